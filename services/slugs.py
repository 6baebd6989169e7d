"""
Slug Service

URL-friendly identifiers for recipes.
"""

import re


def slugify(text):
    """Lowercase, drop punctuation and join words with hyphens."""
    slug = str(text).lower().strip()
    slug = re.sub(r'[^\w\s-]', '', slug, flags=re.ASCII)
    slug = re.sub(r'[\s_-]+', '-', slug)
    return slug.strip('-')


def generate_unique_slug(title, existing_slugs=()):
    """
    Slug for a title that does not collide with existing_slugs.

    Collisions get a numeric suffix starting at 2 (recipe-title-2).
    """
    existing = set(existing_slugs)
    base_slug = slugify(title) or 'recipe'

    if base_slug not in existing:
        return base_slug

    counter = 2
    while f"{base_slug}-{counter}" in existing:
        counter += 1
    return f"{base_slug}-{counter}"
