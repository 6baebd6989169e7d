"""
Recipe Service

Builds recipe fields from request payloads and renders stored recipes in
a reader's measurement system.
"""

from constants import DEFAULT_DIFFICULTY, DEFAULT_SERVINGS, MAX_LENGTHS, VALID_DIFFICULTIES
from utils.sanitizer import (
    sanitize_ingredient,
    sanitize_instructions,
    sanitize_recipe_title,
    sanitize_tags,
    sanitize_text,
    sanitize_url,
)
from .conversion import display_quantity, normalize_unit
from .parsing import float_to_fraction, parse_fraction, parse_ingredient_line


def _optional_int(value, min_val=0, max_val=None):
    if value is None or value == '' or isinstance(value, bool):
        return None
    try:
        result = int(value)
    except (ValueError, TypeError):
        return None
    result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def build_recipe_fields(data, partial=False):
    """
    Turn a create/update payload into sanitized Recipe column values.

    Args:
        data: Request JSON
        partial: When True only keys present in data are returned (updates)

    Returns:
        (fields, error) where error is a message string or None
    """
    fields = {}

    if not partial or 'title' in data:
        title = sanitize_recipe_title(data.get('title'))
        if not title:
            return None, 'Recipe title is required'
        fields['title'] = title

    if 'description' in data or not partial:
        description = sanitize_text(data.get('description'), max_length=MAX_LENGTHS['description'])
        fields['description'] = description or None

    if 'ingredients' in data or not partial:
        raw = data.get('ingredients') or []
        if not isinstance(raw, list):
            return None, 'ingredients must be a list'
        # Plain lines like '2 cups flour, sifted' are split into fields
        raw = [parse_ingredient_line(i) if isinstance(i, str) else i for i in raw]
        fields['ingredients'] = [ing for ing in (sanitize_ingredient(i) for i in raw) if ing]

    if 'instructions' in data or not partial:
        fields['instructions'] = sanitize_instructions(data.get('instructions'))

    for key in ('prep_time', 'cook_time'):
        if key in data or not partial:
            fields[key] = _optional_int(data.get(key), max_val=10000)

    if 'servings' in data or not partial:
        servings = _optional_int(data.get('servings'), min_val=1, max_val=100)
        fields['servings'] = servings if servings is not None else DEFAULT_SERVINGS

    if 'difficulty' in data or not partial:
        difficulty = str(data.get('difficulty') or DEFAULT_DIFFICULTY).strip().lower()
        if difficulty not in VALID_DIFFICULTIES:
            return None, f"difficulty must be one of {sorted(VALID_DIFFICULTIES)}"
        fields['difficulty'] = difficulty

    if 'cuisine' in data or not partial:
        fields['cuisine'] = sanitize_text(data.get('cuisine'), max_length=MAX_LENGTHS['cuisine']) or None

    if 'dietary_tags' in data or not partial:
        fields['dietary_tags'] = sanitize_tags(data.get('dietary_tags'))

    if 'source_url' in data or not partial:
        fields['source_url'] = sanitize_url(data.get('source_url')) or None

    if 'source_name' in data or not partial:
        fields['source_name'] = sanitize_text(data.get('source_name'), max_length=MAX_LENGTHS['source_name']) or None

    if 'rating' in data or not partial:
        fields['rating'] = _optional_int(data.get('rating'), min_val=1, max_val=5)

    for key in ('is_favorite', 'is_public'):
        if key in data or not partial:
            fields[key] = bool(data.get(key, False))

    return fields, None


def display_ingredient(ingredient, system):
    """
    Add converted quantities to one stored ingredient.

    Amounts that cannot be read as numbers ('a pinch') are shown as
    written, and so are ingredients with no unit.
    """
    result = dict(ingredient)
    amount = parse_fraction(ingredient.get('amount'))
    unit = normalize_unit(ingredient.get('unit')) if ingredient.get('unit') else ''

    if amount is None:
        parts = [str(ingredient.get('amount') or ''), ingredient.get('unit') or '']
        result['display'] = ' '.join(p for p in parts if p)
        return result

    if not unit:
        result['display'] = float_to_fraction(amount)
        return result

    converted = display_quantity(amount, unit, system)
    result['converted_amount'] = converted['value']
    result['converted_unit'] = converted['unit']
    result['display'] = converted['display']
    return result


def recipe_for_display(recipe, system):
    """Serialize a recipe with every ingredient rendered in system."""
    data = recipe.to_dict()
    data['measurement_system'] = system
    data['ingredients'] = [display_ingredient(ing, system) for ing in data['ingredients']]
    return data
