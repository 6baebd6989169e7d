"""
XSS Prevention / Input Sanitization Module

Sanitizes recipe input coming from the frontend or from AI responses
before it is stored.
"""

import html
import re
from urllib.parse import urlparse

from constants import MAX_LENGTHS

CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize text by HTML-escaping special characters.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = html.escape(text.strip())

    if len(text) > max_length:
        text = text[:max_length] + '...'

    return text


def sanitize_url(url):
    """
    Sanitize a URL by rejecting dangerous schemes.

    Only http and https (or scheme-less) URLs survive; javascript:, data:
    and friends come back as an empty string.
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()

    dangerous_schemes = {
        'javascript', 'data', 'vbscript', 'file',
        'blob', 'about', 'chrome', 'moz-extension'
    }

    try:
        scheme = urlparse(url).scheme.lower()
    except ValueError:
        return ''

    if scheme and scheme not in ('http', 'https'):
        return ''

    url_lower = url.lower()
    for dangerous in dangerous_schemes:
        if dangerous + ':' in url_lower:
            return ''
        # URL-encoded variants
        if dangerous.replace('a', '%61') in url_lower:
            return ''

    return url[:MAX_LENGTHS['source_url']]


def sanitize_recipe_title(title, max_length=MAX_LENGTHS['recipe_title']):
    """
    Sanitize a recipe title for safe storage and display.

    Returns:
        Sanitized title, or '' when nothing is left after cleaning
    """
    if not title:
        return ''

    if not isinstance(title, str):
        title = str(title)

    title = CONTROL_CHARS.sub('', title.strip())
    title = html.escape(title)
    title = re.sub(r'\s+', ' ', title)

    if len(title) > max_length:
        title = title[:max_length - 3] + '...'

    return title


def sanitize_instructions(instructions, max_length=MAX_LENGTHS['instruction_step']):
    """
    Sanitize recipe instructions into a list of escaped steps.

    Accepts a list of steps or a newline-separated string. Empty steps
    are dropped.
    """
    if not instructions:
        return []

    if isinstance(instructions, str):
        instructions = instructions.splitlines()

    steps = []
    for step in instructions:
        if step is None:
            continue
        step = html.escape(str(step).strip())
        if not step:
            continue
        if len(step) > max_length:
            step = step[:max_length] + '\n...(truncated)'
        steps.append(step)
    return steps


def sanitize_ingredient(ingredient, max_length=MAX_LENGTHS['ingredient_text']):
    """
    Sanitize one ingredient entry.

    Accepts {'item', 'amount', 'unit', 'notes'} dicts; 'name' is read as
    an alias for 'item'. Returns None when there is no item.
    """
    if not isinstance(ingredient, dict):
        return None

    def clean(value):
        if value is None:
            return None
        value = CONTROL_CHARS.sub('', str(value).strip())
        value = html.escape(value)[:max_length]
        return value or None

    item = clean(ingredient.get('item') or ingredient.get('name'))
    if not item:
        return None

    amount = ingredient.get('amount')
    if not isinstance(amount, (int, float)) or isinstance(amount, bool):
        amount = clean(amount)

    return {
        'item': item,
        'amount': amount,
        'unit': clean(ingredient.get('unit')),
        'notes': clean(ingredient.get('notes')),
    }


def sanitize_tags(tags, max_length=MAX_LENGTHS['tag']):
    """Sanitize a list of short tags, dropping blanks and duplicates."""
    if not tags:
        return []
    if isinstance(tags, str):
        tags = tags.split(',')

    cleaned = []
    for tag in tags:
        tag = sanitize_text(tag, max_length=max_length)
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned
