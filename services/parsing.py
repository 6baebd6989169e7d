"""
Parsing Service

Functions for parsing ingredient amounts, fractions and recipe JSON
embedded in chat responses.
"""

import json
import re

from constants import (
    COMMON_FRACTIONS,
    DEFAULT_DIFFICULTY,
    DEFAULT_SERVINGS,
    UNICODE_FRACTIONS,
    UNIT_CONVERSIONS,
)
from .conversion import normalize_unit, is_countable_unit


def float_to_fraction(value):
    """Convert float to fraction string for display."""
    if value is None or value == 0:
        return '0'
    # Check if it's a whole number
    if value == int(value):
        return str(int(value))
    whole = int(value)
    decimal = value - whole
    # Check common fractions (with tolerance)
    for dec, frac in COMMON_FRACTIONS.items():
        if abs(decimal - dec) < 0.02:
            if whole > 0:
                return f"{whole} {frac}"
            return frac
    return f"{value:.2f}".rstrip('0').rstrip('.')


def normalize_fractions(text):
    """Replace Unicode fraction characters with decimal equivalents."""
    # Normalize all whitespace (including non-breaking spaces) to regular spaces
    text = re.sub(r'[\s\u00a0\u2000-\u200b]+', ' ', text)

    for char, value in UNICODE_FRACTIONS.items():
        if char in text:
            # Mixed fraction like "1½" or "1 ½"
            pattern = r'(\d+)\s*' + re.escape(char)
            match = re.search(pattern, text)
            if match:
                whole = float(match.group(1))
                text = re.sub(pattern, str(whole + value), text)
            else:
                text = text.replace(char, str(value))
    return text


def parse_fraction(value, default=None):
    """
    Parse an amount like '1 1/2', '1/4', '½' or '2' into a float.

    Numbers pass straight through. Anything that cannot be read as an
    amount returns default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)

    text = normalize_fractions(str(value)).strip()
    if not text:
        return default

    mixed_match = re.match(r'^(\d+(?:\.\d+)?)\s+(\d+)\s*/\s*(\d+)$', text)
    if mixed_match:
        denom = float(mixed_match.group(3))
        if denom == 0:
            return default
        return float(mixed_match.group(1)) + float(mixed_match.group(2)) / denom

    frac_match = re.match(r'^(\d+)\s*/\s*(\d+)$', text)
    if frac_match:
        denom = float(frac_match.group(2))
        if denom == 0:
            return default
        return float(frac_match.group(1)) / denom

    try:
        return float(text)
    except ValueError:
        return default


def parse_ingredient_line(text):
    """
    Parse an ingredient line like '2 cups flour, sifted' into an ingredient dict.

    Returns:
        Dict with 'item', 'amount', 'unit' and 'notes' keys, or None for blank input
    """
    if not text or not text.strip():
        return None

    text = normalize_fractions(text.strip())

    notes = None
    comma_match = re.search(r',\s*(.*)$', text)
    if comma_match:
        notes = comma_match.group(1).strip() or None
        text = text[:comma_match.start()].strip()

    # Mixed fractions first, then simple fractions, then numbers
    qty_match = re.match(r'^(\d+\s+\d+\s*/\s*\d+|\d+\s*/\s*\d+|\d+\.?\d*)\s*', text)
    amount = None
    if qty_match:
        amount = qty_match.group(1).strip()
        text = text[qty_match.end():].strip()

    unit = None
    words = text.split()
    # Two-word units ("fl oz", "fluid ounces") before single words
    for size in (2, 1):
        if len(words) >= size:
            candidate = normalize_unit(' '.join(words[:size]))
            if candidate in UNIT_CONVERSIONS or is_countable_unit(candidate):
                unit = candidate
                words = words[size:]
                break

    return {
        'item': ' '.join(words),
        'amount': amount,
        'unit': unit,
        'notes': notes,
    }


def parse_recipe_from_text(text):
    """
    Extract a recipe object from a chat response.

    Looks for a fenced JSON code block first, then for a bare object with a
    "recipe" key, then for a bare object with "title" and "ingredients".

    Returns:
        The recipe dict, or None when nothing usable is found
    """
    if not text:
        return None

    try:
        block_match = re.search(r'```(?:json)?\s*(\{.*?\})\s*```', text, re.DOTALL)
        if block_match:
            parsed = json.loads(block_match.group(1))
            if isinstance(parsed, dict):
                if parsed.get('recipe'):
                    return parsed['recipe']
                if parsed.get('title') or parsed.get('ingredients'):
                    return parsed

        wrapped_match = re.search(r'\{.*"recipe".*\}', text, re.DOTALL)
        if wrapped_match:
            parsed = json.loads(wrapped_match.group(0))
            if isinstance(parsed, dict) and parsed.get('recipe'):
                return parsed['recipe']

        bare_match = re.search(r'\{.*"title".*"ingredients".*\}', text, re.DOTALL)
        if bare_match:
            parsed = json.loads(bare_match.group(0))
            if isinstance(parsed, dict) and parsed.get('title') and parsed.get('ingredients'):
                return parsed
    except (json.JSONDecodeError, TypeError):
        return None

    return None


def _first_int(value):
    if value is None or value == '':
        return None
    match = re.search(r'(\d+)', str(value))
    return int(match.group(1)) if match else None


def format_recipe_for_storage(recipe):
    """Normalize a parsed recipe into the fields stored on a Recipe."""
    servings = _first_int(recipe.get('servings'))
    return {
        'title': recipe.get('title'),
        'description': recipe.get('description') or None,
        'ingredients': recipe.get('ingredients') or [],
        'instructions': recipe.get('instructions') or [],
        'prep_time': _first_int(recipe.get('prep_time')),
        'cook_time': _first_int(recipe.get('cook_time')),
        'servings': servings if servings is not None else DEFAULT_SERVINGS,
        'difficulty': recipe.get('difficulty') or DEFAULT_DIFFICULTY,
        'cuisine': recipe.get('cuisine') or None,
        'dietary_tags': recipe.get('dietary_tags') or [],
        'source_url': recipe.get('source_url') or None,
        'source_name': recipe.get('source_name') or None,
        'rating': None,
        'is_favorite': False,
    }
