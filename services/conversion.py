"""
Unit Conversion Service

Converts ingredient quantities between metric and imperial systems for
display. Only the author-entered amount and unit are ever stored; these
functions are pure and run at render time.

Malformed numbers never raise: they degrade to a zero quantity in the
original unit. Unknown units pass through unconverted.
"""

import math
from numbers import Real

from constants import (
    COUNTABLE_UNITS,
    IMPERIAL_UNITS,
    METRIC_UNITS,
    SYSTEM_UNITS,
    UNIT_CONVERSIONS,
    UNIT_MAPPINGS,
    UNIT_OPTIMIZATIONS,
)


def _is_valid_number(value):
    """True for finite real numbers (bools are not quantities)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def _round_half_up(value, digits=0):
    factor = 10 ** digits
    scaled = value * factor
    # Floats this large carry no fractional digits
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def is_metric_unit(unit):
    """Check if a unit is metric."""
    return unit in METRIC_UNITS


def is_imperial_unit(unit):
    """Check if a unit is imperial."""
    return unit in IMPERIAL_UNITS


def is_countable_unit(unit):
    """Check if a unit is countable (never converted)."""
    return unit in COUNTABLE_UNITS


def normalize_unit(text):
    """Map a free-text unit spelling ('Cups', 'grams', '°F') onto a unit symbol."""
    if text is None:
        return ''
    cleaned = str(text).strip()
    if cleaned in UNIT_CONVERSIONS or cleaned in COUNTABLE_UNITS:
        return cleaned
    key = ' '.join(cleaned.lower().rstrip('.').split())
    return UNIT_MAPPINGS.get(key, cleaned)


def round_to_reasonable_precision(value):
    """
    Round to reasonable precision for display.

    - Whole numbers for values >= 100
    - 1 decimal for values between 1 and 100
    - 2 decimals below 1

    Halves round up, so 0.125 becomes 0.13. Values that overflowed to
    infinity during a transform are returned as they are.
    """
    if not math.isfinite(value):
        return value
    if value >= 100:
        return float(_round_half_up(value))
    if value >= 1:
        return _round_half_up(value, 1)
    return _round_half_up(value, 2)


def convert_value(value, from_unit, to_system):
    """
    Convert a value from its unit into the target measurement system.

    Args:
        value: The numeric amount
        from_unit: Unit symbol the amount is expressed in
        to_system: 'metric' or 'imperial'

    Returns:
        Dict with 'value' and 'unit'. Countable units, units already in the
        target system and unknown units come back unchanged.
    """
    if not _is_valid_number(value):
        return {'value': 0, 'unit': from_unit}

    if is_countable_unit(from_unit):
        return {'value': value, 'unit': from_unit}

    if to_system == 'metric' and is_metric_unit(from_unit):
        return {'value': value, 'unit': from_unit}
    if to_system == 'imperial' and is_imperial_unit(from_unit):
        return {'value': value, 'unit': from_unit}

    conversion = UNIT_CONVERSIONS.get(from_unit)
    if conversion is None:
        return {'value': value, 'unit': from_unit}

    if to_system == 'imperial' and 'to_imperial' in conversion:
        converted = conversion['to_imperial'](value)
        return {
            'value': round_to_reasonable_precision(converted),
            'unit': conversion['imperial_unit'],
        }
    if to_system == 'metric' and 'to_metric' in conversion:
        converted = conversion['to_metric'](value)
        return {
            'value': round_to_reasonable_precision(converted),
            'unit': conversion['metric_unit'],
        }

    return {'value': value, 'unit': from_unit}


def convert_ingredient(amount, unit, target_system):
    """Convert an ingredient amount and unit."""
    result = convert_value(amount, unit, target_system)
    return {'amount': result['value'], 'unit': result['unit']}


def optimize_unit(value, unit):
    """
    Move a converted value up to a larger unit when it gets unwieldy
    (16 oz -> 1 lb, 1000 g -> 1 kg). Rules do not chain.
    """
    if not _is_valid_number(value):
        return {'value': 0, 'unit': unit}

    rule = UNIT_OPTIMIZATIONS.get(unit)
    if rule is not None:
        threshold, divisor, larger_unit = rule
        if value >= threshold:
            return {'value': value / divisor, 'unit': larger_unit}

    return {'value': value, 'unit': unit}


def _format_number(value):
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_converted_value(value, unit):
    """Format a value and unit for display, e.g. '1,500 ml' or '0.46 oz'."""
    if not _is_valid_number(value):
        return f"0 {unit}"

    rounded = round_to_reasonable_precision(value)

    if rounded >= 1000:
        return f"{int(rounded):,} {unit}"
    if rounded >= 1:
        return f"{_format_number(rounded)} {unit}"
    return f"{rounded:.2f} {unit}"


def display_quantity(amount, unit, system, optimize=True):
    """Convert, optionally rescale and format a stored ingredient quantity."""
    converted = convert_value(amount, unit, system)
    if not _is_valid_number(converted['value']):
        return {
            'value': 0,
            'unit': converted['unit'],
            'display': format_converted_value(converted['value'], converted['unit']),
        }
    if optimize:
        converted = optimize_unit(converted['value'], converted['unit'])
    return {
        'value': converted['value'],
        'unit': converted['unit'],
        'display': format_converted_value(converted['value'], converted['unit']),
    }


def get_units_for_system(system):
    """Unit pick-lists for recipe forms in the given measurement system."""
    lists = SYSTEM_UNITS.get(system, SYSTEM_UNITS['metric'])
    countable = list(COUNTABLE_UNITS)
    if system == 'imperial':
        all_units = lists['volume'] + lists['weight'] + countable
    else:
        all_units = lists['weight'] + lists['volume'] + countable
    return {
        'weight': list(lists['weight']),
        'volume': list(lists['volume']),
        'countable': countable,
        'all': all_units,
    }
