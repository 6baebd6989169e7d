"""
Unit Constants and Conversion Tables

Contains unit families, the metric/imperial conversion table, optimizer
thresholds and the free-text unit spellings used when reading ingredients.
"""

MEASUREMENT_SYSTEMS = ('metric', 'imperial')

# Unit families
WEIGHT_UNITS = ('g', 'kg', 'oz', 'lb')
VOLUME_UNITS = ('ml', 'l', 'fl oz', 'cup', 'tbsp', 'tsp')
TEMPERATURE_UNITS = ('C', 'F')
LENGTH_UNITS = ('cm', 'm', 'in', 'ft')

# Units that never convert (discrete items)
COUNTABLE_UNITS = ('piece', 'whole', 'slice', 'clove', 'head', 'bunch', 'can', 'package')

# One-directional conversions: metric units carry 'to_imperial', imperial
# units carry 'to_metric', each with the counterpart unit it produces.
UNIT_CONVERSIONS = {
    # Weight
    'g': {'to_imperial': lambda v: v * 0.035274, 'imperial_unit': 'oz'},
    'kg': {'to_imperial': lambda v: v * 2.20462, 'imperial_unit': 'lb'},
    'oz': {'to_metric': lambda v: v * 28.3495, 'metric_unit': 'g'},
    'lb': {'to_metric': lambda v: v * 0.453592, 'metric_unit': 'kg'},
    # Volume
    'ml': {'to_imperial': lambda v: v * 0.033814, 'imperial_unit': 'fl oz'},
    'l': {'to_imperial': lambda v: v * 4.22675, 'imperial_unit': 'cup'},
    'fl oz': {'to_metric': lambda v: v * 29.5735, 'metric_unit': 'ml'},
    'cup': {'to_metric': lambda v: v * 236.588, 'metric_unit': 'ml'},
    'tbsp': {'to_metric': lambda v: v * 14.7868, 'metric_unit': 'ml'},
    'tsp': {'to_metric': lambda v: v * 4.92892, 'metric_unit': 'ml'},
    # Temperature (affine)
    'C': {'to_imperial': lambda v: (v * 9 / 5) + 32, 'imperial_unit': 'F'},
    'F': {'to_metric': lambda v: (v - 32) * 5 / 9, 'metric_unit': 'C'},
    # Length
    'cm': {'to_imperial': lambda v: v * 0.393701, 'imperial_unit': 'in'},
    'm': {'to_imperial': lambda v: v * 3.28084, 'imperial_unit': 'ft'},
    'in': {'to_metric': lambda v: v * 2.54, 'metric_unit': 'cm'},
    'ft': {'to_metric': lambda v: v * 0.3048, 'metric_unit': 'm'},
}

PHYSICAL_UNITS = WEIGHT_UNITS + VOLUME_UNITS + TEMPERATURE_UNITS + LENGTH_UNITS

# A unit's system is the direction its conversion runs
METRIC_UNITS = frozenset(u for u in PHYSICAL_UNITS if 'to_imperial' in UNIT_CONVERSIONS[u])
IMPERIAL_UNITS = frozenset(u for u in PHYSICAL_UNITS if 'to_metric' in UNIT_CONVERSIONS[u])

# Rescale to a larger unit once the value reaches the threshold
# (unit -> (threshold, divisor, larger_unit))
UNIT_OPTIMIZATIONS = {
    'oz': (16, 16, 'lb'),
    'fl oz': (8, 8, 'cup'),
    'ml': (1000, 1000, 'l'),
    'g': (1000, 1000, 'kg'),
}

# Unit pick-lists offered to recipe authors per measurement system
SYSTEM_UNITS = {
    'metric': {
        'weight': ['g', 'kg'],
        'volume': ['ml', 'l'],
    },
    'imperial': {
        'weight': ['oz', 'lb'],
        'volume': ['tsp', 'tbsp', 'fl oz', 'cup'],
    },
}

# Free-text unit spellings (lowercase input -> canonical unit)
UNIT_MAPPINGS = {
    'gram': 'g', 'grams': 'g', 'g': 'g', 'gr': 'g',
    'kilogram': 'kg', 'kilograms': 'kg', 'kg': 'kg', 'kgs': 'kg',
    'ounce': 'oz', 'ounces': 'oz', 'oz': 'oz',
    'pound': 'lb', 'pounds': 'lb', 'lb': 'lb', 'lbs': 'lb',
    'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml', 'millilitres': 'ml', 'ml': 'ml',
    'liter': 'l', 'liters': 'l', 'litre': 'l', 'litres': 'l', 'l': 'l',
    'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz', 'fl oz': 'fl oz', 'fl. oz': 'fl oz', 'floz': 'fl oz',
    'cup': 'cup', 'cups': 'cup', 'c': 'cup',
    'tablespoon': 'tbsp', 'tablespoons': 'tbsp', 'tbsp': 'tbsp', 'tbs': 'tbsp', 'tb': 'tbsp',
    'teaspoon': 'tsp', 'teaspoons': 'tsp', 'tsp': 'tsp', 'ts': 'tsp',
    'celsius': 'C', 'c°': 'C', '°c': 'C',
    'fahrenheit': 'F', 'f': 'F', '°f': 'F', 'f°': 'F',
    'centimeter': 'cm', 'centimeters': 'cm', 'centimetre': 'cm', 'cm': 'cm',
    'meter': 'm', 'meters': 'm', 'metre': 'm', 'm': 'm',
    'inch': 'in', 'inches': 'in', 'in': 'in',
    'foot': 'ft', 'feet': 'ft', 'ft': 'ft',
    'piece': 'piece', 'pieces': 'piece', 'pc': 'piece', 'pcs': 'piece',
    'whole': 'whole',
    'slice': 'slice', 'slices': 'slice',
    'clove': 'clove', 'cloves': 'clove',
    'head': 'head', 'heads': 'head',
    'bunch': 'bunch', 'bunches': 'bunch',
    'can': 'can', 'cans': 'can',
    'package': 'package', 'packages': 'package', 'pkg': 'package',
}

# Common fractions for display (using precise values)
COMMON_FRACTIONS = {
    0.125: '1/8', 0.25: '1/4', 1/3: '1/3', 0.375: '3/8',
    0.5: '1/2', 0.625: '5/8', 2/3: '2/3', 0.75: '3/4', 0.875: '7/8'
}

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,    # ½
    '\u2153': 1/3,    # ⅓
    '\u2154': 2/3,    # ⅔
    '\u00bc': 0.25,   # ¼
    '\u00be': 0.75,   # ¾
    '\u2155': 0.2,    # ⅕
    '\u2156': 0.4,    # ⅖
    '\u2157': 0.6,    # ⅗
    '\u2158': 0.8,    # ⅘
    '\u2159': 1/6,    # ⅙
    '\u215a': 5/6,    # ⅚
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
}
