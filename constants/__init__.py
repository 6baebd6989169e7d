"""
Constants Package

Unit tables and validation whitelists shared by services and routes.
"""

from .units import (
    MEASUREMENT_SYSTEMS,
    WEIGHT_UNITS,
    VOLUME_UNITS,
    TEMPERATURE_UNITS,
    LENGTH_UNITS,
    PHYSICAL_UNITS,
    COUNTABLE_UNITS,
    METRIC_UNITS,
    IMPERIAL_UNITS,
    UNIT_CONVERSIONS,
    UNIT_OPTIMIZATIONS,
    SYSTEM_UNITS,
    UNIT_MAPPINGS,
    COMMON_FRACTIONS,
    UNICODE_FRACTIONS,
)

from .validation import (
    VALID_DIFFICULTIES,
    DEFAULT_DIFFICULTY,
    DEFAULT_SERVINGS,
    VALID_MEAL_TYPES,
    PLAN_DAYS,
    MAX_LENGTHS,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)
