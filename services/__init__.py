"""
Services Package

Business logic modules for the meal-planning application.
"""

from .conversion import (
    is_metric_unit,
    is_imperial_unit,
    is_countable_unit,
    normalize_unit,
    round_to_reasonable_precision,
    convert_value,
    convert_ingredient,
    optimize_unit,
    format_converted_value,
    display_quantity,
    get_units_for_system,
)

from .parsing import (
    float_to_fraction,
    normalize_fractions,
    parse_fraction,
    parse_ingredient_line,
    parse_recipe_from_text,
    format_recipe_for_storage,
)

from .slugs import (
    slugify,
    generate_unique_slug,
)

from .recipes import (
    build_recipe_fields,
    display_ingredient,
    recipe_for_display,
)

from .workflow import (
    WorkflowClient,
    WorkflowError,
)

__all__ = [
    # Conversion
    'is_metric_unit',
    'is_imperial_unit',
    'is_countable_unit',
    'normalize_unit',
    'round_to_reasonable_precision',
    'convert_value',
    'convert_ingredient',
    'optimize_unit',
    'format_converted_value',
    'display_quantity',
    'get_units_for_system',
    # Parsing
    'float_to_fraction',
    'normalize_fractions',
    'parse_fraction',
    'parse_ingredient_line',
    'parse_recipe_from_text',
    'format_recipe_for_storage',
    # Slugs
    'slugify',
    'generate_unique_slug',
    # Recipes
    'build_recipe_fields',
    'display_ingredient',
    'recipe_for_display',
    # Workflow
    'WorkflowClient',
    'WorkflowError',
]
