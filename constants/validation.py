"""
Validation Constants

Contains whitelist values and limits for validating recipe, preference
and meal-plan input.
"""

# Valid difficulty levels (stored lowercase)
VALID_DIFFICULTIES = {'easy', 'medium', 'hard'}
DEFAULT_DIFFICULTY = 'medium'

# Servings fallback when none can be parsed
DEFAULT_SERVINGS = 4

# Valid meal types for meal planning
VALID_MEAL_TYPES = {'Breakfast', 'Lunch', 'Dinner', 'Dessert', 'Snack'}

# Days of the week in a meal plan (1 = Monday)
PLAN_DAYS = range(1, 8)

# Maximum field lengths for security
MAX_LENGTHS = {
    'recipe_title': 200,
    'description': 2000,
    'cuisine': 50,
    'instruction_step': 5000,
    'ingredient_text': 500,
    'source_url': 500,
    'source_name': 200,
    'tag': 50,
    'chat_message': 4000,
}

# Pagination bounds for recipe listings
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
