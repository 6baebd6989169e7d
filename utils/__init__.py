# Utility modules for MealPrep Agent
from .sanitizer import (
    sanitize_text, sanitize_url, sanitize_recipe_title,
    sanitize_instructions, sanitize_ingredient, sanitize_tags
)
from .request_helpers import safe_int, safe_float, current_user_id
