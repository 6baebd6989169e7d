"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .recipe import Recipe
from .preferences import UserPreferences
from .mealplan import MealPlan

__all__ = [
    'db',
    'Recipe',
    'UserPreferences',
    'MealPlan',
]
