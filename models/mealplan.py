"""
Meal Plan Model

Contains the MealPlan model for weekly meal planning.
"""

from .base import db


class MealPlan(db.Model):
    """One meal slot in a user's week, with lock support."""
    __table_args__ = (
        db.UniqueConstraint('user_id', 'week', 'day', 'meal_type', name='uq_mealplan_slot'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    week = db.Column(db.Integer, nullable=False, index=True)
    day = db.Column(db.Integer, nullable=False)  # 1-7 for days of week
    meal_type = db.Column(db.String(20), nullable=False)  # 'Dinner', 'Dessert', etc.
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='SET NULL'), nullable=True, index=True)
    locked = db.Column(db.Boolean, default=False)  # Locked meals preserved during randomization
    recipe = db.relationship('Recipe')

    def to_dict(self):
        return {
            'id': self.id,
            'week': self.week,
            'day': self.day,
            'meal_type': self.meal_type,
            'recipe_id': self.recipe_id,
            'recipe_title': self.recipe.title if self.recipe else None,
            'recipe_slug': self.recipe.slug if self.recipe else None,
            'locked': bool(self.locked),
        }
