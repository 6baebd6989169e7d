"""
User Preferences Model

Per-user display and dietary preferences. measurement_system drives how
ingredient quantities are rendered.
"""

from .base import db


class UserPreferences(db.Model):
    """Preferences keyed by the external user id."""
    __tablename__ = 'user_preferences'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), unique=True, nullable=False, index=True)
    measurement_system = db.Column(db.String(10), nullable=False, default='metric')
    dietary_restrictions = db.Column(db.JSON, nullable=False, default=list)
    allergies = db.Column(db.JSON, nullable=False, default=list)
    favorite_ingredients = db.Column(db.JSON, nullable=False, default=list)
    disliked_ingredients = db.Column(db.JSON, nullable=False, default=list)
    cuisine_preferences = db.Column(db.JSON, nullable=False, default=list)
    household_size = db.Column(db.Integer, default=1)

    LIST_FIELDS = (
        'dietary_restrictions',
        'allergies',
        'favorite_ingredients',
        'disliked_ingredients',
        'cuisine_preferences',
    )

    def to_dict(self):
        data = {
            'measurement_system': self.measurement_system,
            'household_size': self.household_size or 1,
        }
        for field in self.LIST_FIELDS:
            data[field] = list(getattr(self, field) or [])
        return data
