"""
Recipe Model

Recipes store ingredients and instructions as JSON lists. Ingredient
amounts are kept exactly as the author entered them; conversion to the
reader's measurement system happens at display time.
"""

from datetime import datetime, timezone

from .base import db


def _utcnow():
    return datetime.now(timezone.utc)


class Recipe(db.Model):
    """Recipe with metadata, ingredient list and ordered instructions."""
    __table_args__ = (
        db.UniqueConstraint('user_id', 'title', name='uq_recipe_user_title'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(220), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)

    # [{"item": "flour", "amount": "2", "unit": "cup", "notes": "sifted"}]
    ingredients = db.Column(db.JSON, nullable=False, default=list)
    instructions = db.Column(db.JSON, nullable=False, default=list)

    prep_time = db.Column(db.Integer, nullable=True)  # minutes
    cook_time = db.Column(db.Integer, nullable=True)  # minutes
    servings = db.Column(db.Integer, default=4)
    difficulty = db.Column(db.String(20), default='medium')
    cuisine = db.Column(db.String(50), nullable=True, index=True)
    dietary_tags = db.Column(db.JSON, nullable=False, default=list)
    source_url = db.Column(db.String(500), nullable=True)
    source_name = db.Column(db.String(200), nullable=True)
    rating = db.Column(db.Integer, nullable=True)
    is_favorite = db.Column(db.Boolean, default=False)
    is_public = db.Column(db.Boolean, default=False)

    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'slug': self.slug,
            'description': self.description,
            'ingredients': list(self.ingredients or []),
            'instructions': list(self.instructions or []),
            'prep_time': self.prep_time,
            'cook_time': self.cook_time,
            'servings': self.servings,
            'difficulty': self.difficulty,
            'cuisine': self.cuisine,
            'dietary_tags': list(self.dietary_tags or []),
            'source_url': self.source_url,
            'source_name': self.source_name,
            'rating': self.rating,
            'is_favorite': bool(self.is_favorite),
            'is_public': bool(self.is_public),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
