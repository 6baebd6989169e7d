"""Initial schema: recipes, user preferences and meal plans

Revision ID: 3b1f7c2a9d10
Revises:
Create Date: 2025-11-25 10:12:41.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b1f7c2a9d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('slug', sa.String(length=220), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('ingredients', sa.JSON(), nullable=False),
        sa.Column('instructions', sa.JSON(), nullable=False),
        sa.Column('prep_time', sa.Integer(), nullable=True),
        sa.Column('cook_time', sa.Integer(), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=True),
        sa.Column('difficulty', sa.String(length=20), nullable=True),
        sa.Column('cuisine', sa.String(length=50), nullable=True),
        sa.Column('dietary_tags', sa.JSON(), nullable=False),
        sa.Column('source_url', sa.String(length=500), nullable=True),
        sa.Column('source_name', sa.String(length=200), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('is_favorite', sa.Boolean(), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'title', name='uq_recipe_user_title'),
    )
    with op.batch_alter_table('recipe', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_user_id'), ['user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_recipe_slug'), ['slug'], unique=True)
        batch_op.create_index(batch_op.f('ix_recipe_cuisine'), ['cuisine'], unique=False)

    op.create_table(
        'user_preferences',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('measurement_system', sa.String(length=10), nullable=False, server_default='metric'),
        sa.Column('dietary_restrictions', sa.JSON(), nullable=False),
        sa.Column('allergies', sa.JSON(), nullable=False),
        sa.Column('favorite_ingredients', sa.JSON(), nullable=False),
        sa.Column('disliked_ingredients', sa.JSON(), nullable=False),
        sa.Column('cuisine_preferences', sa.JSON(), nullable=False),
        sa.Column('household_size', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('user_preferences', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_user_preferences_user_id'), ['user_id'], unique=True)

    op.create_table(
        'meal_plan',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('day', sa.Integer(), nullable=False),
        sa.Column('meal_type', sa.String(length=20), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=True),
        sa.Column('locked', sa.Boolean(), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'week', 'day', 'meal_type', name='uq_mealplan_slot'),
    )
    with op.batch_alter_table('meal_plan', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_meal_plan_user_id'), ['user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_meal_plan_week'), ['week'], unique=False)
        batch_op.create_index(batch_op.f('ix_meal_plan_recipe_id'), ['recipe_id'], unique=False)


def downgrade():
    op.drop_table('meal_plan')
    op.drop_table('user_preferences')
    op.drop_table('recipe')
