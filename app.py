import logging
import random

from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_migrate import Migrate
from sqlalchemy.exc import IntegrityError

from config import get_config
from constants import (
    DEFAULT_PAGE_SIZE,
    MAX_LENGTHS,
    MAX_PAGE_SIZE,
    MEASUREMENT_SYSTEMS,
    PLAN_DAYS,
    VALID_MEAL_TYPES,
)
from models import db, Recipe, UserPreferences, MealPlan
from services import (
    WorkflowClient,
    WorkflowError,
    build_recipe_fields,
    display_quantity,
    format_recipe_for_storage,
    generate_unique_slug,
    slugify,
    get_units_for_system,
    normalize_unit,
    parse_recipe_from_text,
    recipe_for_display,
)
from utils import safe_float, safe_int, current_user_id, sanitize_tags, sanitize_text

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)
CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})


def error_response(message, status):
    return jsonify({'error': message}), status


def json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ============================================
# HELPERS - PREFERENCES / RECIPES
# ============================================

def get_preferences(user_id, create=False):
    """Stored preferences for a user; unsaved defaults unless create is set."""
    prefs = UserPreferences.query.filter_by(user_id=user_id).first()
    if prefs is None:
        prefs = UserPreferences(
            user_id=user_id,
            measurement_system=app.config['DEFAULT_MEASUREMENT_SYSTEM'],
            dietary_restrictions=[],
            allergies=[],
            favorite_ingredients=[],
            disliked_ingredients=[],
            cuisine_preferences=[],
            household_size=1,
        )
        if create:
            db.session.add(prefs)
    return prefs


def resolve_measurement_system(user_id):
    """?system= wins, then the user's stored preference, then the default."""
    requested = request.args.get('system')
    if requested in MEASUREMENT_SYSTEMS:
        return requested
    prefs = UserPreferences.query.filter_by(user_id=user_id).first()
    if prefs and prefs.measurement_system in MEASUREMENT_SYSTEMS:
        return prefs.measurement_system
    return app.config['DEFAULT_MEASUREMENT_SYSTEM']


def get_recipe_or_error(slug, user_id, write=False):
    """Returns (recipe, None) or (None, error_response)."""
    recipe = Recipe.query.filter_by(slug=slug).first()
    if recipe is None:
        return None, error_response('Recipe not found', 404)
    if recipe.user_id != user_id and (write or not recipe.is_public):
        return None, error_response('Access denied', 403)
    return recipe, None


def existing_slugs(base):
    rows = db.session.query(Recipe.slug).filter(Recipe.slug.like(f"{base}%")).all()
    return [row[0] for row in rows]


def workflow_client():
    return WorkflowClient(app.config['N8N_WEBHOOK_URL'], timeout=app.config['WORKFLOW_TIMEOUT'])


# ============================================
# ROUTES - HEALTH / UNITS
# ============================================

@app.route('/health')
def health():
    return jsonify({'status': 'healthy'})


@app.route('/api/units')
def units_list():
    system = resolve_measurement_system(current_user_id())
    return jsonify({'system': system, 'units': get_units_for_system(system)})


@app.route('/api/convert')
def convert():
    unit = normalize_unit(request.args.get('unit', ''))
    if not unit:
        return error_response('unit is required', 400)

    system = request.args.get('system')
    if system not in MEASUREMENT_SYSTEMS:
        return error_response(f"system must be one of {list(MEASUREMENT_SYSTEMS)}", 400)

    value = safe_float(request.args.get('value'), default=0.0)
    optimize = request.args.get('optimize', 'true').lower() not in ('0', 'false', 'no')
    result = display_quantity(value, unit, system, optimize=optimize)
    return jsonify({
        'input': {'value': value, 'unit': unit},
        'system': system,
        **result,
    })


# ============================================
# ROUTES - PREFERENCES
# ============================================

@app.route('/api/preferences', methods=['GET'])
def preferences_get():
    prefs = get_preferences(current_user_id())
    return jsonify({'preferences': prefs.to_dict()})


@app.route('/api/preferences', methods=['PUT'])
def preferences_update():
    data = json_body()
    system = data.get('measurement_system')
    if system is not None and system not in MEASUREMENT_SYSTEMS:
        return error_response(f"measurement_system must be one of {list(MEASUREMENT_SYSTEMS)}", 400)

    prefs = get_preferences(current_user_id(), create=True)
    if system is not None:
        prefs.measurement_system = system
    for field in UserPreferences.LIST_FIELDS:
        if field in data:
            setattr(prefs, field, sanitize_tags(data[field]))
    if 'household_size' in data:
        prefs.household_size = safe_int(data['household_size'], default=1, min_val=1, max_val=50)

    db.session.commit()
    logger.info("Preferences updated for %s (measurement_system=%s)", prefs.user_id, prefs.measurement_system)
    return jsonify({'message': 'Preferences updated successfully', 'preferences': prefs.to_dict()})


# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/api/recipes', methods=['GET'])
def recipes_list():
    user_id = current_user_id()
    limit = safe_int(request.args.get('limit'), default=DEFAULT_PAGE_SIZE, min_val=1, max_val=MAX_PAGE_SIZE)
    offset = safe_int(request.args.get('offset'), default=0, min_val=0)

    query = Recipe.query.filter_by(user_id=user_id)
    search = (request.args.get('q') or '').strip()
    if search:
        pattern = f"%{search}%"
        query = query.filter(db.or_(
            Recipe.title.ilike(pattern),
            Recipe.description.ilike(pattern),
            Recipe.cuisine.ilike(pattern),
        ))
    if request.args.get('favorites') in ('1', 'true'):
        query = query.filter_by(is_favorite=True)

    total = query.count()
    recipes = query.order_by(Recipe.created_at.desc(), Recipe.id.desc()).offset(offset).limit(limit).all()
    return jsonify({
        'recipes': [r.to_dict() for r in recipes],
        'total': total,
        'limit': limit,
        'offset': offset,
    })


@app.route('/api/recipes', methods=['POST'])
def recipe_create():
    user_id = current_user_id()
    data = json_body()
    fields, error = build_recipe_fields(data)
    if error:
        return error_response(error, 400)

    if Recipe.query.filter_by(user_id=user_id, title=fields['title']).first():
        return error_response(f"A recipe named \"{fields['title']}\" already exists", 409)

    raw_title = str(data.get('title')).strip()
    base = slugify(raw_title) or 'recipe'
    recipe = Recipe(user_id=user_id, slug=generate_unique_slug(raw_title, existing_slugs(base)), **fields)
    db.session.add(recipe)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.warning("Duplicate recipe rejected for %s: %s", user_id, fields['title'])
        return error_response('Recipe already exists', 409)

    logger.info("Recipe created: %s (%s)", recipe.slug, user_id)
    return jsonify({'message': 'Recipe created successfully', 'recipe': recipe.to_dict()}), 201


@app.route('/api/recipes/parse', methods=['POST'])
def recipe_parse():
    user_id = current_user_id()
    text = json_body().get('text')
    if not text or not isinstance(text, str):
        return error_response('text is required', 400)

    parsed = parse_recipe_from_text(text)
    if not parsed or not isinstance(parsed, dict):
        # Free text with no embedded JSON goes to the workflow
        try:
            parsed = workflow_client().parse_recipe(text, get_preferences(user_id).to_dict())
        except WorkflowError as e:
            logger.warning("Recipe parsing via workflow failed for %s: %s", user_id, e)
            parsed = None

    if not isinstance(parsed, dict) or not (parsed.get('title') or parsed.get('ingredients')):
        return error_response('No recipe found in text', 422)
    return jsonify({'recipe': format_recipe_for_storage(parsed)})


@app.route('/api/recipes/<slug>', methods=['GET'])
def recipe_view(slug):
    user_id = current_user_id()
    recipe, error = get_recipe_or_error(slug, user_id)
    if error:
        return error
    system = resolve_measurement_system(user_id)
    return jsonify({'recipe': recipe_for_display(recipe, system)})


@app.route('/api/recipes/<slug>', methods=['PUT'])
def recipe_update(slug):
    user_id = current_user_id()
    recipe, error = get_recipe_or_error(slug, user_id, write=True)
    if error:
        return error

    data = json_body()
    fields, message = build_recipe_fields(data, partial=True)
    if message:
        return error_response(message, 400)

    new_title = fields.get('title')
    if new_title and new_title != recipe.title:
        clash = Recipe.query.filter(
            Recipe.user_id == user_id, Recipe.title == new_title, Recipe.id != recipe.id
        ).first()
        if clash:
            return error_response(f"A recipe named \"{new_title}\" already exists", 409)
        raw_title = str(data.get('title')).strip()
        base = slugify(raw_title) or 'recipe'
        recipe.slug = generate_unique_slug(raw_title, [s for s in existing_slugs(base) if s != recipe.slug])

    for key, value in fields.items():
        setattr(recipe, key, value)

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return error_response('Recipe already exists', 409)

    return jsonify({'message': 'Recipe updated successfully', 'recipe': recipe.to_dict()})


@app.route('/api/recipes/<slug>', methods=['DELETE'])
def recipe_delete(slug):
    user_id = current_user_id()
    recipe, error = get_recipe_or_error(slug, user_id, write=True)
    if error:
        return error

    # Clear MealPlan references (set recipe_id to NULL for this recipe)
    MealPlan.query.filter_by(recipe_id=recipe.id).update({'recipe_id': None, 'locked': False})
    db.session.delete(recipe)
    db.session.commit()
    logger.info("Recipe deleted: %s (%s)", slug, user_id)
    return jsonify({'message': 'Recipe deleted successfully'})


# ============================================
# ROUTES - MEAL PLAN
# ============================================

@app.route('/api/mealplan', methods=['GET'])
def meal_plan():
    week = safe_int(request.args.get('week'), default=1, min_val=1)
    meals = MealPlan.query.filter_by(user_id=current_user_id(), week=week) \
        .order_by(MealPlan.day, MealPlan.meal_type).all()
    return jsonify({'week': week, 'meals': [m.to_dict() for m in meals]})


@app.route('/api/mealplan', methods=['POST'])
def meal_plan_set():
    user_id = current_user_id()
    data = json_body()
    week = safe_int(data.get('week'), default=1, min_val=1)
    day = safe_int(data.get('day'), default=0)
    meal_type = data.get('meal_type', 'Dinner')

    if day not in PLAN_DAYS:
        return error_response('day must be between 1 and 7', 400)
    if meal_type not in VALID_MEAL_TYPES:
        return error_response(f"meal_type must be one of {sorted(VALID_MEAL_TYPES)}", 400)

    recipe_id = data.get('recipe_id')
    if recipe_id is not None:
        recipe = db.session.get(Recipe, safe_int(recipe_id, default=0))
        if recipe is None or (recipe.user_id != user_id and not recipe.is_public):
            return error_response('Recipe not found', 404)
        recipe_id = recipe.id

    meal = MealPlan.query.filter_by(user_id=user_id, week=week, day=day, meal_type=meal_type).first()
    if meal is None:
        meal = MealPlan(user_id=user_id, week=week, day=day, meal_type=meal_type, locked=False)
        db.session.add(meal)
    meal.recipe_id = recipe_id
    db.session.commit()
    return jsonify({'meal': meal.to_dict()})


@app.route('/api/mealplan/<int:day>/<meal_type>/lock', methods=['POST'])
def meal_plan_lock(day, meal_type):
    week = safe_int(request.args.get('week'), default=1, min_val=1)
    meal = MealPlan.query.filter_by(user_id=current_user_id(), week=week, day=day, meal_type=meal_type).first()
    if meal is None:
        return error_response('Meal not found', 404)
    meal.locked = not meal.locked
    db.session.commit()
    return jsonify({'meal': meal.to_dict()})


@app.route('/api/mealplan/randomize', methods=['POST'])
def meal_plan_randomize():
    user_id = current_user_id()
    data = json_body()
    week = safe_int(data.get('week'), default=1, min_val=1)
    meal_type = data.get('meal_type', 'Dinner')
    if meal_type not in VALID_MEAL_TYPES:
        return error_response(f"meal_type must be one of {sorted(VALID_MEAL_TYPES)}", 400)

    slots = MealPlan.query.filter_by(user_id=user_id, week=week, meal_type=meal_type)

    # Get locked meals to preserve
    locked_meals = {m.day: m for m in slots.filter_by(locked=True).all()}
    locked_recipe_ids = {m.recipe_id for m in locked_meals.values() if m.recipe_id}

    # Delete only unlocked meals
    slots.filter_by(locked=False).delete()

    candidates = [r for r in Recipe.query.filter_by(user_id=user_id).all() if r.id not in locked_recipe_ids]
    random.shuffle(candidates)

    recipe_idx = 0
    for day in PLAN_DAYS:
        if day not in locked_meals and candidates:
            selected = candidates[recipe_idx % len(candidates)]
            db.session.add(MealPlan(user_id=user_id, week=week, day=day, meal_type=meal_type,
                                    recipe_id=selected.id, locked=False))
            recipe_idx += 1

    db.session.commit()
    meals = slots.order_by(MealPlan.day).all()
    return jsonify({'week': week, 'meals': [m.to_dict() for m in meals]})


# ============================================
# ROUTES - CHAT
# ============================================

@app.route('/api/chat', methods=['POST'])
def chat():
    user_id = current_user_id()
    data = json_body()
    message = sanitize_text(data.get('message'), max_length=MAX_LENGTHS['chat_message'])
    if not message:
        return error_response('message is required', 400)

    context = data.get('context') if isinstance(data.get('context'), dict) else {}
    context.setdefault('preferences', get_preferences(user_id).to_dict())

    try:
        reply = workflow_client().process_chat_message(message, context)
    except WorkflowError as e:
        logger.error("Chat failed for %s: %s", user_id, e)
        return error_response('AI workflow unavailable', 502)

    recipe = parse_recipe_from_text(reply)
    return jsonify({
        'response': reply,
        'recipe': format_recipe_for_storage(recipe) if isinstance(recipe, dict) else None,
    })


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(404)
def not_found(e):
    return error_response('Not found', 404)


@app.errorhandler(405)
def method_not_allowed(e):
    return error_response('Method not allowed', 405)


@app.errorhandler(500)
def server_error(e):
    db.session.rollback()
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return error_response('Internal server error', 500)


def init_db():
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
