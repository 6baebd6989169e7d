import pytest

from services.parsing import (
    float_to_fraction,
    format_recipe_for_storage,
    normalize_fractions,
    parse_fraction,
    parse_ingredient_line,
    parse_recipe_from_text,
)


@pytest.mark.parametrize('value, expected', [
    ('2', 2.0),
    ('1/4', 0.25),
    ('1 1/2', 1.5),
    ('½', 0.5),
    ('1½', 1.5),
    (3, 3.0),
    (0.75, 0.75),
])
def test_parse_fraction(value, expected):
    assert parse_fraction(value) == pytest.approx(expected)


@pytest.mark.parametrize('value', ['a pinch', '', None, '1/0', True])
def test_parse_fraction_unreadable(value):
    assert parse_fraction(value) is None
    assert parse_fraction(value, default=1.0) == 1.0


def test_float_to_fraction():
    assert float_to_fraction(1.5) == '1 1/2'
    assert float_to_fraction(0.33) == '1/3'
    assert float_to_fraction(2) == '2'
    assert float_to_fraction(0) == '0'
    assert float_to_fraction(1.1) == '1.1'


def test_normalize_fractions_mixed_number():
    assert normalize_fractions('2 ¼ cups') == '2.25 cups'


def test_parse_ingredient_line():
    assert parse_ingredient_line('2 cups flour, sifted') == {
        'item': 'flour', 'amount': '2', 'unit': 'cup', 'notes': 'sifted',
    }
    assert parse_ingredient_line('1 1/2 fl oz lime juice') == {
        'item': 'lime juice', 'amount': '1 1/2', 'unit': 'fl oz', 'notes': None,
    }
    assert parse_ingredient_line('3 cloves garlic') == {
        'item': 'garlic', 'amount': '3', 'unit': 'clove', 'notes': None,
    }
    assert parse_ingredient_line('salt to taste')['amount'] is None
    assert parse_ingredient_line('   ') is None


def test_recipe_in_fenced_block_with_wrapper():
    text = 'Here you go!\n```json\n{"recipe": {"title": "Soup", "ingredients": []}}\n```\nEnjoy.'
    assert parse_recipe_from_text(text) == {'title': 'Soup', 'ingredients': []}


def test_recipe_in_fenced_block_at_root():
    text = '```\n{"title": "Toast", "instructions": ["Toast the bread"]}\n```'
    assert parse_recipe_from_text(text)['title'] == 'Toast'


def test_recipe_in_plain_text():
    text = 'Sure. {"recipe": {"title": "Salad", "ingredients": [{"item": "lettuce"}]}} Anything else?'
    assert parse_recipe_from_text(text)['title'] == 'Salad'


def test_bare_recipe_object_in_plain_text():
    text = 'Try this: {"title": "Rice", "ingredients": [{"item": "rice", "amount": "1", "unit": "cup"}]}'
    recipe = parse_recipe_from_text(text)
    assert recipe['ingredients'][0]['item'] == 'rice'


def test_no_recipe_returns_none():
    assert parse_recipe_from_text('Just some cooking advice.') is None
    assert parse_recipe_from_text('') is None
    assert parse_recipe_from_text(None) is None


def test_malformed_json_returns_none():
    assert parse_recipe_from_text('```json\n{"recipe": {"title": "Oops",}\n```') is None


def test_format_recipe_for_storage_defaults():
    stored = format_recipe_for_storage({'title': 'Stew', 'prep_time': '15 minutes', 'cook_time': 'about 2 hours'})
    assert stored['title'] == 'Stew'
    assert stored['prep_time'] == 15
    assert stored['cook_time'] == 2
    assert stored['servings'] == 4
    assert stored['difficulty'] == 'medium'
    assert stored['ingredients'] == []
    assert stored['dietary_tags'] == []
    assert stored['description'] is None
    assert stored['rating'] is None
    assert stored['is_favorite'] is False


def test_format_recipe_for_storage_reads_values():
    stored = format_recipe_for_storage({
        'title': 'Curry',
        'servings': 'Serves 6',
        'difficulty': 'hard',
        'cuisine': 'Thai',
        'prep_time': 20,
    })
    assert stored['servings'] == 6
    assert stored['difficulty'] == 'hard'
    assert stored['cuisine'] == 'Thai'
    assert stored['prep_time'] == 20
    assert stored['cook_time'] is None
