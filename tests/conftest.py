import os

os.environ['FLASK_ENV'] = 'testing'

import pytest

from app import app as flask_app, db


@pytest.fixture
def app():
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_recipe(client):
    def _make(title='Pancakes', user='alice', **overrides):
        payload = {
            'title': title,
            'description': 'Fluffy breakfast pancakes',
            'ingredients': [
                {'item': 'flour', 'amount': '2', 'unit': 'cup'},
                {'item': 'milk', 'amount': '1 1/2', 'unit': 'cups'},
                {'item': 'butter', 'amount': '500', 'unit': 'g'},
                {'item': 'eggs', 'amount': '2', 'unit': 'whole'},
                {'item': 'salt', 'amount': 'a pinch'},
            ],
            'instructions': ['Mix dry ingredients', 'Whisk in milk and eggs', 'Cook on a hot griddle'],
            'prep_time': '10',
            'cook_time': 15,
            'servings': 4,
            'difficulty': 'easy',
            'cuisine': 'American',
        }
        payload.update(overrides)
        response = client.post('/api/recipes', json=payload, headers={'X-User-Id': user})
        assert response.status_code == 201, response.get_json()
        return response.get_json()['recipe']
    return _make
