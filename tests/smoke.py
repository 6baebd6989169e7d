"""
Smoke tests for the MealPrep Agent API.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('FLASK_ENV', 'testing')


def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app, db
    assert app is not None
    assert db is not None
    print("OK: App imports successfully")


def test_models_import():
    """Verify models can be imported."""
    from models import Recipe, UserPreferences, MealPlan
    assert Recipe is not None
    assert UserPreferences is not None
    assert MealPlan is not None
    print("OK: Models import successfully")


def test_security_utils_import():
    """Verify sanitizers can be imported."""
    from utils import sanitize_text, sanitize_url, sanitize_ingredient
    assert callable(sanitize_text)
    assert callable(sanitize_url)
    assert callable(sanitize_ingredient)
    print("OK: Security utils import successfully")


def test_conversion_constants_unchanged():
    """Verify critical conversion constants have expected values."""
    from constants import UNIT_CONVERSIONS

    # These values must not change
    assert UNIT_CONVERSIONS['cup']['to_metric'](1) == 236.588
    assert UNIT_CONVERSIONS['oz']['to_metric'](1) == 28.3495
    assert UNIT_CONVERSIONS['g']['to_imperial'](1) == 0.035274
    assert UNIT_CONVERSIONS['C']['to_imperial'](100) == 212
    assert UNIT_CONVERSIONS['F']['to_metric'](32) == 0
    print("OK: Conversion constants unchanged")


def test_app_runs():
    """Verify app can create test client and serve the health check."""
    from app import app, db
    with app.app_context():
        db.create_all()
        with app.test_client() as client:
            response = client.get('/health')
            assert response.status_code == 200
            response = client.get('/api/convert?value=4&unit=cup&system=metric')
            assert response.get_json()['display'] == '946 ml'
        db.drop_all()
    print("OK: App serves health check and conversions")


if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_security_utils_import,
        test_conversion_constants_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
