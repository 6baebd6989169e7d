"""
Request Helpers

Lenient parsing of query/body values and resolution of the acting user.
"""

import math
import re

from flask import request

DEFAULT_USER_ID = 'local'
USER_ID_PATTERN = re.compile(r'^[A-Za-z0-9_.@:-]{1,64}$')


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value not in (None, '') else default
    except (ValueError, TypeError):
        return default
    if not math.isfinite(result):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value not in (None, '') else default
    except (ValueError, TypeError):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def current_user_id():
    """
    The acting user, taken from the X-User-Id header.

    Identity is established upstream by the auth provider; anything that
    does not look like an id falls back to the local user.
    """
    user_id = (request.headers.get('X-User-Id') or '').strip()
    if USER_ID_PATTERN.match(user_id):
        return user_id
    return DEFAULT_USER_ID
