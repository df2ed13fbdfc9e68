"""Shared request parsing for route handlers."""

from flask import request

from campusgo.errors import ValidationError


def get_json_body():
    """Request JSON as a dict; empty dict when the body is missing."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def parse_id(value, name, required=True):
    """Coerce an id from JSON or a query string to int.

    Accepts ints, integral floats and numeric strings; rejects booleans
    and fractional numbers.
    """
    if value is None or value == '':
        if required:
            raise ValidationError(f'Missing {name}')
        return None
    if isinstance(value, bool):
        raise ValidationError(f'Invalid {name}')
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f'Invalid {name}')
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f'Invalid {name}')
