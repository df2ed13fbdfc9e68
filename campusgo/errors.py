"""Error taxonomy shared by services, repositories and routes.

Services raise these; the handlers registered here turn them into the
``{'error': message}`` JSON bodies every route returns.
"""

import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class CampusGoError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(CampusGoError):
    """Missing or invalid request field."""
    status_code = 400


class NotFound(CampusGoError):
    status_code = 404


class Unauthorized(CampusGoError):
    """The acting user is not allowed to perform this change."""
    status_code = 403


class Conflict(CampusGoError):
    """The order is not in a state that allows the requested transition."""
    status_code = 409


class DuplicateReview(CampusGoError):
    status_code = 409

    def __init__(self, message='Already reviewed'):
        super().__init__(message)


class PersistenceError(CampusGoError):
    status_code = 500

    def __init__(self, message='Database operation failed'):
        super().__init__(message)


def register_error_handlers(app):
    """Register JSON error handlers on the Flask app."""

    @app.errorhandler(CampusGoError)
    def handle_campusgo_error(error):
        if error.status_code >= 500:
            logger.error(f'{type(error).__name__}: {error.message}', exc_info=error)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        logger.error(f'Unhandled database error: {error}', exc_info=error)
        return jsonify(PersistenceError().to_dict()), 500

    @app.errorhandler(404)
    def handle_not_found(error):
        return jsonify({'error': 'Not found'}), 404
