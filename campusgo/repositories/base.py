"""Shared repository plumbing."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from campusgo import db
from campusgo.errors import PersistenceError

logger = logging.getLogger(__name__)


class Repository:
    """Base class holding the SQLAlchemy session.

    Defaults to the Flask-SQLAlchemy scoped session so routes can build
    repositories without arguments; tests may pass their own session.
    """

    def __init__(self, session=None):
        self.session = session or db.session

    def commit(self):
        """Commit the current transaction, rolling back on failure."""
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f'Commit failed in {type(self).__name__}: {e}', exc_info=True)
            raise PersistenceError() from e
