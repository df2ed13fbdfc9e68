#!/usr/bin/env python
"""Database initialization script for the CampusGo backend.

Creates all tables from the SQLAlchemy models. The app also does this on
startup; run it to prepare a database ahead of the first deploy.

Usage:
    python init_db.py
"""

import logging
import os
import sys

from campusgo import create_app, db

logger = logging.getLogger('init_db')

TABLES = [
    ('users', 'Requesters and runners, ratings, preferences'),
    ('orders', 'Errand orders and their status'),
    ('reviews', 'Post-order ratings, one per order and reviewer'),
    ('notifications', 'In-app notifications'),
]


def init_database():
    """Initialize the database by creating all tables."""
    config_name = os.getenv('FLASK_ENV', 'development')
    app = create_app(config_name)

    with app.app_context():
        logger.info(f"Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}")
        try:
            db.create_all()
        except Exception as e:
            logger.error(f'Error creating database: {e}', exc_info=True)
            return False

        for table_name, description in TABLES:
            logger.info(f'  {table_name:<15} - {description}')
        logger.info('Database initialization complete')
        return True


if __name__ == '__main__':
    success = init_database()
    sys.exit(0 if success else 1)
