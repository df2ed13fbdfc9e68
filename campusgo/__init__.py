import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

load_dotenv()

db = SQLAlchemy()

logger = logging.getLogger(__name__)


def create_app(config_name='development'):
    app = Flask(__name__)

    # Config
    if config_name == 'testing':
        app.config['TESTING'] = True
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///:memory:'
    else:
        app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv(
            'DATABASE_URL',
            'sqlite:///campusgo.db'
        )
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    # Notification texts are Chinese; keep them readable in responses
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

    # Initialize extensions
    db.init_app(app)
    CORS(app, origins=os.getenv('CORS_ORIGINS', '*'))

    # Models must be imported before create_all sees their tables
    from campusgo import models  # noqa: F401

    with app.app_context():
        try:
            db.create_all()
        except Exception as e:
            logger.warning(f'Could not create database tables: {e}')

    from campusgo.errors import register_error_handlers
    from campusgo.routes import register_routes
    register_error_handlers(app)
    register_routes(app)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok'}, 200

    return app
