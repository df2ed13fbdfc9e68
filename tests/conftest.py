"""
Pytest configuration and fixtures for testing the CampusGo API.
"""

import json
import os
import sys

import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from campusgo import create_app, db
from campusgo.constants import OrderStatus
from campusgo.models import Order, User

fake = Faker()


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create a fresh database session for each test."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        yield db.session
        db.session.rollback()


def _create_user(preferences=None, **overrides):
    """Helper to create a user with sensible defaults.

    preferences may be a list/dict (stored as JSON) or raw text.
    """
    data = {
        'openid': f'test_{fake.uuid4()}',
        'nickname': fake.first_name(),
        'avatar_url': fake.image_url(),
    }
    data.update(overrides)
    if preferences is not None and not isinstance(preferences, str):
        preferences = json.dumps(preferences, ensure_ascii=False)
    user = User(preferences=preferences, **data)
    db.session.add(user)
    db.session.commit()
    return user


def _create_order(requester_id, **overrides):
    """Helper to create a pending order directly in the database."""
    data = {
        'type': 'takeout',
        'description': fake.sentence(nb_words=5),
        'pickup_location': fake.street_address(),
        'delivery_location': fake.street_address(),
        'price': 20.0,
        'requester_wechat': fake.user_name(),
        'status': OrderStatus.PENDING,
    }
    data.update(overrides)
    order = Order(requester_id=requester_id, **data)
    db.session.add(order)
    db.session.commit()
    return order


@pytest.fixture
def make_user(db_session):
    """Factory fixture: make_user(preferences=..., nickname=...) -> User."""
    return _create_user


@pytest.fixture
def make_order(db_session):
    """Factory fixture: make_order(requester_id, **fields) -> Order."""
    return _create_order


@pytest.fixture
def requester(make_user):
    return make_user(nickname='Requester')


@pytest.fixture
def runner(make_user):
    return make_user(nickname='Runner')


@pytest.fixture
def pending_order(make_order, requester):
    return make_order(requester.id)


def order_payload(requester_id, **overrides):
    """JSON body for POST /api/orders."""
    data = {
        'requester_id': requester_id,
        'type': 'takeout',
        'description': '两份黄焖鸡，中等大小',
        'pickup_location': '北门外卖柜',
        'delivery_location': '7号宿舍楼 302',
        'price': 15.5,
        'requester_wechat': fake.user_name(),
        'time_requirement': '12:30 前',
    }
    data.update(overrides)
    return data
