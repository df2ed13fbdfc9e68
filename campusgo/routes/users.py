"""User routes: mock identity, profile and preferences."""

from flask import Blueprint, jsonify, request

from campusgo.routes.helpers import get_json_body, parse_id
from campusgo.services import UserService

users_bp = Blueprint('users', __name__)


def _user_response(service, user):
    return user.to_dict(stats=service.get_stats(user.id))


@users_bp.route('/user/me', methods=['GET'])
def get_current_user():
    """Current user with order and review counts.

    Query params:
        - id: User to act as. Falls back to the first user, creating a
          default one on an empty database.
    """
    service = UserService()
    user = service.get_current(parse_id(request.args.get('id'), 'id', required=False))
    return jsonify(_user_response(service, user)), 200


@users_bp.route('/user/switch', methods=['POST'])
def switch_user():
    """Create a fresh random user to act as."""
    service = UserService()
    user = service.create_random()
    return jsonify(_user_response(service, user)), 201


@users_bp.route('/users', methods=['GET'])
def list_users():
    users = UserService().list_recent()
    return jsonify([
        {'id': u.id, 'nickname': u.nickname, 'avatar_url': u.avatar_url}
        for u in users
    ]), 200


@users_bp.route('/user/preferences', methods=['PATCH'])
def update_preferences():
    """Body: id, preferences ({types, priceMin, priceMax, tags})."""
    data = get_json_body()
    service = UserService()
    user = service.update_preferences(parse_id(data.get('id'), 'id'), data.get('preferences'))
    return jsonify({'success': True, 'preferences': user.raw_preferences()}), 200


@users_bp.route('/user/profile', methods=['PATCH'])
def update_profile():
    """Body: id, nickname, avatar_url."""
    data = get_json_body()
    service = UserService()
    user = service.update_profile(
        parse_id(data.get('id'), 'id'),
        nickname=data.get('nickname'),
        avatar_url=data.get('avatar_url'),
    )
    return jsonify({'success': True, 'user': user.to_dict()}), 200
