"""Notification routes for user notifications."""

from flask import Blueprint, jsonify, request

from campusgo.routes.helpers import get_json_body, parse_id
from campusgo.services import NotificationService

notifications_bp = Blueprint('notifications', __name__)


@notifications_bp.route('', methods=['GET'])
def get_notifications():
    """All notifications for ?user_id=, newest first."""
    user_id = parse_id(request.args.get('user_id'), 'user_id')
    notifications = NotificationService().list_for_user(user_id)
    return jsonify([n.to_dict() for n in notifications]), 200


@notifications_bp.route('/mark-read', methods=['POST'])
def mark_as_read():
    data = get_json_body()
    NotificationService().mark_read(parse_id(data.get('id'), 'id'))
    return jsonify({'success': True}), 200
