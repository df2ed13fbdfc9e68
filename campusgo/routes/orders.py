"""Order routes: create, list, status transitions, review status."""

from flask import Blueprint, jsonify, request

from campusgo.routes.helpers import get_json_body, parse_id
from campusgo.services import OrderService, ReviewService

orders_bp = Blueprint('orders', __name__)


@orders_bp.route('', methods=['POST'])
def create_order():
    """Create a new order.

    Body: requester_id, type, description, pickup_location,
    delivery_location, price, requester_wechat, and optionally
    time_requirement, extra_needs.
    """
    data = get_json_body()
    data['requester_id'] = parse_id(data.get('requester_id'), 'requester_id')

    order = OrderService().create_order(data)
    return jsonify(order.to_dict()), 201


@orders_bp.route('', methods=['GET'])
def list_orders():
    """List orders, newest first.

    Query params:
        - status: Only orders in this status
        - role, user_id: 'requester' for orders the user posted,
          'runner' for orders the user accepted
    """
    status = request.args.get('status') or None
    role = request.args.get('role') or None
    user_id = parse_id(request.args.get('user_id'), 'user_id', required=False)

    orders = OrderService().list_orders(status=status, role=role, user_id=user_id)
    return jsonify([o.to_dict(include_requester=True) for o in orders]), 200


@orders_bp.route('/<int:order_id>', methods=['GET'])
def get_order(order_id):
    order = OrderService().get_order(order_id)
    return jsonify(order.to_dict(include_requester=True)), 200


@orders_bp.route('/<int:order_id>/status', methods=['PATCH'])
def update_order_status(order_id):
    """Accept, complete, confirm or cancel an order.

    Body: status, and runner_id when accepting.
    """
    data = get_json_body()
    status = data.get('status')
    runner_id = parse_id(data.get('runner_id'), 'runner_id', required=False)

    order = OrderService().set_status(order_id, status, runner_id=runner_id)
    return jsonify(order.to_dict()), 200


@orders_bp.route('/<int:order_id>/cancel-acceptance', methods=['PATCH'])
def cancel_acceptance(order_id):
    """Assigned runner gives the order up; it goes back to pending."""
    data = get_json_body()
    runner_id = parse_id(data.get('runner_id'), 'runner_id')

    OrderService().cancel_acceptance(order_id, runner_id)
    return jsonify({'success': True}), 200


@orders_bp.route('/<int:order_id>/review-status', methods=['GET'])
def review_status(order_id):
    user_id = parse_id(request.args.get('user_id'), 'user_id')
    return jsonify({'hasReviewed': ReviewService().has_reviewed(order_id, user_id)}), 200
