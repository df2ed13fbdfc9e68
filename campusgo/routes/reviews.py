"""Review routes.

Each side of an order rates the other once; the target's per-role
rating is recomputed on every new review.
"""

from flask import Blueprint, jsonify

from campusgo.routes.helpers import get_json_body, parse_id
from campusgo.services import ReviewService

reviews_bp = Blueprint('reviews', __name__)


@reviews_bp.route('', methods=['POST'])
def create_review():
    """Submit a review.

    Body: order_id, reviewer_id, target_id, role (role of the target),
    rating (1-5), optional comment.
    """
    data = get_json_body()

    review = ReviewService().record_review(
        order_id=parse_id(data.get('order_id'), 'order_id'),
        reviewer_id=parse_id(data.get('reviewer_id'), 'reviewer_id'),
        target_id=parse_id(data.get('target_id'), 'target_id'),
        target_role=data.get('role'),
        rating=data.get('rating'),
        comment=data.get('comment'),
    )
    return jsonify({'success': True, 'review': review.to_dict()}), 201
