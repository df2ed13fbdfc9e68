"""Reviews and per-role rating aggregation."""

import logging

from campusgo.constants import ROLES
from campusgo.errors import DuplicateReview, NotFound, ValidationError
from campusgo.models import Review
from campusgo.repositories import OrderRepository, ReviewRepository, UserRepository

logger = logging.getLogger(__name__)


def _validate_rating(rating):
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError('Rating must be an integer between 1 and 5')
    if not (1 <= rating <= 5):
        raise ValidationError('Rating must be between 1 and 5')
    return rating


class ReviewService:

    def __init__(self, reviews=None, orders=None, users=None):
        self.reviews = reviews or ReviewRepository()
        self.orders = orders or OrderRepository()
        self.users = users or UserRepository()

    def record_review(self, order_id, reviewer_id, target_id, target_role, rating, comment=None):
        """Store a review and recompute the target's rating for that role.

        Raises:
            ValidationError: bad rating or role
            NotFound: unknown order, reviewer or target
            DuplicateReview: reviewer already reviewed this order
        """
        if target_role not in ROLES:
            raise ValidationError("Role must be 'requester' or 'runner'")
        _validate_rating(rating)

        if self.orders.get(order_id) is None:
            raise NotFound('Order not found')
        if self.users.get(reviewer_id) is None:
            raise NotFound('Reviewer not found')
        if self.users.get(target_id) is None:
            raise NotFound('Target user not found')

        if self.reviews.exists(order_id, reviewer_id):
            raise DuplicateReview()

        review = Review(
            order_id=order_id,
            reviewer_id=reviewer_id,
            target_id=target_id,
            role=target_role,
            rating=rating,
            comment=comment or None,
        )
        self.reviews.add_and_recompute_rating(review)
        logger.info(f'User {reviewer_id} rated user {target_id} as {target_role}: {rating}')
        return review

    def has_reviewed(self, order_id, user_id) -> bool:
        return self.reviews.exists(order_id, user_id)
