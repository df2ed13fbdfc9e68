"""User persistence."""

from sqlalchemy import func

from campusgo.constants import OrderStatus
from campusgo.models import Order, Review, User
from campusgo.repositories.base import Repository

# Orders that count towards a runner's record
RUNNER_COUNTED_STATUSES = (OrderStatus.COMPLETED_BY_RUNNER, OrderStatus.CONFIRMED)


class UserRepository(Repository):

    def get(self, user_id):
        if user_id is None:
            return None
        return self.session.get(User, user_id)

    def first(self):
        return self.session.query(User).order_by(User.id).first()

    def add(self, user):
        self.session.add(user)
        self.commit()
        return user

    def list_recent(self, limit=10):
        return (
            self.session.query(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .limit(limit)
            .all()
        )

    def iter_candidates(self, exclude_id):
        """All users except one, in id order, for alert fan-out."""
        return (
            self.session.query(User)
            .filter(User.id != exclude_id)
            .order_by(User.id)
            .all()
        )

    def save(self, user):
        self.commit()
        return user

    def get_stats(self, user_id):
        """Derived order and review counts, computed on every read.

        Returns dict with requester_order_count, requester_review_count,
        runner_order_count, runner_review_count.
        """
        requester_orders = self.session.query(func.count(Order.id)).filter(
            Order.requester_id == user_id
        ).scalar()
        runner_orders = self.session.query(func.count(Order.id)).filter(
            Order.runner_id == user_id,
            Order.status.in_(RUNNER_COUNTED_STATUSES)
        ).scalar()

        review_counts = dict(
            self.session.query(Review.role, func.count(Review.id))
            .filter(Review.target_id == user_id)
            .group_by(Review.role)
            .all()
        )

        return {
            'requester_order_count': requester_orders or 0,
            'requester_review_count': review_counts.get('requester', 0),
            'runner_order_count': runner_orders or 0,
            'runner_review_count': review_counts.get('runner', 0),
        }
