"""Order persistence, including the guarded status update."""

from datetime import datetime

from sqlalchemy.orm import joinedload

from campusgo.models import Order
from campusgo.repositories.base import Repository

_ANY = object()


class OrderRepository(Repository):

    def get(self, order_id):
        return self.session.get(Order, order_id)

    def add(self, order):
        self.session.add(order)
        self.commit()
        return order

    def list(self, status=None, role=None, user_id=None):
        """Orders newest first with the requester eagerly loaded.

        role/user_id narrow to orders the user posted ('requester') or
        accepted ('runner'); other roles are ignored.
        """
        query = self.session.query(Order).options(joinedload(Order.requester))

        if status:
            query = query.filter(Order.status == status)

        if role == 'requester' and user_id is not None:
            query = query.filter(Order.requester_id == user_id)
        elif role == 'runner' and user_id is not None:
            query = query.filter(Order.runner_id == user_id)

        return query.order_by(Order.created_at.desc(), Order.id.desc()).all()

    def transition(self, order_id, from_statuses, values, expected_runner_id=_ANY):
        """Update an order only if it is still in one of from_statuses.

        The check and the write are one UPDATE statement, so of two
        concurrent callers at most one sees its row change.

        Args:
            order_id: Order to update
            from_statuses: Statuses the order must currently be in
            values: Column values to set, e.g. {'status': ..., 'runner_id': ...}
            expected_runner_id: If given, runner_id must also equal this

        Returns:
            True if the row was updated, False if the guard did not hold
        """
        query = self.session.query(Order).filter(
            Order.id == order_id,
            Order.status.in_(tuple(from_statuses))
        )
        if expected_runner_id is not _ANY:
            query = query.filter(Order.runner_id == expected_runner_id)

        values = dict(values, updated_at=datetime.utcnow())
        updated = query.update(values, synchronize_session=False)
        self.commit()
        return updated == 1
