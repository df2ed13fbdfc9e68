"""Order lifecycle.

    pending -> accepted -> completed_by_runner -> confirmed
    pending | accepted -> cancelled
    accepted -> pending              (runner gives up, see cancel_acceptance)

Every transition is a guarded UPDATE on the expected prior status. A
transition from any other status is rejected with Conflict, as is one
whose guard no longer holds by the time it runs (lost race).

Notifications are sent only after the order change is committed.
"""

import logging
import math
from numbers import Real

from campusgo.constants import TRANSITIONS, OrderStatus, validate_order_type
from campusgo.errors import Conflict, NotFound, Unauthorized, ValidationError
from campusgo.models import NotificationText, Order
from campusgo.repositories import OrderRepository, UserRepository
from campusgo.services.notifications import NotificationService
from campusgo.services.order_alerts import send_order_alerts

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = [
    'requester_id', 'type', 'description', 'pickup_location',
    'delivery_location', 'price', 'requester_wechat',
]
TEXT_FIELDS = ['description', 'pickup_location', 'delivery_location', 'requester_wechat']
OPTIONAL_TEXT_FIELDS = ['time_requirement', 'extra_needs']


def _validate_price(price):
    if isinstance(price, bool) or not isinstance(price, Real):
        raise ValidationError('Price must be a number')
    if not math.isfinite(price) or price <= 0:
        raise ValidationError('Price must be greater than 0')
    return float(price)


class OrderService:

    def __init__(self, orders=None, users=None, notifier=None):
        self.orders = orders or OrderRepository()
        self.users = users or UserRepository()
        self.notifier = notifier or NotificationService()

    # ---- queries ----

    def get_order(self, order_id):
        order = self.orders.get(order_id)
        if order is None:
            raise NotFound('Order not found')
        return order

    def list_orders(self, status=None, role=None, user_id=None):
        if status and status not in OrderStatus.ALL:
            raise ValidationError(f"Invalid status '{status}'")
        return self.orders.list(status=status, role=role, user_id=user_id)

    # ---- create ----

    def create_order(self, data):
        """Create a pending order, then notify the requester and matching runners."""
        missing = [k for k in REQUIRED_FIELDS
                   if data.get(k) is None or (isinstance(data.get(k), str) and not data[k].strip())]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        for key in TEXT_FIELDS:
            if not isinstance(data[key], str):
                raise ValidationError(f'{key} must be text')
        for key in OPTIONAL_TEXT_FIELDS:
            if data.get(key) is not None and not isinstance(data[key], str):
                raise ValidationError(f'{key} must be text')

        order_type, error = validate_order_type(data['type'])
        if error:
            raise ValidationError(error)
        price = _validate_price(data['price'])

        requester_id = data['requester_id']
        if self.users.get(requester_id) is None:
            raise NotFound('Requester not found')

        order = Order(
            requester_id=requester_id,
            type=order_type,
            description=data['description'].strip(),
            pickup_location=data['pickup_location'].strip(),
            delivery_location=data['delivery_location'].strip(),
            price=price,
            requester_wechat=data['requester_wechat'].strip(),
            status=OrderStatus.PENDING,
            time_requirement=data.get('time_requirement') or None,
            extra_needs=data.get('extra_needs') or None,
        )
        self.orders.add(order)
        logger.info(f'Order {order.id} created by user {requester_id}: {order_type} {price}')

        self.notifier.notify(
            requester_id,
            NotificationText.ORDER_PUBLISHED,
            f'您的订单 "{order.description}" 已发布，请耐心等待接单。'
        )
        send_order_alerts(order, users=self.users, notifier=self.notifier)
        return order

    # ---- transitions ----

    def set_status(self, order_id, status, runner_id=None):
        """Move an order to a new status.

        Args:
            order_id: Order to update
            status: One of accepted, completed_by_runner, confirmed, cancelled
            runner_id: Required when status is accepted

        Raises:
            ValidationError: unknown status, or accept without runner_id
            NotFound: unknown order or runner
            Conflict: the order is not in a status this transition starts from
        """
        if not isinstance(status, str) or status not in TRANSITIONS:
            raise ValidationError(f"Cannot set status to '{status}'")

        order = self.get_order(order_id)

        if status == OrderStatus.ACCEPTED:
            return self._accept(order, runner_id)
        if status == OrderStatus.COMPLETED_BY_RUNNER:
            return self._complete(order)
        if status == OrderStatus.CONFIRMED:
            return self._confirm(order)
        return self._cancel(order)

    def cancel_acceptance(self, order_id, runner_id):
        """The assigned runner gives the order back to the lobby.

        Raises:
            NotFound: unknown order
            Unauthorized: runner_id is not the assigned runner
            Conflict: the order is no longer accepted
        """
        order = self.get_order(order_id)
        if runner_id is None or order.runner_id != runner_id:
            raise Unauthorized('Not authorized')

        requester_id = order.requester_id
        self._transition(
            order, OrderStatus.PENDING, {OrderStatus.ACCEPTED},
            {'status': OrderStatus.PENDING, 'runner_id': None},
            expected_runner_id=runner_id
        )
        self.notifier.notify(
            requester_id,
            NotificationText.RUNNER_GAVE_UP,
            '接单人取消了接单，您的订单已重新回到任务大厅。'
        )
        return self.get_order(order_id)

    def _accept(self, order, runner_id):
        if runner_id is None:
            raise ValidationError('runner_id is required to accept an order')
        runner = self.users.get(runner_id)
        if runner is None:
            raise NotFound('Runner not found')
        runner_name = runner.nickname
        requester_id = order.requester_id

        self._transition(
            order, OrderStatus.ACCEPTED, TRANSITIONS[OrderStatus.ACCEPTED],
            {'status': OrderStatus.ACCEPTED, 'runner_id': runner_id}
        )
        self.notifier.notify(
            requester_id,
            NotificationText.ORDER_ACCEPTED,
            f'您的订单已被 {runner_name or "接单人"} 接单。'
        )
        return self.get_order(order.id)

    def _complete(self, order):
        requester_id = order.requester_id
        self._transition(
            order, OrderStatus.COMPLETED_BY_RUNNER, TRANSITIONS[OrderStatus.COMPLETED_BY_RUNNER],
            {'status': OrderStatus.COMPLETED_BY_RUNNER}
        )
        self.notifier.notify(
            requester_id,
            NotificationText.ORDER_DELIVERED,
            '接单人已确认送达，请您确认完成。'
        )
        return self.get_order(order.id)

    def _confirm(self, order):
        runner_id = order.runner_id
        self._transition(
            order, OrderStatus.CONFIRMED, TRANSITIONS[OrderStatus.CONFIRMED],
            {'status': OrderStatus.CONFIRMED}
        )
        if runner_id:
            self.notifier.notify(
                runner_id,
                NotificationText.ORDER_CONFIRMED,
                '下单人已确认完成，请自行联系结算赏金。'
            )
        return self.get_order(order.id)

    def _cancel(self, order):
        order_id = order.id
        requester_id = order.requester_id
        runner_id = order.runner_id
        self._transition(
            order, OrderStatus.CANCELLED, TRANSITIONS[OrderStatus.CANCELLED],
            {'status': OrderStatus.CANCELLED},
            expected_runner_id=runner_id
        )
        if runner_id:
            self.notifier.notify(runner_id, NotificationText.ORDER_CANCELLED, '下单人取消了订单。')
        self.notifier.notify(requester_id, NotificationText.ORDER_CANCELLED, '订单已成功取消。')
        return self.get_order(order_id)

    def _transition(self, order, target, from_statuses, values, **guard):
        order_id = order.id
        current = order.status
        if current not in from_statuses:
            raise Conflict(f"Cannot change order from '{current}' to '{target}'")

        if not self.orders.transition(order_id, from_statuses, values, **guard):
            logger.info(f'Order {order_id}: {current} -> {target} lost the race')
            raise Conflict('Order was updated by someone else, please refresh')

        logger.info(f'Order {order_id}: {current} -> {target}')
