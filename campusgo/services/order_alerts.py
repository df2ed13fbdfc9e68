"""Service for recommending new orders to runners.

Called after a new order is created. Notifies users who:
1. Are NOT the order's requester
2. Have structured preferences with at least one type or price criterion
3. Accept the order's type (if they listed types)
4. Accept the order's price (if they set a minimum and/or maximum)

Legacy tag-list preferences never match. Tags are stored but not used
here.
"""

import logging

from campusgo.models import NotificationText, PreferenceFormatError
from campusgo.repositories import UserRepository
from campusgo.services.notifications import NotificationService

logger = logging.getLogger(__name__)


def matches(order, candidate) -> bool:
    """Decide whether a candidate runner should hear about an order.

    Args:
        order: An Order (needs type and price)
        candidate: A User other than the order's requester

    Raises:
        PreferenceFormatError: the candidate's stored preferences are malformed
    """
    prefs = candidate.get_preferences()
    if prefs is None:
        return False
    return prefs.accepts(order.type, order.price)


def send_order_alerts(order, users=None, notifier=None) -> int:
    """Notify every matching runner about a new order.

    Each candidate is handled on its own: bad preference data or a failed
    notification for one user is logged and the loop moves on.

    Returns:
        Number of notifications created
    """
    users = users or UserRepository()
    notifier = notifier or NotificationService()

    notified = 0
    for candidate in users.iter_candidates(exclude_id=order.requester_id):
        try:
            if not matches(order, candidate):
                continue
        except PreferenceFormatError as e:
            logger.warning(f'Skipping user {candidate.id}: bad preferences ({e})')
            continue

        notification = notifier.notify(
            candidate.id,
            NotificationText.ORDER_RECOMMENDED,
            f'有你感兴趣的订单发布了：{order.description}'
        )
        if notification is not None:
            notified += 1

    if notified > 0:
        logger.info(f'Sent {notified} recommendation(s) for order {order.id}')
    return notified
