"""Business logic, independent of HTTP."""

from campusgo.services.notifications import NotificationService
from campusgo.services.order_alerts import matches, send_order_alerts
from campusgo.services.orders import OrderService
from campusgo.services.ratings import ReviewService
from campusgo.services.users import UserService

__all__ = [
    'NotificationService',
    'OrderService',
    'ReviewService',
    'UserService',
    'matches',
    'send_order_alerts',
]
