"""Per-entity persistence interfaces.

Services never touch the session directly; they go through these.
"""

from campusgo.repositories.notifications import NotificationRepository
from campusgo.repositories.orders import OrderRepository
from campusgo.repositories.reviews import ReviewRepository
from campusgo.repositories.users import UserRepository

__all__ = [
    'NotificationRepository',
    'OrderRepository',
    'ReviewRepository',
    'UserRepository',
]
