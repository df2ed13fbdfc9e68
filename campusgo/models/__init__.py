"""Database models for the errand application."""

from .user import User
from .order import Order
from .review import Review
from .notification import Notification, NotificationText
from .preferences import (
    LegacyPreferences,
    PreferenceFormatError,
    StructuredPreferences,
    parse_preferences,
)

__all__ = [
    'User',
    'Order',
    'Review',
    'Notification',
    'NotificationText',
    'LegacyPreferences',
    'PreferenceFormatError',
    'StructuredPreferences',
    'parse_preferences',
]
