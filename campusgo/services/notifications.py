"""In-app notifications.

Notifications are a convenience layer: ``notify`` never raises, so a
failure here cannot undo or fail the order operation that triggered it.
Callers commit their primary change before notifying.
"""

import logging

from campusgo.errors import NotFound, ValidationError
from campusgo.repositories import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:

    def __init__(self, notifications=None):
        self.notifications = notifications or NotificationRepository()

    def notify(self, user_id, title, message):
        """Create a notification for a user, best effort.

        Returns:
            The Notification, or None if it could not be stored
        """
        try:
            return self.notifications.add(user_id, title, message)
        except Exception as e:
            logger.error(f'Failed to create notification for user {user_id} (non-critical): {e}',
                         exc_info=True)
            self.notifications.session.rollback()
            return None

    def list_for_user(self, user_id):
        if user_id is None:
            raise ValidationError('Missing user_id')
        return self.notifications.list_for_user(user_id)

    def mark_read(self, notification_id):
        if notification_id is None:
            raise ValidationError('Missing id')
        if not self.notifications.mark_read(notification_id):
            raise NotFound('Notification not found')
