"""Notification persistence."""

from campusgo.models import Notification
from campusgo.repositories.base import Repository


class NotificationRepository(Repository):

    def add(self, user_id, title, message):
        notification = Notification(user_id=user_id, title=title, message=message)
        self.session.add(notification)
        self.commit()
        return notification

    def list_for_user(self, user_id):
        return (
            self.session.query(Notification)
            .filter_by(user_id=user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .all()
        )

    def mark_read(self, notification_id):
        """Returns False when no such notification exists."""
        updated = self.session.query(Notification).filter_by(id=notification_id).update(
            {'is_read': True},
            synchronize_session=False
        )
        self.commit()
        return updated == 1
