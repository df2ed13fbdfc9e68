"""Notification model for user notifications."""

from datetime import datetime

from campusgo import db


class Notification(db.Model):
    """Model for storing user notifications."""

    __tablename__ = 'notifications'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    is_read = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f'<Notification {self.id} for User {self.user_id}>'

    def to_dict(self):
        """Convert notification to dictionary."""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'message': self.message,
            'is_read': self.is_read,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


# Titles and messages shown to users
class NotificationText:
    ORDER_PUBLISHED = '发布成功'
    ORDER_RECOMMENDED = '新任务推荐'
    ORDER_ACCEPTED = '订单被接单'
    ORDER_DELIVERED = '订单已送达'
    ORDER_CONFIRMED = '订单已完成'
    ORDER_CANCELLED = '订单已取消'
    RUNNER_GAVE_UP = '接单人取消'
