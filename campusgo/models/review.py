"""Review model for post-order ratings."""
from datetime import datetime

from campusgo import db


class Review(db.Model):
    """One user's rating of the other party on an order."""

    __tablename__ = 'reviews'

    __table_args__ = (
        db.UniqueConstraint('order_id', 'reviewer_id', name='unique_order_reviewer'),
    )

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey('orders.id'), nullable=False, index=True)
    reviewer_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    target_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    role = db.Column(db.String(20), nullable=False)  # role of the target: 'requester' or 'runner'
    rating = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        """Convert review to dictionary."""
        return {
            'id': self.id,
            'order_id': self.order_id,
            'reviewer_id': self.reviewer_id,
            'target_id': self.target_id,
            'role': self.role,
            'rating': self.rating,
            'comment': self.comment,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Review {self.id}: {self.rating}stars>'
