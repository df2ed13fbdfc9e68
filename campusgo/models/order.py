"""Order model for errand requests."""

from datetime import datetime

from campusgo import db
from campusgo.constants import OrderStatus


class Order(db.Model):
    """An errand posted by a requester and fulfilled by a runner."""

    __tablename__ = 'orders'

    id = db.Column(db.Integer, primary_key=True)
    requester_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    runner_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)
    type = db.Column(db.String(20), nullable=False)  # 'takeout', 'express', 'send', 'errand', 'other'
    description = db.Column(db.Text, nullable=False)  # size, weight details
    pickup_location = db.Column(db.String(255), nullable=False)
    delivery_location = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Float, nullable=False)
    requester_wechat = db.Column(db.String(80), nullable=False)
    status = db.Column(db.String(32), default=OrderStatus.PENDING, nullable=False, index=True)
    time_requirement = db.Column(db.String(255), nullable=True)
    extra_needs = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    requester = db.relationship('User', foreign_keys=[requester_id], backref='requested_orders')
    runner = db.relationship('User', foreign_keys=[runner_id], backref='run_orders')

    def to_dict(self, include_requester=False):
        """Convert order to dictionary.

        With include_requester, adds the requester's display fields the
        order lists show.
        """
        data = {
            'id': self.id,
            'requester_id': self.requester_id,
            'runner_id': self.runner_id,
            'type': self.type,
            'description': self.description,
            'pickup_location': self.pickup_location,
            'delivery_location': self.delivery_location,
            'price': self.price,
            'requester_wechat': self.requester_wechat,
            'status': self.status,
            'time_requirement': self.time_requirement,
            'extra_needs': self.extra_needs,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_requester:
            data['requester_name'] = self.requester.nickname if self.requester else None
            data['requester_avatar'] = self.requester.avatar_url if self.requester else None
        return data

    def __repr__(self):
        return f'<Order {self.id}: {self.type} {self.status}>'
