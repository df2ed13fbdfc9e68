"""User model for requesters and runners."""

import json
from datetime import datetime

from campusgo import db
from campusgo.models.preferences import parse_preferences

DEFAULT_RATING = 5.0


class User(db.Model):
    """A campus user; the same account posts and runs orders."""

    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    openid = db.Column(db.String(64), unique=True, nullable=False, index=True)
    nickname = db.Column(db.String(80), nullable=False)
    avatar_url = db.Column(db.String(255), nullable=True)
    rating_as_requester = db.Column(db.Float, default=DEFAULT_RATING, nullable=False)
    rating_as_runner = db.Column(db.Float, default=DEFAULT_RATING, nullable=False)
    # JSON text: legacy tag array or structured object, see models.preferences
    preferences = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def get_preferences(self):
        """Parse stored preferences. Raises PreferenceFormatError on bad data."""
        return parse_preferences(self.preferences)

    def set_preferences(self, prefs):
        self.preferences = json.dumps(prefs.to_json(), ensure_ascii=False) if prefs else None

    def raw_preferences(self):
        """Stored preferences decoded as-is, for API responses."""
        if not self.preferences:
            return None
        try:
            return json.loads(self.preferences)
        except (json.JSONDecodeError, TypeError):
            return None

    def to_dict(self, stats=None):
        """Convert user to dictionary.

        Args:
            stats: Optional dict of derived counts from UserRepository.get_stats()
        """
        data = {
            'id': self.id,
            'openid': self.openid,
            'nickname': self.nickname,
            'avatar_url': self.avatar_url,
            'rating_as_requester': self.rating_as_requester,
            'rating_as_runner': self.rating_as_runner,
            'preferences': self.raw_preferences(),
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
        if stats:
            data.update(stats)
        return data

    def __repr__(self):
        return f'<User {self.id}: {self.nickname}>'
