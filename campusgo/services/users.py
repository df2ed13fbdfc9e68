"""Mock identity, profiles and preferences.

There is no login: the client passes the id of the user it is acting as.
"""

import logging
import random
import time
import uuid

from campusgo.errors import NotFound, ValidationError
from campusgo.models import PreferenceFormatError, User
from campusgo.models.preferences import validate_preferences_update
from campusgo.repositories import UserRepository

logger = logging.getLogger(__name__)

AVATAR_URL = 'https://api.dicebear.com/7.x/avataaars/svg?seed={seed}'
AVATAR_SEEDS = ['Felix', 'Aneka', 'Zoe', 'Jack', 'Bella', 'Charlie']
DEFAULT_NICKNAME = 'CampusGoUser'


def _new_openid():
    return f'mock_openid_{uuid.uuid4().hex}'


class UserService:

    def __init__(self, users=None):
        self.users = users or UserRepository()

    def get_user(self, user_id):
        user = self.users.get(user_id)
        if user is None:
            raise NotFound('User not found')
        return user

    def get_current(self, user_id=None):
        """Return the requested user, else the first user, else a new default one."""
        user = self.users.get(user_id) if user_id is not None else None
        if user is None:
            user = self.users.first()
        if user is None:
            user = self.users.add(User(
                openid=_new_openid(),
                nickname=DEFAULT_NICKNAME,
                avatar_url=AVATAR_URL.format(seed='Felix'),
            ))
            logger.info(f'Created default user {user.id}')
        return user

    def create_random(self):
        seed = f'{random.choice(AVATAR_SEEDS)}{int(time.time() * 1000)}'
        user = self.users.add(User(
            openid=_new_openid(),
            nickname=f'User_{random.randint(0, 999)}',
            avatar_url=AVATAR_URL.format(seed=seed),
        ))
        logger.info(f'Created mock user {user.id} ({user.nickname})')
        return user

    def list_recent(self, limit=10):
        return self.users.list_recent(limit)

    def get_stats(self, user_id):
        return self.users.get_stats(user_id)

    def update_preferences(self, user_id, preferences):
        user = self.get_user(user_id)
        try:
            prefs = validate_preferences_update(preferences)
        except PreferenceFormatError as e:
            raise ValidationError(str(e)) from e
        user.set_preferences(prefs)
        return self.users.save(user)

    def update_profile(self, user_id, nickname=None, avatar_url=None):
        user = self.get_user(user_id)
        if nickname is not None:
            if not isinstance(nickname, str) or not nickname.strip():
                raise ValidationError('Nickname cannot be empty')
            user.nickname = nickname.strip()
        if avatar_url is not None:
            if not isinstance(avatar_url, str):
                raise ValidationError('avatar_url must be text')
            user.avatar_url = avatar_url.strip() or None
        return self.users.save(user)
