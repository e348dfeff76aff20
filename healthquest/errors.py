# healthquest/errors.py
from .core.periods import InvalidPeriod


class UserNotFound(LookupError):
    def __init__(self, user_id):
        super().__init__(f"user {user_id} not found")
        self.user_id = user_id


__all__ = ["InvalidPeriod", "UserNotFound"]
