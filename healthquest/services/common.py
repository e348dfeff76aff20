# healthquest/services/common.py
from datetime import datetime
from typing import Optional

from flask import current_app

from .. import db
from ..errors import UserNotFound
from ..models.user import User


def utcnow() -> datetime:
    return datetime.utcnow()


def find_user(user_id, for_update: bool = False) -> Optional[User]:
    """
    None means "no such user"; a user without records is still returned.

    With `for_update=True` the user row is locked until the transaction ends,
    which serializes read-check-write operations for the same user.
    """
    query = User.query.filter_by(id=user_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


def require_user(user_id, for_update: bool = False) -> User:
    user = find_user(user_id, for_update)
    if user is None:
        raise UserNotFound(user_id)
    return user


def commit(action: str) -> None:
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception(f"[{action}] commit failed")
        raise
