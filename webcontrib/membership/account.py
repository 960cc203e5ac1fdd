from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from ..config import get_settings

# Stored instead of None in timestamp fields that have not happened yet.
NO_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)
NO_FAILURE_RECORDED = NO_TIMESTAMP


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(slots=True)
class UserAccount:
    """Authentication and security state of a user, as kept by a membership provider.

    ``failed_password_window_started_at`` and
    ``failed_password_answer_window_started_at`` hold :data:`NO_FAILURE_RECORDED`
    until the first incorrect attempt (and again once the user logs in
    successfully); they are never ``None``. ``id`` is whatever identifies the
    account in the backing store.
    """

    user_name: str
    id: Any = None
    application_name: str = ""
    email: str = ""
    password: str = ""
    password_salt: str = ""
    password_question: str = ""
    password_answer: str = ""
    comment: str = ""
    created_at: datetime = NO_TIMESTAMP
    is_approved: bool = False
    last_login_at: datetime = NO_TIMESTAMP
    last_password_change_at: datetime = NO_TIMESTAMP
    is_locked_out: bool = False
    last_locked_out_at: datetime = NO_TIMESTAMP
    failed_password_window_started_at: datetime = NO_FAILURE_RECORDED
    failed_password_window_attempt_count: int = 0
    failed_password_answer_window_started_at: datetime = NO_FAILURE_RECORDED
    failed_password_answer_window_attempt_count: int = 0
    last_activity_at: datetime = NO_TIMESTAMP

    @property
    def is_online(self) -> bool:
        """Whether the user did something within the configured online window."""
        return self.is_online_at(datetime.now(timezone.utc))

    def is_online_at(self, now: datetime, window: timedelta | None = None) -> bool:
        if window is None:
            window = timedelta(minutes=get_settings().online_window_minutes)
        last_activity = _as_utc(self.last_activity_at)
        if last_activity == NO_TIMESTAMP:
            return False
        return _as_utc(now) - last_activity <= window

    @property
    def has_failed_password_window(self) -> bool:
        return _as_utc(self.failed_password_window_started_at) != NO_FAILURE_RECORDED

    @property
    def has_failed_password_answer_window(self) -> bool:
        return _as_utc(self.failed_password_answer_window_started_at) != NO_FAILURE_RECORDED
