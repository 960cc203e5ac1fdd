"""Account views that are safe to hand to session and API layers."""

from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel

from ..membership.account import UserAccount


class UserAccountSnapshot(BaseModel):
    """Serialised representation of a `UserAccount` without credentials."""

    id: str | None
    user_name: str
    application_name: str
    email: str | None = None
    comment: str = ""
    created_at: datetime
    is_approved: bool
    is_locked_out: bool
    last_login_at: datetime
    last_activity_at: datetime
    is_online: bool

    @classmethod
    def from_domain(cls, account: UserAccount) -> "UserAccountSnapshot":
        """Build a snapshot from the account record."""
        return cls(
            id=None if account.id is None else str(account.id),
            user_name=account.user_name,
            application_name=account.application_name,
            email=account.email or None,
            comment=account.comment,
            created_at=account.created_at,
            is_approved=account.is_approved,
            is_locked_out=account.is_locked_out,
            last_login_at=account.last_login_at,
            last_activity_at=account.last_activity_at,
            is_online=account.is_online,
        )
