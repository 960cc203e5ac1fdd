"""Contracts between membership providers and account storage."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from .account import UserAccount


@dataclass(slots=True)
class CreateAccountInput:
    """Values a membership provider supplies when registering an account.

    ``password`` and ``password_answer`` are expected in their stored
    (hashed or encoded) form.
    """

    application_name: str
    user_name: str
    email: str
    password: str
    password_salt: str = ""
    password_question: str = ""
    password_answer: str = ""
    is_approved: bool = False
    comment: str = ""

    def to_account(self, now: datetime) -> UserAccount:
        """Build a fresh, unsaved account record created at ``now``."""
        return UserAccount(
            user_name=self.user_name,
            application_name=self.application_name,
            email=self.email,
            password=self.password,
            password_salt=self.password_salt,
            password_question=self.password_question,
            password_answer=self.password_answer,
            is_approved=self.is_approved,
            comment=self.comment,
            created_at=now,
            last_password_change_at=now,
            last_activity_at=now,
        )


class AccountStore(Protocol):
    """Storage capability implemented by the persistence layer."""

    def create(self, account: UserAccount) -> UserAccount:
        """Persist a new account and return it with its identifier assigned."""
        ...

    def find_by_id(self, account_id: Any) -> UserAccount | None:
        ...

    def find_by_user_name(self, application_name: str, user_name: str) -> UserAccount | None:
        ...

    def find_by_email(self, application_name: str, email: str) -> UserAccount | None:
        ...

    def update(self, account: UserAccount) -> None:
        """Write back every field of an existing account."""
        ...

    def delete(self, account_id: Any) -> bool:
        """Remove an account; ``False`` when it did not exist."""
        ...
