"""Account data contract for pluggable membership providers."""

from .account import NO_FAILURE_RECORDED, NO_TIMESTAMP, UserAccount
from .contracts import AccountStore, CreateAccountInput

__all__ = [
    "AccountStore",
    "CreateAccountInput",
    "NO_FAILURE_RECORDED",
    "NO_TIMESTAMP",
    "UserAccount",
]
