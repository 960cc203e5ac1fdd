"""Serialisable views shared with session and API layers."""

from .account import UserAccountSnapshot

__all__ = ["UserAccountSnapshot"]
