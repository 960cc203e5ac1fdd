"""Redis-backed string source."""

from __future__ import annotations

from typing import Mapping

from redis import Redis


class RedisStringSource:
    """String table stored as one Redis hash per culture.

    Strings for culture ``sv`` with the default prefix live in the hash
    ``strings:sv``, one field per lookup key.
    """

    def __init__(
        self,
        client: Redis,
        *,
        culture: str,
        key_prefix: str = "strings"
    ) -> None:
        """Store the Redis client and the hash name derived from culture and prefix."""
        self._client = client
        self._hash_key = f"{key_prefix}:{culture.lower()}"

    @property
    def hash_key(self) -> str:
        return self._hash_key

    def get(self, key: str) -> str | None:
        """Return the stored string, or ``None`` when the hash has no such field."""
        value = self._client.hget(self._hash_key, key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def publish(self, strings: Mapping[str, str]) -> int:
        """Write a batch of strings into the culture hash and return the number of new fields."""
        if not strings:
            return 0
        return int(self._client.hset(self._hash_key, mapping=dict(strings)))
