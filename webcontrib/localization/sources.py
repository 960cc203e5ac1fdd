"""In-process string sources: mappings, flat JSON files and gettext catalogs."""

from __future__ import annotations

import gettext
import json
import logging
from pathlib import Path
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


class MappingStringSource:
    """String table backed by any mapping of name to localized text."""

    def __init__(self, strings: Mapping[str, str]) -> None:
        self._strings = strings

    def get(self, key: str) -> str | None:
        return self._strings.get(key)


class JsonFileStringSource:
    """String table loaded once from a flat JSON object file.

    The file must contain a single object whose values are strings::

        {"User_FirstName": "First name", "Required": "{0} is required."}
    """

    def __init__(self, path: str | Path) -> None:
        """Read and validate the file; raises ``ValueError`` for anything but a flat object."""
        self._path = Path(path)
        with self._path.open(encoding="utf-8") as fp:
            try:
                data = json.load(fp)
            except json.JSONDecodeError as exc:
                raise ValueError(f"invalid string table {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"string table {self._path} must contain a JSON object")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ValueError(f"string table {self._path}: value for {key!r} is not a string")
        self._strings: dict[str, str] = data
        logger.info("loaded %d localized strings from %s", len(data), self._path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        return self._strings.get(key)


class GettextStringSource:
    """String table backed by a compiled gettext catalog.

    gettext answers an unknown message id with the id itself, so an echoed key
    is reported as a miss.
    """

    def __init__(self, translations: gettext.NullTranslations) -> None:
        self._translations = translations

    @classmethod
    def from_directory(
        cls, localedir: str | Path, domain: str, languages: Sequence[str] | None = None
    ) -> "GettextStringSource":
        """Load ``<localedir>/<lang>/LC_MESSAGES/<domain>.mo``; a missing catalog yields an empty source."""
        translations = gettext.translation(
            domain,
            localedir=str(localedir),
            languages=list(languages) if languages else None,
            fallback=True,
        )
        if type(translations) is gettext.NullTranslations:
            logger.warning("no gettext catalog for domain %s in %s", domain, localedir)
        return cls(translations)

    def get(self, key: str) -> str | None:
        # the empty msgid holds the catalog header
        if not key:
            return None
        value = self._translations.gettext(key)
        if value == key:
            return None
        return value
