"""Localized string lookup for model properties, metadata and validation messages."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "_"


@runtime_checkable
class StringSource(Protocol):
    """A string table queried by name.

    Resource bundles, database-backed dictionaries and flat files all fit as
    long as they return ``None`` for names they do not know.
    """

    def get(self, key: str) -> str | None:
        ...


class MetadataName(str, Enum):
    """Metadata names that can be localized for a model property."""

    watermark = "Watermark"
    description = "Description"
    null_display_text = "NullDisplayText"
    short_display_text = "ShortDisplayText"


class LocalizedStringProvider(Protocol):
    """Capability consumed by view rendering and validation layers."""

    def resolve_model_string(
        self, model: type | str, property_name: str, metadata_name: str | None = None
    ) -> str | None:
        ...

    def resolve_validation_string(self, attribute_type: type | str) -> str | None:
        ...


def type_name(model: type | str) -> str:
    """Return the name used in lookup keys for a class (or an already resolved name)."""
    if isinstance(model, str):
        return model
    return model.__name__


class ResourceStringProvider:
    """Return strings from one or more string tables.

    Model translations are keyed ``ClassName_PropertyName`` (``User_FirstName``)
    and property metadata ``ClassName_PropertyName_MetadataName``
    (``User_FirstName_Watermark``). Validation messages are keyed by the
    attribute name without ``Attribute`` (``Required`` for ``RequiredAttribute``).

    Sources are queried in the order given and the first one that knows the key
    wins::

        provider = ResourceStringProvider(site_strings, shared_strings)
        provider.resolve_model_string(User, "first_name")
    """

    def __init__(self, *sources: StringSource) -> None:
        """Store the sources; their order is the fallback precedence."""
        self._sources: tuple[StringSource, ...] = tuple(sources)

    @property
    def sources(self) -> tuple[StringSource, ...]:
        return self._sources

    def resolve_model_string(
        self, model: type | str, property_name: str, metadata_name: str | None = None
    ) -> str | None:
        """Get the localized label for a model property, or one of its metadata strings.

        Args:
            model: Model class being localized.
            property_name: Property to get a string for.
            metadata_name: Optional metadata entry. Valid names are listed in
                :class:`MetadataName` (``Watermark``, ``Description``,
                ``NullDisplayText``, ``ShortDisplayText``) but any string is accepted.
        """
        if metadata_name is None:
            return self._get_string(self.format_key(model, property_name))
        if isinstance(metadata_name, MetadataName):
            metadata_name = metadata_name.value
        return self._get_string(self.format_key(model, property_name, metadata_name))

    def resolve_validation_string(self, attribute_type: type | str) -> str | None:
        """Get the localized message for a validation attribute.

        The returned string is expected to carry the same placeholders as the
        built-in message it replaces, such as ``"{0} is required."``.
        """
        name = type_name(attribute_type).replace("Attribute", "")
        return self._get_string(name)

    def resolve_model_string_or_default(
        self,
        model: type | str,
        property_name: str,
        default: str,
        metadata_name: str | None = None,
    ) -> str:
        value = self.resolve_model_string(model, property_name, metadata_name)
        return default if value is None else value

    def resolve_validation_string_or_default(self, attribute_type: type | str, default: str) -> str:
        value = self.resolve_validation_string(attribute_type)
        return default if value is None else value

    def format_key(self, model: type | str, property_name: str, *extras: str) -> str:
        """Build the lookup key; override to use another naming convention."""
        key = f"{type_name(model)}{KEY_SEPARATOR}{property_name}"
        for extra in extras:
            key += KEY_SEPARATOR + extra
        return key

    def _get_string(self, key: str) -> str | None:
        for source in self._sources:
            value = source.get(key)
            if value is not None:
                return value
        logger.debug("no localized string for key %s in %d source(s)", key, len(self._sources))
        return None
