"""Localized strings for models, property metadata and validation messages."""

from __future__ import annotations

import logging

import redis

from ..config import Settings, get_settings
from .metadata import FieldDisplayMetadata, describe_model
from .provider import (
    LocalizedStringProvider,
    MetadataName,
    ResourceStringProvider,
    StringSource,
)
from .redis_source import RedisStringSource
from .sources import GettextStringSource, JsonFileStringSource, MappingStringSource

logger = logging.getLogger(__name__)


def build_default_provider(settings: Settings | None = None) -> ResourceStringProvider:
    """Assemble a provider from configuration: Redis first, then the JSON resource file."""
    settings = settings or get_settings()
    sources: list[StringSource] = []

    if settings.localization_redis_url:
        client = None
        try:
            client = redis.from_url(settings.localization_redis_url)
            client.ping()
            logger.info(
                "localized strings served from redis at %s", settings.localization_redis_url
            )
            sources.append(
                RedisStringSource(
                    client,
                    culture=settings.localization_culture,
                    key_prefix=settings.localization_redis_prefix,
                )
            )
        except (redis.RedisError, ValueError) as exc:
            logger.warning("redis string source unavailable, skipping it: %s", exc)
            if client is not None:
                client.close()

    if settings.localization_resource_path:
        sources.append(JsonFileStringSource(settings.localization_resource_path))

    logger.info("string provider configured with %d source(s)", len(sources))
    return ResourceStringProvider(*sources)


__all__ = [
    "FieldDisplayMetadata",
    "GettextStringSource",
    "JsonFileStringSource",
    "LocalizedStringProvider",
    "MappingStringSource",
    "MetadataName",
    "RedisStringSource",
    "ResourceStringProvider",
    "StringSource",
    "build_default_provider",
    "describe_model",
]
