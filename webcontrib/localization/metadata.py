"""Localized display metadata for pydantic models."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from .provider import LocalizedStringProvider, MetadataName


@dataclass(slots=True)
class FieldDisplayMetadata:
    """Display strings for a single model field."""

    display_name: str
    description: str | None = None
    watermark: str | None = None
    null_display_text: str | None = None
    short_display_text: str | None = None


def describe_model(
    model: type[BaseModel], provider: LocalizedStringProvider
) -> dict[str, FieldDisplayMetadata]:
    """Resolve display metadata for every declared field of ``model``.

    The label falls back to the field's declared ``title`` and then to its
    name; the description falls back to the declared description. Other
    entries stay ``None`` when untranslated.
    """
    described: dict[str, FieldDisplayMetadata] = {}
    for name, field in model.model_fields.items():
        label = provider.resolve_model_string(model, name)
        description = provider.resolve_model_string(model, name, MetadataName.description)
        described[name] = FieldDisplayMetadata(
            display_name=label if label is not None else (field.title or name),
            description=description if description is not None else field.description,
            watermark=provider.resolve_model_string(model, name, MetadataName.watermark),
            null_display_text=provider.resolve_model_string(
                model, name, MetadataName.null_display_text
            ),
            short_display_text=provider.resolve_model_string(
                model, name, MetadataName.short_display_text
            ),
        )
    return described
