"""FastAPI wiring for the string provider."""

from __future__ import annotations

from fastapi import FastAPI, Request

from .localization.provider import LocalizedStringProvider


def install_string_provider(app: FastAPI, provider: LocalizedStringProvider) -> None:
    """Make ``provider`` available to request handlers of ``app``."""
    app.state.string_provider = provider


def get_string_provider(request: Request) -> LocalizedStringProvider:
    """Resolve the string provider stored on the FastAPI application state."""
    provider: LocalizedStringProvider | None = getattr(request.app.state, "string_provider", None)
    if provider is None:
        raise RuntimeError("no string provider installed on this application")
    return provider
