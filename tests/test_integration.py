from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from webcontrib.integration import get_string_provider, install_string_provider
from webcontrib.localization import LocalizedStringProvider, MappingStringSource, ResourceStringProvider


class RequiredAttribute:
    pass


def _build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/labels/{model}/{property_name}")
    def label(
        model: str,
        property_name: str,
        provider: LocalizedStringProvider = Depends(get_string_provider),
    ) -> dict[str, str | None]:
        return {
            "label": provider.resolve_model_string(model, property_name),
            "required": provider.resolve_validation_string(RequiredAttribute),
        }

    return app


@pytest.fixture
def api_client():
    """Provide a FastAPI test client with a provider installed."""
    app = _build_app()
    install_string_provider(
        app,
        ResourceStringProvider(MappingStringSource({"User_Email": "E-mail", "Required": "{0} is required."})),
    )
    with TestClient(app) as client:
        yield client


def test_dependency_returns_installed_provider(api_client):
    response = api_client.get("/labels/User/Email")

    assert response.status_code == 200
    assert response.json() == {"label": "E-mail", "required": "{0} is required."}


def test_untranslated_label_is_null(api_client):
    response = api_client.get("/labels/User/Phone")

    assert response.status_code == 200
    assert response.json()["label"] is None


def test_missing_provider_is_a_configuration_error():
    app = _build_app()

    with TestClient(app, raise_server_exceptions=True) as client:
        with pytest.raises(RuntimeError, match="no string provider"):
            client.get("/labels/User/Email")
