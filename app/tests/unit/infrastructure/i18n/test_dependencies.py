"""Tests for infrastructure.i18n.dependencies module."""

from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from infrastructure.i18n import REQUEST_STATE_KEY, IntlAccessor, intl_dependency
from tests.factories.i18n import make_intl_factory


def create_test_app(intl_factory) -> FastAPI:
    """Build an app with one route per namespace."""
    GlobalIntl = Annotated[
        IntlAccessor, Depends(intl_dependency(intl_factory.with_namespace("global")))
    ]
    ErrorsIntl = Annotated[
        IntlAccessor, Depends(intl_dependency(intl_factory.with_namespace("errors")))
    ]
    RootIntl = Annotated[IntlAccessor, Depends(intl_dependency(intl_factory))]

    app = FastAPI()

    @app.get("/global")
    def global_messages(intl: GlobalIntl):
        return {
            "locale": intl.locale,
            "welcome": intl.get("welcome"),
            "greeting": intl.get("user_greeting", {"name": "John"}),
        }

    @app.get("/errors")
    def error_messages(intl: ErrorsIntl):
        return {
            "not_found": intl.get("not_found"),
            "missing": intl.get("does.not.exist"),
        }

    @app.get("/state")
    def state_messages(request: Request, intl: RootIntl):
        attached = getattr(request.state, REQUEST_STATE_KEY)
        return {
            "same": attached is intl,
            "message": attached.get("nested.deep.message"),
        }

    return app


class TestIntlDependency:
    """Tests for intl_dependency() in FastAPI routes."""

    def test_default_locale(self):
        """Requests without Accept-Language use the default locale."""
        client = TestClient(create_test_app(make_intl_factory()))
        response = client.get("/global")
        assert response.status_code == 200
        assert response.json() == {
            "locale": "en-US",
            "welcome": "Welcome to our application!",
            "greeting": "Hello John!",
        }

    def test_accept_language_header(self):
        """The Accept-Language header is negotiated regardless of header casing."""
        client = TestClient(create_test_app(make_intl_factory()))
        response = client.get("/global", headers={"Accept-Language": "id-ID,id;q=0.9"})
        data = response.json()
        assert data["locale"] == "id-ID"
        assert data["welcome"] == "Selamat datang di aplikasi kami!"
        assert data["greeting"] == "Halo John!"

    def test_namespaces(self):
        """Each route resolves keys in its own namespace."""
        client = TestClient(create_test_app(make_intl_factory()))
        response = client.get("/errors", headers={"Accept-Language": "fr-FR"})
        assert response.json() == {
            "not_found": "La ressource demandée est introuvable.",
            "missing": "does.not.exist",
        }

    def test_attached_to_request_state(self):
        """The accessor is stored on request.state.intl."""
        client = TestClient(create_test_app(make_intl_factory()))
        response = client.get("/state", headers={"Accept-Language": "fr"})
        assert response.json() == {
            "same": True,
            "message": "Ceci est un message profondément imbriqué",
        }

    def test_selector_receives_lowercased_headers(self):
        """Custom selectors see lowercased header names."""
        seen = {}

        def selector(headers):
            seen.update(headers)
            return "fr-FR" if "fr" in headers.get("accept-language", "") else "en-US"

        client = TestClient(create_test_app(make_intl_factory(locale_selector=selector)))
        response = client.get("/global", headers={"Accept-Language": "fr-CA"})

        assert seen["accept-language"] == "fr-CA"
        assert response.json()["welcome"] == "Bienvenue dans notre application!"
