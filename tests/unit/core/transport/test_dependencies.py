"""
Tests for the FastAPI integration of the response formatter.
"""

import pytest
from api_response.core.config.app_config import AppConfig, ResponseConfig
from api_response.core.services.response_formatter import ResponseFormatter
from api_response.core.services.response_formatter_factory import (
    build_response_formatter,
    set_default_formatter,
)
from api_response.core.transport.fastapi.dependencies import (
    get_response_formatter,
    install_response_formatter,
)
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from structlog.testing import capture_logs


def _build_app(formatter: ResponseFormatter | None = None, install: bool = True) -> FastAPI:
    app = FastAPI()
    if install:
        install_response_formatter(app, formatter)

    @app.get("/items/{item_id}")
    def read_item(
        item_id: int,
        responses: ResponseFormatter = Depends(get_response_formatter),
    ):
        if item_id < 0:
            return responses.fail("Invalid item id", 422, {"X-Reason": "negative"})
        return responses.success(
            {"id": item_id, "name": "Ünïcode/item"},
            "ok",
            headers={"X-Tags": ["a", "b"]},
        )

    @app.get("/broken")
    def broken(responses: ResponseFormatter = Depends(get_response_formatter)):
        payload: dict = {}
        payload["self"] = payload
        return responses.success(payload, "never sent")

    return app


@pytest.fixture
def client(native_formatter: ResponseFormatter) -> TestClient:
    with TestClient(_build_app(native_formatter)) as test_client:
        yield test_client


class TestInstalledFormatter:
    def test_success_route(self, client: TestClient) -> None:
        response = client.get("/items/5")

        assert response.status_code == 200
        assert response.json() == {
            "status": "success",
            "message": "ok",
            "data": {"id": 5, "name": "Ünïcode/item"},
        }
        assert response.headers["content-type"] == "application/json"
        assert response.headers["x-tags"] == "a, b"

    def test_fail_route(self, client: TestClient) -> None:
        response = client.get("/items/-1")

        assert response.status_code == 422
        assert response.json() == {"status": "error", "message": "Invalid item id"}
        assert response.headers["x-reason"] == "negative"

    def test_encoding_failure_route(self, client: TestClient) -> None:
        response = client.get("/broken")

        assert response.status_code == 500
        assert response.json() == {
            "status": "error",
            "message": "Failed to encode response payload",
        }

    def test_install_returns_and_stores_formatter(
        self, encoded_formatter: ResponseFormatter
    ) -> None:
        app = FastAPI()

        with capture_logs() as logs:
            installed = install_response_formatter(app, encoded_formatter)

        assert installed is encoded_formatter
        assert app.state.response_formatter is encoded_formatter
        assert logs == [
            {
                "event": "Installed response formatter",
                "response_factory": "EncodedJsonResponseFactory",
                "log_level": "debug",
            }
        ]

    def test_install_builds_formatter_when_omitted(self) -> None:
        app = FastAPI()

        installed = install_response_formatter(app)

        assert isinstance(installed, ResponseFormatter)
        assert app.state.response_formatter is installed

    def test_encoded_formatter_serves_same_responses(
        self, encoded_formatter: ResponseFormatter
    ) -> None:
        with TestClient(_build_app(encoded_formatter)) as test_client:
            response = test_client.get("/items/7")

        assert response.status_code == 200
        assert response.json()["data"] == {"id": 7, "name": "Ünïcode/item"}
        assert response.headers["content-type"] == "application/json"


class TestDefaultFallback:
    def test_uses_default_formatter_when_not_installed(self) -> None:
        formatter = build_response_formatter(
            AppConfig(response=ResponseConfig(success_status_code=202))
        )
        set_default_formatter(formatter)

        with TestClient(_build_app(install=False)) as test_client:
            response = test_client.get("/items/3")

        assert response.status_code == 202
        assert response.json()["data"]["id"] == 3

    def test_configured_defaults_apply(self) -> None:
        formatter = build_response_formatter(
            AppConfig(response=ResponseConfig(success_status_code=203))
        )

        with TestClient(_build_app(formatter)) as test_client:
            response = test_client.get("/items/1")

        assert response.status_code == 203
