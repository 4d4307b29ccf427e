import pytest
from api_response.core.config.app_config import ResponseConfig
from api_response.core.services.response_formatter import ResponseFormatter
from api_response.core.services.response_formatter_factory import (
    reset_default_formatter,
)
from api_response.core.transport.fastapi.response_factories import (
    EncodedJsonResponseFactory,
    FastAPIJsonResponseFactory,
)

from tests.doubles import RecordingResponseFactory


@pytest.fixture
def response_config() -> ResponseConfig:
    return ResponseConfig()


@pytest.fixture
def recording_factory() -> RecordingResponseFactory:
    return RecordingResponseFactory()


@pytest.fixture
def recording_formatter(
    recording_factory: RecordingResponseFactory, response_config: ResponseConfig
) -> ResponseFormatter:
    return ResponseFormatter(recording_factory, response_config)


@pytest.fixture
def native_formatter(response_config: ResponseConfig) -> ResponseFormatter:
    """Formatter wired with the framework JSONResponse factory."""
    return ResponseFormatter(FastAPIJsonResponseFactory(), response_config)


@pytest.fixture
def encoded_formatter(response_config: ResponseConfig) -> ResponseFormatter:
    """Formatter wired with the self-encoding Starlette Response factory."""
    return ResponseFormatter(EncodedJsonResponseFactory(), response_config)


@pytest.fixture(params=["native", "encoded"])
def any_formatter(
    request: pytest.FixtureRequest,
    native_formatter: ResponseFormatter,
    encoded_formatter: ResponseFormatter,
) -> ResponseFormatter:
    """Both production formatters; behaviour must not differ between them."""
    if request.param == "native":
        return native_formatter
    return encoded_formatter


@pytest.fixture(autouse=True)
def _reset_default_formatter():
    reset_default_formatter()
    yield
    reset_default_formatter()
