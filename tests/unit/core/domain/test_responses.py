from api_response.core.constants import CONTENT_TYPE_JSON, HTTP_200_OK
from api_response.core.domain.responses import (
    ResponseEnvelope,
    ResponseStatus,
    encoding_failure_payload,
)


def test_response_status_values():
    assert ResponseStatus.SUCCESS.value == "success"
    assert ResponseStatus.ERROR.value == "error"
    assert ResponseStatus("error") is ResponseStatus.ERROR


def test_envelope_defaults():
    envelope = ResponseEnvelope(content={"status": "success"})

    assert envelope.status_code == HTTP_200_OK
    assert envelope.headers == {}
    assert envelope.media_type == CONTENT_TYPE_JSON


def test_envelope_status_reads_payload_label():
    assert ResponseEnvelope(content={"status": "error"}).status is ResponseStatus.ERROR
    assert ResponseEnvelope(content={"status": "other"}).status is None
    assert ResponseEnvelope(content='{"status":"success"}').status is None


def test_envelopes_do_not_share_headers():
    first = ResponseEnvelope(content={})
    second = ResponseEnvelope(content={})

    first.headers["X-Test"] = "1"

    assert second.headers == {}


def test_encoding_failure_payload():
    assert encoding_failure_payload("boom") == {"status": "error", "message": "boom"}
