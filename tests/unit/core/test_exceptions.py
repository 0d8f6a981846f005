"""Unit tests for the exception hierarchy."""

import pytest

from rpadmin.core.exceptions import (
    ApplicationError,
    ConfigurationError,
    ExternalServiceError,
    ResponseDecodeError,
    ServerUnreachableError,
    UnexpectedStatusError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ConfigurationError(), "SYS_CONFIG_ERROR"),
        (ExternalServiceError(), "SYS_EXTERNAL_SERVICE_ERROR"),
        (ServerUnreachableError(), "SRV_UNREACHABLE"),
        (ResponseDecodeError(), "SRV_BAD_RESPONSE"),
        (UnexpectedStatusError("bad", status_code=500), "SRV_BAD_STATUS"),
    ],
)
def test_codes(error: ApplicationError, code: str) -> None:
    assert error.code == code
    assert isinstance(error, ApplicationError)


def test_server_errors_share_a_base() -> None:
    for cls in (ServerUnreachableError, ResponseDecodeError):
        assert issubclass(cls, ExternalServiceError)
    assert issubclass(UnexpectedStatusError, ExternalServiceError)


def test_message_is_str() -> None:
    error = UnexpectedStatusError("DELETE /rps/x returned HTTP 404", status_code=404)
    assert str(error) == "DELETE /rps/x returned HTTP 404"
    assert error.status_code == 404
