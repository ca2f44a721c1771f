"""Tests for use case error handling utilities."""

import logging

import pytest

from vsbridge.core.use_case_errors import format_error_message, log_use_case_error
from vsbridge.domain.exceptions import (
    BridgeDomainError,
    InvalidConfigError,
    UnknownVariantError,
)


class TestBridgeDomainError:
    """Tests for the domain error base class."""

    def test_message_stored_on_exception(self) -> None:
        error = BridgeDomainError("Test error message")
        assert error.message == "Test error message"
        assert error.hint is None

    def test_message_used_as_str(self) -> None:
        assert str(BridgeDomainError("Test error message")) == "Test error message"

    def test_subclasses_share_base(self) -> None:
        assert issubclass(UnknownVariantError, BridgeDomainError)
        assert issubclass(InvalidConfigError, BridgeDomainError)


class TestFormatErrorMessage:
    """Tests for format_error_message utility function."""

    def test_domain_error_uses_message_directly(self) -> None:
        error = UnknownVariantError("Unknown editor variant: 2011")
        assert format_error_message(error, "open") == "Unknown editor variant: 2011"

    def test_domain_error_hint_appended(self) -> None:
        error = UnknownVariantError(
            "Unknown editor variant: 2011", hint="Supported variants: 2010, 2013"
        )
        result = format_error_message(error, "open")
        assert result == "Unknown editor variant: 2011. Supported variants: 2010, 2013"

    def test_oserror_adds_context(self) -> None:
        result = format_error_message(OSError("Access is denied"), "launch")
        assert result == "OS error during launch: Access is denied"

    def test_valueerror_includes_operation_name(self) -> None:
        result = format_error_message(ValueError("bad line"), "navigation")
        assert result == "Navigation error: bad line"

    def test_runtimeerror_includes_operation_name(self) -> None:
        result = format_error_message(RuntimeError("window gone"), "open")
        assert result == "Open error: window gone"

    def test_generic_exception_returns_internal_error(self) -> None:
        result = format_error_message(TypeError("unexpected"), "open")
        assert result == "Internal error during open. Check logs for details."
        assert "unexpected" not in result


class TestLogUseCaseError:
    """Tests for log_use_case_error utility function."""

    def test_domain_error_logged_at_error_level(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            log_use_case_error(InvalidConfigError("Bad config"), "open")
        assert "Bad config" in caplog.text
        assert caplog.records[0].levelno == logging.ERROR

    def test_oserror_logged_with_operation(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            log_use_case_error(OSError("Access is denied"), "launch")
        assert "OS error during launch" in caplog.text
        assert "Access is denied" in caplog.text

    def test_valueerror_logged_at_error_level(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            log_use_case_error(ValueError("Invalid value"), "validation")
        assert "validation" in caplog.text
        assert "Invalid value" in caplog.text

    def test_generic_exception_logged_with_traceback(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        try:
            raise TypeError("unexpected type")
        except TypeError as e:
            with caplog.at_level(logging.ERROR):
                log_use_case_error(e, "open")
        assert "Unexpected error during open" in caplog.text
        assert caplog.records[0].exc_info is not None
