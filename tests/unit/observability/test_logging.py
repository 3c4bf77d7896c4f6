"""Tests for structured logging."""

import json
from io import StringIO

import pytest
import structlog

from disguise.observability.logging import (
    SecretRedactor,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self) -> None:
        """Should configure JSON format for production."""
        setup_logging(level="INFO", format="json", redact_secrets=False)
        get_logger("test").info("test_message")

    def test_setup_console_format(self) -> None:
        """Should configure console format for development."""
        setup_logging(level="DEBUG", format="console", redact_secrets=False)
        get_logger("test").debug("test_message")

    def test_setup_with_redaction(self) -> None:
        setup_logging(level="INFO", format="json", redact_secrets=True)
        get_logger("test").info("test_message", signature="abc")


class TestSecretRedactor:
    """Tests for signature and credential redaction."""

    @pytest.fixture
    def redactor(self) -> SecretRedactor:
        return SecretRedactor()

    def test_redacts_signature_by_key(self, redactor: SecretRedactor) -> None:
        event_dict = {"signature": "c2lnbmF0dXJl", "provider": "mojang"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["signature"] == "[REDACTED]"
        assert result["provider"] == "mojang"

    def test_redacts_credentials_by_key(self, redactor: SecretRedactor) -> None:
        event_dict = {"Authorization": "Bearer sk", "api_key": "sk"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["Authorization"] == "[REDACTED]"
        assert result["api_key"] == "[REDACTED]"

    def test_truncates_long_texture(self, redactor: SecretRedactor) -> None:
        """Texture payloads are shortened to a prefix."""
        texture = "ewogICJ0aW1lc3RhbXAiIDogMTcwMDAwMDAwMDAwMCwK"
        result = redactor(None, None, {"texture": texture})  # type: ignore
        assert result["texture"] == f"{texture[:16]}...({len(texture)} chars)"

    def test_keeps_short_texture(self, redactor: SecretRedactor) -> None:
        result = redactor(None, None, {"texture": "short"})  # type: ignore
        assert result["texture"] == "short"

    def test_handles_nested_structures(self, redactor: SecretRedactor) -> None:
        event_dict = {
            "skin": {"signature": "sig", "valid": True},
            "properties": [{"value": "v", "signature": "s"}],
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["skin"] == {"signature": "[REDACTED]", "valid": True}
        assert result["properties"] == [{"value": "v", "signature": "[REDACTED]"}]

    def test_preserves_other_data(self, redactor: SecretRedactor) -> None:
        event_dict = {
            "event": "skin_fetch_request",
            "url": "https://api.minetools.eu/profile/abc",
            "status_code": 200,
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result == event_dict


class TestJSONLogging:
    """Tests for JSON log output format."""

    def test_redacted_json_output(self) -> None:
        """Redaction runs before the JSON renderer."""
        output = StringIO()
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                SecretRedactor(),
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(0),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(output),
            cache_logger_on_first_use=False,
        )

        structlog.get_logger("test").info("skin_resolved", signature="sig", provider="mojang")

        parsed = json.loads(output.getvalue().strip())
        assert parsed["event"] == "skin_resolved"
        assert parsed["signature"] == "[REDACTED]"
        assert parsed["provider"] == "mojang"
        structlog.reset_defaults()
