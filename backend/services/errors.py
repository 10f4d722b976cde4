"""Structured errors raised by the webhook processing pipeline."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class WebhookError:
    """Structured error information from pipeline operations."""
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class WebhookClientError(Exception):
    """Base exception for pipeline errors with structured error information."""

    code = "WEBHOOK_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.error = WebhookError(code=self.code, message=message, details=details or {})
        super().__init__(message)


class MissingEndpointError(WebhookClientError):
    """No webhook endpoint was configured."""

    code = "MISSING_ENDPOINT"

    def __init__(self, message: str = "Webhook URL is required"):
        super().__init__(message)


class RemoteCallFailedError(WebhookClientError):
    """The webhook answered with a non-success HTTP status."""

    code = "REMOTE_CALL_FAILED"

    def __init__(self, status_code: int, details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        details = dict(details or {})
        details["status_code"] = status_code
        super().__init__(f"Webhook request failed: {status_code}", details)


class InvalidResponseFormatError(WebhookClientError):
    """A successful response carried no extractable string value."""

    code = "INVALID_RESPONSE_FORMAT"

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Invalid response format from webhook", details)


class TransportFailureError(WebhookClientError):
    """Network-level failure: DNS, connection, timeout or an unparsable body."""

    code = "TRANSPORT_FAILURE"


class ProcessingInProgressError(WebhookClientError):
    """A run is already in flight against this processor."""

    code = "PROCESSING_IN_PROGRESS"

    def __init__(self, message: str = "A processing run is already in progress"):
        super().__init__(message)


class EmptyDocumentError(WebhookClientError):
    """The document has no text to process."""

    code = "EMPTY_DOCUMENT"

    def __init__(self, message: str = "Document is empty; nothing to process"):
        super().__init__(message)
