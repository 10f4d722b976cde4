"""Webhook client that submits one chunk of text for transformation."""
import time
import logging
from typing import Dict, Optional
import httpx

from config import WEBHOOK_TIMEOUT, WEBHOOK_AUTH_TOKEN
from services.errors import (
    WebhookClientError,
    MissingEndpointError,
    RemoteCallFailedError,
    TransportFailureError,
)
from services.response_decoder import decode_response

logger = logging.getLogger(__name__)

_DEFAULT = object()


class WebhookClient:
    """Client for the external text-transformation webhook."""

    def __init__(self, timeout=_DEFAULT, auth_token: Optional[str] = None):
        """
        Initialize the webhook client.

        Args:
            timeout: Per-request timeout in seconds; None waits indefinitely
                (defaults to WEBHOOK_TIMEOUT from environment)
            auth_token: Optional bearer token (defaults to WEBHOOK_AUTH_TOKEN)
        """
        self.timeout = WEBHOOK_TIMEOUT if timeout is _DEFAULT else timeout
        self.auth_token = auth_token or WEBHOOK_AUTH_TOKEN

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    def transform(self, endpoint: str, text: str) -> str:
        """
        POST one chunk to the webhook and return the transformed text.

        No retry is attempted; a single failure is final for this call.

        Args:
            endpoint: Webhook URL
            text: Chunk text

        Returns:
            Transformed text extracted from the response body

        Raises:
            MissingEndpointError: If endpoint is empty
            RemoteCallFailedError: On a non-2xx status
            InvalidResponseFormatError: If the body holds no usable string
            TransportFailureError: On network errors or an unparsable body
        """
        if not endpoint:
            raise MissingEndpointError()

        start_time = time.time()

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(
                    endpoint,
                    headers=self._headers(),
                    json={"text": text}
                )

            latency_ms = int((time.time() - start_time) * 1000)

            if not 200 <= response.status_code < 300:
                raise RemoteCallFailedError(
                    response.status_code,
                    details={"endpoint": endpoint, "latency_ms": latency_ms}
                )

            try:
                data = response.json()
            except ValueError as e:
                raise TransportFailureError(
                    f"Malformed JSON in webhook response: {e}",
                    details={"endpoint": endpoint, "latency_ms": latency_ms}
                ) from e

            decoded = decode_response(data)

            logger.info(
                f"Webhook call succeeded: endpoint={endpoint}, "
                f"input_chars={len(text)}, output_chars={len(decoded.value)}, "
                f"shape={type(decoded).__name__}, latency={latency_ms}ms"
            )
            return decoded.value

        except WebhookClientError as e:
            logger.error(
                f"Webhook error: endpoint={endpoint}, error={e}",
                extra={"error_code": e.error.code, "error_details": e.error.details}
            )
            raise

        except httpx.TimeoutException as e:
            latency_ms = int((time.time() - start_time) * 1000)
            error = TransportFailureError(
                f"Webhook request timed out after {self.timeout}s",
                details={"endpoint": endpoint, "latency_ms": latency_ms, "original_error": str(e)}
            )
            logger.error(
                f"Timeout error: endpoint={endpoint}, latency={latency_ms}ms, error={e}",
                extra={"error_code": error.error.code, "error_details": error.error.details}
            )
            raise error from e

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            latency_ms = int((time.time() - start_time) * 1000)
            error = TransportFailureError(
                f"Network error: {str(e)}",
                details={
                    "endpoint": endpoint,
                    "latency_ms": latency_ms,
                    "original_error": str(e),
                    "error_type": type(e).__name__
                }
            )
            logger.error(
                f"Network error: endpoint={endpoint}, latency={latency_ms}ms, error={e}",
                exc_info=True,
                extra={"error_code": error.error.code, "error_details": error.error.details}
            )
            raise error from e
