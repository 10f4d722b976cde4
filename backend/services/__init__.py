"""Services for the Formal Editor backend."""
from .chunking_engine import ChunkingEngine, count_words
from .errors import (
    WebhookError,
    WebhookClientError,
    MissingEndpointError,
    RemoteCallFailedError,
    InvalidResponseFormatError,
    TransportFailureError,
    ProcessingInProgressError,
    EmptyDocumentError,
)
from .response_decoder import decode_response, StringBody, ObjectWithField, ObjectWithAnyStringValue
from .webhook_client import WebhookClient
from .formatter import join_chunks, contains_html, format_plain_text_to_html
from .webhook_processor import WebhookProcessor
from .editor_session import EditorSession

__all__ = ['ChunkingEngine', 'count_words', 'WebhookError', 'WebhookClientError', 'MissingEndpointError', 'RemoteCallFailedError', 'InvalidResponseFormatError', 'TransportFailureError', 'ProcessingInProgressError', 'EmptyDocumentError', 'decode_response', 'StringBody', 'ObjectWithField', 'ObjectWithAnyStringValue', 'WebhookClient', 'join_chunks', 'contains_html', 'format_plain_text_to_html', 'WebhookProcessor', 'EditorSession']
