"""Data models for the Formal Editor backend."""
from .chunk import ChunkInfo
from .processing import ProcessingState
from .document import EditorDocument
from .api import (
    ProcessingStateModel,
    DocumentUpdateRequest,
    DocumentResponse,
    ProcessDocumentRequest,
    ProcessTextRequest,
    ProcessResponse,
)

__all__ = [
    "ChunkInfo",
    "ProcessingState",
    "EditorDocument",
    "ProcessingStateModel",
    "DocumentUpdateRequest",
    "DocumentResponse",
    "ProcessDocumentRequest",
    "ProcessTextRequest",
    "ProcessResponse",
]
