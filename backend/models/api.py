"""API request/response models."""
from typing import Optional
from pydantic import BaseModel, Field


class ProcessingStateModel(BaseModel):
    """Serialized ProcessingState."""
    is_processing: bool
    progress: int = Field(ge=0, le=100)
    current_chunk: int
    total_chunks: int
    error: Optional[str] = None


class DocumentUpdateRequest(BaseModel):
    """Replace the document content."""
    content: str


class DocumentResponse(BaseModel):
    content: str
    plain_text: str
    word_count: int


class ProcessDocumentRequest(BaseModel):
    """Run the pipeline on the current document."""
    webhook_url: Optional[str] = None


class ProcessTextRequest(BaseModel):
    """Run the pipeline on raw text without touching the document."""
    text: str
    webhook_url: Optional[str] = None


class ProcessResponse(BaseModel):
    content: str
    word_count: int
    state: ProcessingStateModel
