"""Main entry point for the Formal Editor API."""
import logging
import time
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import PORT, CORS_ORIGINS, LOG_LEVEL, LOG_FORMAT, WEBHOOK_URL
from logger import setup_logging
from models.api import (
    DocumentUpdateRequest,
    DocumentResponse,
    ProcessDocumentRequest,
    ProcessTextRequest,
    ProcessResponse,
    ProcessingStateModel,
)
from models.document import EditorDocument
from services.chunking_engine import count_words
from services.editor_session import EditorSession
from services.errors import (
    WebhookClientError,
    MissingEndpointError,
    ProcessingInProgressError,
    EmptyDocumentError,
)
from services.webhook_processor import WebhookProcessor

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Formal Editor",
    description="Text editor backend that rewrites documents through a webhook, chunk by chunk",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services (will be done on startup)
editor_session: EditorSession = None


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global editor_session

    setup_logging(LOG_LEVEL, json_format=LOG_FORMAT == "json")
    logger.info("Initializing Formal Editor services...")

    editor_session = EditorSession(
        document=EditorDocument(),
        processor=WebhookProcessor(),
        webhook_url=WEBHOOK_URL
    )
    logger.info(f"Initialized EditorSession (webhook: {WEBHOOK_URL or 'not configured'})")


def _state_model() -> ProcessingStateModel:
    return ProcessingStateModel(**editor_session.processor.state.to_dict())


def _document_response() -> DocumentResponse:
    document = editor_session.document
    return DocumentResponse(
        content=document.get_content(),
        plain_text=document.get_plain_text(),
        word_count=document.get_word_count()
    )


def _to_http_exception(e: WebhookClientError) -> HTTPException:
    """Map a pipeline error onto an HTTP error with a structured body."""
    if isinstance(e, (MissingEndpointError, EmptyDocumentError)):
        status_code = 400
    elif isinstance(e, ProcessingInProgressError):
        status_code = 409
    else:
        status_code = 502

    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": e.error.code,
                "message": e.error.message,
                "details": e.error.details
            }
        }
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Formal Editor API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "formal-editor",
        "version": "1.0.0",
        "webhook_configured": bool(editor_session and editor_session.webhook_url)
    }


@app.get("/document", response_model=DocumentResponse)
async def get_document() -> DocumentResponse:
    """Return the current document content, plain text and word count."""
    return _document_response()


@app.put("/document", response_model=DocumentResponse)
async def update_document(request: DocumentUpdateRequest) -> DocumentResponse:
    """Replace the document content wholesale."""
    editor_session.document.set_content(request.content)
    logger.info(f"Document updated: {editor_session.document.get_word_count()} words")
    return _document_response()


@app.post("/document/process", response_model=ProcessResponse)
def process_document(request: ProcessDocumentRequest) -> ProcessResponse:
    """
    Run the current document through the webhook and replace its content.

    Declared sync so it runs in the threadpool and /progress stays
    responsive while chunks are in flight.

    Raises:
        HTTPException: 400 for empty document or missing endpoint, 409 if a
            run is already in progress, 502 for webhook failures
    """
    start_time = time.time()

    try:
        content = editor_session.process_document(webhook_url=request.webhook_url)
    except WebhookClientError as e:
        logger.error(f"Document processing failed: {e.error.message}")
        raise _to_http_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error processing document: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )

    latency_ms = int((time.time() - start_time) * 1000)
    logger.info(f"Document processed successfully in {latency_ms}ms")

    return ProcessResponse(
        content=content,
        word_count=editor_session.document.get_word_count(),
        state=_state_model()
    )


@app.post("/process", response_model=ProcessResponse)
def process_text(request: ProcessTextRequest) -> ProcessResponse:
    """Run raw text through the webhook without touching the document."""
    endpoint = editor_session.webhook_url if request.webhook_url is None else request.webhook_url

    try:
        content = editor_session.processor.process(endpoint, request.text)
    except WebhookClientError as e:
        logger.error(f"Text processing failed: {e.error.message}")
        raise _to_http_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error processing text: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )

    return ProcessResponse(
        content=content,
        word_count=count_words(request.text),
        state=_state_model()
    )


@app.get("/progress", response_model=ProcessingStateModel)
async def get_progress() -> ProcessingStateModel:
    """Current processing state, for progress polling."""
    return _state_model()


@app.post("/progress/reset", response_model=ProcessingStateModel)
async def reset_progress() -> ProcessingStateModel:
    """Reset the processing state."""
    editor_session.processor.reset()
    return _state_model()


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Formal Editor API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
