"""Editor session: runs the pipeline over a document and writes back the result."""
import logging
from typing import Optional

from config import WEBHOOK_URL
from models.document import EditorDocument
from services.errors import EmptyDocumentError
from services.webhook_processor import WebhookProcessor, ChunkCallback

logger = logging.getLogger(__name__)


class EditorSession:
    """Binds one EditorDocument to one WebhookProcessor."""

    def __init__(
        self,
        document: Optional[EditorDocument] = None,
        processor: Optional[WebhookProcessor] = None,
        webhook_url: Optional[str] = None
    ):
        self.document = document or EditorDocument()
        self.processor = processor or WebhookProcessor()
        self.webhook_url = WEBHOOK_URL if webhook_url is None else webhook_url

    def process_document(
        self,
        webhook_url: Optional[str] = None,
        on_chunk_processed: Optional[ChunkCallback] = None
    ) -> str:
        """
        Process the document's plain text and replace its content with the result.

        Args:
            webhook_url: Override for the session's webhook URL
            on_chunk_processed: Optional per-chunk observer

        Returns:
            The new document markup

        Raises:
            EmptyDocumentError: If the document has no text
            WebhookClientError: If the pipeline fails; the document is left untouched
        """
        text = self.document.get_plain_text()
        if not text.strip():
            raise EmptyDocumentError()

        endpoint = self.webhook_url if webhook_url is None else webhook_url
        logger.info(f"Processing document: {self.document.get_word_count()} words")

        markup = self.processor.process(endpoint, text, on_chunk_processed)
        self.document.set_content(markup)

        logger.info("Document content replaced with processed result")
        return markup
