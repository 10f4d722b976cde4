"""Pipeline orchestrator: chunk, transform sequentially, reassemble."""
import logging
import threading
import time
from typing import Callable, List, Optional

from models.processing import ProcessingState
from services.chunking_engine import ChunkingEngine
from services.webhook_client import WebhookClient
from services.errors import MissingEndpointError, ProcessingInProgressError
from services.formatter import join_chunks, format_plain_text_to_html

logger = logging.getLogger(__name__)

ChunkCallback = Callable[[str, int], None]
ProgressCallback = Callable[[ProcessingState], None]


class WebhookProcessor:
    """
    Drive a text through the webhook one chunk at a time.

    Chunks are submitted strictly sequentially: the next request is issued
    only after the previous response is known. Progress is tracked in a
    ProcessingState owned by this instance; pollers read it through the
    `state` property, observers get a snapshot after every mutation.
    """

    def __init__(
        self,
        client: Optional[WebhookClient] = None,
        chunking_engine: Optional[ChunkingEngine] = None,
        on_progress: Optional[ProgressCallback] = None
    ):
        """
        Initialize the processor.

        Args:
            client: Webhook client (defaults to a new WebhookClient)
            chunking_engine: Chunker (defaults to a new ChunkingEngine)
            on_progress: Optional observer called with a state snapshot
                after every state change
        """
        self.client = client or WebhookClient()
        self.chunking_engine = chunking_engine or ChunkingEngine()
        self.on_progress = on_progress
        self._state = ProcessingState()
        self._state_lock = threading.Lock()
        self._run_lock = threading.Lock()

    @property
    def state(self) -> ProcessingState:
        """Snapshot of the current processing state."""
        with self._state_lock:
            return self._state.snapshot()

    def reset(self) -> None:
        """Restore the all-zero state."""
        self._set_state(ProcessingState())

    def _set_state(self, state: ProcessingState) -> None:
        with self._state_lock:
            self._state = state
            snapshot = state.snapshot()
        self._notify(snapshot)

    def _update_state(self, **changes) -> None:
        with self._state_lock:
            for name, value in changes.items():
                setattr(self._state, name, value)
            snapshot = self._state.snapshot()
        self._notify(snapshot)

    def _notify(self, snapshot: ProcessingState) -> None:
        if self.on_progress:
            self.on_progress(snapshot)

    def process(
        self,
        endpoint: str,
        text: str,
        on_chunk_processed: Optional[ChunkCallback] = None
    ) -> str:
        """
        Run the full pipeline on `text`.

        Args:
            endpoint: Webhook URL; must be non-empty
            text: Input text
            on_chunk_processed: Optional observer called with each chunk's
                transformed text and its 0-based index, right after that
                chunk succeeds

        Returns:
            Final document markup ("" when the text has no words)

        Raises:
            MissingEndpointError: If endpoint is empty (no state change, no I/O)
            ProcessingInProgressError: If another run is in flight
            WebhookClientError: Any chunk failure; the run is aborted and no
                partial document is returned
        """
        if not endpoint:
            raise MissingEndpointError()

        chunks = self.chunking_engine.split_text(text)
        if not chunks:
            logger.info("No words to process, returning empty document")
            return ""

        if not self._run_lock.acquire(blocking=False):
            raise ProcessingInProgressError()

        try:
            return self._run(endpoint, chunks, on_chunk_processed)
        finally:
            self._run_lock.release()

    def _run(self, endpoint, chunks, on_chunk_processed) -> str:
        total = len(chunks)
        start_time = time.time()
        processed_chunks: List[str] = []

        try:
            self._set_state(ProcessingState(
                is_processing=True,
                progress=0,
                current_chunk=0,
                total_chunks=total,
                error=None
            ))
            logger.info(f"Processing {total} chunks via {endpoint}")

            for i, chunk in enumerate(chunks):
                self._update_state(current_chunk=i + 1, progress=100 * i // total)
                logger.debug(f"Submitting chunk {i + 1}/{total} ({chunk.word_count} words)")

                processed_text = self.client.transform(endpoint, chunk.text)
                processed_chunks.append(processed_text)

                if on_chunk_processed:
                    on_chunk_processed(processed_text, i)

                self._update_state(progress=100 * (i + 1) // total)

            self._update_state(is_processing=False, progress=100)

        except Exception as e:
            self._record_failure(e)
            logger.error(
                f"Processing aborted at chunk {self.state.current_chunk}/{total}: {e}"
            )
            raise

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(f"Processed {total} chunks in {latency_ms}ms")

        return format_plain_text_to_html(join_chunks(processed_chunks))

    def _record_failure(self, error: Exception) -> None:
        """Finalize the state after a failed run; `error` is what the caller sees."""
        with self._state_lock:
            self._state.is_processing = False
            self._state.error = str(error)
            snapshot = self._state.snapshot()
        try:
            self._notify(snapshot)
        except Exception:
            logger.exception("Progress observer failed while recording a processing failure")
