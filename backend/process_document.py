"""
Command-line processing for Formal Editor documents.

This script:
1. Reads a plain-text or HTML document
2. Splits it into word-bounded chunks
3. Sends each chunk to the webhook in order
4. Writes the reassembled markup to stdout or a file

Usage:
    python process_document.py essay.txt --output essay.html
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from config import WEBHOOK_URL, MAX_WORDS_PER_CHUNK
from models.document import EditorDocument
from models.processing import ProcessingState
from services.chunking_engine import ChunkingEngine
from services.errors import WebhookClientError
from services.webhook_processor import WebhookProcessor

logger = logging.getLogger(__name__)

HTML_SUFFIXES = {".html", ".htm"}


def load_text(path: Path) -> str:
    """Read the input file; HTML is reduced to its plain text."""
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() in HTML_SUFFIXES:
        return EditorDocument(content).get_plain_text()
    return content


def log_progress(state: ProcessingState) -> None:
    if state.is_processing and state.current_chunk:
        logger.info(f"Processing chunk {state.current_chunk}/{state.total_chunks} ({state.progress}%)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rewrite a document through the Formal Editor webhook"
    )
    parser.add_argument("input", help="Path to a .txt or .html document")
    parser.add_argument(
        "--webhook-url",
        default=WEBHOOK_URL,
        help="Webhook endpoint (default: WEBHOOK_URL from environment)"
    )
    parser.add_argument(
        "--output",
        help="Write markup to this file instead of stdout"
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=MAX_WORDS_PER_CHUNK,
        help=f"Maximum words per chunk (default: {MAX_WORDS_PER_CHUNK})"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI; returns the process exit code."""
    args = build_parser().parse_args(argv)

    input_path = Path(args.input)
    if not input_path.is_file():
        logger.error(f"Input file not found: {input_path}")
        return 1

    text = load_text(input_path)
    processor = WebhookProcessor(
        chunking_engine=ChunkingEngine(max_words=args.max_words),
        on_progress=log_progress
    )

    try:
        markup = processor.process(args.webhook_url, text)
    except WebhookClientError as e:
        logger.error(f"Processing failed [{e.error.code}]: {e.error.message}")
        return 1

    if args.output:
        Path(args.output).write_text(markup, encoding="utf-8")
        logger.info(f"✓ Wrote {len(markup)} characters to {args.output}")
    else:
        sys.stdout.write(markup + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
