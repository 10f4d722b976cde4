"""Chunking engine that splits text into word-bounded chunks."""
import logging
import re
from typing import List, Optional

from models.chunk import ChunkInfo
from config import MAX_WORDS_PER_CHUNK

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Split text on runs of whitespace, discarding empty tokens."""
    return [word for word in _WHITESPACE.split(text) if word]


def count_words(text: str) -> int:
    """Count non-empty whitespace-delimited tokens."""
    return len(tokenize(text))


class ChunkingEngine:
    """Segments text into ordered chunks of at most `max_words` words."""

    def __init__(self, max_words: Optional[int] = None):
        """
        Initialize ChunkingEngine.

        Args:
            max_words: Word cap per chunk (defaults to MAX_WORDS_PER_CHUNK)
        """
        self.max_words = max_words if max_words is not None else MAX_WORDS_PER_CHUNK
        if self.max_words < 1:
            raise ValueError("max_words must be at least 1")

    def split_text(self, text: str) -> List[ChunkInfo]:
        """
        Split text into chunks.

        Whitespace runs collapse to single spaces; word order and content are
        preserved exactly. start/end indices are offsets into the chunks
        re-joined with single spaces, not into the original text.

        Args:
            text: Text to chunk (may be empty)

        Returns:
            Ordered list of ChunkInfo, empty for empty or whitespace-only text
        """
        words = tokenize(text)
        chunks: List[ChunkInfo] = []

        current_index = 0
        for i in range(0, len(words), self.max_words):
            chunk_text = " ".join(words[i:i + self.max_words])
            chunks.append(ChunkInfo(
                text=chunk_text,
                start_index=current_index,
                end_index=current_index + len(chunk_text)
            ))
            current_index += len(chunk_text) + 1  # +1 for the joining space

        logger.debug(f"Split {len(words)} words into {len(chunks)} chunks (max {self.max_words} words)")
        return chunks
