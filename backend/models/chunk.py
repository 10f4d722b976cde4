"""Chunk data models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkInfo:
    """One bounded-size slice of the input's word sequence."""
    text: str  # Words joined with single spaces
    start_index: int  # Offset into the re-joined chunk text, not the source
    end_index: int

    @property
    def word_count(self) -> int:
        return len(self.text.split())
