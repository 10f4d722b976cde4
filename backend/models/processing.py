"""Processing state model."""
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional


@dataclass
class ProcessingState:
    """Progress of the current (or last) webhook processing run."""
    is_processing: bool = False
    progress: int = 0  # 0..100
    current_chunk: int = 0  # 1-based, 0 before start
    total_chunks: int = 0
    error: Optional[str] = None

    def snapshot(self) -> "ProcessingState":
        """Return an independent copy for observers and pollers."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
