from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for error logging.

Structured record for input rejected by the tracker (JSON Lines, fixed keys).
Each record names the session operation that failed and the parser message
shown to the user.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        operation: Session operation that failed (baseline / update)
        source: Where the text came from (file path or "<stdin>")
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Message surfaced to the user
    """
    timestamp: str  # ISO8601 UTC
    operation: str
    source: str
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(operation: str, source: str, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            operation=operation,
            source=source,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to one JSON line; keys are exactly the dataclass fields."""
        return json.dumps(asdict(self), ensure_ascii=False)
