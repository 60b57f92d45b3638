"""
Leak-Proof Violation Model

A Violation is one reported instance of a disallowed filename or
secret-shaped line in a staged file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

# Line number used for findings that concern the whole file (its name).
FILENAME_LINE = 0

SNIPPET_LENGTH = 80


@dataclass(frozen=True)
class Violation:
    file: str
    line: int
    reason: str
    snippet: Optional[str] = None

    @property
    def is_filename_violation(self) -> bool:
        return self.line == FILENAME_LINE

    @property
    def location(self) -> str:
        """``file:line``, or ``file:filename`` for filename-level violations."""
        if self.is_filename_violation:
            return f"{self.file}:filename"
        return f"{self.file}:{self.line}"

    def to_dict(self) -> dict[str, Any]:
        """Convert violation to a dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "file": self.file,
            "line": self.line,
            "reason": self.reason,
        }
        if self.snippet is not None:
            result["snippet"] = self.snippet
        return result


def make_snippet(line: str) -> str:
    """Trim a source line and keep its first 80 characters."""
    return line.strip()[:SNIPPET_LENGTH]
