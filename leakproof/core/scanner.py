"""
Leak-Proof Base Scanner

A scanner inspects a list of staged paths and returns a ScanReport.
File contents are obtained through a reader that returns a FileContent
result instead of raising, so one unreadable file never aborts a scan.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from leakproof.core.violation import Violation

# Skip reasons reported by readers
SKIP_UNREADABLE = "unreadable"
SKIP_BINARY = "binary"


@dataclass(frozen=True)
class FileContent:
    """Outcome of reading one candidate file: its text, or why it was skipped."""

    path: Path
    text: Optional[str] = None
    skip_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def loaded(cls, path: Path, text: str) -> "FileContent":
        return cls(path=path, text=text)

    @classmethod
    def skipped(cls, path: Path, reason: str) -> "FileContent":
        return cls(path=path, skip_reason=reason)


Reader = Callable[[Path], FileContent]


def read_text(path: Path) -> FileContent:
    """Read a file as UTF-8 text. I/O and decode failures become skip results."""
    try:
        raw = path.read_bytes()
    except OSError:
        return FileContent.skipped(path, SKIP_UNREADABLE)

    try:
        return FileContent.loaded(path, raw.decode("utf-8"))
    except UnicodeDecodeError:
        return FileContent.skipped(path, SKIP_BINARY)


def verdict(violations: Sequence[Violation]) -> bool:
    """Return True when the commit must be rejected."""
    return len(violations) > 0


@dataclass(frozen=True)
class ScanReport:
    """Ordered, immutable result of one scan pass."""

    violations: tuple[Violation, ...] = ()
    files_checked: int = 0
    files_scanned: int = 0

    @property
    def should_fail(self) -> bool:
        return verdict(self.violations)

    @property
    def passed(self) -> bool:
        return not self.should_fail


class BaseScanner(ABC):
    """
    Minimal scanner interface.
    Each scanner must implement scan().
    """

    name: str = "base"

    def __init__(self, root: Optional[Path] = None, reader: Optional[Reader] = None):
        self.root = root if root is not None else Path.cwd()
        self.reader = reader or read_text

    @abstractmethod
    def scan(self, paths: Iterable[str]) -> ScanReport:
        """
        Scan the given repository-relative paths and return a report.
        """
        raise NotImplementedError
