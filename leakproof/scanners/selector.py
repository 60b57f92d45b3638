"""
Leak-Proof File Selector

Narrows the staged file list down to the files whose content is worth
reading: lock files and binary formats are dropped, as are paths that no
longer exist in the working tree (staged deletions) and directories.
"""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Iterable, List, Optional

# Package manager lock files; large, generated and full of hashes
SKIP_FILES = {
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
}

BINARY_EXTENSIONS = {
    ".png", ".jpg", ".jpeg", ".gif", ".pdf",
    ".zip", ".tar", ".gz", ".exe", ".bin",
}


def is_content_candidate(path: str) -> bool:
    """Check the name-based filters (skip list and binary extension)."""
    pure = PurePath(path)
    if pure.name in SKIP_FILES:
        return False
    if pure.suffix.lower() in BINARY_EXTENSIONS:
        return False
    return True


def resolve(path: str, root: Optional[Path] = None) -> Path:
    """Resolve a repository-relative path against the scan root."""
    return (root if root is not None else Path.cwd()) / path


def select_for_content_scan(paths: Iterable[str], root: Optional[Path] = None) -> List[str]:
    """Return the scan-eligible paths, preserving input order."""
    selected: List[str] = []
    for path in paths:
        if not is_content_candidate(path):
            continue
        # is_file() is False for missing paths and directories alike
        if not resolve(path, root).is_file():
            continue
        selected.append(path)
    return selected
