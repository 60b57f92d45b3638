"""
Leak-Proof Filename Classifier

Flags dotenv files by name alone. The check runs on every staged path,
including ones the content scan skips, and does not need the file to exist.
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Optional

from leakproof.core.violation import FILENAME_LINE, Violation

ENV_FILE_PATTERN = re.compile(r"\.env(\.(local|production|development|test))?")

ENV_FILE_REASON = "Filename matches .env pattern (not allowed to be committed)"


def classify_filename(path: str) -> Optional[Violation]:
    """Return a filename violation for ``path``, or None if its name is allowed."""
    if ENV_FILE_PATTERN.fullmatch(PurePath(path).name):
        return Violation(file=path, line=FILENAME_LINE, reason=ENV_FILE_REASON)
    return None
