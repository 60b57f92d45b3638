"""
Leak-Proof Git Integration

Thin wrapper around the git command line:
- Repository detection
- Staged file listing (index vs. HEAD, names only)
- Hook path configuration
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from leakproof.core.errors import GitCommandError, NotARepositoryError

GIT_TIMEOUT = 60


class GitRepository:
    """The git repository containing ``cwd`` (defaults to the current directory)."""

    def __init__(self, cwd: Optional[Path] = None) -> None:
        self.cwd = cwd

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        git_path = shutil.which("git")
        if not git_path:
            raise GitCommandError("git executable not found on PATH")

        return subprocess.run(
            [git_path, *args],
            cwd=self.cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            timeout=GIT_TIMEOUT,
        )

    def is_repository(self) -> bool:
        """Check if ``cwd`` is inside a git work tree."""
        try:
            result = self._run("rev-parse", "--is-inside-work-tree")
        except (GitCommandError, subprocess.TimeoutExpired, OSError):
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def ensure_repository(self) -> None:
        if not self.is_repository():
            raise NotARepositoryError("Not a git repository.")

    def root(self) -> Path:
        """Absolute path of the work tree's top-level directory."""
        result = self._check("rev-parse", "--show-toplevel")
        return Path(result.stdout.strip())

    def list_staged_files(self) -> List[str]:
        """
        Paths recorded in the index for the pending commit, relative to
        the repository root. Empty entries are discarded.

        Names are read NUL-separated so git prints them unquoted, including
        non-ASCII paths.
        """
        result = self._check("diff", "--cached", "--name-only", "-z")
        return [name for name in result.stdout.split("\0") if name]

    def set_hooks_path(self, hooks_dir: str) -> None:
        """Point ``core.hooksPath`` at ``hooks_dir``."""
        self._check("config", "core.hooksPath", hooks_dir)

    def _check(self, *args: str) -> subprocess.CompletedProcess:
        result = self._run(*args)
        if result.returncode != 0:
            message = result.stderr.strip() or f"git {' '.join(args)} failed"
            raise GitCommandError(message)
        return result
