"""
Pytest Configuration and Fixtures

Shared fixtures for Leak-Proof tests.
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from leakproof.core.violation import Violation

OPENAI_KEY = "sk-" + "A" * 48


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_file(temp_dir: Path) -> Callable[..., Path]:
    """Return a helper that writes a file relative to temp_dir."""

    def _write(relative: str, content="") -> Path:
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_violations() -> list:
    """A filename violation followed by two content violations."""
    return [
        Violation(
            file=".env",
            line=0,
            reason="Filename matches .env pattern (not allowed to be committed)",
        ),
        Violation(
            file="src/app.js",
            line=3,
            reason="Detected OpenAI API Key",
            snippet=f'const token = "{OPENAI_KEY}"',
        ),
        Violation(
            file="src/app.js",
            line=3,
            reason="Detected Generic API Key/Token (broad match)",
            snippet=f'const token = "{OPENAI_KEY}"',
        ),
    ]


@pytest.fixture
def app_js(write_file) -> Path:
    """Create a JavaScript file with a hardcoded OpenAI key on line 3."""
    return write_file(
        "src/app.js",
        "const express = require('express');\n"
        "\n"
        f'const token = "{OPENAI_KEY}";\n'
        "module.exports = token;\n",
    )


@pytest.fixture
def package_json(write_file) -> Path:
    """Create a minimal package.json."""
    return write_file(
        "package.json",
        '{\n  "name": "demo",\n  "version": "1.0.0",\n  "scripts": {\n    "test": "jest"\n  }\n}\n',
    )
