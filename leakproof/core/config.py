"""
Leak-Proof Configuration Management

Loads optional settings from a .leakproof.yaml file at the repository root.
Configuration covers output and hook placement only; the detection rules
are fixed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

CONFIG_FILENAME = ".leakproof.yaml"

DEFAULT_HOOKS_DIR = ".husky"
DEFAULT_MANIFEST = "package.json"

OUTPUT_FORMATS = ("console", "json")


@dataclass
class OutputConfig:
    format: str = "console"
    file: Optional[str] = None


@dataclass
class HooksConfig:
    directory: str = DEFAULT_HOOKS_DIR
    manifest: str = DEFAULT_MANIFEST


@dataclass
class LeakProofConfig:
    """Root configuration object for Leak-Proof."""

    output: OutputConfig = field(default_factory=OutputConfig)
    hooks: HooksConfig = field(default_factory=HooksConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "LeakProofConfig":
        """Load configuration from a YAML file, falling back to defaults."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return cls()

        if not isinstance(raw, dict):
            return cls()

        return cls._from_dict(raw)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "LeakProofConfig":
        """Build config from a parsed YAML dictionary."""
        output_data = data.get("output") or {}
        fmt = output_data.get("format", "console")
        output = OutputConfig(
            format=fmt if fmt in OUTPUT_FORMATS else "console",
            file=output_data.get("file"),
        )

        hooks_data = data.get("hooks") or {}
        hooks = HooksConfig(
            directory=hooks_data.get("directory", DEFAULT_HOOKS_DIR),
            manifest=hooks_data.get("manifest", DEFAULT_MANIFEST),
        )

        return cls(output=output, hooks=hooks)


def generate_default_config() -> str:
    """Generate a default .leakproof.yaml configuration file content."""
    return """\
# Leak-Proof Configuration

# Output settings
output:
  format: console  # console, json
  # file: leakproof-report.json

# Hook installation
hooks:
  directory: .husky
  manifest: package.json
"""
