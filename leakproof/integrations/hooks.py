"""
Leak-Proof Hook Installer

Installs and removes the pre-commit hook:
- Writes an executable husky-style hook script that runs ``leakproof scan``
- Activates the hook directory (``npx husky install`` or ``core.hooksPath``)
- Adds a ``prepare`` script to package.json so collaborators get the hook
  on ``npm install``

Both operations are idempotent and return the steps they performed so the
CLI can report them.
"""

from __future__ import annotations

import json
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from leakproof.core.config import DEFAULT_HOOKS_DIR, DEFAULT_MANIFEST
from leakproof.core.errors import ManifestError
from leakproof.integrations.git import GitRepository

HOOK_NAME = "pre-commit"
BOOTSTRAP_SCRIPT = "prepare"
BOOTSTRAP_COMMAND = "husky install"

HOOK_SCRIPT = """\
#!/usr/bin/env sh
if [ -f "$(dirname -- "$0")/_/husky.sh" ]; then
  . "$(dirname -- "$0")/_/husky.sh"
fi

leakproof scan
"""

NPX_TIMEOUT = 300

# Step statuses
DONE = "done"
SKIPPED = "skipped"
WARNING = "warning"


@dataclass(frozen=True)
class HookStep:
    """One reported outcome of an install/remove operation."""

    status: str
    message: str


class HookInstaller:
    """Manages the pre-commit hook and the manifest bootstrap entry under ``root``."""

    def __init__(
        self,
        root: Path,
        hooks_dir: str = DEFAULT_HOOKS_DIR,
        manifest: str = DEFAULT_MANIFEST,
        repository: Optional[GitRepository] = None,
    ) -> None:
        self.root = root
        self.hooks_dir = hooks_dir
        self.hooks_path = root / hooks_dir
        self.hook_file = self.hooks_path / HOOK_NAME
        self.manifest_path = root / manifest
        self.repository = repository or GitRepository(cwd=root)

    # ── install ──

    def install(self) -> List[HookStep]:
        return [self._activate_hooks_dir(), self.write_hook(), self.add_bootstrap_script()]

    def write_hook(self) -> HookStep:
        """Write the pre-commit script, replacing any previous copy."""
        self.hooks_path.mkdir(parents=True, exist_ok=True)
        self.hook_file.write_text(HOOK_SCRIPT, encoding="utf-8")

        if sys.platform != "win32":
            os.chmod(self.hook_file, 0o755)

        return HookStep(DONE, "Pre-commit hook created")

    def _activate_hooks_dir(self) -> HookStep:
        npx_path = shutil.which("npx")
        if npx_path:
            subprocess.run(
                [npx_path, "husky", "install", self.hooks_dir],
                cwd=self.root,
                check=True,
                timeout=NPX_TIMEOUT,
            )
            return HookStep(DONE, "Installed husky hooks")

        self.repository.set_hooks_path(self.hooks_dir)
        return HookStep(
            DONE, f"npx not found; set git core.hooksPath to {self.hooks_dir}"
        )

    def add_bootstrap_script(self) -> HookStep:
        """Add ``"prepare": "husky install"`` to the manifest scripts table."""
        if not self.manifest_path.exists():
            return HookStep(
                WARNING,
                f"{self.manifest_path.name} not found. Skipping prepare script.",
            )

        manifest = self._load_manifest()
        scripts = manifest.setdefault("scripts", {})
        current = scripts.get(BOOTSTRAP_SCRIPT)

        if current is None:
            scripts[BOOTSTRAP_SCRIPT] = BOOTSTRAP_COMMAND
            self._save_manifest(manifest)
            return HookStep(
                DONE, f'Added "{BOOTSTRAP_SCRIPT}" script to {self.manifest_path.name}'
            )

        if current != BOOTSTRAP_COMMAND:
            return HookStep(
                WARNING,
                f'"{BOOTSTRAP_SCRIPT}" script already exists in {self.manifest_path.name}. '
                f'Please add "{BOOTSTRAP_COMMAND}" manually.',
            )

        return HookStep(SKIPPED, f'"{BOOTSTRAP_SCRIPT}" script already configured')

    # ── remove ──

    def remove(self) -> List[HookStep]:
        return [self.remove_hooks_dir(), self.remove_bootstrap_script()]

    def remove_hooks_dir(self) -> HookStep:
        if not self.hooks_path.exists():
            return HookStep(SKIPPED, f"{self.hooks_dir} directory not found")

        shutil.rmtree(self.hooks_path)
        return HookStep(DONE, f"Removed {self.hooks_dir} directory")

    def remove_bootstrap_script(self) -> HookStep:
        """Remove the bootstrap entry, dropping the scripts table if it empties."""
        if not self.manifest_path.exists():
            return HookStep(WARNING, f"{self.manifest_path.name} not found")

        manifest = self._load_manifest()
        scripts = manifest.get("scripts")

        if not isinstance(scripts, dict) or scripts.get(BOOTSTRAP_SCRIPT) != BOOTSTRAP_COMMAND:
            return HookStep(
                SKIPPED,
                f'"{BOOTSTRAP_SCRIPT}" script not found or different in '
                f"{self.manifest_path.name}",
            )

        del scripts[BOOTSTRAP_SCRIPT]
        if not scripts:
            del manifest["scripts"]

        self._save_manifest(manifest)
        return HookStep(
            DONE, f'Removed "{BOOTSTRAP_SCRIPT}" script from {self.manifest_path.name}'
        )

    # ── manifest I/O ──

    def _load_manifest(self) -> dict[str, Any]:
        try:
            data = json.loads(self.manifest_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ManifestError(f"Invalid JSON in {self.manifest_path.name}: {exc}") from exc

        if not isinstance(data, dict):
            raise ManifestError(f"{self.manifest_path.name} must contain a JSON object")
        return data

    def _save_manifest(self, data: dict[str, Any]) -> None:
        self.manifest_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
