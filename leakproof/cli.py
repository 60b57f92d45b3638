"""
Leak-Proof CLI

Command-line interface for the pre-commit guard.

Commands:
    leakproof init      - Install the pre-commit hook in the current repository
    leakproof scan      - Scan staged files for secrets (run by the hook)
    leakproof remove    - Uninstall the hook and the package.json bootstrap
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from leakproof import __version__
from leakproof.core.config import (
    CONFIG_FILENAME,
    OUTPUT_FORMATS,
    LeakProofConfig,
    generate_default_config,
)
from leakproof.core.errors import NotARepositoryError
from leakproof.integrations.git import GitRepository
from leakproof.integrations.hooks import DONE, WARNING, HookInstaller, HookStep
from leakproof.reporting.console import ConsoleReporter, _safe_echo
from leakproof.reporting.json_reporter import JSONReporter
from leakproof.scanners.secrets import SecretsScanner


@click.group()
@click.version_option(version=__version__, prog_name="Leak-Proof")
def cli() -> None:
    """
    Leak-Proof - zero-config pre-commit guard

    Blocks commits that contain .env files or hardcoded secrets.
    """
    pass


# ═══════════════════════════════════════════════════════
#  leakproof init
# ═══════════════════════════════════════════════════════
@cli.command()
@click.option("--write-config", is_flag=True,
              help=f"Also create a default {CONFIG_FILENAME}.")
def init(write_config: bool) -> None:
    """Install Leak-Proof as a git pre-commit hook."""
    _safe_echo(click.style("  Initializing Leak-Proof...", fg="blue"))

    repo = GitRepository()
    try:
        repo.ensure_repository()
    except NotARepositoryError as exc:
        _fail(f"Error: {exc} Please run this command in a git repository.")

    try:
        root = repo.root()
        config = LeakProofConfig.load(root / CONFIG_FILENAME)
        installer = HookInstaller(
            root,
            hooks_dir=config.hooks.directory,
            manifest=config.hooks.manifest,
            repository=repo,
        )
        steps = installer.install()

        if write_config:
            steps.append(_write_config(root / CONFIG_FILENAME))
    except Exception as exc:
        _fail(f"Error during initialization: {exc}")

    for step in steps:
        _echo_step(step)

    _safe_echo("")
    _safe_echo(click.style("  Leak-Proof initialized successfully!", fg="green", bold=True))
    _safe_echo(click.style(
        '  Your team will automatically get these hooks when they run "npm install"',
        fg="bright_black",
    ))


# ═══════════════════════════════════════════════════════
#  leakproof scan
# ═══════════════════════════════════════════════════════
@cli.command()
@click.option("--format", "-f", "output_format", type=click.Choice(list(OUTPUT_FORMATS)),
              default=None, help="Output format (default: console).")
@click.option("--output", "-o", "output_file", type=click.Path(), default=None,
              help="Write a JSON report to a file.")
@click.option("--no-color", is_flag=True, help="Disable coloured output.")
@click.option("--config", "config_path", type=click.Path(), default=None,
              help=f"Path to {CONFIG_FILENAME} configuration file.")
def scan(
    output_format: Optional[str],
    output_file: Optional[str],
    no_color: bool,
    config_path: Optional[str],
) -> None:
    """Scan staged files for secrets (runs automatically on pre-commit).

    Exits with status 1 when any violation is found.
    """
    repo = GitRepository()
    try:
        repo.ensure_repository()
    except NotARepositoryError as exc:
        _fail(f"Error: {exc}")

    try:
        root = repo.root()
        config = LeakProofConfig.load(Path(config_path) if config_path else root / CONFIG_FILENAME)
        staged_files = repo.list_staged_files()

        if not staged_files:
            _safe_echo(click.style("No staged files to scan.", fg="bright_black"))
            return

        report = SecretsScanner(root).scan(staged_files)

        # CLI flags override config
        fmt = output_format or config.output.format
        out_file = output_file or config.output.file

        if fmt == "json":
            reporter = JSONReporter()
            json_str = reporter.report(report.violations, output_file=out_file)
            if not out_file:
                _safe_echo(json_str)
        else:
            ConsoleReporter(color=not no_color).report(report.violations)
            if out_file:
                JSONReporter().report(report.violations, output_file=out_file)
    except Exception as exc:
        _fail(f"Error during scan: {exc}")

    if report.should_fail:
        sys.exit(1)


# ═══════════════════════════════════════════════════════
#  leakproof remove
# ═══════════════════════════════════════════════════════
@cli.command()
def remove() -> None:
    """Remove Leak-Proof from the project."""
    _safe_echo(click.style("  Removing Leak-Proof...", fg="blue"))

    repo = GitRepository()
    try:
        root = repo.root() if repo.is_repository() else Path.cwd()
        config = LeakProofConfig.load(root / CONFIG_FILENAME)
        installer = HookInstaller(
            root,
            hooks_dir=config.hooks.directory,
            manifest=config.hooks.manifest,
            repository=repo,
        )
        steps = installer.remove()
    except Exception as exc:
        _fail(f"Error during removal: {exc}")

    for step in steps:
        _echo_step(step)

    _safe_echo("")
    _safe_echo(click.style("  Leak-Proof removed successfully!", fg="green", bold=True))


# ── Helpers ──

def _fail(message: str) -> NoReturn:
    _safe_echo(click.style(f"  [X] {message}", fg="red"), err=True)
    sys.exit(1)


def _echo_step(step: HookStep) -> None:
    if step.status == DONE:
        _safe_echo(click.style(f"  [+] {step.message}", fg="green"))
    elif step.status == WARNING:
        _safe_echo(click.style(f"  [!] Warning: {step.message}", fg="yellow"), err=True)
    else:
        _safe_echo(click.style(f"  [i] {step.message}", fg="bright_black"))


def _write_config(config_file: Path) -> HookStep:
    if config_file.exists():
        return HookStep(WARNING, f"{config_file} already exists, skipping.")
    config_file.write_text(generate_default_config(), encoding="utf-8")
    return HookStep(DONE, f"Created {config_file}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
