"""
Leak-Proof Console Reporter

Renders the blocked-commit report shown by the pre-commit hook.
"""

from __future__ import annotations

import sys
from typing import Sequence

import click

from leakproof.core.violation import Violation

BOX_WIDTH = 49


def _safe_echo(text: str = "", **kwargs) -> None:
    """Echo text, handling Unicode issues on Windows consoles."""
    try:
        click.echo(text, **kwargs)
    except UnicodeEncodeError:
        stream = sys.stderr if kwargs.get("err") else sys.stdout
        encoding = getattr(stream, "encoding", None) or "utf-8"
        safe = text.encode(encoding, errors="replace").decode(encoding, errors="replace")
        click.echo(safe, **kwargs)


class ConsoleReporter:
    """Prints violations as framed boxes followed by remediation help."""

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def _style(self, text: str, **styles) -> str:
        if not self.color:
            return text
        return click.style(text, **styles)

    def echo(self, text: str = "", **kwargs) -> None:
        _safe_echo(text, **kwargs)

    def report(self, violations: Sequence[Violation]) -> None:
        """
        Print the scan result.

        Args:
            violations: Violations in collector order. Empty means the commit
                is allowed.
        """
        if not violations:
            self.echo(self._style("✓ No secrets detected. Commit allowed.", fg="green"))
            return

        self._print_banner()
        total = len(violations)
        for idx, violation in enumerate(violations, start=1):
            self._print_violation(violation, idx, total)
        self._print_help()

    def _print_banner(self) -> None:
        self.echo("")
        self.echo(self._style("┌" + "─" * BOX_WIDTH + "┐", fg="red"))
        self.echo(self._style("│  🔒 COMMIT BLOCKED - SECRETS DETECTED           │", fg="red"))
        self.echo(self._style("└" + "─" * BOX_WIDTH + "┘", fg="red"))
        self.echo("")

    def _print_violation(self, violation: Violation, current: int, total: int) -> None:
        title = f"Violation {current} of {total}"
        padding = "─" * max(0, BOX_WIDTH - len(title) - 2)
        bar = self._style("│", fg="bright_black")

        self.echo(self._style(f"┌─ {title} {padding}", fg="bright_black"))
        self.echo(bar + " 📄 File: " + self._style(violation.location, fg="cyan"))
        self.echo(bar + " 🚨 Issue: " + self._style(violation.reason, fg="red"))

        if violation.snippet:
            line_no = violation.line or "?"
            self.echo(bar)
            self.echo(bar + " Code preview:")
            self.echo(bar + self._style(f" {line_no} | {violation.snippet}", fg="yellow"))

        self.echo(self._style("└" + "─" * BOX_WIDTH, fg="bright_black"))
        self.echo("")

    def _print_help(self) -> None:
        self.echo("💡 " + self._style("What to do next:", bold=True))
        self.echo("   • Remove the secrets from your code")
        self.echo("   • Use environment variables instead (.env files)")
        self.echo("   • Add .env to your .gitignore")
        self.echo("")
        self.echo("⚠️  " + self._style("Emergency bypass (use with caution):", fg="yellow"))
        self.echo("   git commit --no-verify")
        self.echo("")
