"""
Leak-Proof JSON Reporter

Generates machine-readable JSON output format:
{
    "version": "1.0",
    "passed": false,
    "summary": {
        "total_violations": N,
        "files": n,
        "by_reason": {"Detected AWS Access Key": n, ...}
    },
    "violations": [...]
}
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Optional, Sequence

from leakproof import __version__
from leakproof.core.scanner import verdict
from leakproof.core.violation import Violation


class JSONReporter:
    """Generates JSON-formatted scan reports."""

    def report(
        self,
        violations: Sequence[Violation],
        output_file: Optional[str] = None,
    ) -> str:
        """
        Generate JSON report.

        Args:
            violations: Violations in collector order.
            output_file: Optional file path to write the report to.

        Returns:
            The JSON string.
        """
        report_data = {
            "version": "1.0",
            "tool": {
                "name": "Leak-Proof",
                "version": __version__,
            },
            "passed": not verdict(violations),
            "summary": {
                "total_violations": len(violations),
                "files": len({v.file for v in violations}),
                "by_reason": dict(Counter(v.reason for v in violations)),
            },
            "violations": [v.to_dict() for v in violations],
        }

        json_str = json.dumps(report_data, indent=2)

        if output_file:
            Path(output_file).write_text(json_str, encoding="utf-8")

        return json_str
