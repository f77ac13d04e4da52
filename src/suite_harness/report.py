"""Report generation for suite runs."""

import json
from datetime import datetime
from typing import Any, Dict

from .types import TestSuiteResult, TestSummary


def _suite_status(suite: TestSuiteResult) -> str:
    if suite.setup_failed:
        return "setup failed"
    return "passed" if suite.ok else "failed"


def generate_markdown_report(summary: TestSummary, title: str = "Suite Run") -> str:
    """
    Generate a markdown report suitable for CI job summaries.

    Args:
        summary: Test summary
        title: Report heading

    Returns:
        Markdown-formatted report
    """
    lines = []

    lines.append(f"# {title} Report")
    lines.append("")
    lines.append(f"**Date**: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append(f"**Duration**: {summary.duration_ms}ms")
    lines.append("")

    if summary.exit_code == 0:
        lines.append("## ✅ All Suites Passed!")
        lines.append("")
        lines.append(f"**{summary.passed}/{summary.total}** tests passed in {len(summary.suites)} suite(s)")
    else:
        lines.append("## ⚠️ Some Suites Failed")
        lines.append("")
        lines.append(
            f"**{summary.passed}/{summary.total}** tests passed, "
            f"**{summary.assertion_failures}** assertion(s) failed"
        )

    lines.append("")
    lines.append("---")
    lines.append("")

    for suite in summary.suites:
        kind = "automatic" if suite.automatic else "manual"
        lines.append(f"## {suite.name} ({kind})")
        lines.append("")

        if suite.ok:
            lines.append(f"✅ **{suite.passed}/{suite.total}** tests passed")
        else:
            lines.append(f"⚠️ {_suite_status(suite)}: **{suite.passed}/{suite.total}** tests passed")

        lines.append("")

        if suite.results:
            lines.append("| Test | Status | Duration |")
            lines.append("|------|--------|----------|")
            for result in suite.results:
                status = "✅" if result.passed else "❌"
                lines.append(f"| {result.name} | {status} | {result.duration_ms}ms |")
            lines.append("")

        if suite.failures:
            lines.append("### Failures")
            lines.append("")
            for failure in suite.failures:
                lines.append(f"- `{failure.describe()}`")
            lines.append("")

    return "\n".join(lines)


def generate_json_report(summary: TestSummary) -> Dict[str, Any]:
    """
    Generate a JSON report.

    Args:
        summary: Test summary

    Returns:
        JSON-serializable dictionary
    """
    return {
        "timestamp": datetime.now().isoformat(),
        "duration_ms": summary.duration_ms,
        "exit_code": summary.exit_code,
        "summary": {
            "total": summary.total,
            "passed": summary.passed,
            "failed": summary.failed,
            "assertion_failures": summary.assertion_failures,
        },
        "suites": [
            {
                "name": suite.name,
                "automatic": suite.automatic,
                "status": _suite_status(suite),
                "setup_failed": suite.setup_failed,
                "duration_ms": suite.duration_ms,
                "tests": [
                    {
                        "name": result.name,
                        "passed": result.passed,
                        "duration_ms": result.duration_ms,
                        "message": result.message,
                    }
                    for result in suite.results
                ],
                "failures": [
                    {"site": failure.site, "message": failure.message}
                    for failure in suite.failures
                ],
            }
            for suite in summary.suites
        ],
    }


def save_report(summary: TestSummary, output_path: str, format: str = "markdown") -> None:
    """
    Save report to a file.

    Args:
        summary: Test summary
        output_path: Path to save the report
        format: Report format ('markdown' or 'json')
    """
    if format == "markdown":
        content = generate_markdown_report(summary)
    elif format == "json":
        content = json.dumps(generate_json_report(summary), indent=2)
    else:
        raise ValueError(f"Unsupported format: {format}")

    with open(output_path, "w") as f:
        f.write(content)
