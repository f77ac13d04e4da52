"""Command-line interface for the suite harness."""

import json
import os
import sys
from typing import Optional

import click

from .config import load_modules, load_suites_file
from .errors import HarnessError, SuiteNotFoundError
from .logs import init_logging
from .registry import default_registry
from .report import generate_json_report, save_report
from .runner import SuiteRunner
from .types import TestSummary


def print_summary(summary: TestSummary, output_format: str = "text") -> None:
    """
    Print run results summary.

    Args:
        summary: Test summary to print
        output_format: Output format ('text' or 'json')
    """
    if output_format == "json":
        print(json.dumps(generate_json_report(summary), indent=2))
        return

    print()
    print("=" * 70)
    print(" Suite Results ".center(70))
    print("=" * 70)

    for suite in summary.suites:
        kind = "" if suite.automatic else " (manual)"
        print(f"\n{suite.name}{kind}:")
        print("-" * 70)

        if suite.setup_failed:
            print("  \033[91m✗ before-all failed, tests skipped\033[0m")

        for result in suite.results:
            status = "✓" if result.passed else "✗"
            color = "\033[92m" if result.passed else "\033[91m"
            reset = "\033[0m"

            print(f"  {color}{status}{reset} {result.name} ({result.duration_ms}ms)")

            if result.message:
                print(f"    \033[90m{result.message}\033[0m")

    print()
    print("-" * 70)

    passed_color = "\033[92m"
    failed_color = "\033[91m" if summary.exit_code else "\033[90m"
    reset = "\033[0m"

    print(
        f"  Suites: {len(summary.suites)} | "
        f"Tests: {summary.total} | "
        f"{passed_color}{summary.passed} passed{reset} | "
        f"{failed_color}{summary.assertion_failures} assertion(s) failed{reset} | "
        f"Duration: {summary.duration_ms}ms"
    )

    print()
    if summary.exit_code == 0:
        print(f"  {passed_color}All suites passed! ✓{reset}")
    else:
        print(f"  {failed_color}Failed: {', '.join(summary.failed_suites)}{reset}")

    print("=" * 70)
    print()


def _extend_path(suites_file: Optional[str]) -> None:
    """Make modules beside the working directory and the suites file importable."""
    dirs = [os.getcwd()]
    if suites_file:
        dirs.append(os.path.dirname(os.path.abspath(suites_file)))
    for directory in reversed(dirs):
        if directory not in sys.path:
            sys.path.insert(0, directory)


def _load(modules: tuple, suites_file: Optional[str]) -> None:
    _extend_path(suites_file)
    try:
        load_modules(modules)
        if suites_file:
            load_suites_file(suites_file)
    except HarnessError as e:
        raise click.UsageError(str(e)) from e


module_option = click.option(
    "--module",
    "-m",
    "modules",
    multiple=True,
    help="Module to import before running; importing it registers its suites",
)
suites_file_option = click.option(
    "--suites-file",
    envvar="SUITE_HARNESS_SUITES_FILE",
    type=click.Path(dir_okay=False),
    help="YAML file declaring suites",
)


@click.group()
@click.option("--log-level", envvar="SUITE_HARNESS_LOG_LEVEL", default="INFO", help="Log level")
@click.option("--log-file", envvar="SUITE_HARNESS_LOG_FILE", help="Also write the log trail to this file")
def cli(log_level: str, log_file: Optional[str]) -> None:
    """Run registered test suites."""
    init_logging(level=log_level, log_file=log_file, force=True)


@cli.command()
@module_option
@suites_file_option
@click.option(
    "--suite",
    envvar="SUITE_HARNESS_SUITE",
    help="Run only this suite, even if it is a manual one",
)
@click.option(
    "--output",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--report", help="Path to save report (markdown or json based on extension)")
def run(
    modules: tuple,
    suites_file: Optional[str],
    suite: Optional[str],
    output: str,
    report: Optional[str],
) -> None:
    """Run all automatic suites, or the one given by --suite."""
    _load(modules, suites_file)

    try:
        summary = SuiteRunner().run(suite)
    except SuiteNotFoundError as e:
        raise click.UsageError(str(e)) from e

    print_summary(summary, output)

    if report:
        report_format = "json" if report.endswith(".json") else "markdown"
        save_report(summary, report, report_format)
        click.echo(f"\n✓ Report saved to {report}", err=True)

    sys.exit(summary.exit_code)


@cli.command(name="list")
@module_option
@suites_file_option
def list_suites(modules: tuple, suites_file: Optional[str]) -> None:
    """List registered suites in run order."""
    _load(modules, suites_file)

    registry = default_registry()
    if not len(registry):
        click.echo("No suites registered")
        return

    for suite in registry:
        kind = "automatic" if suite.automatic else "manual"
        click.echo(f"{suite.name}\t{kind}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
