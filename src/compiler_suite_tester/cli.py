"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from compiler_suite_tester.errors import TesterError
from compiler_suite_tester.run_execution import (
    EXIT_HARNESS_ERROR,
    EXIT_TESTS_FAILED,
    SuiteRunRequest,
    run_test_suite,
)
from compiler_suite_tester.test_execution import OutputFormat, RunnerOptions
from compiler_suite_tester.test_modes import all_modes, handlers_for

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="compiler-suite-tester")
def cli() -> None:
    """Fixture-driven test-suite runner for a compiler binary."""


@cli.command(name="modes")
def list_modes() -> None:
    """Show every test mode with its fixture root and extensions."""
    for mode in all_modes():
        handlers = handlers_for(mode)
        headers = "structured" if handlers.uses_structured_headers else "directives"
        extensions = ",".join(handlers.extensions)
        click.echo(f"{mode.value}\t{handlers.discovery_root}/\t{extensions}\t{headers}")


@cli.command(name="run")
@click.argument("filters", nargs=-1)
@click.option(
    "--binary",
    "binary_path",
    required=True,
    envvar="TESTER_BINARY",
    type=click.Path(path_type=str),
    help="Path to the compiler binary under test",
)
@click.option(
    "--root",
    "root_dir",
    required=False,
    envvar="TESTER_ROOT",
    type=click.Path(path_type=str, file_okay=False),
    help="Project root holding the fixture trees (default: nearest ancestor with fixtures)",
)
@click.option(
    "--mode",
    "mode_override",
    required=False,
    help="Run a single mode (overrides TESTER_MODE): ui, solc-solidity or solc-yul",
)
@click.option(
    "--bless",
    is_flag=True,
    default=False,
    help="Overwrite expected outputs instead of comparing (also enabled by TESTER_BLESS)",
)
@click.option(
    "--test-threads",
    type=click.IntRange(min=1),
    envvar="TESTER_TEST_THREADS",
    help="Number of worker threads (default: logical processors)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([output_format.value for output_format in OutputFormat]),
    default=None,
    help="Console output format (default: terse)",
)
@click.option("--list", "list_only", is_flag=True, help="List selected tests without running")
@click.option("--exact", is_flag=True, help="Match filters and --skip against whole names")
@click.option("--skip", multiple=True, help="Skip tests whose name contains this text")
@click.option("--ignored", is_flag=True, help="Run only ignored tests")
@click.option("--include-ignored", is_flag=True, help="Run ignored and non-ignored tests")
@click.option("-v", "--verbose", is_flag=True, help="Log build and scheduling details")
def run_tests(  # pylint: disable=too-many-arguments
    filters: tuple[str, ...],
    binary_path: str,
    root_dir: str | None,
    mode_override: str | None,
    bless: bool,
    test_threads: int | None,
    output_format: str | None,
    list_only: bool,
    exact: bool,
    skip: tuple[str, ...],
    ignored: bool,
    include_ignored: bool,
    verbose: bool,
) -> None:
    """Discover, build and execute the fixture test suite."""
    if ignored and include_ignored:
        raise click.UsageError("--ignored and --include-ignored cannot be combined")
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)

    options = RunnerOptions(
        filters=filters,
        skip=skip,
        exact=exact,
        ignored=ignored,
        include_ignored=include_ignored,
        test_threads=test_threads,
        output_format=OutputFormat(output_format) if output_format else OutputFormat.TERSE,
        list_only=list_only,
    )
    try:
        outcome = run_test_suite(
            SuiteRunRequest(
                binary_path=binary_path,
                root_dir=root_dir,
                options=options,
                mode_override=mode_override,
                bless=bless,
                verbose=verbose,
            )
        )
    except TesterError as exc:
        raise CliError(str(exc)) from exc
    if outcome.exit_code == EXIT_TESTS_FAILED:
        click.echo("Some tests failed", err=True)
    click.get_current_context().exit(outcome.exit_code)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(f"error: {exc}", err=True)
        return EXIT_HARNESS_ERROR
    except click.ClickException as exc:
        exc.show()
        return EXIT_HARNESS_ERROR
    except click.Abort:
        click.echo("Aborted.", err=True)
        return EXIT_HARNESS_ERROR
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
