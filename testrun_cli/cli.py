"""CLI entry point for triggering test runs."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from testrun_cli.builder import build_run_request
from testrun_cli.engines.loading import load_engine_manifest
from testrun_cli.engines.manifest import EngineManifest
from testrun_cli.errors import InvalidInputError, TestRunError, exit_code_for
from testrun_cli.linting import (
    ConsolePrinter,
    LintingIssue,
    Printer,
    print_and_raise_if_needed,
)
from testrun_cli.models.options import RunOptions
from testrun_cli.models.request import RunRequest
from testrun_cli.models.result import RunOutcome
from testrun_cli.runner import TestRunner

PACKAGE_NAME = "testrun-cli"

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "error": "❗",
}

ISSUES_ADAPTER = TypeAdapter(list[LintingIssue])


def log_outcome(log: logging.Logger, outcome: RunOutcome) -> None:
    """Log a one line summary of the run outcome."""
    symbol = STATUS_SYMBOLS.get(outcome.status, "?")
    log.info("%s Test run %s (%.2fs)", symbol, outcome.status, outcome.duration)
    if outcome.message:
        log.info("  Message: %s", outcome.message)


def format_output(request: RunRequest, outcome: RunOutcome) -> dict[str, Any]:
    """Format the request and its outcome for JSON output."""
    return {
        "request": request.to_dict(),
        "status": outcome.status,
        "duration": outcome.duration,
        "message": outcome.message,
    }


def load_engine_config(
    manifest: EngineManifest[Any], engine_config_json: str
) -> BaseModel:
    """Parse and validate the JSON configuration of an engine."""
    try:
        config_dict = json.loads(engine_config_json)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Engine configuration is not valid JSON: {e}") from e
    if not isinstance(config_dict, dict):
        raise InvalidInputError("Engine configuration must be a JSON object")

    try:
        return manifest.config_cls(**config_dict)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid engine configuration: {e}") from e


async def run(
    options: RunOptions,
    cwd: Path,
    engine_key: str,
    engine_config_json: str = "{}",
) -> int:
    """Validate options, run tests and return exit code."""
    log = logging.getLogger("testrun_cli")

    request = build_run_request(options, cwd)

    log.info("Loading execution engine: %s", engine_key)
    manifest = load_engine_manifest(engine_key)

    config = load_engine_config(manifest, engine_config_json)

    async with manifest.engine_factory(config) as engine:
        outcome = await TestRunner(engine=engine).run(request)

    log_outcome(log, outcome)
    print(json.dumps(format_output(request, outcome), indent=2))

    return 0 if outcome.status == "success" else 1


def report_issues(issues_path: Path, printer: Printer) -> int:
    """Print linting issues from a JSON file and return exit code."""
    try:
        issues = ISSUES_ADAPTER.validate_json(issues_path.read_bytes())
    except OSError as e:
        raise InvalidInputError(f"Cannot read issues file {issues_path}: {e}") from e
    except ValidationError as e:
        raise InvalidInputError(f"Invalid issues file {issues_path}: {e}") from e
    print_and_raise_if_needed(issues, printer)
    return 0


def get_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "unknown"


def options_from_args(args: argparse.Namespace) -> RunOptions:
    """Collect parsed test arguments into run options."""
    return RunOptions(
        scheme=args.scheme,
        clean=args.clean,
        path=args.path,
        device=args.device,
        os=args.os,
        configuration=args.configuration,
        skip_ui_tests=args.skip_ui_tests,
        result_bundle_path=args.result_bundle_path,
        retry_count=args.retry_count,
        test_plan=args.test_plan,
        test_targets=args.test_targets,
        skip_test_targets=args.skip_test_targets,
        test_configurations=args.test_configurations,
        skip_test_configurations=args.skip_test_configurations,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="testrun", description="Validate run options and trigger test runs"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    test = subparsers.add_parser("test", help="Tests a project")
    test.add_argument(
        "scheme",
        nargs="?",
        help="Scheme to test. By default all testable targets are tested",
    )
    test.add_argument(
        "-c",
        "--clean",
        action="store_true",
        help="Clean the project before testing it",
    )
    test.add_argument(
        "-p", "--path", help="Directory that contains the project to be tested"
    )
    test.add_argument("-d", "--device", help="Test on a specific device")
    test.add_argument("-o", "--os", help="Test with a specific version of the OS")
    test.add_argument(
        "-C", "--configuration", help="Configuration to use when testing the scheme"
    )
    test.add_argument(
        "--skip-ui-tests",
        action="store_true",
        help="Skip testing UI test targets",
    )
    test.add_argument(
        "-T",
        "--result-bundle-path",
        help="Path where the test result bundle will be saved",
    )
    test.add_argument(
        "--retry-count",
        type=int,
        default=0,
        help="Retry failing tests up to N times (N=1 runs a test at most twice)",
    )
    test.add_argument("--test-plan", help="Test plan to run")
    test.add_argument(
        "--test-targets",
        nargs="*",
        default=[],
        metavar="IDENTIFIER",
        help="Test identifiers to test (Target, Target/Class or Target/Class/method)",
    )
    test.add_argument(
        "--skip-test-targets",
        nargs="*",
        default=[],
        metavar="IDENTIFIER",
        help="Test identifiers to skip",
    )
    test.add_argument(
        "--test-configurations",
        nargs="*",
        default=[],
        metavar="NAME",
        help="Test plan configurations to test",
    )
    test.add_argument(
        "--skip-test-configurations",
        nargs="*",
        default=[],
        metavar="NAME",
        help="Test plan configurations to skip",
    )
    test.add_argument(
        "--engine",
        default="dry-run",
        help="Execution engine key (default: dry-run)",
    )
    test.add_argument(
        "--engine-config",
        default="{}",
        help="JSON configuration for the execution engine",
    )

    lint = subparsers.add_parser(
        "lint-report", help="Print linting issues and fail on errors"
    )
    lint.add_argument(
        "issues_file",
        type=Path,
        help="JSON file with a list of {reason, severity} issues",
    )

    subparsers.add_parser("version", help="Print the installed version")

    return parser


def dispatch(args: argparse.Namespace, cwd: Path) -> int:
    """Run the selected subcommand and return exit code."""
    if args.command == "test":
        return asyncio.run(
            run(
                options=options_from_args(args),
                cwd=cwd,
                engine_key=args.engine,
                engine_config_json=args.engine_config,
            )
        )
    if args.command == "lint-report":
        return report_issues(args.issues_file, ConsolePrinter())

    print(get_version())
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        exit_code = dispatch(args, Path.cwd())
    except TestRunError as e:
        logging.getLogger("testrun_cli").error("%s", e)
        exit_code = exit_code_for(e)
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
