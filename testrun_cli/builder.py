"""Build a canonical run request from raw options."""

import logging
from pathlib import Path

from testrun_cli.errors import InvalidPathError, InvalidRetryCountError
from testrun_cli.models.filters import FilterList
from testrun_cli.models.identifier import TestIdentifier
from testrun_cli.models.options import RunOptions
from testrun_cli.models.request import RunRequest
from testrun_cli.paths import resolve_path

log = logging.getLogger(__name__)


def build_run_request(options: RunOptions, cwd: Path) -> RunRequest:
    """Validate raw options and resolve them into a run request.

    Selections are validated before any path is resolved. Nothing is read
    from disk: whether the project exists is left to the execution engine.

    Args:
        options: Options as received from the command line
        cwd: Absolute working directory of the invocation

    Returns:
        Fully resolved run request

    Raises:
        InvalidRetryCountError: If the retry count is negative
        InvalidTestIdentifierError: If a test identifier is malformed
        ConflictingSelectionError: If a value is both wanted and skipped
        InvalidPathError: If a path cannot be resolved

    """
    if options.retry_count < 0:
        raise InvalidRetryCountError(options.retry_count)

    test_targets = FilterList.from_selection(
        (TestIdentifier.parse(value) for value in options.test_targets),
        (TestIdentifier.parse(value) for value in options.skip_test_targets),
        wanted_option="--test-targets",
        skipped_option="--skip-test-targets",
        subject="target identifier",
    )
    test_configurations = FilterList.from_selection(
        options.test_configurations,
        options.skip_test_configurations,
        wanted_option="--test-configurations",
        skipped_option="--skip-test-configurations",
        subject="configuration",
    )

    if not cwd.is_absolute():
        raise InvalidPathError(str(cwd), "working directory must be absolute")

    project_path = resolve_path(options.path, cwd) if options.path is not None else cwd
    result_bundle_path = (
        resolve_path(options.result_bundle_path, cwd)
        if options.result_bundle_path is not None
        else None
    )
    log.debug(
        "Resolved project path %s (result bundle: %s)",
        project_path,
        result_bundle_path,
    )

    return RunRequest(
        scheme=options.scheme,
        clean=options.clean,
        configuration=options.configuration,
        project_path=project_path,
        device=options.device,
        os_version=options.os,
        skip_ui_tests=options.skip_ui_tests,
        result_bundle_path=result_bundle_path,
        retry_count=options.retry_count,
        test_plan=options.test_plan,
        test_targets=test_targets,
        test_configurations=test_configurations,
    )
