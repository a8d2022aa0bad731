"""Raw run options as received from the command line."""

from collections.abc import Sequence

from pydantic import Field

from testrun_cli.models.base import Model


class RunOptions(Model):
    """Unvalidated option bag for a single test run."""

    scheme: str | None = Field(
        default=None, description="Scheme to test (None means all testable targets)"
    )
    clean: bool = Field(default=False, description="Clean the project before testing")
    path: str | None = Field(
        default=None, description="Project directory (None means working directory)"
    )
    device: str | None = Field(default=None, description="Device to test on")
    os: str | None = Field(default=None, description="OS version to test with")
    configuration: str | None = Field(default=None, description="Build configuration")
    skip_ui_tests: bool = Field(default=False, description="Skip UI test targets")
    result_bundle_path: str | None = Field(
        default=None, description="Where to save the test result bundle"
    )
    retry_count: int = Field(
        default=0, description="Retries of a failing test (N retries, N+1 runs)"
    )
    test_plan: str | None = Field(default=None, description="Test plan to run")
    test_targets: Sequence[str] = Field(
        default_factory=list, description="Test identifiers to run"
    )
    skip_test_targets: Sequence[str] = Field(
        default_factory=list, description="Test identifiers to skip"
    )
    test_configurations: Sequence[str] = Field(
        default_factory=list, description="Test plan configurations to run"
    )
    skip_test_configurations: Sequence[str] = Field(
        default_factory=list, description="Test plan configurations to skip"
    )
