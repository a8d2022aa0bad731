"""Canonical, fully resolved test run request."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from testrun_cli.models.filters import FilterList
from testrun_cli.models.identifier import TestIdentifier


@dataclass(frozen=True, kw_only=True)
class RunRequest:
    """Everything an execution engine needs for one test invocation.

    Optional fields left as None let the engine pick its own default.
    """

    project_path: Path
    scheme: str | None = None
    clean: bool = False
    configuration: str | None = None
    device: str | None = None
    os_version: str | None = None
    skip_ui_tests: bool = False
    result_bundle_path: Path | None = None
    retry_count: int = 0
    test_plan: str | None = None
    test_targets: FilterList[TestIdentifier] = field(default_factory=FilterList)
    test_configurations: FilterList[str] = field(default_factory=FilterList)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON serializable view of the request."""
        return {
            "scheme": self.scheme,
            "clean": self.clean,
            "configuration": self.configuration,
            "project_path": str(self.project_path),
            "device": self.device,
            "os_version": self.os_version,
            "skip_ui_tests": self.skip_ui_tests,
            "result_bundle_path": (
                str(self.result_bundle_path) if self.result_bundle_path else None
            ),
            "retry_count": self.retry_count,
            "test_plan": self.test_plan,
            "test_targets": self.test_targets.to_dict(),
            "test_configurations": self.test_configurations.to_dict(),
        }
