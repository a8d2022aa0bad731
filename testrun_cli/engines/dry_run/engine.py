"""Engine that reports what would run without running anything."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from testrun_cli.engines.base import ExecutionEngine
from testrun_cli.engines.dry_run.config import DryRunConfig
from testrun_cli.models.request import RunRequest
from testrun_cli.models.result import RunOutcome

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class DryRunEngine(ExecutionEngine):
    """Dry-run execution engine."""

    config: DryRunConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: DryRunConfig
    ) -> AsyncGenerator["DryRunEngine", None]:
        """Create engine from its configuration."""
        yield cls(config=config)

    async def run_tests(self, request: RunRequest) -> RunOutcome:
        """Log the request and report the configured status."""
        log.info(
            "Dry run: scheme=%s project=%s device=%s os=%s retries=%d",
            request.scheme or "<all>",
            request.project_path,
            request.device or "<default>",
            request.os_version or "<default>",
            request.retry_count,
        )
        if not request.test_targets.is_empty:
            log.info("Dry run: target filter %s", request.test_targets.to_dict())
        if not request.test_configurations.is_empty:
            log.info(
                "Dry run: configuration filter %s",
                request.test_configurations.to_dict(),
            )

        return RunOutcome(
            status=self.config.status,
            duration=0.0,
            message="Dry run, no tests were executed",
        )
