"""Test runner handing a resolved request to an execution engine."""

import asyncio
import logging
from dataclasses import dataclass

from testrun_cli.engines.base import ExecutionEngine
from testrun_cli.models.request import RunRequest
from testrun_cli.models.result import RunOutcome

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestRunner:
    """Dispatches a run request to a single engine."""

    __test__ = False

    engine: ExecutionEngine

    async def run(self, request: RunRequest) -> RunOutcome:
        """Run the request on the configured engine.

        Args:
            request: Fully resolved run request

        Returns:
            Outcome from the engine, or an error outcome if the engine raised

        """
        log.info(
            "Dispatching test run for %s at %s",
            request.scheme or "all testable targets",
            request.project_path,
        )
        started = asyncio.get_running_loop().time()

        try:
            outcome = await self.engine.run_tests(request)
        except Exception as e:
            log.error("Test execution failed: %s", e, exc_info=e)
            return RunOutcome(
                status="error",
                duration=asyncio.get_running_loop().time() - started,
                message=str(e),
            )

        log.info(
            "Test run completed: status=%s duration=%.1fs",
            outcome.status,
            outcome.duration,
        )
        return outcome
