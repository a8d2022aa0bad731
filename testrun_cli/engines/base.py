"""Abstract base class for test execution engines."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from testrun_cli.models.request import RunRequest
from testrun_cli.models.result import RunOutcome


@dataclass(frozen=True, kw_only=True)
class ExecutionEngine(ABC):
    """Abstract base for engines that actually run tests.

    Engines own process invocation, device provisioning, the retry loop and
    result bundle generation. They receive a request that has already been
    validated and resolved, and must not keep it after returning.
    """

    @abstractmethod
    async def run_tests(self, request: RunRequest) -> RunOutcome:
        """Run the tests described by the request.

        Args:
            request: Fully resolved run request

        Returns:
            Outcome of the run; test failures and toolchain errors are
            reported through its status rather than raised

        """
