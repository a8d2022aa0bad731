"""Errors raised while preparing a test run or reporting issues."""

from collections.abc import Iterable
from enum import StrEnum


class ErrorCategory(StrEnum):
    """How the hosting process should react to an error."""

    RECOVERABLE = "recoverable"
    ABORT = "abort"


class TestRunError(Exception):
    """Base class for user-facing errors."""

    __test__ = False

    category: ErrorCategory = ErrorCategory.RECOVERABLE


class ConflictingSelectionError(TestRunError):
    """Raised when the same value is both wanted and skipped."""

    def __init__(
        self,
        conflicts: Iterable[object],
        *,
        wanted_option: str = "include",
        skipped_option: str = "exclude",
        subject: str = "value",
    ) -> None:
        self.conflicts = tuple(sorted(conflicts, key=str))
        self.wanted_option = wanted_option
        self.skipped_option = skipped_option
        self.subject = subject
        specified = ", ".join(str(conflict) for conflict in self.conflicts)
        super().__init__(
            f"The {subject} cannot be specified both in {wanted_option} "
            f"and {skipped_option} (were specified: {specified})"
        )


class InvalidPathError(TestRunError):
    """Raised when a path string cannot be resolved."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path '{path}': {reason}")


class InvalidRetryCountError(TestRunError):
    """Raised when a negative retry count is requested."""

    def __init__(self, retry_count: int) -> None:
        self.retry_count = retry_count
        super().__init__(f"Retry count must be zero or greater, got {retry_count}")


class InvalidTestIdentifierError(TestRunError):
    """Raised when a test identifier string is malformed."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid test identifier '{value}': {reason}")


class InvalidInputError(TestRunError):
    """Raised when a configuration or input file cannot be read or parsed."""


class EngineNotFoundError(TestRunError):
    """Raised when no execution engine is registered under a key."""


class FatalLintingIssuesError(TestRunError):
    """Raised after error-level linting issues have been printed."""

    category = ErrorCategory.ABORT

    def __init__(self) -> None:
        super().__init__("Fatal linting issues found")


def exit_code_for(error: TestRunError) -> int:
    """Map an error to the process exit status."""
    return 1 if error.category is ErrorCategory.ABORT else 2
