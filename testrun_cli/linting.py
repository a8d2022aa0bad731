"""Linting issues and their escalation to a fatal error."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal

from pydantic import Field
from rich.console import Console

from testrun_cli.errors import FatalLintingIssuesError
from testrun_cli.models.base import Model


class OutputChannel(StrEnum):
    """Stream a printed message is directed to."""

    STANDARD = "standard"
    ERROR = "error"


class LintingIssue(Model):
    """Issue found while linting a project."""

    reason: str = Field(..., description="Human-readable description")
    severity: Literal["warning", "error"] = Field(..., description="Issue severity")

    def __str__(self) -> str:
        return self.reason


class Printer(ABC):
    """Destination for rendered messages."""

    @abstractmethod
    def print(
        self,
        message: str,
        *,
        output: OutputChannel = OutputChannel.STANDARD,
        color: str | None = None,
    ) -> None:
        """Print a message on the given channel with an optional color hint."""


@dataclass(frozen=True, kw_only=True)
class ConsolePrinter(Printer):
    """Printer writing to the process standard streams through rich."""

    stdout: Console = field(default_factory=Console)
    stderr: Console = field(default_factory=lambda: Console(stderr=True))

    def print(
        self,
        message: str,
        *,
        output: OutputChannel = OutputChannel.STANDARD,
        color: str | None = None,
    ) -> None:
        console = self.stderr if output is OutputChannel.ERROR else self.stdout
        console.print(
            message, style=color, markup=False, highlight=False, soft_wrap=True
        )


def render_issues(issues: Sequence[LintingIssue]) -> str:
    return "\n".join(f"  - {issue}" for issue in issues)


def print_and_raise_if_needed(
    issues: Sequence[LintingIssue], printer: Printer
) -> None:
    """Print linting issues and abort if any of them is an error.

    Warnings go to the standard channel and never fail the operation. Errors
    go to the error channel, after which FatalLintingIssuesError is raised.
    Each block is a header line followed by the issue list.

    Raises:
        FatalLintingIssuesError: If at least one issue has error severity

    """
    if not issues:
        return

    warnings = [issue for issue in issues if issue.severity == "warning"]
    errors = [issue for issue in issues if issue.severity == "error"]

    if warnings:
        printer.print("The following issues have been found:", color="yellow")
        printer.print(render_issues(warnings))

    if errors:
        prefix = "\n" if warnings else ""
        printer.print(
            f"{prefix}The following critical issues have been found:",
            output=OutputChannel.ERROR,
        )
        printer.print(render_issues(errors), output=OutputChannel.ERROR)
        raise FatalLintingIssuesError
