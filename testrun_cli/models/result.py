"""Models for test run outcomes."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class RunOutcome:
    """Outcome reported by an execution engine for one run request."""

    status: Literal["success", "failure", "error"]
    duration: float
    message: str | None = None
