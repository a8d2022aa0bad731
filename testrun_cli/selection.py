"""Validation of wanted/skipped selections."""

from collections.abc import Hashable, Iterable
from typing import TypeVar

from testrun_cli.errors import ConflictingSelectionError

T = TypeVar("T", bound=Hashable)


def validate_selection(
    wanted: Iterable[T],
    skipped: Iterable[T],
    *,
    wanted_option: str = "include",
    skipped_option: str = "exclude",
    subject: str = "value",
) -> None:
    """Ensure no value is both wanted and skipped.

    Args:
        wanted: Values the caller wants to run
        skipped: Values the caller wants to skip
        wanted_option: Option name of the wanted list, used in the message
        skipped_option: Option name of the skipped list, used in the message
        subject: What the values are (e.g., "target identifier")

    Raises:
        ConflictingSelectionError: If the lists share at least one value

    """
    conflicts = set(wanted).intersection(skipped)
    if conflicts:
        raise ConflictingSelectionError(
            conflicts,
            wanted_option=wanted_option,
            skipped_option=skipped_option,
            subject=subject,
        )
