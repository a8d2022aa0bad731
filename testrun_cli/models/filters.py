"""Include/exclude filter used for targets and configurations."""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Generic, Self, TypeVar

from testrun_cli.selection import validate_selection

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True, kw_only=True)
class FilterList(Generic[T]):
    """Pair of disjoint include and exclude sets.

    Both sets empty means no filtering at all.
    """

    include: frozenset[T] = field(default_factory=frozenset)
    exclude: frozenset[T] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "include", frozenset(self.include))
        object.__setattr__(self, "exclude", frozenset(self.exclude))
        validate_selection(self.include, self.exclude)

    @classmethod
    def from_selection(
        cls,
        wanted: Iterable[T],
        skipped: Iterable[T],
        *,
        wanted_option: str,
        skipped_option: str,
        subject: str,
    ) -> Self:
        """Validate a wanted/skipped pair and build the filter from it."""
        include = frozenset(wanted)
        exclude = frozenset(skipped)
        validate_selection(
            include,
            exclude,
            wanted_option=wanted_option,
            skipped_option=skipped_option,
            subject=subject,
        )
        return cls(include=include, exclude=exclude)

    @property
    def is_empty(self) -> bool:
        return not self.include and not self.exclude

    def allows(self, item: T) -> bool:
        """Check whether an item passes the filter.

        A non-empty include set takes precedence over the exclude set.
        """
        if self.include:
            return item in self.include
        return item not in self.exclude

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "include": sorted(str(item) for item in self.include),
            "exclude": sorted(str(item) for item in self.exclude),
        }
