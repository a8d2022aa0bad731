"""Test identifier referencing a target, class or method."""

import re
from typing import Self

from pydantic import Field

from testrun_cli.errors import InvalidTestIdentifierError
from testrun_cli.models.base import Model

SEPARATORS = re.compile(r"[/:]")


class TestIdentifier(Model):
    """Reference to a test target, optionally narrowed to a class and method."""

    __test__ = False

    target: str = Field(..., description="Test target name")
    class_name: str | None = Field(default=None, description="Test class name")
    method_name: str | None = Field(default=None, description="Test method name")

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse ``Target``, ``Target/Class`` or ``Target/Class/method``.

        Both ``/`` and ``:`` separate components.

        Raises:
            InvalidTestIdentifierError: If the string is blank, has an empty
                component or has more than three components

        """
        if not value.strip():
            raise InvalidTestIdentifierError(value, "identifier is empty")

        components = [component.strip() for component in SEPARATORS.split(value)]
        if len(components) > 3:
            raise InvalidTestIdentifierError(
                value, "expected at most target, class and method"
            )
        if any(not component for component in components):
            raise InvalidTestIdentifierError(value, "identifier has an empty component")

        target, *rest = components
        return cls(
            target=target,
            class_name=rest[0] if rest else None,
            method_name=rest[1] if len(rest) > 1 else None,
        )

    def __str__(self) -> str:
        return "/".join(
            part
            for part in (self.target, self.class_name, self.method_name)
            if part is not None
        )
