"""Syntactic resolution of user supplied paths."""

import os
from pathlib import Path

from testrun_cli.errors import InvalidPathError


def resolve_path(raw: str, cwd: Path) -> Path:
    """Resolve a path string against the working directory.

    Resolution is purely lexical: ``.`` and ``..`` are collapsed and nothing
    is looked up on disk, so missing paths resolve fine.

    Args:
        raw: Path as given by the user, absolute or relative
        cwd: Absolute working directory relative paths are resolved against

    Returns:
        Normalized absolute path

    Raises:
        InvalidPathError: If the string is blank, contains a NUL byte or
            starts with ``~``, or if cwd is not absolute

    """
    if not raw.strip():
        raise InvalidPathError(raw, "path is empty")
    if "\0" in raw:
        raise InvalidPathError(raw, "path contains a NUL byte")
    if raw.startswith("~"):
        raise InvalidPathError(raw, "home directory expansion is not supported")
    if not cwd.is_absolute():
        raise InvalidPathError(str(cwd), "working directory must be absolute")

    return Path(os.path.normpath(cwd / raw))
