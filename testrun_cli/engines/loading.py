"""Loading of execution engines from entry points."""

from importlib.metadata import entry_points
from typing import Any

from testrun_cli.engines.manifest import EngineManifest
from testrun_cli.errors import EngineNotFoundError

ENTRY_POINT_GROUP = "testrun_cli.engines"


def load_engine_manifest(key: str) -> EngineManifest[Any]:
    """Load an engine manifest by key.

    Args:
        key: The engine key as registered in pyproject.toml (e.g., "dry-run")

    Returns:
        The engine manifest instance

    Raises:
        EngineNotFoundError: If no engine with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: EngineManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise EngineNotFoundError(
        f"Engine '{key}' not found. Available engines: {available}"
    )
