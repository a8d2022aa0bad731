"""Tests for engine loading module."""

import pytest

from testrun_cli.engines.dry_run import dry_run_manifest
from testrun_cli.engines.loading import load_engine_manifest
from testrun_cli.errors import EngineNotFoundError


def test_load_engine_manifest_returns_manifest() -> None:
    """Loads engine manifest by key."""
    manifest = load_engine_manifest("dry-run")

    assert manifest is dry_run_manifest


def test_load_engine_manifest_raises_for_unknown_engine() -> None:
    """Raises EngineNotFoundError for unknown engine key."""
    with pytest.raises(EngineNotFoundError) as exc_info:
        load_engine_manifest("unknown-engine")

    assert "unknown-engine" in str(exc_info.value)
    assert "Available engines" in str(exc_info.value)
