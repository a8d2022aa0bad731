"""Dry-run engine module."""

from testrun_cli.engines.dry_run.config import DryRunConfig
from testrun_cli.engines.dry_run.engine import DryRunEngine
from testrun_cli.engines.dry_run.manifest import dry_run_manifest

__all__ = ["DryRunConfig", "DryRunEngine", "dry_run_manifest"]
