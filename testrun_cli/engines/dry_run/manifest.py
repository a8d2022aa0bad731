"""Dry-run engine manifest."""

from testrun_cli.engines.dry_run.config import DryRunConfig
from testrun_cli.engines.dry_run.engine import DryRunEngine
from testrun_cli.engines.manifest import EngineManifest

dry_run_manifest = EngineManifest(
    config_cls=DryRunConfig,
    engine_factory=DryRunEngine.from_config,
)
