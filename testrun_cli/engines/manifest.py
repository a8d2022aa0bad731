"""Engine manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from testrun_cli.engines.base import ExecutionEngine

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class EngineManifest(Generic[ConfigT]):
    """Manifest describing an execution engine plugin.

    The manifest contains references to the configuration class and the
    engine factory function for lazy loading of engines based on their key.
    """

    config_cls: type[ConfigT]
    engine_factory: Callable[[ConfigT], AbstractAsyncContextManager[ExecutionEngine]]
