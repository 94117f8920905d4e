"""Leafpress - pluggable rendering engines for static sites."""

from leafpress.config import EngineOptions, load_options
from leafpress.engine import Engine, SourceFile, Watcher
from leafpress.engines import HandlebarsEngine, create_engine, get_engine
from leafpress.errors import (
    EngineRequirementError,
    HelperLoadError,
    LeafpressError,
    MissingDefaultLayoutError,
    MissingLayoutError,
    RenderError,
    UnknownEngineError,
)

__all__ = [
    "EngineOptions",
    "load_options",
    "Engine",
    "SourceFile",
    "Watcher",
    "HandlebarsEngine",
    "create_engine",
    "get_engine",
    "LeafpressError",
    "MissingDefaultLayoutError",
    "MissingLayoutError",
    "RenderError",
    "HelperLoadError",
    "EngineRequirementError",
    "UnknownEngineError",
]
