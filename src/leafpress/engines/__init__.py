"""Rendering engines.

Engines are referenced by name in the site options (e.g., ``engine: handlebars``).
"""

from __future__ import annotations

from leafpress.config import EngineOptions
from leafpress.engine import Engine
from leafpress.engines.handlebars import HandlebarsEngine
from leafpress.errors import UnknownEngineError

# Engine registry
_ENGINES: dict[str, type[Engine]] = {
    "handlebars": HandlebarsEngine,
}


def get_engine(name: str) -> type[Engine]:
    """Get an engine class by its name (e.g., 'handlebars')."""
    if name in _ENGINES:
        return _ENGINES[name]
    raise UnknownEngineError(name)


def list_engines() -> list[str]:
    """List all registered engine names."""
    return list(_ENGINES.keys())


def create_engine(options: EngineOptions | None = None) -> Engine:
    """Create the engine named by the options and verify its requirements."""
    options = options or EngineOptions()
    engine = get_engine(options.engine)(options)
    engine.check_requirements()
    return engine


__all__ = ["HandlebarsEngine", "get_engine", "list_engines", "create_engine"]
