"""Leafpress Exceptions

Custom exceptions raised by rendering engines.
"""

from __future__ import annotations

from pathlib import Path


class LeafpressError(Exception):
    """Base exception for all leafpress errors."""

    pass


class MissingDefaultLayoutError(LeafpressError):
    """Raised when a page uses the default layout and none is registered."""

    def __init__(self) -> None:
        super().__init__('You must have a layout named "default".')


class MissingLayoutError(LeafpressError):
    """Raised when a page names a layout that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'No layout named "{name}" exists.')


class RenderError(LeafpressError):
    """Raised when a template fails to compile or execute."""

    pass


class HelperLoadError(LeafpressError):
    """Raised when a helper source file cannot be loaded."""

    def __init__(self, name: str, file_path: str | Path, reason: str = ""):
        self.name = name
        self.file_path = Path(file_path)
        message = f"Could not load helper '{name}' from {file_path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EngineRequirementError(LeafpressError):
    """Raised when an engine's templating library is not installed."""

    def __init__(self, requirement: str):
        self.requirement = requirement
        super().__init__(f"Engine requires '{requirement}', which is not installed")


class UnknownEngineError(LeafpressError):
    """Raised when no engine is registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown engine: {name}")
