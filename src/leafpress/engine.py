"""Base class for rendering engines.

An engine owns the layouts of a site and knows how to turn a page body into
final HTML. The file watcher drives it through the engine's ``watchers``:
each binding names a glob pattern (relative to the input root), whether file
contents should be read before the hook is called, and the update/remove
hooks themselves.
"""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path
from typing import Any, Callable, Optional

from leafpress.config import EngineOptions
from leafpress.errors import EngineRequirementError

log = logging.getLogger(__name__)

ERROR_PAGE = """<!DOCTYPE html>
<html>
  <head><title>Leafpress error</title></head>
  <body>
    <h1>Error rendering {path}</h1>
    <pre>{message}</pre>
  </body>
</html>
"""


@dataclass
class SourceFile:
    """A page source file handed over by the build pipeline."""

    path: Path


@dataclass
class Watcher:
    """Binding between a watched glob pattern and an engine's hooks.

    ``update`` is called as ``update(name, file_path, contents)`` when
    ``read`` is true and as ``update(name, file_path)`` otherwise.
    ``remove`` is called as ``remove(name, file_path)``.
    """

    pattern: str
    update: Callable[..., None]
    remove: Callable[[str, Path], None]
    read: bool = False


class Engine(ABC):
    """Base class for rendering engines."""

    # Distribution name of the templating library the engine needs
    requires: Optional[str] = None

    def __init__(self, options: EngineOptions | None = None):
        self.options = options or EngineOptions()
        self.layouts: dict[str, str] = {}

    @property
    def watchers(self) -> list[Watcher]:
        """Watcher bindings for this engine."""
        return []

    def check_requirements(self) -> None:
        """Verify that the engine's templating library is installed.

        Raises:
            EngineRequirementError: If the required distribution is missing.
        """
        if not self.requires:
            return
        try:
            version = metadata.version(self.requires)
        except metadata.PackageNotFoundError as e:
            raise EngineRequirementError(self.requires) from e
        log.debug(f"{type(self).__name__} using {self.requires} {version}")

    @abstractmethod
    def render(self, page_body: str, page_data: dict[str, Any], file: Any) -> str:
        """Render a page body inside its layout."""
        ...

    def error(self, err: Exception, file_path: str | Path) -> str:
        """Report a render error and build the page emitted in its place.

        Args:
            err: The error raised while rendering.
            file_path: Path of the page that failed.

        Returns:
            An HTML page describing the error.
        """
        log.error(f"Error rendering {file_path}: {err}")
        return ERROR_PAGE.format(
            path=html.escape(str(file_path), quote=False),
            message=html.escape(str(err), quote=False),
        )
