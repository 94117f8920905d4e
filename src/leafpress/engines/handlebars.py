"""Handlebars engine - renders pages and layouts with pybars.

Site structure read by the watchers (relative to the input root):

    layouts/**/*.{html,hbs,handlebars}   full page layouts with a {{> body}} slot
    partials/**/*.{html,hbs,handlebars}  partials, named by relative path
    helpers/**/*.py                      one helper per file, named by base name
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Iterator

from pybars import Compiler

from leafpress import folders
from leafpress.config import EngineOptions
from leafpress.engine import Engine, Watcher
from leafpress.engines.builtins import BUILTIN_HELPERS
from leafpress.engines.loader import load_helper
from leafpress.errors import (
    HelperLoadError,
    MissingDefaultLayoutError,
    MissingLayoutError,
    RenderError,
)

log = logging.getLogger(__name__)

GLOB_PATTERN = "/**/*.{html,hbs,handlebars}"

# Slot in a layout where the page body goes. Only the first one is filled.
BODY_PATTERN = re.compile(r"{{> ?body ?}}")

DEFAULT_LAYOUT = "default"


def partial_name(input_folder: str, file_path: str | Path) -> str:
    """Derive a partial's name from its file path.

    The name is the path relative to ``{cwd}/{input}/partials`` with
    everything from the first period on stripped, so
    ``src/partials/nav/header.hbs`` becomes ``nav/header``.

    Args:
        input_folder: The site's input root, relative to the working directory.
        file_path: Path of the partial file, absolute or relative to the
            working directory.

    Returns:
        Slash-separated partial name.
    """
    root = Path.cwd() / input_folder / folders.partials
    relative = Path(os.path.relpath(Path(file_path).absolute(), root)).as_posix()
    return re.sub(r"\..*$", "", relative)


class CompiledPartials(Mapping):
    """Read-only view of partial sources that compiles each one on first use.

    Syntax errors in a partial surface while a page is rendered, not when the
    partial is registered.
    """

    def __init__(
        self,
        compiler: Compiler,
        sources: dict[str, str],
        cache: dict[str, Callable[..., str]],
    ):
        self._compiler = compiler
        self._sources = sources
        self._cache = cache

    def __getitem__(self, name: str) -> Callable[..., str]:
        if name not in self._cache:
            self._cache[name] = self._compiler.compile(self._sources[name])
        return self._cache[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sources)

    def __len__(self) -> int:
        return len(self._sources)


class HandlebarsEngine(Engine):
    """Render Handlebars pages and layouts."""

    requires = "pybars3"

    def __init__(self, options: EngineOptions | None = None):
        super().__init__(options)

        self.compiler = Compiler()
        self.partials: dict[str, str] = {}
        self.helpers: dict[str, Callable[..., Any]] = {}
        self._compiled_partials: dict[str, Callable[..., str]] = {}

        if self.options.builtins:
            self.helpers.update(BUILTIN_HELPERS)

    @property
    def watchers(self) -> list[Watcher]:
        return [
            Watcher(
                pattern=folders.layouts + GLOB_PATTERN,
                read=True,
                update=self.update_layout,
                remove=self.remove_layout,
            ),
            Watcher(
                pattern=folders.partials + GLOB_PATTERN,
                read=True,
                update=self.update_partial,
                remove=self.remove_partial,
            ),
            Watcher(
                pattern=f"{folders.helpers}/**/*.py",
                update=self.update_helper,
                remove=self.remove_helper,
            ),
        ]

    def render(self, page_body: str, page_data: dict[str, Any], file: Any) -> str:
        """Render a Handlebars page inside its layout.

        Args:
            page_body: Handlebars template string of the page.
            page_data: Handlebars context. ``layout`` names the layout to use.
            file: Source file of the page, used to attribute errors.

        Returns:
            Rendered page, or an error page if rendering failed.
        """
        try:
            page = self._apply_layout(page_body, page_data)
            return self._render_template(page, page_data)
        except Exception as err:
            return self.error(err, file.path)

    def _apply_layout(self, page_body: str, page_data: dict[str, Any]) -> str:
        """Insert the page body into the page's layout.

        Raises:
            MissingDefaultLayoutError: If the default layout is requested and
                not registered.
            MissingLayoutError: If another named layout is not registered.
        """
        layout_name = page_data.get("layout", DEFAULT_LAYOUT)
        layout = self.layouts.get(layout_name)

        if layout is None:
            if layout_name == DEFAULT_LAYOUT:
                raise MissingDefaultLayoutError()
            raise MissingLayoutError(layout_name)

        return BODY_PATTERN.sub(lambda _: page_body, layout, count=1)

    def _render_template(self, source: str, page_data: dict[str, Any]) -> str:
        """Compile a template and execute it against page data.

        Raises:
            RenderError: If compilation or execution fails, including errors
                in partials and errors raised by helpers.
        """
        partials = CompiledPartials(
            self.compiler, self.partials, self._compiled_partials
        )
        try:
            template = self.compiler.compile(source)
            return template(page_data, helpers=self.helpers, partials=partials)
        except Exception as e:
            raise RenderError(f"{type(e).__name__}: {e}") from e

    def update_layout(self, name: str, file_path: Path, contents: str) -> None:
        self.layouts[name] = contents
        log.debug(f"Updated layout '{name}'")

    def remove_layout(self, name: str, file_path: Path) -> None:
        self.layouts.pop(name, None)
        log.debug(f"Removed layout '{name}'")

    def update_partial(self, name: str, file_path: Path, contents: str) -> None:
        """Register a partial's source under its path-derived name."""
        partial = partial_name(self.options.input, file_path)
        self.partials[partial] = contents
        self._compiled_partials.pop(partial, None)
        log.debug(f"Updated partial '{partial}'")

    def remove_partial(self, name: str, file_path: Path) -> None:
        partial = partial_name(self.options.input, file_path)
        self.partials.pop(partial, None)
        self._compiled_partials.pop(partial, None)
        log.debug(f"Removed partial '{partial}'")

    def update_helper(self, name: str, file_path: Path) -> None:
        """(Re)load a helper from disk and register it.

        The new definition replaces the old one only once it has loaded, so
        a broken edit leaves the last working version registered.
        """
        try:
            helper = load_helper(name, file_path)
        except HelperLoadError as e:
            log.warning(f"Error when loading {name}.py as a Handlebars helper.")
            log.debug(str(e))
            return

        self.helpers[name] = helper
        log.debug(f"Updated helper '{name}'")

    def remove_helper(self, name: str, file_path: Path) -> None:
        self.helpers.pop(name, None)
        log.debug(f"Removed helper '{name}'")
