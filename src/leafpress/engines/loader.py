"""Helper source loading.

Helpers are plain Python files under the site's helpers folder. A file named
``shout.py`` must define a callable named ``shout``:

    def shout(this, text):
        return text.upper() + "!"

Every load reads the file's bytes from disk and compiles them into a fresh
module object. Nothing is taken from ``sys.modules`` or the bytecode cache,
so an edit is picked up even when it keeps the file's size and modification
second.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from typing import Any, Callable

from leafpress.errors import HelperLoadError

# Prefix for module names given to loaded helper files
HELPER_MODULE_PREFIX = "leafpress_helpers"


def load_helper(name: str, file_path: str | Path) -> Callable[..., Any]:
    """Load the helper callable defined in a source file.

    Args:
        name: Helper name, which is also the attribute the file must define.
        file_path: Path to the helper's source file.

    Returns:
        The helper callable.

    Raises:
        HelperLoadError: If the file cannot be read, decoded or executed, or
            does not define a callable under ``name``.
    """
    path = Path(file_path)

    spec = importlib.util.spec_from_file_location(
        f"{HELPER_MODULE_PREFIX}.{name}", path
    )
    if not spec or not spec.loader:
        raise HelperLoadError(name, path, "not a Python source file")

    module = importlib.util.module_from_spec(spec)

    try:
        data = spec.loader.get_data(str(path))
    except OSError as e:
        raise HelperLoadError(name, path, str(e)) from e

    try:
        # Compiled from the bytes just read; coding cookies are honoured
        code = spec.loader.source_to_code(data, str(path))
        exec(code, module.__dict__)
    except Exception as e:
        raise HelperLoadError(name, path, f"{type(e).__name__}: {e}") from e

    helper = getattr(module, name, None)
    if not callable(helper):
        raise HelperLoadError(name, path, f"no callable named '{name}'")

    return helper
