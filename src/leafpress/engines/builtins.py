"""Standard helper bundle for the Handlebars engine.

Inline helpers are called as ``helper(this, *args)``; block helpers receive
the block options as their second argument, with ``options['fn']`` rendering
the block and ``options['inverse']`` rendering its ``{{else}}`` branch.

Example:
    {{#eq page.section "blog"}}<a href="/blog">Blog</a>{{else}}Home{{/eq}}
    <title>{{upper title}}</title>
"""

import json
from typing import Any


def _block(this: Any, options: dict, condition: bool) -> Any:
    """Render the block or its inverse depending on condition."""
    if condition:
        return options["fn"](this)
    return options["inverse"](this)


def helper_eq(this, options, a, b):
    return _block(this, options, a == b)


def helper_ne(this, options, a, b):
    return _block(this, options, a != b)


def helper_gt(this, options, a, b):
    return _block(this, options, a > b)


def helper_lt(this, options, a, b):
    return _block(this, options, a < b)


def helper_and(this, options, *values):
    return _block(this, options, all(values))


def helper_or(this, options, *values):
    return _block(this, options, any(values))


def helper_contains(this, options, collection, value):
    """Render the block if value is in collection (string or sequence)."""
    return _block(this, options, collection is not None and value in collection)


def helper_upper(this, value: Any) -> str:
    return str(value).upper()


def helper_lower(this, value: Any) -> str:
    return str(value).lower()


def helper_capitalize(this, value: Any) -> str:
    return str(value).capitalize()


def helper_truncate(this, value: Any, length: int, suffix: str = "") -> str:
    """Cut value down to length characters, appending suffix if cut."""
    text = str(value)
    length = int(length)
    if len(text) <= length:
        return text
    return text[:length] + suffix


def helper_replace(this, value: Any, old: str, new: str) -> str:
    return str(value).replace(old, new)


def helper_join(this, items: Any, separator: str = ", ") -> str:
    if items is None:
        return ""
    return separator.join(str(item) for item in items)


def helper_first(this, items: Any) -> Any:
    return items[0] if items else None


def helper_last(this, items: Any) -> Any:
    return items[-1] if items else None


def helper_length(this, value: Any) -> int:
    """Return length of string, list, or dict (0 for None)."""
    return len(value) if value is not None else 0


def helper_default(this, value: Any, default: Any) -> Any:
    """Return default if value is None or empty."""
    return value if value not in (None, "") else default


def helper_json(this, value: Any) -> str:
    return json.dumps(value)


# Registry of bundled helpers
BUILTIN_HELPERS: dict[str, Any] = {
    "eq": helper_eq,
    "ne": helper_ne,
    "gt": helper_gt,
    "lt": helper_lt,
    "and": helper_and,
    "or": helper_or,
    "contains": helper_contains,
    "upper": helper_upper,
    "lower": helper_lower,
    "capitalize": helper_capitalize,
    "truncate": helper_truncate,
    "replace": helper_replace,
    "join": helper_join,
    "first": helper_first,
    "last": helper_last,
    "length": helper_length,
    "default": helper_default,
    "json": helper_json,
}
