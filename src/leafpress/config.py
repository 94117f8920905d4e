"""Configuration parsing for engine options.

Options may be built in code or loaded from a YAML file:

    input: src
    builtins: true
    engine: handlebars
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class EngineOptions(BaseModel):
    """Options shared by all rendering engines."""

    input: str = Field(default="src", description="Root content directory")
    builtins: bool = Field(
        default=True, description="Register the standard helper bundle"
    )
    engine: str = Field(default="handlebars", description="Rendering engine name")


def load_options(path: Path) -> EngineOptions:
    """Load engine options from a YAML file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return EngineOptions(**data)
