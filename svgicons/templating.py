"""Jinja2 environment for registry files and standalone components."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = None


def get_environment() -> Environment:
    global _env
    if _env is None:
        _env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
    return _env


def render(template_name: str, **context: Any) -> str:
    return get_environment().get_template(template_name).render(**context)
