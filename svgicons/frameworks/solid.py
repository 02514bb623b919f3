"""Solid strategy.

Solid renders real DOM attributes, so the normalized kebab-case markup
is used as-is.  Refs are ordinary props and pass through the spread.
"""

from __future__ import annotations

from .base import MarkupStrategy, framework_registry


@framework_registry.register("solid")
class SolidStrategy(MarkupStrategy):
    name = "solid"
    label = "Solid"
    file_extensions = {"typescript": ".tsx", "javascript": ".jsx"}
    icons_template = "solid_icons.jinja2"
    component_template = "solid_component.jinja2"
