"""Qwik strategy.

Inline entries are plain arrow functions; standalone files wrap the
markup in ``component$``.  Like Solid, Qwik keeps kebab-case attributes.
"""

from __future__ import annotations

from .base import MarkupStrategy, framework_registry


@framework_registry.register("qwik")
class QwikStrategy(MarkupStrategy):
    name = "qwik"
    label = "Qwik"
    file_extensions = {"typescript": ".tsx", "javascript": ".jsx"}
    icons_template = "qwik_icons.jinja2"
    component_template = "qwik_component.jinja2"
