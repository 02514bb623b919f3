"""Preact strategy."""

from __future__ import annotations

from .base import JsxStrategy, framework_registry


@framework_registry.register("preact")
class PreactStrategy(JsxStrategy):
    """Same component shape as React; ``forwardRef`` comes from ``preact/compat``."""

    name = "preact"
    label = "Preact"
    forward_ref_import_source = "preact/compat"
    icons_template = "preact_icons.jinja2"
    component_template = "preact_component.jinja2"
