"""React strategy."""

from __future__ import annotations

from .base import JsxStrategy, framework_registry


@framework_registry.register("react")
class ReactStrategy(JsxStrategy):
    """React function components written as JSX.

    With the ``forwardRef`` option every component is wrapped in
    ``React.forwardRef`` and receives ``ref={ref}`` on its root.
    """

    name = "react"
    label = "React"
    forward_ref_import_source = "react"
    icons_template = "react_icons.jinja2"
    component_template = "react_component.jinja2"
