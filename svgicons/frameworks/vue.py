"""Vue strategy.

Vue icons are functional components built from ``h()`` render calls
rather than templates, so the registry stays a plain ``.ts``/``.js``
module.  See :mod:`svgicons.calltree` for the call emitter.
"""

from __future__ import annotations

import logging

from ..calltree import svg_to_calls
from ..errors import MarkupError, TransformError
from ..model import A11Y_TITLE
from ..svg import find_svg_markup, get_extra_attrs, optimize_markup, to_readable_name
from ..templating import render
from .base import FrameworkStrategy, framework_registry

logger = logging.getLogger(__name__)


@framework_registry.register("vue")
class VueStrategy(FrameworkStrategy):
    name = "vue"
    label = "Vue"
    icons_template = "vue_icons.jinja2"
    component_template = "vue_component.jinja2"

    def default_options(self):
        return {"syntax": "h"}

    def transform_svg(self, markup, spec, framework_options=None):
        title = to_readable_name(spec.component_name) if spec.a11y == A11Y_TITLE else None
        try:
            optimized = optimize_markup(markup)
            svg = find_svg_markup(optimized)
            if svg is None:
                raise MarkupError("no <svg> element found")
            call = svg_to_calls(
                svg,
                extra_attrs=get_extra_attrs(spec),
                title=title,
            )
        except MarkupError as exc:
            raise TransformError(
                f"Failed to transform {spec.label}: {exc}", icon=spec.label
            ) from exc
        logger.debug("Transformed %s for vue", spec.label)

        if spec.is_standalone:
            return render(
                self.component_template,
                name=spec.component_name,
                call=call,
                typescript=spec.typescript,
            )
        return f"{spec.component_name}: (props) => {call}"
