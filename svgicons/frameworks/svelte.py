"""Svelte strategy.

Svelte components are single-file ``.svelte`` documents, so every icon
becomes its own file regardless of the requested output shape.
"""

from __future__ import annotations

from ..folder import generate_types
from .base import OUTPUT_FOLDER, MarkupStrategy, framework_registry

TYPES_IMPORT = 'import type { SVGAttributes } from "svelte/elements";'
TYPES_PROPS = "SVGAttributes<SVGSVGElement>"


@framework_registry.register("svelte")
class SvelteStrategy(MarkupStrategy):
    name = "svelte"
    label = "Svelte"
    file_extensions = {"typescript": ".svelte", "javascript": ".svelte"}
    supports_inline = False
    preferred_output = OUTPUT_FOLDER
    icons_template = "svelte_icons.jinja2"
    component_template = "svelte_component.jinja2"

    def get_types_file_content(self):
        return generate_types(TYPES_PROPS, TYPES_IMPORT)
