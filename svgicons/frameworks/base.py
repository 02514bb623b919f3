"""Framework strategy interface and registry.

A strategy knows how one UI framework represents an icon component:
the whole-file registry template, the shape of an inline registry entry
and of a standalone component file, and which import (if any) ref
forwarding needs.  Concrete strategies register themselves in
:data:`framework_registry` under their identifier.

Two shared transform paths are provided:

* :class:`MarkupStrategy` re-emits the element tree with its SVG
  (kebab-case) attribute names and a trailing ``{...props}`` spread.
  Used by Solid, Qwik and Svelte.
* :class:`JsxStrategy` re-emits the element tree as camelCase JSX.
  Used by React and Preact.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..errors import MarkupError, TransformError
from ..jsx import render_jsx
from ..markup import parse_element
from ..model import CallNode, ComponentSpec, TemplateConfig
from ..plugins import StrategyRegistry
from ..svg import find_svg_markup, normalize
from ..templating import render

logger = logging.getLogger(__name__)

# Registry for framework implementations
framework_registry = StrategyRegistry("framework")

OUTPUT_FILE = "file"
OUTPUT_FOLDER = "folder"


class FrameworkStrategy(ABC):
    """Abstract base class for framework specific component generation."""

    name: str = ""
    label: str = ""
    file_extensions: Dict[str, str] = {"typescript": ".ts", "javascript": ".js"}
    supports_ref: bool = False
    supports_inline: bool = True
    preferred_output: str = OUTPUT_FILE
    forward_ref_import_source: Optional[str] = None

    icons_template: str = ""
    component_template: str = ""

    def file_extension(self, typescript: bool = True) -> str:
        return self.file_extensions["typescript" if typescript else "javascript"]

    def default_options(self) -> Dict[str, Any]:
        """Framework options written to a fresh configuration file."""
        return {}

    def is_forward_ref_enabled(self, options: Optional[Dict[str, Any]] = None) -> bool:
        return self.supports_ref and bool((options or {}).get("forwardRef", False))

    def get_imports(self, options: Optional[Dict[str, Any]] = None) -> List[str]:
        """Import lines the registry file needs for ``options``."""
        if self.forward_ref_import_source and self.is_forward_ref_enabled(options):
            return [f'import {{ forwardRef }} from "{self.forward_ref_import_source}";']
        return []

    def get_icons_template(self, config: TemplateConfig) -> str:
        """Render the initial registry file with an empty collection."""
        return render(
            self.icons_template,
            typescript=config.typescript,
            forward_ref=self.is_forward_ref_enabled(config.framework_options),
        )

    def get_types_file_content(self) -> Optional[str]:
        """Content of ``types.ts`` for folder output, or ``None``."""
        return None

    @abstractmethod
    def transform_svg(
        self,
        markup: str,
        spec: ComponentSpec,
        framework_options: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Turn raw SVG ``markup`` into component source for ``spec``.

        Args:
            markup: SVG document as fetched from the icon provider.
            spec: Names, accessibility strategy and output shape.
            framework_options: Framework specific options from the config.

        Returns:
            Either an inline registry entry (``Name: ...``) or the full
            text of a standalone component file.

        Raises:
            TransformError: If no root ``<svg>`` element can be processed.
        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers shared by the concrete strategies

    def prepare_svg(self, markup: str, spec: ComponentSpec) -> str:
        """Normalize ``markup`` and return its root ``<svg>`` element.

        Raises:
            TransformError: On malformed markup or a missing root element.
        """
        try:
            normalized = normalize(markup, spec)
        except MarkupError as exc:
            raise TransformError(
                f"Failed to transform {spec.label}: {exc}", icon=spec.label
            ) from exc
        svg = find_svg_markup(normalized)
        if svg is None:
            raise TransformError(
                f"Failed to transform {spec.label}: no <svg> element found",
                icon=spec.label,
            )
        return svg

    def parse_svg(self, markup: str, spec: ComponentSpec) -> CallNode:
        """Normalize ``markup`` and parse it into an element tree."""
        svg = self.prepare_svg(markup, spec)
        try:
            return parse_element(svg)
        except MarkupError as exc:
            raise TransformError(
                f"Failed to transform {spec.label}: {exc}", icon=spec.label
            ) from exc


class MarkupStrategy(FrameworkStrategy):
    """Emit kebab-case markup from the element tree plus a props spread."""

    def transform_svg(self, markup, spec, framework_options=None):
        root = self.parse_svg(markup, spec)
        svg = render_jsx(root, root_props=["{...props}"], camel_case=False)
        logger.debug("Transformed %s for %s", spec.label, self.name)
        if spec.is_standalone or not self.supports_inline:
            return render(
                self.component_template,
                name=spec.component_name,
                svg=svg,
                typescript=spec.typescript,
            )
        return f"{spec.component_name}: (props) => ({svg})"


class JsxStrategy(FrameworkStrategy):
    """Emit camelCase JSX, optionally wrapped in ``forwardRef``."""

    supports_ref = True
    file_extensions = {"typescript": ".tsx", "javascript": ".jsx"}

    def default_options(self):
        return {"forwardRef": False}

    def transform_svg(self, markup, spec, framework_options=None):
        root = self.parse_svg(markup, spec)
        forward_ref = self.supports_ref and spec.forward_ref
        root_props = ["ref={ref}"] if forward_ref else []
        root_props.append("{...props}")
        jsx = render_jsx(root, root_props=root_props)
        logger.debug("Transformed %s for %s", spec.label, self.name)

        if spec.is_standalone:
            return render(
                self.component_template,
                name=spec.component_name,
                svg=jsx,
                typescript=spec.typescript,
                forward_ref=forward_ref,
            )
        if not forward_ref:
            return f"{spec.component_name}: (props) => ({jsx})"
        generics = "<SVGSVGElement, IconProps>" if spec.typescript else ""
        return f"{spec.component_name}: forwardRef{generics}((props, ref) => ({jsx}))"
