"""Top level package for the icon registry tooling.

This package maintains a project's SVG icon components.  Icons are
fetched from Iconify, optimized, and turned into framework specific
components that live either as entries of one registry object
(``export const Icons = { ... }``) or as one file per icon.

Key concepts:

* **Model classes** describe registry entries and component requests.
  See :mod:`svgicons.model`.
* **Registry parser/editor** read and rewrite the registry source with
  tree-sitter.  See :mod:`svgicons.registry_parser` and
  :mod:`svgicons.editor`.
* **Normalizer** optimizes SVG and injects accessibility attributes.
  See :mod:`svgicons.svg`.
* **Framework strategies** emit components for React, Preact, Solid,
  Qwik, Vue and Svelte.  See :mod:`svgicons.frameworks`.
* **Operations** implement add, remove, list and clear over a configured
  project.  See :mod:`svgicons.operations`.
"""

from .model import (
    CallNode,
    ComponentSpec,
    Outcome,
    RegistryEntry,
    RegistryFile,
    TemplateConfig,
)
from .errors import (
    ConfigError,
    HookError,
    IconFetchError,
    IconNotFoundError,
    MarkupError,
    RegistryParseError,
    TransformError,
)
from .registry_parser import get_existing_names, parse_registry
from .editor import insert_icon_alphabetically, remove_icon, remove_icons, replace_icon
from .svg import normalize, optimize_markup
from .calltree import svg_to_calls
from .plugins import StrategyRegistry
from .frameworks import FrameworkStrategy, framework_registry

__all__ = [
    "CallNode",
    "ComponentSpec",
    "Outcome",
    "RegistryEntry",
    "RegistryFile",
    "TemplateConfig",
    "ConfigError",
    "HookError",
    "IconFetchError",
    "IconNotFoundError",
    "MarkupError",
    "RegistryParseError",
    "TransformError",
    "get_existing_names",
    "parse_registry",
    "insert_icon_alphabetically",
    "remove_icon",
    "remove_icons",
    "replace_icon",
    "normalize",
    "optimize_markup",
    "svg_to_calls",
    "StrategyRegistry",
    "FrameworkStrategy",
    "framework_registry",
]
