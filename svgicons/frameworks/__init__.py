"""Framework strategies for generated icon components.

This package contains one strategy per supported framework:
- react / preact: camelCase JSX, optional ``forwardRef``
- solid / qwik: kebab-case JSX markup
- vue: ``h()`` render functions
- svelte: standalone ``.svelte`` files

All strategies are automatically registered via decorators.
"""

from .base import FrameworkStrategy, JsxStrategy, MarkupStrategy, framework_registry
from .react import ReactStrategy
from .preact import PreactStrategy
from .solid import SolidStrategy
from .qwik import QwikStrategy
from .vue import VueStrategy
from .svelte import SvelteStrategy

__all__ = [
    "FrameworkStrategy",
    "JsxStrategy",
    "MarkupStrategy",
    "framework_registry",
    "ReactStrategy",
    "PreactStrategy",
    "SolidStrategy",
    "QwikStrategy",
    "VueStrategy",
    "SvelteStrategy",
]
