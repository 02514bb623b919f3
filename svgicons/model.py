"""Data model shared by the registry engine and the transpilers.

The classes here are deliberately small value objects.  A
:class:`RegistryFile` is a disposable view over one version of the
registry source text: every edit produces new text, which is parsed
again from scratch before the next edit.  Nothing in this module keeps
a syntax tree alive between edits.

:class:`CallNode` is the element tree produced by
:mod:`svgicons.markup` and walked by both the call emitter
(:mod:`svgicons.calltree`) and the JSX emitter (:mod:`svgicons.jsx`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Accessibility strategies understood by the normalizer.
A11Y_HIDDEN = "hidden"
A11Y_IMG = "img"
A11Y_TITLE = "title"
A11Y_PRESENTATION = "presentation"
A11Y_NONE = "none"

A11Y_STRATEGIES = (A11Y_HIDDEN, A11Y_IMG, A11Y_TITLE, A11Y_PRESENTATION, A11Y_NONE)

# Component output shapes.
OUTPUT_INLINE = "inline"
OUTPUT_STANDALONE = "standalone"

OUTPUT_MODES = (OUTPUT_INLINE, OUTPUT_STANDALONE)


@dataclass(frozen=True)
class RegistryEntry:
    """One named entry of the registry collection.

    ``start``/``end`` form a half-open character span covering the
    entry's key through its value, without the trailing separator.
    """

    name: str
    start: int
    end: int


@dataclass
class RegistryFile:
    """Result of parsing registry source text.

    ``entries`` are listed in appearance order, which is not
    necessarily alphabetical.  ``collection_start`` and
    ``collection_end`` point just inside the braces of the collection
    object literal; both are ``0`` when the collection was not found.
    """

    source_text: str
    entries: List[RegistryEntry] = field(default_factory=list)
    collection_start: int = 0
    collection_end: int = 0

    @property
    def has_collection(self) -> bool:
        # An opening brace always precedes collection_start.
        return self.collection_start > 0

    def names(self) -> List[str]:
        return [e.name for e in self.entries]

    def find(self, name: str) -> Optional[RegistryEntry]:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def index_of(self, name: str) -> int:
        for i, entry in enumerate(self.entries):
            if entry.name == name:
                return i
        return -1


@dataclass
class ComponentSpec:
    """Describes the component to generate for a single icon."""

    component_name: str
    icon_name: str = ""
    a11y: str = A11Y_NONE
    track_source: bool = True
    forward_ref: bool = False
    output_mode: str = OUTPUT_INLINE
    typescript: bool = True

    def __post_init__(self) -> None:
        if self.a11y is None:
            self.a11y = A11Y_NONE
        if self.a11y not in A11Y_STRATEGIES:
            raise ValueError(
                f"Unknown a11y strategy '{self.a11y}'. "
                f"Expected one of: {', '.join(A11Y_STRATEGIES)}"
            )
        if self.output_mode not in OUTPUT_MODES:
            raise ValueError(
                f"Unknown output mode '{self.output_mode}'. "
                f"Expected one of: {', '.join(OUTPUT_MODES)}"
            )

    @property
    def is_standalone(self) -> bool:
        return self.output_mode == OUTPUT_STANDALONE

    @property
    def label(self) -> str:
        """Name used when reporting errors about this icon."""
        return self.icon_name or self.component_name


@dataclass
class CallNode:
    """An element of parsed SVG markup.

    ``attributes`` preserves source order.  ``text`` holds the body of
    leaf elements whose content is plain text, such as ``<title>``.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["CallNode"] = field(default_factory=list)
    self_closing: bool = False
    text: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children and self.text is None


@dataclass
class TemplateConfig:
    """Settings used to render a whole registry file."""

    typescript: bool = True
    framework_options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Outcome:
    """One reported result of a batch operation."""

    status: str
    name: str
    message: str = ""

    def __str__(self) -> str:
        label = self.status.capitalize()
        if self.message:
            return f"{label} {self.name}: {self.message}"
        return f"{label} {self.name}"
