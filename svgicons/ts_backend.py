"""Tree-sitter backed parsing of TypeScript/TSX source.

This module defines :class:`TsBackend`, a thin wrapper around the
``tree_sitter`` bindings and the grammars shipped by
``tree_sitter_language_pack``.  The registry parser uses it to get a
real concrete syntax tree for the registry file instead of guessing at
structure with regular expressions.

Tree-sitter reports node positions as UTF-8 byte offsets, while the
rest of the package slices Python strings.  :meth:`TsBackend.char_offset`
converts between the two so callers never see byte offsets.

Because the grammars are compiled extensions, importing them may fail
on an incomplete install.  In that case :meth:`TsBackend.parse` raises
:class:`ImportError` with installation instructions; there is no
fallback parser.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from .errors import RegistryParseError

try:
    from tree_sitter_language_pack import get_parser  # type: ignore[import]
except ImportError:
    get_parser = None  # type: ignore

logger = logging.getLogger(__name__)

# Wrapper expressions that may surround the collection literal, e.g.
# ``{} as const satisfies Record<string, Icon>``.
WRAPPER_NODES = {
    "as_expression",
    "satisfies_expression",
    "parenthesized_expression",
    "non_null_expression",
    "type_assertion",
}


class TsBackend:
    """Parse TypeScript (or TSX) source text with tree-sitter.

    The ``language`` argument selects the grammar.  ``tsx`` is the
    default because registry files for JSX frameworks embed markup; it
    also accepts plain TypeScript and JavaScript as long as they do not
    use angle-bracket type assertions.
    """

    def __init__(self, language: str = "tsx") -> None:
        self.language = language
        self._parser = None
        self._source = ""
        self._bytes = b""
        self._ascii = True
        self._tree = None

    def parse(self, source_text: str):
        """Parse ``source_text`` and return the root node.

        Raises:
            ImportError: If the tree-sitter grammars are not installed.
            RegistryParseError: If the source contains syntax errors.
        """
        if get_parser is None:
            raise ImportError(
                "tree-sitter-language-pack is required to parse registry files but is not "
                "installed. Install it via `pip install tree-sitter-language-pack`."
            )
        if self._parser is None:
            self._parser = get_parser(self.language)

        self._source = source_text
        self._bytes = source_text.encode("utf-8")
        self._ascii = len(self._bytes) == len(source_text)
        self._tree = self._parser.parse(self._bytes)

        root = self._tree.root_node
        if root.has_error:
            line, column = self._first_error_position(root)
            raise RegistryParseError(
                f"Failed to parse registry source: syntax error near line {line + 1}, "
                f"column {column + 1}"
            )
        logger.debug("Parsed %d bytes of %s source", len(self._bytes), self.language)
        return root

    # ------------------------------------------------------------------
    # Offset helpers

    def char_offset(self, byte_offset: int) -> int:
        """Convert a UTF-8 byte offset into a string index."""
        if self._ascii:
            return byte_offset
        return len(self._bytes[:byte_offset].decode("utf-8", errors="ignore"))

    def node_text(self, node) -> str:
        return self._bytes[node.start_byte:node.end_byte].decode("utf-8")

    def span(self, node) -> tuple:
        """Return the ``(start, end)`` string span of ``node``."""
        return self.char_offset(node.start_byte), self.char_offset(node.end_byte)

    # ------------------------------------------------------------------
    # Tree navigation helpers

    def iter_exported_declarators(self, root) -> Iterator:
        """Yield ``variable_declarator`` nodes of exported declarations.

        Only top-level ``export const|let|var`` statements are
        considered; re-exports and default exports are ignored.
        """
        for node in root.named_children:
            if node.type != "export_statement":
                continue
            declaration = node.child_by_field_name("declaration")
            if declaration is None:
                continue
            if declaration.type not in ("lexical_declaration", "variable_declaration"):
                continue
            for child in declaration.named_children:
                if child.type == "variable_declarator":
                    yield child

    def unwrap(self, node):
        """Strip type assertion and parenthesis wrappers from an expression."""
        while node is not None and node.type in WRAPPER_NODES:
            inner = self._wrapped_expression(node)
            if inner is None:
                return None
            node = inner
        return node

    def _wrapped_expression(self, node) -> Optional[object]:
        named = [c for c in node.named_children if c.type != "comment"]
        if not named:
            return None
        # ``<T>expr`` puts the type first; every other wrapper starts with
        # the wrapped expression.
        if node.type == "type_assertion":
            return named[-1]
        return named[0]

    def _first_error_position(self, node) -> tuple:
        if node.type == "ERROR" or node.is_missing:
            return node.start_point
        for child in node.children:
            if child.has_error:
                return self._first_error_position(child)
        return node.start_point
