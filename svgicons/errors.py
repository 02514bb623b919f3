"""Exception types raised by the icon tooling.

Each error derives from the builtin exception that best describes it so
callers that only care about the broad category (``ValueError`` for bad
input, ``LookupError`` for missing names) can keep catching builtins.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class RegistryParseError(ValueError):
    """The registry source text is not valid TypeScript/TSX."""


class MarkupError(ValueError):
    """SVG markup could not be parsed into an element tree."""


class TransformError(ValueError):
    """A framework strategy failed to produce component source for an icon."""

    def __init__(self, message: str, icon: Optional[str] = None) -> None:
        super().__init__(message)
        self.icon = icon


class IconNotFoundError(LookupError):
    """One or more icon names are unknown (registry lookup or remote API)."""

    def __init__(self, names: Iterable[str], message: Optional[str] = None) -> None:
        self.names: List[str] = list(names)
        if message is None:
            message = f"Icon(s) not found: {', '.join(self.names)}"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class IconFetchError(RuntimeError):
    """The remote icon provider could not be reached or returned an error."""


class ConfigError(ValueError):
    """The configuration file is missing or invalid."""


class HookError(RuntimeError):
    """A configured shell hook failed."""
