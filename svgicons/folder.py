"""Helpers for folder output, where every icon is its own file.

The folder holds one component file per icon plus an ``index`` barrel
that re-exports them as an ``Icons`` object.  The barrel uses the same
``export const Icons = { ... }`` shape as a registry file, so it can be
read back with :func:`svgicons.registry_parser.parse_registry`.
"""

from __future__ import annotations

import os
from typing import Iterable, List

from .templating import render

RESERVED_FILES = {"index.ts", "index.js", "types.ts"}

# Extensions imported with their suffix; script modules resolve without one.
DEFAULT_EXPORT_EXTENSIONS = {".svelte", ".vue"}


def get_existing_icon_names(files: Iterable[str], ext: str) -> List[str]:
    """Component names for the files in ``files`` ending with ``ext``, sorted."""
    names = [
        f[: -len(ext)]
        for f in files
        if f.endswith(ext) and os.path.basename(f) not in RESERVED_FILES
    ]
    return sorted(os.path.basename(n) for n in names)


def import_line(name: str, ext: str) -> str:
    if ext in DEFAULT_EXPORT_EXTENSIONS:
        return f'import {name} from "./{name}{ext}";'
    return f'import {{ {name} }} from "./{name}";'


def generate_barrel(names: Iterable[str], ext: str, typescript: bool) -> str:
    """Return the ``index`` module exporting ``names`` as ``Icons``."""
    ordered = sorted(names)
    return render(
        "barrel.jinja2",
        names=ordered,
        imports={name: import_line(name, ext) for name in ordered},
        typescript=typescript,
    )


def barrel_filename(typescript: bool) -> str:
    return "index.ts" if typescript else "index.js"


def generate_types(props_type: str, props_import: str) -> str:
    """Return ``types.ts`` exporting ``IconProps``."""
    return f"{props_import}\n\nexport type IconProps = {props_type};\n"
