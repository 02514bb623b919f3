"""Icon operations over a project's configured output.

Every operation works from a loaded :class:`~svgicons.config.Config`
and a project directory.  The output is either a single registry file
(``file``) edited in place with :mod:`svgicons.editor`, or a folder
(``folder``) holding one component file per icon plus an ``index``
barrel regenerated after every change.

Batches are processed strictly left to right.  ``add`` reports a
per-icon :class:`~svgicons.model.Outcome` and keeps going when a single
icon fails to download or transform; ``remove`` checks every name
before touching anything.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from .config import Config, write_config
from .editor import (
    find_missing,
    insert_icon_alphabetically,
    remove_icons as remove_registry_icons,
    replace_icon,
)
from .errors import (
    ConfigError,
    IconFetchError,
    IconNotFoundError,
    TransformError,
)
from .folder import (
    barrel_filename,
    generate_barrel,
    get_existing_icon_names,
)
from .frameworks import FrameworkStrategy, framework_registry
from .hooks import run_hooks
from .icons import fetch_icon_markup, to_component_name, validate_icon_name
from .model import (
    A11Y_STRATEGIES,
    OUTPUT_INLINE,
    OUTPUT_STANDALONE,
    ComponentSpec,
    Outcome,
    TemplateConfig,
)
from .registry_parser import get_existing_names

logger = logging.getLogger(__name__)

ADDED = "added"
REPLACED = "replaced"
SKIPPED = "skipped"
FAILED = "failed"
REMOVED = "removed"

Fetcher = Callable[[str], str]
PathLike = Union[str, Path]


def get_strategy(config: Config) -> FrameworkStrategy:
    return framework_registry.get(config.framework)


def check_output_type(config: Config) -> FrameworkStrategy:
    """Return the strategy for ``config`` after checking its output type.

    Raises:
        ConfigError: If the framework cannot write a single registry file.
    """
    strategy = get_strategy(config)
    if not config.is_folder and not strategy.supports_inline:
        raise ConfigError(f"{strategy.label} icons require folder output")
    return strategy


def output_path(cwd: PathLike, config: Config) -> Path:
    return Path(cwd) / config.output.path


def parse_a11y(value: Optional[str]) -> Optional[str]:
    """Map a command-line ``--a11y`` value to a normalizer strategy.

    ``"false"`` means no accessibility attributes.

    Raises:
        ValueError: On an unknown strategy.
    """
    if value is None:
        return None
    if value == "false":
        return "none"
    if value not in A11Y_STRATEGIES:
        raise ValueError(
            f"Invalid a11y strategy: {value}. Use: hidden, img, title, presentation, false"
        )
    return value


def build_spec(
    icon: str,
    component_name: str,
    config: Config,
    strategy: FrameworkStrategy,
    a11y: Optional[str] = None,
) -> ComponentSpec:
    return ComponentSpec(
        component_name=component_name,
        icon_name=icon,
        a11y=a11y or config.a11y_strategy,
        track_source=config.track_source,
        forward_ref=strategy.is_forward_ref_enabled(config.framework_options()),
        output_mode=OUTPUT_STANDALONE if config.is_folder else OUTPUT_INLINE,
        typescript=config.typescript,
    )


# ----------------------------------------------------------------------
# init


def init_project(
    cwd: PathLike,
    config: Config,
    force: bool = False,
) -> Path:
    """Write ``denji.json`` and an empty output for ``config``.

    Raises:
        ConfigError: If the configuration or output already exists and
            ``force`` is not set, or the framework cannot use the
            requested output type.
    """
    strategy = check_output_type(config)

    target = output_path(cwd, config)
    config_file = Path(cwd) / "denji.json"
    if not force:
        for path in (config_file, target):
            if path.exists():
                raise ConfigError(f"{path} already exists. Use --force to overwrite.")

    if config.is_folder:
        target.mkdir(parents=True, exist_ok=True)
        (target / barrel_filename(config.typescript)).write_text(
            generate_barrel([], strategy.file_extension(config.typescript), config.typescript),
            encoding="utf-8",
        )
        types_content = strategy.get_types_file_content()
        if types_content and config.typescript:
            (target / "types.ts").write_text(types_content, encoding="utf-8")
    else:
        target.parent.mkdir(parents=True, exist_ok=True)
        template = strategy.get_icons_template(
            TemplateConfig(config.typescript, config.framework_options())
        )
        target.write_text(template, encoding="utf-8")

    logger.debug("Initialized %s output at %s", config.output.type, target)
    return write_config(cwd, config)


# ----------------------------------------------------------------------
# add


def add_icons_to_source(
    source_text: str,
    icons: Iterable[str],
    config: Config,
    strategy: FrameworkStrategy,
    fetch: Optional[Fetcher] = None,
    force: bool = False,
    name: Optional[str] = None,
    a11y: Optional[str] = None,
) -> Tuple[str, List[Outcome]]:
    """Fold ``icons`` into registry ``source_text``.

    Returns the new text and one outcome per icon.  Fetch and transform
    failures are reported as ``failed`` and do not stop the batch.  An
    icon whose component already exists is replaced only with ``force``.
    """
    fetch = fetch or fetch_icon_markup
    outcomes: List[Outcome] = []
    imports = strategy.get_imports(config.framework_options())

    for icon in icons:
        component_name = name or to_component_name(icon)
        existing = get_existing_names(source_text)
        exists = component_name in existing
        if exists and not force:
            outcomes.append(Outcome(SKIPPED, component_name, "already exists"))
            continue

        component = _generate(icon, component_name, config, strategy, fetch, a11y, outcomes)
        if component is None:
            continue

        for line in imports:
            if line not in source_text:
                source_text = f"{line}\n\n{source_text}"

        if exists:
            source_text = replace_icon(source_text, component_name, component)
            outcomes.append(Outcome(REPLACED, component_name))
        else:
            source_text = insert_icon_alphabetically(source_text, component_name, component)
            outcomes.append(Outcome(ADDED, component_name))

    return source_text, outcomes


def _generate(
    icon: str,
    component_name: str,
    config: Config,
    strategy: FrameworkStrategy,
    fetch: Fetcher,
    a11y: Optional[str],
    outcomes: List[Outcome],
) -> Optional[str]:
    """Fetch and transform one icon, recording a failure in ``outcomes``."""
    try:
        markup = fetch(icon)
    except (IconNotFoundError, IconFetchError) as exc:
        logger.debug("Fetch failed for %s: %s", icon, exc)
        outcomes.append(Outcome(FAILED, icon, str(exc)))
        return None

    spec = build_spec(icon, component_name, config, strategy, a11y)
    try:
        return strategy.transform_svg(markup, spec, config.framework_options())
    except TransformError as exc:
        outcomes.append(Outcome(FAILED, icon, str(exc)))
        return None


def add_icons(
    cwd: PathLike,
    config: Config,
    icons: List[str],
    fetch: Optional[Fetcher] = None,
    force: bool = False,
    name: Optional[str] = None,
    a11y: Optional[str] = None,
) -> List[Outcome]:
    """Add ``icons`` to the configured output.

    Raises:
        ValueError: On an invalid icon identifier, or ``name`` given
            with more than one icon.
        ConfigError: If the output does not exist.
        HookError: If a hook fails.
    """
    if name and len(icons) > 1:
        raise ValueError("--name can only be used with a single icon")
    for icon in icons:
        validate_icon_name(icon)

    fetch = fetch or fetch_icon_markup
    strategy = get_strategy(config)
    target = _require_output(cwd, config)
    run_hooks(config.hooks.get("preAdd"), cwd)

    if config.is_folder:
        outcomes = _add_to_folder(target, icons, config, strategy, fetch, force, name, a11y)
    else:
        source_text = target.read_text(encoding="utf-8")
        source_text, outcomes = add_icons_to_source(
            source_text, icons, config, strategy, fetch, force, name, a11y
        )
        if _changed(outcomes):
            target.write_text(source_text, encoding="utf-8")

    if _changed(outcomes):
        run_hooks(config.hooks.get("postAdd"), cwd)
    return outcomes


def _add_to_folder(
    folder: Path,
    icons: List[str],
    config: Config,
    strategy: FrameworkStrategy,
    fetch: Fetcher,
    force: bool,
    name: Optional[str],
    a11y: Optional[str],
) -> List[Outcome]:
    ext = strategy.file_extension(config.typescript)
    existing = get_existing_icon_names(os.listdir(folder), ext)
    outcomes: List[Outcome] = []

    for icon in icons:
        component_name = name or to_component_name(icon)
        exists = component_name in existing
        if exists and not force:
            outcomes.append(Outcome(SKIPPED, component_name, "already exists"))
            continue

        component = _generate(icon, component_name, config, strategy, fetch, a11y, outcomes)
        if component is None:
            continue

        (folder / f"{component_name}{ext}").write_text(component, encoding="utf-8")
        if exists:
            outcomes.append(Outcome(REPLACED, component_name))
        else:
            existing.append(component_name)
            outcomes.append(Outcome(ADDED, component_name))

    if _changed(outcomes):
        _write_barrel(folder, existing, ext, config.typescript)
    return outcomes


# ----------------------------------------------------------------------
# remove / list / clear


def remove_icons(cwd: PathLike, config: Config, names: List[str]) -> List[Outcome]:
    """Remove the components ``names``; nothing is removed if any is missing.

    Raises:
        IconNotFoundError: Listing every unknown name.
        ConfigError: If the output does not exist.
        HookError: If a hook fails.
    """
    strategy = get_strategy(config)
    target = _require_output(cwd, config)
    names = list(dict.fromkeys(names))

    if config.is_folder:
        ext = strategy.file_extension(config.typescript)
        existing = get_existing_icon_names(os.listdir(target), ext)
        missing = [n for n in names if n not in existing]
        if missing:
            raise IconNotFoundError(missing)
        run_hooks(config.hooks.get("preRemove"), cwd)
        for name in names:
            (target / f"{name}{ext}").unlink()
        _write_barrel(target, [n for n in existing if n not in names], ext, config.typescript)
    else:
        source_text = target.read_text(encoding="utf-8")
        missing = find_missing(source_text, names)
        if missing:
            raise IconNotFoundError(missing)
        run_hooks(config.hooks.get("preRemove"), cwd)
        target.write_text(remove_registry_icons(source_text, names), encoding="utf-8")

    run_hooks(config.hooks.get("postRemove"), cwd)
    return [Outcome(REMOVED, name) for name in names]


def list_icons(cwd: PathLike, config: Config) -> List[str]:
    """Return the component names present in the output.

    File output lists names in appearance order; folder output sorted.
    The ``preList`` hooks run before reading; callers run ``postList``
    after displaying the result.
    """
    run_hooks(config.hooks.get("preList"), cwd)
    return existing_icons(cwd, config)


def existing_icons(cwd: PathLike, config: Config) -> List[str]:
    """Component names present in the output, without running hooks."""
    strategy = get_strategy(config)
    target = _require_output(cwd, config)
    if config.is_folder:
        return get_existing_icon_names(
            os.listdir(target), strategy.file_extension(config.typescript)
        )
    return get_existing_names(target.read_text(encoding="utf-8"))


def list_payload(config: Config, names: List[str]) -> Dict[str, object]:
    """JSON document printed by ``list --json``."""
    return {"count": len(names), "output": config.output.path, "icons": names}


def clear_icons(cwd: PathLike, config: Config) -> List[str]:
    """Remove every icon and return the removed names.

    File output is reset to the framework's empty template; folder output
    loses every component file and gets an empty barrel.  Nothing is
    written (and no hook runs) when the output holds no icons.
    """
    strategy = get_strategy(config)
    target = _require_output(cwd, config)
    ext = strategy.file_extension(config.typescript)
    existing = existing_icons(cwd, config)
    if not existing:
        return []

    run_hooks(config.hooks.get("preClear"), cwd)
    if config.is_folder:
        for name in existing:
            (target / f"{name}{ext}").unlink()
        _write_barrel(target, [], ext, config.typescript)
    else:
        template = strategy.get_icons_template(
            TemplateConfig(config.typescript, config.framework_options())
        )
        target.write_text(template, encoding="utf-8")
    run_hooks(config.hooks.get("postClear"), cwd)
    return existing


# ----------------------------------------------------------------------
# Helpers


def _require_output(cwd: PathLike, config: Config) -> Path:
    check_output_type(config)
    target = output_path(cwd, config)
    if config.is_folder and not target.is_dir():
        raise ConfigError(
            f'Icons directory not found: {config.output.path}. Run "denji init" first.'
        )
    if not config.is_folder and not target.is_file():
        raise ConfigError(
            f'Icons file not found: {config.output.path}. Run "denji init" first.'
        )
    return target


def _write_barrel(folder: Path, names: List[str], ext: str, typescript: bool) -> None:
    (folder / barrel_filename(typescript)).write_text(
        generate_barrel(names, ext, typescript), encoding="utf-8"
    )


def _changed(outcomes: List[Outcome]) -> bool:
    return any(o.status in (ADDED, REPLACED) for o in outcomes)
