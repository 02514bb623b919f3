import argparse
import json
import logging
import sys

from svgicons.config import Config, load_config
from svgicons.errors import HookError
from svgicons.frameworks import framework_registry
from svgicons.hooks import run_hooks
from svgicons.model import A11Y_STRATEGIES
from svgicons import operations


def _load(args: argparse.Namespace) -> Config:
    return load_config(args.cwd)


def _default_output(framework: str, output_type: str, typescript: bool) -> str:
    if output_type == "folder":
        return "./src/icons"
    strategy = framework_registry.get(framework)
    return f"./src/icons{strategy.file_extension(typescript)}"


def cmd_init(args: argparse.Namespace) -> int:
    """Create ``denji.json`` and an empty icon registry."""
    strategy = framework_registry.get(args.framework)
    output_type = args.output_type or strategy.preferred_output
    path = args.output or _default_output(args.framework, output_type, args.typescript)

    options = strategy.default_options()
    if strategy.supports_ref:
        options["forwardRef"] = args.forward_ref

    data = {
        "framework": args.framework,
        "output": {"type": output_type, "path": path},
        "typescript": args.typescript,
        "trackSource": not args.no_track_source,
        args.framework: options,
    }
    if args.a11y is not None:
        data["a11y"] = False if args.a11y == "false" else args.a11y
    config = Config.model_validate(data)

    written = operations.init_project(args.cwd, config, force=args.force)
    print(f"Created {written} ({strategy.label}, {output_type} output at {path})")
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    """Fetch icons and add them to the registry.

    Each icon is reported on its own line.  Returns 1 if any icon
    failed.
    """
    config = _load(args)
    outcomes = operations.add_icons(
        args.cwd,
        config,
        args.icons,
        force=args.force,
        name=args.name,
        a11y=operations.parse_a11y(args.a11y),
    )
    for outcome in outcomes:
        print(outcome)
    return 1 if any(o.status == operations.FAILED for o in outcomes) else 0


def cmd_remove(args: argparse.Namespace) -> int:
    config = _load(args)
    for outcome in operations.remove_icons(args.cwd, config, args.names):
        print(outcome)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    config = _load(args)
    names = operations.list_icons(args.cwd, config)

    if args.json:
        print(json.dumps(operations.list_payload(config, names), indent=2))
    elif not names:
        print(f"No icons found in {config.output.path}")
    else:
        print(f"Found {len(names)} icon(s) in {config.output.path}")
        print()
        print("Icons:")
        for name in names:
            print(f"  - {name}")

    run_hooks(config.hooks.get("postList"), args.cwd)
    return 0


def cmd_clear(args: argparse.Namespace) -> int:
    """Remove every icon.  Without ``--yes`` the user is asked first."""
    config = _load(args)
    count = len(operations.existing_icons(args.cwd, config))
    if count == 0:
        print("No icons to remove")
        return 0

    if not args.yes:
        answer = input(f"Remove all {count} icon(s)? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Operation cancelled.")
            return 1

    removed = operations.clear_icons(args.cwd, config)
    print(f"Removed {len(removed)} icon(s)")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="denji",
        description="Manage SVG icon components in a frontend project.",
    )

    # Global options
    parser.add_argument(
        "--cwd",
        default=".",
        help="Project directory containing denji.json (default: current directory).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command")

    # init subcommand
    init = subparsers.add_parser("init", help="Create denji.json and an empty icon registry.")
    init.add_argument(
        "--framework",
        choices=framework_registry.keys(),
        default="react",
        help="Target framework (default: react).",
    )
    init.add_argument("--output", help="Registry file or icons folder path.")
    init.add_argument(
        "--output-type",
        choices=["file", "folder"],
        help="Single registry file or one file per icon (default: framework preference).",
    )
    init.add_argument(
        "--typescript",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Generate TypeScript (default: on).",
    )
    init.add_argument(
        "--a11y",
        choices=[s for s in A11Y_STRATEGIES if s != "none"] + ["false"],
        help="Accessibility strategy for generated icons.",
    )
    init.add_argument(
        "--no-track-source",
        action="store_true",
        help="Do not add data-icon attributes.",
    )
    init.add_argument(
        "--forward-ref",
        action="store_true",
        help="Wrap components with forwardRef (React and Preact).",
    )
    init.add_argument("--force", action="store_true", help="Overwrite an existing setup.")
    init.set_defaults(func=cmd_init)

    # add subcommand
    add = subparsers.add_parser("add", help="Add icons (e.g. mdi:home lucide:check).")
    add.add_argument("icons", nargs="+", metavar="ICON", help="Icon identifiers as prefix:name.")
    add.add_argument("--name", help="Custom component name (single icon only).")
    add.add_argument("--a11y", help="Accessibility strategy (overrides config).")
    add.add_argument("--force", action="store_true", help="Replace icons that already exist.")
    add.set_defaults(func=cmd_add)

    # remove subcommand
    remove = subparsers.add_parser("remove", help="Remove icons by component name.")
    remove.add_argument("names", nargs="+", metavar="NAME", help="Component names to remove.")
    remove.set_defaults(func=cmd_remove)

    # list subcommand
    list_cmd = subparsers.add_parser("list", help="List icons in the registry.")
    list_cmd.add_argument("--json", action="store_true", help="Print the list as JSON.")
    list_cmd.set_defaults(func=cmd_list)

    # clear subcommand
    clear = subparsers.add_parser("clear", help="Remove every icon.")
    clear.add_argument("-y", "--yes", action="store_true", help="Skip the confirmation prompt.")
    clear.set_defaults(func=cmd_clear)

    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (ValueError, LookupError, HookError) as exc:
        sys.exit(f"Error: {exc}")


if __name__ == "__main__":
    raise SystemExit(main())
