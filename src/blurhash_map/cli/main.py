"""CLI entrypoint for blurhash-map."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from blurhash_map import __version__
from blurhash_map.config import load_config, parse_extension_list
from blurhash_map.constants.branding import CLI_DESCRIPTION
from blurhash_map.constants.config import DEFAULT_DEBOUNCE_SECONDS
from blurhash_map.exceptions import BlurHashMapError, InvalidConfiguration
from blurhash_map.exceptions.validation import format_errors
from blurhash_map.orchestrator import BlurHashMap
from blurhash_map.reporting import StdoutReporter
from blurhash_map.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="blurhash-map",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Hash every image once and write the hash map")
    _add_run_arguments(build)

    watch = subparsers.add_parser("watch", help="Build, then keep hashes in sync while files change")
    _add_run_arguments(watch)
    watch.add_argument(
        "--debounce",
        type=float,
        default=DEFAULT_DEBOUNCE_SECONDS,
        help=f"Seconds of quiet before a batch of changes is processed (default: {DEFAULT_DEBOUNCE_SECONDS})",
    )

    validate = subparsers.add_parser("validate-config", help="Validate configuration without touching assets")
    validate.add_argument("-a", "--assets", type=Path, default=None, help="Assets folder to check")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_run_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-a", "--assets", type=Path, default=None, help="Path to your assets folder")
    parser.add_argument(
        "-e",
        "--extensions",
        default=None,
        help="Comma-separated image extensions. Default: jpg,jpeg,png,bmp,webp",
    )
    parser.add_argument("-x", "--component-x", type=int, default=None, help="Horizontal components, 1-9. Default: 4")
    parser.add_argument("-y", "--component-y", type=int, default=None, help="Vertical components, 1-9. Default: 3")
    parser.add_argument("-t", "--target", type=Path, default=None, help="Hash map JSON file. Default: ./hashmap.json")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("--encoder", type=Path, default=None, help="Path to the blurhash encoder binary")
    parser.add_argument("--no-stdout", action="store_true", help="Silence the summary output")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command not in {"build", "watch"}:
        parser.error(f"Unsupported command: {args.command}")

    cwd = Path.cwd()
    validation_errors = preflight_validate(cwd, args.config, assets=args.assets)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(
            cwd,
            args.config,
            assets=args.assets,
            extensions=parse_extension_list(args.extensions) if args.extensions is not None else None,
            component_x=args.component_x,
            component_y=args.component_y,
            target=args.target,
            encoder_executable=args.encoder,
        )
        blurhash_map = BlurHashMap(config)
        blurhash_map.initialize()
    except InvalidConfiguration as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except BlurHashMapError as exc:
        print(f"Sync error: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout and blurhash_map.last_report is not None:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(blurhash_map.last_report, color=use_color, verbose=args.verbose).render())

    if args.command == "watch":
        from blurhash_map.watch import watch_assets

        watch_assets(blurhash_map, debounce=args.debounce)

    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(Path.cwd(), args.config, assets=args.assets)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
