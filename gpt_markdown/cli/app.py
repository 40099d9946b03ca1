from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from gpt_markdown.cli import output as out
from gpt_markdown.cli.config import (
    config_exists,
    config_path_display,
    load_config,
    save_config,
)
from gpt_markdown.core.exceptions import (
    ConversionFailedException,
    ExportNotFoundError,
)
from gpt_markdown.facade.core import ExportConverter

DESCRIPTION = """\
gpt-markdown — turn a ChatGPT data export into Markdown

Reads conversations.json (or the export .zip / folder that contains it)
and writes one Markdown file per conversation, following the branch that
was last active in each chat."""

Handler = Callable[[argparse.Namespace], int]


# ── convert ─────────────────────────────────────────────────────────


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert an export into Markdown documents."""
    cfg = load_config()
    output_dir = args.output or cfg.output_dir
    limit = args.limit if args.limit is not None else cfg.limit

    converter = ExportConverter.to_directory(output_dir)
    try:
        result = converter.convert(args.source, limit=limit)
    except ExportNotFoundError as exc:
        out.error(exc.message)
        return 1
    except OSError as exc:
        out.error(str(exc))
        return 1
    except ConversionFailedException as exc:
        out.error(exc.message)
        return 1

    if result.conversations_found == 0:
        out.warn("No conversations found in the provided file.")
        return 0

    for location in result.written:
        out.generated(location)
    for error in result.errors:
        out.error(error)

    out.conversion_summary(result)
    return 0 if result.ok else 1


# ── config ──────────────────────────────────────────────────────────


def cmd_config_show(args: argparse.Namespace) -> int:
    """Display current configuration."""
    cfg = load_config()

    out.header(f"Configuration ({config_path_display()})")
    if not config_exists():
        out.info(out.dim("no config file, using defaults"))
    out.kv("Output directory", cfg.output_dir)
    out.kv("Limit", cfg.limit if cfg.limit > 0 else out.dim("none"))
    return 0


def cmd_config_path(args: argparse.Namespace) -> int:
    print(config_path_display())
    return 0


def cmd_config_set_output(args: argparse.Namespace) -> int:
    cfg = load_config()
    cfg.output_dir = args.dir
    path = save_config(cfg)
    out.success(f"Output directory set to {cfg.output_dir} ({path})")
    return 0


def cmd_config_set_limit(args: argparse.Namespace) -> int:
    cfg = load_config()
    cfg.limit = max(args.limit, 0)
    path = save_config(cfg)
    out.success(f"Default limit set to {cfg.limit} ({path})")
    return 0


# ── parser ──────────────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpt-markdown",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed progress logs",
    )
    sub = parser.add_subparsers(dest="command", title="commands")

    p_convert = sub.add_parser(
        "convert",
        help="Convert an export into Markdown files",
        description=(
            "Convert every conversation in SOURCE into a Markdown file under "
            "OUTPUT (default: the configured output directory, ./output)."
        ),
    )
    p_convert.add_argument(
        "source",
        help="conversations.json, the export folder, or the export .zip",
    )
    p_convert.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Directory to write Markdown files into",
    )
    p_convert.add_argument(
        "-l",
        "--limit",
        type=int,
        default=None,
        help="Limit the number of conversations to process (0 for no limit)",
    )

    p_cfg = sub.add_parser("config", help="View and change settings")
    cfg_sub = p_cfg.add_subparsers(dest="config_command")
    cfg_sub.add_parser("show", help="Show current settings")
    cfg_sub.add_parser("path", help="Print config file location")
    p_cfg_output = cfg_sub.add_parser(
        "set-output", help="Set the default output directory"
    )
    p_cfg_output.add_argument("dir", help="Output directory")
    p_cfg_limit = cfg_sub.add_parser(
        "set-limit", help="Set the default conversation limit"
    )
    p_cfg_limit.add_argument("limit", type=int, help="0 for no limit")

    return parser


_COMMAND_MAP: dict[str, Handler] = {
    "convert": cmd_convert,
}

_CONFIG_MAP: dict[str, Handler] = {
    "show": cmd_config_show,
    "path": cmd_config_path,
    "set-output": cmd_config_set_output,
    "set-limit": cmd_config_set_limit,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="  %(name)s: %(message)s",
        )

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "config":
        if not args.config_command:
            parser.parse_args(["config", "--help"])
            return 0
        handler = _CONFIG_MAP.get(args.config_command)
    else:
        handler = _COMMAND_MAP.get(args.command)

    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args)
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
