"""Terminal output helpers for the gpt-markdown CLI.

Plain ANSI formatting plus the per-document progress lines printed by
``gpt-markdown convert``.
Automatically disables color when stdout is not a TTY or when
the ``NO_COLOR`` environment variable is set.
"""

from __future__ import annotations

import os
import sys

from gpt_markdown.core.types import ConversionResult


def _supports_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if not hasattr(sys.stdout, "isatty"):
        return False
    return sys.stdout.isatty()


_COLOR = _supports_color()


def _ansi(code: str, text: str) -> str:
    if not _COLOR:
        return text
    return f"\033[{code}m{text}\033[0m"


def bold(text: str) -> str:
    return _ansi("1", text)


def dim(text: str) -> str:
    return _ansi("2", text)


def green(text: str) -> str:
    return _ansi("32", text)


def yellow(text: str) -> str:
    return _ansi("33", text)


def red(text: str) -> str:
    return _ansi("31", text)


# ── Structured output ───────────────────────────────────────────────


def header(title: str) -> None:
    """Print a section header."""
    print(f"\n{bold(title)}")


def success(msg: str) -> None:
    print(f"  {green('✓')} {msg}")


def warn(msg: str) -> None:
    print(f"  {yellow('!')} {msg}")


def error(msg: str) -> None:
    print(f"  {red('✗')} {msg}")


def info(msg: str) -> None:
    print(f"  {msg}")


def kv(key: str, value: object, indent: int = 2) -> None:
    """Print a key-value pair."""
    pad = " " * indent
    print(f"{pad}{dim(str(key) + ':')}  {value}")


# ── Conversion progress ─────────────────────────────────────────────


def generated(location: str) -> None:
    success(f"Generated: {location}")


def conversion_summary(result: ConversionResult) -> None:
    """Print the totals for one ``convert`` run."""
    header("Summary")
    kv("Source", result.source)
    kv("Conversations", result.conversations_found)
    kv("Written", green(str(result.documents_written)))
    if result.conversations_failed:
        kv("Failed", red(str(result.conversations_failed)))
