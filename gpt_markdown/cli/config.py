"""Configuration management for the gpt-markdown CLI.

Reads/writes a TOML config file and provides a typed Config dataclass.
Default location: ``~/.config/gpt-markdown/config.toml``.
Override with the ``GPT_MARKDOWN_CONFIG`` environment variable.

Example::

    [output]
    dir = "./output"

    [convert]
    limit = 0
"""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_CONFIG_DIR = Path("~/.config/gpt-markdown").expanduser()
_DEFAULT_OUTPUT_DIR = Path("./output")


def _config_path() -> Path:
    env = os.environ.get("GPT_MARKDOWN_CONFIG")
    if env:
        return Path(env).expanduser()
    return _DEFAULT_CONFIG_DIR / "config.toml"


@dataclass
class Config:
    output_dir: str = str(_DEFAULT_OUTPUT_DIR)

    # 0 means convert every conversation
    limit: int = 0


def load_config() -> Config:
    """Load config from disk, falling back to defaults + env overrides."""
    path = _config_path()
    cfg = Config()

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)
        output_section = data.get("output", {})
        convert_section = data.get("convert", {})

        cfg.output_dir = output_section.get("dir", cfg.output_dir)
        cfg.limit = int(convert_section.get("limit", cfg.limit))

    # Environment variables always take precedence
    cfg.output_dir = os.environ.get("GPT_MARKDOWN_OUTPUT_DIR", cfg.output_dir)
    cfg.limit = int(os.environ.get("GPT_MARKDOWN_LIMIT", str(cfg.limit)))

    return cfg


def save_config(cfg: Config) -> Path:
    """Write config to the TOML file. Returns the path written."""
    path = _config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        "[output]",
        f"dir = {json.dumps(cfg.output_dir)}",
        "",
        "[convert]",
        f"limit = {cfg.limit}",
        "",
    ]

    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def config_exists() -> bool:
    return _config_path().exists()


def config_path_display() -> str:
    return str(_config_path())
