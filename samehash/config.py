"""Configuration loading and validation for samehash."""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from samehash.errors import ConfigError
from samehash.hasher import CHUNK_SIZE

COLOR_CHOICES = ("auto", "always", "never")


@dataclass
class AppConfig:
    paths: list[str] = field(default_factory=list)
    chunk_size: int = CHUNK_SIZE
    skip_hidden: bool = False
    color: str = "auto"
    pause_on_exit: bool = True
    log_file: Path | None = None


def _parse_cli_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="samehash",
        description="Hash files and directories with SHA-256 and check whether they match",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files and/or directories to hash (directories are walked recursively)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        help=f"Bytes read per chunk (default {CHUNK_SIZE})",
    )
    parser.add_argument(
        "--skip-hidden",
        action="store_true",
        default=None,
        help="Skip dot-files and dot-directories inside walked directories",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default=None,
        help="Colour the SAME/DIFFERENT line (default: auto)",
    )
    parser.add_argument(
        "--no-pause",
        dest="pause_on_exit",
        action="store_false",
        default=None,
        help="Do not wait for enter before exiting",
    )
    parser.add_argument(
        "--log",
        type=Path,
        default=None,
        help="Path to write a session log",
    )
    return parser.parse_args(args)


def _load_yaml(path: Path) -> dict:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc.strerror or exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a YAML mapping, got {type(data).__name__}")
    return data


def _validate_and_resolve(data: dict, base_dir: Path | None = None) -> AppConfig:
    chunk_size = data.get("chunk_size", CHUNK_SIZE)
    # bool is an int subclass; reject it explicitly
    if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size < 1:
        raise ConfigError(f"chunk_size must be a positive integer, got {chunk_size!r}")

    color = data.get("color", "auto")
    if color not in COLOR_CHOICES:
        raise ConfigError(f"color must be one of {', '.join(COLOR_CHOICES)}, got '{color}'")

    flags = {}
    for key, default in (("skip_hidden", False), ("pause_on_exit", True)):
        value = data.get(key, default)
        if not isinstance(value, bool):
            raise ConfigError(f"{key} must be true or false, got {value!r}")
        flags[key] = value

    log_file = None
    if data.get("log_file") is not None:
        log_file = Path(data["log_file"]).expanduser()
        if not log_file.is_absolute() and base_dir is not None:
            log_file = base_dir / log_file

    raw_paths = data.get("paths", [])
    if not isinstance(raw_paths, list):
        raise ConfigError("paths must be a list")
    paths = []
    for raw in raw_paths:
        if not isinstance(raw, str):
            raise ConfigError(f"paths entries must be strings, got {raw!r}")
        path = Path(raw).expanduser()
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        paths.append(str(path))

    return AppConfig(
        paths=paths,
        chunk_size=chunk_size,
        skip_hidden=flags["skip_hidden"],
        color=color,
        pause_on_exit=flags["pause_on_exit"],
        log_file=log_file,
    )


def build_config(cli_args: list[str] | None = None) -> AppConfig:
    """Parse CLI args, load the optional YAML config, validate, and return AppConfig.

    Values given on the command line override the config file. Positional
    paths replace any paths listed in the config file.
    """
    ns = _parse_cli_args(cli_args)

    data: dict = {}
    base_dir = None
    if ns.config is not None:
        config_path = ns.config.expanduser().resolve()
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        data = _load_yaml(config_path)
        base_dir = config_path.parent

    overrides = {
        "chunk_size": ns.chunk_size,
        "skip_hidden": ns.skip_hidden,
        "color": ns.color,
        "pause_on_exit": ns.pause_on_exit,
    }
    for key, value in overrides.items():
        if value is not None:
            data[key] = value
    config = _validate_and_resolve(data, base_dir)
    if ns.paths:
        config.paths = list(ns.paths)
    if ns.log is not None:
        config.log_file = ns.log.expanduser()
    return config
