"""Command-line entry point for samehash."""

import sys

import yaml

from samehash.check import run_check
from samehash.config import build_config
from samehash.errors import ConfigError
from samehash.report import (
    display_path,
    exit_status,
    make_console,
    pause,
    print_arguments,
    render_report,
    write_session_log,
)


def main(argv: list[str] | None = None) -> int:
    try:
        config = build_config(argv)
    except (ConfigError, yaml.YAMLError) as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 2

    out = make_console(config.color)
    err = make_console(config.color, stderr=True)

    print_arguments(config.paths, out, err)
    report = run_check(
        config.paths,
        chunk_size=config.chunk_size,
        skip_hidden=config.skip_hidden,
    )
    render_report(report, out, err)

    if config.log_file is not None:
        log_path = write_session_log(report, config.log_file)
        err.print(f"\nLog written to: {display_path(log_path)}")

    if config.pause_on_exit:
        pause(err)

    return exit_status(report)


if __name__ == "__main__":
    sys.exit(main())
