"""Terminal output, session log and pause-on-exit for a finished check."""

import os
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console

from samehash.models import CheckReport, Outcome

NO_FILES_MESSAGE = "No valid files found (did you select a folder with no files?)"


def display_path(path: Path | str) -> str:
    """Printable form of a path; undecodable bytes become U+FFFD."""
    return os.fsencode(str(path)).decode("utf-8", "replace")


def make_console(color: str = "auto", stderr: bool = False) -> Console:
    """Build a rich Console for stdout (or stderr).

    "auto" leaves colour detection to rich, which only colours a terminal.
    """
    kwargs = {}
    if color == "always":
        kwargs["force_terminal"] = True
    elif color == "never":
        kwargs["color_system"] = None
    return Console(
        stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True, **kwargs,
    )


def print_arguments(paths: list[str] | tuple[str, ...], out: Console, err: Console) -> None:
    out.print("Arguments:")
    for path in paths:
        out.print(display_path(path))
    err.print("\nComputing hashes (error-producing items will be skipped)...\n")


def render_report(report: CheckReport, out: Console, err: Console) -> None:
    """Print failures to err, then digests, comparison and combined digest to out."""
    for failure in report.failures:
        err.print(f"{failure.kind}: {display_path(failure.path)}: {failure.message}")

    if report.outcome is Outcome.NO_FILES:
        out.print(NO_FILES_MESSAGE)
        return
    if report.outcome is Outcome.ALL_FAILED:
        out.print(f"No files could be hashed (all {len(report.hash_failures)} failed)")
        return

    out.print()
    for record in report.records:
        out.print(f"{display_path(record.path)}\n{record.digest}\n")

    if report.aggregate is not None:
        if report.aggregate.all_equal:
            out.print("SAME\n", style="green")
        else:
            out.print("DIFFERENT\n", style="red")
        out.print(f"Combined\n{report.aggregate.combined_digest}\n")

    out.print("SHA-256")


def exit_status(report: CheckReport) -> int:
    """0 when everything hashed matched, 1 for a mismatch or nothing hashed."""
    if report.outcome is not Outcome.OK:
        return 1
    if report.aggregate is not None and not report.aggregate.all_equal:
        return 1
    return 0


def write_session_log(report: CheckReport, log_path: Path) -> Path:
    """Write a plain-text summary of the run and return its path."""
    log_path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        "samehash session",
        f"Timestamp: {datetime.now().isoformat(timespec='seconds')}",
        f"Inputs: {', '.join(display_path(p) for p in report.paths)}",
        f"Outcome: {report.outcome.value}",
        "",
        "Summary:",
        f"  Files hashed: {len(report.records)}",
        f"  Traversal failures: {len(report.traversal_failures)}",
        f"  Hash failures: {len(report.hash_failures)}",
    ]

    if report.records:
        lines.append("")
        lines.append("Digests:")
        for record in report.records:
            lines.append(f"  {record.digest}  {display_path(record.path)}")

    if report.failures:
        lines.append("")
        lines.append("Errors:")
        for failure in report.failures:
            lines.append(f"  - {failure.kind}: {display_path(failure.path)}: {failure.message}")

    if report.aggregate is not None:
        lines.append("")
        lines.append(f"Status: {'SAME' if report.aggregate.all_equal else 'DIFFERENT'}")
        lines.append(f"Combined: {report.aggregate.combined_digest}")

    log_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return log_path


def pause(err: Console) -> None:
    """Wait for enter, but only when someone is there to press it."""
    if not sys.stdin.isatty():
        return
    err.print("\nPress enter to exit...", end="")
    sys.stdin.readline()
