"""Run one check: expand paths, hash every file, aggregate the results."""

from pathlib import Path

from samehash.aggregate import aggregate
from samehash.errors import SameHashError
from samehash.expand import expand_paths
from samehash.hasher import CHUNK_SIZE, hash_file, make_buffer
from samehash.models import CheckReport, Failure, FileRecord, Outcome


def hash_files(
    files: tuple[Path, ...] | list[Path],
    buf: bytearray,
) -> tuple[list[FileRecord], list[Failure]]:
    """Hash each file in turn with the given buffer, partitioning the results."""
    records: list[FileRecord] = []
    failures: list[Failure] = []
    for path in files:
        try:
            digest = hash_file(path, buf)
        except SameHashError as exc:
            failures.append(exc.to_failure())
            continue
        records.append(FileRecord(path=path, digest=digest))
    return records, failures


def run_check(
    paths: list[Path | str],
    chunk_size: int = CHUNK_SIZE,
    skip_hidden: bool = False,
) -> CheckReport:
    """Expand, hash and aggregate. Per-path errors are collected, never raised."""
    expansion = expand_paths(paths, skip_hidden=skip_hidden)

    records: list[FileRecord] = []
    hash_failures: list[Failure] = []
    if expansion.files:
        buf = make_buffer(chunk_size)
        records, hash_failures = hash_files(expansion.files, buf)

    if not expansion.files:
        outcome = Outcome.NO_FILES
    elif not records:
        outcome = Outcome.ALL_FAILED
    else:
        outcome = Outcome.OK

    return CheckReport(
        paths=tuple(str(p) for p in paths),
        records=tuple(records),
        traversal_failures=expansion.failures,
        hash_failures=tuple(hash_failures),
        aggregate=aggregate(records),
        outcome=outcome,
    )
