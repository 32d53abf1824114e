"""Equality check and order-independent combined digest over file records."""

import hashlib
import os

from samehash.models import AggregateResult, FileRecord


def _path_sort_key(record: FileRecord) -> bytes:
    return os.fsencode(str(record.path))


def combine_digests(records: list[FileRecord]) -> str:
    """SHA-256 over the per-file digests, fed in byte-wise path order.

    Sorting by path rather than by arrival makes the result independent of
    argument order and of whether a file was named directly or found by
    walking its directory.
    """
    sha = hashlib.sha256()
    for record in sorted(records, key=_path_sort_key):
        sha.update(record.digest.encode("ascii"))
    return sha.hexdigest().upper()


def aggregate(records: list[FileRecord]) -> AggregateResult | None:
    """Compare and fingerprint records. Returns None for fewer than two."""
    if len(records) < 2:
        return None
    digests = {record.digest for record in records}
    return AggregateResult(
        all_equal=len(digests) == 1,
        combined_digest=combine_digests(records),
    )
