"""SHA-256 file hashing in fixed-size chunks."""

import hashlib
from pathlib import Path
from typing import BinaryIO

from samehash.errors import OpenError, ReadError

CHUNK_SIZE = 100 * 1024 * 1024  # 100 MiB


def make_buffer(size: int = CHUNK_SIZE) -> bytearray:
    """Allocate a read buffer for hash_stream/hash_file."""
    if size < 1:
        raise ValueError(f"chunk size must be at least 1 byte, got {size}")
    return bytearray(size)


def hash_stream(stream: BinaryIO, buf: bytearray) -> str:
    """Return the uppercase SHA-256 hex digest of everything left in stream.

    Reads into the caller's buffer, one chunk at a time, so memory stays at
    len(buf) no matter how long the stream is. OSErrors from the stream
    propagate unchanged.
    """
    sha = hashlib.sha256()
    with memoryview(buf) as view:
        while n := stream.readinto(view):
            sha.update(view[:n])
    return sha.hexdigest().upper()


def hash_file(path: Path | str, buf: bytearray) -> str:
    """Hash one file, raising OpenError or ReadError attributed to path."""
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise OpenError(path, exc.strerror or str(exc)) from exc
    with f:
        try:
            return hash_stream(f, buf)
        except OSError as exc:
            raise ReadError(path, exc.strerror or str(exc)) from exc
