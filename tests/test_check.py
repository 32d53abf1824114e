"""Tests for samehash.check."""

import hashlib

import pytest

import samehash.check
from samehash.check import hash_files, run_check
from samehash.errors import ReadError
from samehash.hasher import make_buffer
from samehash.models import Outcome


def _sha(content: bytes) -> str:
    return hashlib.sha256(content).hexdigest().upper()


@pytest.fixture
def twin_files(tmp_path):
    """Two files with identical content in different places."""
    (tmp_path / "left").mkdir()
    (tmp_path / "right").mkdir()
    a = tmp_path / "left" / "copy.bin"
    b = tmp_path / "right" / "copy.bin"
    a.write_bytes(b"same bytes")
    b.write_bytes(b"same bytes")
    return a, b


# --- Scenarios ---

def test_identical_files_same(twin_files):
    """Identical content gives all_equal and the path-ordered combined digest."""
    a, b = twin_files
    report = run_check([b, a], chunk_size=4)
    digest = _sha(b"same bytes")

    assert report.outcome is Outcome.OK
    assert [r.digest for r in report.records] == [digest, digest]
    assert report.aggregate.all_equal is True
    assert report.aggregate.combined_digest == _sha((digest + digest).encode("ascii"))


def test_combined_digest_independent_of_argument_order(tmp_path):
    for name, content in (("a", b"alpha"), ("b", b"beta"), ("c", b"gamma")):
        (tmp_path / name).write_bytes(content)
    paths = [tmp_path / "a", tmp_path / "b", tmp_path / "c"]

    forward = run_check(paths, chunk_size=3)
    backward = run_check(list(reversed(paths)), chunk_size=3)
    assert forward.aggregate == backward.aggregate
    assert forward.aggregate.all_equal is False


def test_directory_and_explicit_files_agree(tmp_path):
    """Walking a directory and listing its files give the same fingerprint."""
    folder = tmp_path / "data"
    folder.mkdir()
    (folder / "one.txt").write_bytes(b"1")
    (folder / "two.txt").write_bytes(b"2")

    via_dir = run_check([folder])
    via_files = run_check([folder / "two.txt", folder / "one.txt"])
    assert via_dir.aggregate.combined_digest == via_files.aggregate.combined_digest


def test_file_plus_directory_aggregates_three(tmp_path):
    (tmp_path / "single").write_bytes(b"s")
    folder = tmp_path / "folder"
    folder.mkdir()
    (folder / "x").write_bytes(b"x")
    (folder / "y").write_bytes(b"y")

    report = run_check([tmp_path / "single", folder], chunk_size=1024)
    assert len(report.records) == 3
    assert report.aggregate is not None


def test_single_file_has_no_aggregate(tmp_path):
    f = tmp_path / "lonely.txt"
    f.write_bytes(b"alone")

    report = run_check([f])
    assert report.outcome is Outcome.OK
    assert len(report.records) == 1
    assert report.aggregate is None


# --- Failures and empty outcomes ---

def test_missing_path_does_not_block_others(tmp_path):
    (tmp_path / "first").write_bytes(b"1")
    (tmp_path / "third").write_bytes(b"3")

    report = run_check([tmp_path / "first", tmp_path / "second", tmp_path / "third"])
    assert [r.path.name for r in report.records] == ["first", "third"]
    assert [f.kind for f in report.traversal_failures] == ["PathNotFound"]
    assert report.hash_failures == ()
    assert report.outcome is Outcome.OK


def test_no_arguments_is_no_files():
    report = run_check([])
    assert report.outcome is Outcome.NO_FILES
    assert report.records == ()
    assert report.aggregate is None


def test_empty_directory_is_no_files(tmp_path):
    report = run_check([tmp_path])
    assert report.outcome is Outcome.NO_FILES
    assert report.failures == ()


def test_all_missing_is_no_files(tmp_path):
    report = run_check([tmp_path / "gone"])
    assert report.outcome is Outcome.NO_FILES
    assert len(report.failures) == 1


def test_hash_failures_collected(tmp_path, monkeypatch):
    """Read errors become hash failures; the run still finishes."""
    good = tmp_path / "good"
    bad = tmp_path / "bad"
    good.write_bytes(b"ok")
    bad.write_bytes(b"broken")
    real_hash_file = samehash.check.hash_file

    def flaky_hash_file(path, buf):
        if path == bad:
            raise ReadError(path, "Input/output error")
        return real_hash_file(path, buf)

    monkeypatch.setattr(samehash.check, "hash_file", flaky_hash_file)
    report = run_check([bad, good])

    assert [r.path for r in report.records] == [good]
    assert [(f.path, f.kind) for f in report.hash_failures] == [(bad, "ReadError")]
    assert report.outcome is Outcome.OK


def test_all_hashing_failed(tmp_path, monkeypatch):
    f = tmp_path / "f"
    f.write_bytes(b"x")

    def always_fails(path, buf):
        raise ReadError(path, "Input/output error")

    monkeypatch.setattr(samehash.check, "hash_file", always_fails)
    report = run_check([f])
    assert report.outcome is Outcome.ALL_FAILED
    assert len(report.hash_failures) == 1


def test_hash_files_shares_one_buffer(tmp_path):
    paths = []
    for i in range(3):
        p = tmp_path / f"f{i}"
        p.write_bytes(bytes([i]) * (i * 10))
        paths.append(p)

    records, failures = hash_files(paths, make_buffer(7))
    assert failures == []
    assert [r.digest for r in records] == [_sha(bytes([i]) * (i * 10)) for i in range(3)]


def test_repeated_argument_hashed_twice(tmp_path):
    """Every direct file argument gets its own record, even a repeat."""
    f = tmp_path / "same.bin"
    f.write_bytes(b"twice")
    digest = _sha(b"twice")

    report = run_check([f, f])
    assert [r.digest for r in report.records] == [digest, digest]
    assert report.failures == ()
    assert report.aggregate.all_equal is True
    assert report.aggregate.combined_digest == _sha((digest + digest).encode("ascii"))
