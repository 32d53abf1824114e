"""Expand mixed file/directory arguments into a flat list of regular files."""

import os
import stat
from pathlib import Path

from samehash.errors import PathNotFound, SameHashError, TraversalError
from samehash.models import ExpansionResult, Failure


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _walk_directory(
    root: Path,
    root_id: tuple[int, int],
    skip_hidden: bool,
) -> tuple[list[Path], list[Failure]]:
    """Depth-first walk of root, following symlinks, isolating per-entry errors.

    Symlinked directories that point back at one of their own ancestors are
    reported as TraversalError and pruned.
    """
    files: list[Path] = []
    failures: list[Failure] = []
    ancestors: dict[str, tuple[tuple[int, int], ...]] = {str(root): (root_id,)}

    def on_error(exc: OSError) -> None:
        path = exc.filename if exc.filename is not None else root
        failures.append(TraversalError(path, _describe(exc)).to_failure())

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=True):
        chain = ancestors.pop(dirpath, ())

        kept_dirs = []
        for name in sorted(dirnames):
            if skip_hidden and _is_hidden(name):
                continue
            full = os.path.join(dirpath, name)
            try:
                st = os.stat(full)
            except OSError as exc:
                failures.append(TraversalError(full, _describe(exc)).to_failure())
                continue
            dir_id = (st.st_dev, st.st_ino)
            if dir_id in chain:
                failures.append(
                    TraversalError(full, "symbolic link cycle detected").to_failure()
                )
                continue
            ancestors[full] = chain + (dir_id,)
            kept_dirs.append(name)
        dirnames[:] = kept_dirs

        for name in sorted(filenames):
            if skip_hidden and _is_hidden(name):
                continue
            full = os.path.join(dirpath, name)
            try:
                st = os.stat(full)
            except FileNotFoundError:
                if os.path.islink(full):
                    message = "broken symbolic link"
                else:
                    message = "entry vanished during traversal"
                failures.append(TraversalError(full, message).to_failure())
                continue
            except OSError as exc:
                failures.append(TraversalError(full, _describe(exc)).to_failure())
                continue
            if stat.S_ISREG(st.st_mode):
                files.append(Path(full))

    return files, failures


def _expand_one(path: Path, skip_hidden: bool) -> tuple[list[Path], list[Failure]]:
    try:
        st = path.stat()
    except FileNotFoundError:
        if path.is_symlink():
            raise TraversalError(path, "broken symbolic link")
        raise PathNotFound(path, "no such file or directory")
    except OSError as exc:
        raise TraversalError(path, _describe(exc)) from exc

    if stat.S_ISREG(st.st_mode):
        return [path], []
    if stat.S_ISDIR(st.st_mode):
        return _walk_directory(path, (st.st_dev, st.st_ino), skip_hidden)
    raise TraversalError(path, "not a regular file or directory")


def expand_paths(paths: list[Path | str], skip_hidden: bool = False) -> ExpansionResult:
    """Turn input paths into regular files plus per-path traversal failures.

    Inputs are processed in order. Directories are walked recursively
    (following symlinks); an error on one entry never stops its siblings or
    the remaining inputs. A file reached more than once is listed each time,
    so every direct file argument yields its own record. skip_hidden only
    applies inside walked directories.
    """
    files: list[Path] = []
    failures: list[Failure] = []

    for raw in paths:
        path = Path(raw)
        try:
            found, walk_failures = _expand_one(path, skip_hidden)
        except SameHashError as exc:
            failures.append(exc.to_failure())
            continue
        failures.extend(walk_failures)
        files.extend(found)

    return ExpansionResult(files=tuple(files), failures=tuple(failures))
