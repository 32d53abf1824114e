"""Result containers shared by the expander, hasher, aggregator and reporter."""

import enum
from dataclasses import dataclass
from pathlib import Path


class Outcome(enum.Enum):
    OK = "ok"
    NO_FILES = "no_files"
    ALL_FAILED = "all_failed"


@dataclass(frozen=True)
class FileRecord:
    path: Path
    digest: str


@dataclass(frozen=True)
class Failure:
    """A path that could not be expanded or hashed."""

    path: Path
    kind: str
    message: str


@dataclass(frozen=True)
class ExpansionResult:
    files: tuple[Path, ...] = ()
    failures: tuple[Failure, ...] = ()


@dataclass(frozen=True)
class AggregateResult:
    all_equal: bool
    combined_digest: str


@dataclass(frozen=True)
class CheckReport:
    """Everything one run produced, handed to the presentation layer."""

    paths: tuple[str, ...]
    records: tuple[FileRecord, ...]
    traversal_failures: tuple[Failure, ...]
    hash_failures: tuple[Failure, ...]
    aggregate: AggregateResult | None
    outcome: Outcome

    @property
    def failures(self) -> tuple[Failure, ...]:
        return self.traversal_failures + self.hash_failures
