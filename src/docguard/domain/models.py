"""
Domain models for documentation validation.

Pure data structures describing the corpus under validation, the
principles it is validated against, and the outcome of a run.
All models are immutable (frozen dataclasses) so a run has no hidden state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docguard.domain.interfaces import CheckInterface


# =============================================================================
# CORPUS
# =============================================================================


@dataclass(frozen=True)
class Document:
    """A documentation source file and its text."""

    path: str  # Relative to the document root, POSIX separators
    content: str


@dataclass(frozen=True)
class UnreadableDocument:
    """A document that was enumerated but could not be read."""

    path: str
    error: str


@dataclass(frozen=True)
class SectionDirectory:
    """A direct subdirectory of the document root."""

    name: str
    entry_count: int  # Entries directly inside, files and directories alike


@dataclass(frozen=True)
class Corpus:
    """
    Everything a check may look at, loaded once per run.

    Checks never touch the filesystem; they only see this snapshot.
    """

    root: str
    documents: tuple[Document, ...] = ()
    unreadable: tuple[UnreadableDocument, ...] = ()
    directories: tuple[SectionDirectory, ...] = ()
    root_files: frozenset[str] = frozenset()

    @property
    def document_count(self) -> int:
        """Number of enumerated documents, readable or not."""
        return len(self.documents) + len(self.unreadable)

    def texts(self) -> tuple[str, ...]:
        return tuple(doc.content for doc in self.documents)

    def section_directories(self, prefix: str) -> tuple[SectionDirectory, ...]:
        """Direct subdirectories whose name starts with ``prefix``."""
        return tuple(d for d in self.directories if d.name.startswith(prefix))

    def has_root_file(self, name: str) -> bool:
        return name in self.root_files


# =============================================================================
# PRINCIPLES AND RESULTS
# =============================================================================


@dataclass(frozen=True)
class CheckResult:
    """Immutable check outcome."""

    passed: bool
    message: str = ""


@dataclass(frozen=True)
class Principle:
    """A named documentation rule with its automated check."""

    key: str  # Stable identifier used on the command line
    name: str
    description: str
    check: "CheckInterface"


@dataclass(frozen=True)
class PrincipleOutcome:
    """Result of evaluating one principle."""

    principle: Principle
    result: CheckResult

    @property
    def passed(self) -> bool:
        return self.result.passed


class RunStatus(Enum):
    """Overall outcome of a validation run."""

    PASSED = "passed"  # Every principle passed
    FAILED = "failed"  # At least one principle failed


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of running every selected principle against a corpus."""

    root: str
    outcomes: tuple[PrincipleOutcome, ...]
    document_count: int = 0

    @property
    def passed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.passed)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def all_passed(self) -> bool:
        return self.passed_count == self.total

    @property
    def status(self) -> RunStatus:
        return RunStatus.PASSED if self.all_passed else RunStatus.FAILED

    def failed(self) -> tuple[PrincipleOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.passed)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "root": self.root,
            "status": self.status.value,
            "document_count": self.document_count,
            "passed": self.passed_count,
            "total": self.total,
            "principles": [
                {
                    "key": outcome.principle.key,
                    "name": outcome.principle.name,
                    "description": outcome.principle.description,
                    "passed": outcome.result.passed,
                    "message": outcome.result.message,
                }
                for outcome in self.outcomes
            ],
        }
