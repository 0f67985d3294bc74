"""
Domain layer for documentation validation.

Contains the corpus and result models, the check port and domain errors,
with no external dependencies.
"""

from docguard.domain.exceptions import (
    ConfigurationError,
    DocGuardError,
    DocsRootNotFound,
    NotFoundError,
)
from docguard.domain.interfaces import CheckInterface
from docguard.domain.models import (
    CheckResult,
    Corpus,
    Document,
    Principle,
    PrincipleOutcome,
    RunStatus,
    SectionDirectory,
    UnreadableDocument,
    ValidationReport,
)

__all__ = [
    # Models
    "Document",
    "UnreadableDocument",
    "SectionDirectory",
    "Corpus",
    "CheckResult",
    "Principle",
    "PrincipleOutcome",
    "RunStatus",
    "ValidationReport",
    # Interfaces
    "CheckInterface",
    # Exceptions
    "DocGuardError",
    "NotFoundError",
    "DocsRootNotFound",
    "ConfigurationError",
]
