"""
DocGuard: documentation principles validator.

Scans a Markdown/MDX documentation tree once and validates it against an
ordered catalogue of documentation principles, each backed by a pure check.

Example:
    from pathlib import Path

    from docguard import ContentValidator, DEFAULT_PRINCIPLES, load_corpus

    corpus = load_corpus(Path("docs"))
    report = ContentValidator(DEFAULT_PRINCIPLES).run(corpus)
    print(f"{report.passed_count}/{report.total} principles validated")
"""

# Application layer (orchestration)
from docguard.application.validator import ContentValidator

# Checks
from docguard.checks import (
    FormatCompatibilityCheck,
    KeywordCheck,
    ModularityCheck,
    StructureCheck,
    VisualAidsCheck,
)

# Domain exceptions
from docguard.domain.exceptions import (
    ConfigurationError,
    DocGuardError,
    DocsRootNotFound,
    NotFoundError,
)

# Domain interfaces (for custom checks)
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

# Infrastructure
from docguard.infrastructure import (
    DocGuardSettings,
    enumerate_documents,
    load_corpus,
    load_settings,
)
from docguard.principles import (
    DEFAULT_PRINCIPLES,
    build_principles,
    select_principles,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Document",
    "UnreadableDocument",
    "SectionDirectory",
    "Corpus",
    "CheckResult",
    "Principle",
    "PrincipleOutcome",
    "RunStatus",
    "ValidationReport",
    # Domain interfaces
    "CheckInterface",
    # Domain exceptions
    "DocGuardError",
    "NotFoundError",
    "DocsRootNotFound",
    "ConfigurationError",
    # Principles
    "DEFAULT_PRINCIPLES",
    "build_principles",
    "select_principles",
    # Application layer
    "ContentValidator",
    # Infrastructure
    "DocGuardSettings",
    "enumerate_documents",
    "load_corpus",
    "load_settings",
    # Checks
    "KeywordCheck",
    "VisualAidsCheck",
    "StructureCheck",
    "ModularityCheck",
    "FormatCompatibilityCheck",
]
