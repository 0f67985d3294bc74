"""
Checks for documentation principles.

Checks are deterministic validators over an in-memory corpus that return
a passing or failing CheckResult with a message. None of them read the
filesystem, so each can be tested against a hand-built Corpus.

Organization by what is inspected:
- keywords: document text, substring presence
- visual: document text, fenced block structure
- structure: root directory listing
- format: read status of every document
"""

from docguard.checks.format import FormatCompatibilityCheck
from docguard.checks.keywords import KeywordCheck
from docguard.checks.structure import ModularityCheck, StructureCheck
from docguard.checks.visual import VisualAidsCheck

__all__ = [
    # Text checks
    "KeywordCheck",
    "VisualAidsCheck",
    # Layout checks
    "StructureCheck",
    "ModularityCheck",
    # Read status
    "FormatCompatibilityCheck",
]
