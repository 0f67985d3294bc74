"""
Output format compatibility check.

Passes when every enumerated document could be read as text.
"""

from docguard.domain.interfaces import CheckInterface
from docguard.domain.models import CheckResult, Corpus

# Unreadable paths listed in the failure message before truncating
MAX_LISTED = 5


class FormatCompatibilityCheck(CheckInterface):
    """
    Validates that the site generator can consume every document.

    Documents are decoded leniently when the corpus is loaded, so only
    documents that failed to read at all count against this check.
    An empty corpus passes.
    """

    def validate(self, corpus: Corpus) -> CheckResult:
        if not corpus.unreadable:
            return CheckResult(
                passed=True,
                message=f"{len(corpus.documents)} valid Markdown files found",
            )

        paths = [doc.path for doc in corpus.unreadable]
        listed = ", ".join(paths[:MAX_LISTED])
        if len(paths) > MAX_LISTED:
            listed += f", ... ({len(paths) - MAX_LISTED} more)"
        return CheckResult(
            passed=False,
            message=(
                f"{len(paths)} of {corpus.document_count} files could not be "
                f"read as text: {listed}"
            ),
        )
