"""
Keyword presence check.

Pure check with no I/O - scans document text for any of a set of keywords.
"""

from docguard.domain.interfaces import CheckInterface
from docguard.domain.models import CheckResult, Corpus


class KeywordCheck(CheckInterface):
    """
    Passes if any document contains any of the keywords.

    Stops scanning at the first matching document. Matching is a plain
    substring test, so "tool" also matches "toolkit".
    """

    def __init__(
        self,
        keywords: tuple[str, ...],
        found_message: str,
        missing_message: str,
        case_sensitive: bool = False,
    ):
        """
        Args:
            keywords: Substrings to look for
            found_message: Message when a keyword is present
            missing_message: Message when no document contains a keyword
            case_sensitive: Compare text as-is instead of lowercased
        """
        if not keywords:
            raise ValueError("KeywordCheck requires at least one keyword")
        self.case_sensitive = case_sensitive
        self.keywords = (
            keywords if case_sensitive else tuple(k.lower() for k in keywords)
        )
        self.found_message = found_message
        self.missing_message = missing_message

    def validate(self, corpus: Corpus) -> CheckResult:
        for document in corpus.documents:
            if self.matches(document.content):
                return CheckResult(passed=True, message=self.found_message)
        return CheckResult(passed=False, message=self.missing_message)

    def matches(self, text: str) -> bool:
        """True if ``text`` contains any keyword."""
        haystack = text if self.case_sensitive else text.lower()
        return any(keyword in haystack for keyword in self.keywords)
