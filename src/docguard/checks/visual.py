"""
Visual aids check.

Pure check with no I/O - looks for diagram blocks and code snippets in
fenced Markdown.
"""

import re

from docguard.domain.interfaces import CheckInterface
from docguard.domain.models import CheckResult, Corpus

FENCE = "```"


class VisualAidsCheck(CheckInterface):
    """
    Validates that the documentation includes diagrams and code examples.

    Both conditions must hold, but not necessarily in the same document:
    - some document opens a fence tagged with a diagram language
      (e.g. ```mermaid)
    - some document contains more than ``max_fences_without_snippets``
      fence delimiters, i.e. more than a single code block

    Every document is scanned; there is no early exit.
    """

    def __init__(
        self,
        diagram_tags: tuple[str, ...] = ("mermaid",),
        max_fences_without_snippets: int = 2,
    ):
        if not diagram_tags:
            raise ValueError("VisualAidsCheck requires at least one diagram tag")
        self.diagram_tags = diagram_tags
        self.max_fences_without_snippets = max_fences_without_snippets
        tags = "|".join(re.escape(tag) for tag in diagram_tags)
        self._diagram_fence = re.compile(
            rf"^[ \t]*{re.escape(FENCE)}[ \t]*(?:{tags})\b", re.MULTILINE
        )

    def validate(self, corpus: Corpus) -> CheckResult:
        has_diagrams = False
        has_code_snippets = False

        for text in corpus.texts():
            if self.has_diagram(text):
                has_diagrams = True
            if text.count(FENCE) > self.max_fences_without_snippets:
                has_code_snippets = True

        return CheckResult(
            passed=has_diagrams and has_code_snippets,
            message=(
                f"Diagrams: {'yes' if has_diagrams else 'no'}, "
                f"Code snippets: {'yes' if has_code_snippets else 'no'}"
            ),
        )

    def has_diagram(self, text: str) -> bool:
        """True if ``text`` opens a fence tagged with a diagram language."""
        return self._diagram_fence.search(text) is not None
