"""
Directory layout checks.

Pure checks over the root directory listing captured in the corpus.
Documentation is expected to be split into section directories ("chapters")
that share a name prefix, with an introduction page at the root.
"""

from docguard.domain.interfaces import CheckInterface
from docguard.domain.models import CheckResult, Corpus


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


class StructureCheck(CheckInterface):
    """
    Validates the book-style layout of the document root.

    Passes iff there are at least ``min_sections`` section directories and
    the introduction file exists directly under the root.
    """

    def __init__(
        self,
        section_prefix: str = "chapter",
        intro_file: str = "intro.md",
        min_sections: int = 3,
    ):
        self.section_prefix = section_prefix
        self.intro_file = intro_file
        self.min_sections = min_sections

    def validate(self, corpus: Corpus) -> CheckResult:
        sections = corpus.section_directories(self.section_prefix)
        has_intro = corpus.has_root_file(self.intro_file)
        return CheckResult(
            passed=len(sections) >= self.min_sections and has_intro,
            message=(
                f"Found {len(sections)} {self.section_prefix} directories "
                f"and intro: {_yes_no(has_intro)}"
            ),
        )


class ModularityCheck(CheckInterface):
    """
    Validates that every section directory is split into several pages.

    Fails when there are no section directories at all.
    """

    def __init__(self, section_prefix: str = "chapter", min_entries: int = 2):
        self.section_prefix = section_prefix
        self.min_entries = min_entries

    def validate(self, corpus: Corpus) -> CheckResult:
        sections = corpus.section_directories(self.section_prefix)
        all_modular = all(s.entry_count >= self.min_entries for s in sections)
        # Capitalized to read as a heading: "Chapter directories: 3"
        label = self.section_prefix.capitalize()
        return CheckResult(
            passed=bool(sections) and all_modular,
            message=(
                f"{label} directories: {len(sections)}, "
                f"All modular: {_yes_no(all_modular)}"
            ),
        )
