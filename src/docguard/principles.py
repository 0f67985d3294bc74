"""
Documentation principles catalogue.

The eight principles every documentation tree is validated against, in
reporting order. The catalogue is built once and never mutated; callers
that need different layout parameters build their own with
build_principles().
"""

from collections.abc import Iterable

from docguard.checks import (
    FormatCompatibilityCheck,
    KeywordCheck,
    ModularityCheck,
    StructureCheck,
    VisualAidsCheck,
)
from docguard.domain.exceptions import ConfigurationError
from docguard.domain.models import Principle


def build_principles(
    section_prefix: str = "chapter",
    intro_file: str = "intro.md",
    min_sections: int = 3,
    min_section_entries: int = 2,
    diagram_tags: tuple[str, ...] = ("mermaid",),
) -> tuple[Principle, ...]:
    """
    Build the ordered principle catalogue.

    Args:
        section_prefix: Name prefix of section ("chapter") directories
        intro_file: File that must exist directly under the root
        min_sections: Minimum number of section directories
        min_section_entries: Minimum entries inside each section directory
        diagram_tags: Fence languages that count as diagrams

    Returns:
        Tuple of Principle in reporting order
    """
    return (
        Principle(
            key="citations",
            name="Content Accuracy & Research-Based Approach",
            description=(
                "All content must be accurate, research-based, "
                "and cite sources where possible"
            ),
            check=KeywordCheck(
                ("cite", "reference", "source"),
                found_message="Found citation references in content",
                missing_message="No citation references found in content",
                case_sensitive=True,
            ),
        ),
        Principle(
            key="academic-language",
            name="Academic Language & Professional Communication",
            description=(
                "Use clear, professional academic language "
                "suitable for thesis/research paper"
            ),
            check=KeywordCheck(
                ("research", "study", "analysis", "methodology"),
                found_message="Found academic language indicators",
                missing_message="No clear academic language indicators found",
            ),
        ),
        Principle(
            key="structure",
            name="Structured Documentation Format",
            description=(
                "Structure everything in chapters/sections (8-10 chapter book style)"
            ),
            check=StructureCheck(
                section_prefix=section_prefix,
                intro_file=intro_file,
                min_sections=min_sections,
            ),
        ),
        Principle(
            key="visual-aids",
            name="Visual Aids & Practical Examples",
            description=(
                "Include diagrams (Mermaid for architecture), "
                "code snippets, and practical examples"
            ),
            check=VisualAidsCheck(diagram_tags=diagram_tags),
        ),
        Principle(
            key="agentic-focus",
            name="Agentic AI Concepts Focus",
            description=(
                "Prioritize agentic AI concepts: planning, tools, multi-agent, "
                "constitution-driven development"
            ),
            check=KeywordCheck(
                ("agent", "planning", "multi-agent", "tool"),
                found_message="Found agentic AI concept references",
                missing_message="No clear agentic AI concept references found",
            ),
        ),
        Principle(
            key="safety-ethics",
            name="Safety & Ethics Standards",
            description=(
                "Avoid hallucinations, no harmful suggestions, transparent reasoning"
            ),
            check=KeywordCheck(
                ("safety", "ethics", "secure", "privacy"),
                found_message="Found safety/ethics considerations",
                missing_message="No safety/ethics considerations found",
            ),
        ),
        Principle(
            key="format",
            name="Output Format Compatibility",
            description=(
                "Output format: Markdown compatible with Docusaurus (MDX if needed)"
            ),
            check=FormatCompatibilityCheck(),
        ),
        Principle(
            key="modularity",
            name="Modular & Extensible Documentation",
            description="Keep docs modular, versionable, and easy to extend",
            check=ModularityCheck(
                section_prefix=section_prefix,
                min_entries=min_section_entries,
            ),
        ),
    )


DEFAULT_PRINCIPLES: tuple[Principle, ...] = build_principles()


def principle_keys(principles: Iterable[Principle]) -> tuple[str, ...]:
    return tuple(p.key for p in principles)


def select_principles(
    principles: tuple[Principle, ...], keys: Iterable[str]
) -> tuple[Principle, ...]:
    """
    Select a subset of principles by key, keeping catalogue order.

    An empty ``keys`` selects every principle.

    Raises:
        ConfigurationError: If a key is not in the catalogue
    """
    wanted = set(keys)
    if not wanted:
        return principles

    unknown = wanted - set(principle_keys(principles))
    if unknown:
        raise ConfigurationError(
            f"Unknown principle(s): {', '.join(sorted(unknown))}. "
            f"Valid principles: {', '.join(principle_keys(principles))}"
        )
    return tuple(p for p in principles if p.key in wanted)
