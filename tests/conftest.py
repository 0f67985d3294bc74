"""Shared pytest fixtures for docguard tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from docguard.domain.models import (
    Corpus,
    Document,
    SectionDirectory,
    UnreadableDocument,
)

BOOK_FILES: dict[str, str] = {
    "intro.md": (
        "# Introduction\n\n"
        "This book surveys research on agent planning. "
        "See the reference list for every source we cite.\n"
    ),
    "chapter-01/index.md": "# Foundations\n\nAgents call a tool to act.\n",
    "chapter-01/architecture.md": (
        "# Architecture\n\n"
        "```mermaid\n"
        "graph TD\n"
        "  Planner --> Executor\n"
        "```\n\n"
        "```python\n"
        "agent.run()\n"
        "```\n"
    ),
    "chapter-02/index.md": "# Multi-agent systems\n\nA study of coordination.\n",
    "chapter-02/patterns.mdx": "# Patterns\n\nAnalysis of common patterns.\n",
    "chapter-03/index.md": "# Safety\n\nSafety, ethics and privacy concerns.\n",
    "chapter-03/guardrails.md": "# Guardrails\n\nKeep tool access secure.\n",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (relative path -> content) under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def build_corpus(
    documents: dict[str, str] | None = None,
    directories: dict[str, int] | None = None,
    root_files: tuple[str, ...] = (),
    unreadable: tuple[str, ...] = (),
) -> Corpus:
    """Build an in-memory corpus without touching the filesystem."""
    return Corpus(
        root="docs",
        documents=tuple(
            Document(path=path, content=content)
            for path, content in (documents or {}).items()
        ),
        unreadable=tuple(
            UnreadableDocument(path=path, error="Permission denied")
            for path in unreadable
        ),
        directories=tuple(
            SectionDirectory(name=name, entry_count=count)
            for name, count in (directories or {}).items()
        ),
        root_files=frozenset(root_files),
    )


@pytest.fixture
def make_corpus() -> Callable[..., Corpus]:
    """Factory for in-memory corpora."""
    return build_corpus


@pytest.fixture
def empty_corpus() -> Corpus:
    """A corpus for an existing but empty root."""
    return build_corpus()


@pytest.fixture
def book_corpus() -> Corpus:
    """In-memory corpus mirroring BOOK_FILES; satisfies every principle."""
    return build_corpus(
        documents=BOOK_FILES,
        directories={"chapter-01": 2, "chapter-02": 2, "chapter-03": 2},
        root_files=("intro.md",),
    )


@pytest.fixture
def book_dir(tmp_path: Path) -> Path:
    """A documentation tree on disk that satisfies every principle."""
    return write_tree(tmp_path / "docs", BOOK_FILES)


@pytest.fixture
def tree_writer() -> Callable[[Path, dict[str, str]], Path]:
    """Writes a documentation tree under a root directory."""
    return write_tree


@pytest.fixture
def fail_reads(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Make ``Path.read_text`` raise PermissionError for the given file names."""

    def install(*names: str) -> None:
        original = Path.read_text

        def read_text(self, *args, **kwargs):
            if self.name in names:
                raise PermissionError(13, "Permission denied", str(self))
            return original(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", read_text)

    return install


@pytest.fixture(autouse=True)
def reset_docguard_logger():
    """Drop handlers installed by CLI runs so they don't outlive the test."""
    yield
    logger = logging.getLogger("docguard")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
