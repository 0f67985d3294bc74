"""
Filesystem adapter: document enumeration and corpus loading.

Walks the document root once, reads each document once, and snapshots the
root's directory listing so that every check runs against the same
in-memory corpus.
"""

import json
import logging
import os
from pathlib import Path

from docguard.domain.exceptions import DocsRootNotFound
from docguard.domain.models import (
    Corpus,
    Document,
    SectionDirectory,
    UnreadableDocument,
    ValidationReport,
)

logger = logging.getLogger("docguard.filesystem")

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".mdx")


def _require_root(root: Path) -> None:
    if not root.is_dir():
        raise DocsRootNotFound(str(root))


def _walk(directory: Path, extensions: tuple[str, ...]) -> list[Path]:
    found: list[Path] = []
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            found.extend(_walk(entry, extensions))
        elif entry.is_file() and entry.name.endswith(extensions):
            found.append(entry)
    return found


def enumerate_documents(
    root: Path, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
) -> list[Path]:
    """
    List every document under ``root``, recursing into all subdirectories.

    Args:
        root: Document root directory
        extensions: File name suffixes that mark a document (case-sensitive)

    Returns:
        Sorted list of document paths

    Raises:
        DocsRootNotFound: If root does not exist or is not a directory
        OSError: If a directory cannot be listed
    """
    _require_root(root)
    return _walk(root, extensions)


def _read_document(root: Path, path: Path) -> Document | UnreadableDocument:
    relative = path.relative_to(root).as_posix()
    try:
        # Undecodable bytes are replaced; any readable byte stream is text
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return UnreadableDocument(path=relative, error=str(e))
    return Document(path=relative, content=content)


def _list_root(root: Path) -> tuple[tuple[SectionDirectory, ...], frozenset[str]]:
    directories = []
    files = set()
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            entry_count = sum(1 for _ in entry.iterdir())
            directories.append(SectionDirectory(name=entry.name, entry_count=entry_count))
        elif entry.is_file():
            files.add(entry.name)
    return tuple(directories), frozenset(files)


def load_corpus(
    root: Path, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
) -> Corpus:
    """
    Load the corpus for one validation run.

    Args:
        root: Document root directory
        extensions: File name suffixes that mark a document

    Returns:
        Corpus with every readable document, the unreadable ones, and the
        root's direct subdirectories and files

    Raises:
        DocsRootNotFound: If root does not exist or is not a directory
    """
    paths = enumerate_documents(root, extensions)
    logger.debug("Enumerated %d documents under %s", len(paths), root)

    documents = []
    unreadable = []
    for path in paths:
        loaded = _read_document(root, path)
        if isinstance(loaded, UnreadableDocument):
            unreadable.append(loaded)
        else:
            documents.append(loaded)

    directories, root_files = _list_root(root)
    return Corpus(
        root=str(root),
        documents=tuple(documents),
        unreadable=tuple(unreadable),
        directories=directories,
        root_files=root_files,
    )


def save_report(report: ValidationReport, output_path: str) -> None:
    """
    Save a validation report to a JSON file.

    Args:
        report: Report to save
        output_path: Destination path; parent directories are created
    """
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
    logger.debug("Saved report to %s", output_path)
