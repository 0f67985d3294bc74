"""
Infrastructure layer for documentation validation.

Adapters for the filesystem and settings files.
"""

from docguard.infrastructure.config import (
    DEFAULT_CONFIG_FILE,
    DocGuardSettings,
    load_settings,
    resolve_settings,
)
from docguard.infrastructure.filesystem import (
    DEFAULT_EXTENSIONS,
    enumerate_documents,
    load_corpus,
    save_report,
)

__all__ = [
    # Filesystem
    "DEFAULT_EXTENSIONS",
    "enumerate_documents",
    "load_corpus",
    "save_report",
    # Settings
    "DEFAULT_CONFIG_FILE",
    "DocGuardSettings",
    "load_settings",
    "resolve_settings",
]
