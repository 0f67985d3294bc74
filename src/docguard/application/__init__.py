"""
Application layer for documentation validation.

Orchestrates principle checks over a loaded corpus.
"""

from docguard.application.validator import ContentValidator

__all__ = [
    "ContentValidator",
]
