"""
Domain interfaces (Ports) for documentation validation.

These abstract base classes define the contracts that implementations must satisfy.
They have no external dependencies.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docguard.domain.models import CheckResult, Corpus


class CheckInterface(ABC):
    """
    Port for principle checks.

    Checks are deterministic, pure functions of the corpus: they return a
    passing or failing CheckResult with a human-readable message and never
    read the filesystem themselves. Checks are independent of each other,
    so any subset may be run in any order.
    """

    @abstractmethod
    def validate(self, corpus: "Corpus") -> "CheckResult":
        """
        Validate a corpus.

        Args:
            corpus: Documents and root directory listing loaded for this run

        Returns:
            CheckResult with pass/fail and message
        """
        pass
