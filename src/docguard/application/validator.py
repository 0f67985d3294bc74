"""
ContentValidator: runs documentation principles against a corpus.

Principles are evaluated in catalogue order. They are independent, so a
check that errors out is reported as a failure of that principle only and
the run continues.
"""

import logging

from docguard.domain.exceptions import DocGuardError
from docguard.domain.models import (
    CheckResult,
    Corpus,
    Principle,
    PrincipleOutcome,
    ValidationReport,
)

logger = logging.getLogger("docguard.validator")


class ContentValidator:
    """Evaluates every principle against one corpus."""

    def __init__(self, principles: tuple[Principle, ...]):
        """
        Args:
            principles: Principles to evaluate, in reporting order
        """
        self._principles = principles

    @property
    def principles(self) -> tuple[Principle, ...]:
        return self._principles

    def run(self, corpus: Corpus) -> ValidationReport:
        """
        Validate the corpus against all principles.

        Args:
            corpus: Documents and directory listing loaded for this run

        Returns:
            ValidationReport with one outcome per principle
        """
        logger.info(
            "Validating %d documents in %s against %d principles",
            corpus.document_count,
            corpus.root,
            len(self._principles),
        )

        outcomes = tuple(
            PrincipleOutcome(principle=p, result=self._evaluate(p, corpus))
            for p in self._principles
        )
        report = ValidationReport(
            root=corpus.root,
            outcomes=outcomes,
            document_count=corpus.document_count,
        )

        logger.info(
            "%d/%d principles validated", report.passed_count, report.total
        )
        return report

    def _evaluate(self, principle: Principle, corpus: Corpus) -> CheckResult:
        try:
            result = principle.check.validate(corpus)
        except (OSError, DocGuardError) as e:
            logger.warning("Check '%s' raised: %s", principle.key, e)
            return CheckResult(passed=False, message=f"Check error: {e}")

        logger.debug(
            "%s: %s (%s)",
            principle.key,
            "pass" if result.passed else "fail",
            result.message,
        )
        return result
