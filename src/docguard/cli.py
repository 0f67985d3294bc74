"""
DocGuard command line.

Usage:
    docguard                        # validate ./docs
    docguard website/docs
    docguard --principle structure --principle modularity
    docguard --config docguard.json --output reports/docs.json
    docguard --list-principles

Exit status:
    0  every principle passed
    1  a principle failed, or the documentation directory is missing
    2  invalid settings or options
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from docguard.application.validator import ContentValidator
from docguard.console import print_error, print_principles, print_report
from docguard.domain.exceptions import ConfigurationError, DocsRootNotFound
from docguard.infrastructure.config import resolve_settings
from docguard.infrastructure.filesystem import load_corpus, save_report
from docguard.logging_setup import setup_logging
from docguard.principles import build_principles, select_principles

EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 2


@click.command()
@click.argument(
    "docs_dir",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to settings JSON (default: ./docguard.json if present)",
)
@click.option(
    "-p",
    "--principle",
    "principle_keys",
    multiple=True,
    help="Only run this principle (repeatable; see --list-principles)",
)
@click.option(
    "--list-principles",
    is_flag=True,
    help="List the principles and exit",
)
@click.option(
    "--output",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to save the report as JSON",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to log file",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose (DEBUG) logging to stderr",
)
def main(
    docs_dir: Path | None,
    config_path: Path | None,
    principle_keys: tuple[str, ...],
    list_principles: bool,
    output: str | None,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Validate a documentation tree against the documentation principles."""
    logger = setup_logging("docguard", log_file, verbose)

    # Fatal errors reach the console once, as a panel; the log file keeps a record
    try:
        settings = resolve_settings(config_path).with_overrides(
            docs_dir=str(docs_dir) if docs_dir else None,
            principles=principle_keys,
        )
        catalogue = build_principles(
            section_prefix=settings.section_prefix,
            intro_file=settings.intro_file,
            min_sections=settings.min_sections,
            min_section_entries=settings.min_section_entries,
            diagram_tags=settings.diagram_tags,
        )
        if list_principles:
            print_principles(catalogue)
            return
        principles = select_principles(catalogue, settings.principles)
    except ConfigurationError as e:
        logger.debug("Configuration error: %s", e)
        print_error(str(e), "Check the settings file and --principle values.")
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        corpus = load_corpus(Path(settings.docs_dir), settings.extensions)
    except DocsRootNotFound as e:
        logger.debug("%s", e)
        print_error(
            str(e), "Run from the site root or pass the documentation directory."
        )
        sys.exit(EXIT_FAILED)
    except OSError as e:
        logger.debug("Could not scan %s: %s", settings.docs_dir, e)
        print_error(f"Could not scan {settings.docs_dir}: {e}")
        sys.exit(EXIT_FAILED)

    report = ContentValidator(principles).run(corpus)
    print_report(report)

    if output:
        try:
            save_report(report, output)
        except OSError as e:
            logger.debug("Could not write report to %s: %s", output, e)
            print_error(f"Could not write report to {output}: {e}")
            sys.exit(EXIT_FAILED)
        logger.info("Report saved to %s", output)

    sys.exit(0 if report.all_passed else EXIT_FAILED)
