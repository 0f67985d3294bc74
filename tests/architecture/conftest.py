"""Fixtures for the DocGuard layering rules."""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src"))


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of the installed docguard package."""
    return get_evaluable_architecture(SRC_DIR, os.path.join(SRC_DIR, "docguard"))


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Domain, checks, application and infrastructure, innermost first.

    Module names are taken relative to the source root, hence the
    ``src.`` prefix.
    """
    layered = LayeredArchitecture()
    for name in ("domain", "checks", "application", "infrastructure"):
        layered = layered.layer(name).containing_modules([f"src.docguard.{name}"])
    return layered
