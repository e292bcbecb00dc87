# tests/conftest.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Fitchpad tests.

Makes the project packages importable from the repository root and provides
the atoms and documents most tests start from.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages import before any test runs."""
    try:
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def atoms():
    """Provide the atoms A, B, C and Z.

    Returns:
        Tuple of Atom formulas
    """
    from parser.ast_nodes import Atom

    return Atom("A"), Atom("B"), Atom("C"), Atom("Z")


@pytest.fixture
def document():
    """Provide an empty proof document with reference scoping."""
    from core.document import ProofDocument

    return ProofDocument()


@pytest.fixture
def strict_document():
    """Provide an empty proof document with strict scoping."""
    from core.document import ProofDocument

    return ProofDocument(strict_scope=True)
