# core/__init__.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant

"""Proof-document engine.

This package provides:
  • ProofDocument: ordered, nested proof lines with one operation per rule
  • ProofLine / LineRole / Rule / Justification: line metadata
  • ProofSnapshot: read-only view handed to renderers
  • ProofSession: text command layer driving a ProofDocument
"""

from .line import Justification, LineRole, ProofLine, Rule
from .snapshot import ProofSnapshot
from .document import ProofDocument
from .session import ProofSession, SessionError, SessionResult

__all__ = [
    "ProofDocument",
    "ProofLine",
    "LineRole",
    "Rule",
    "Justification",
    "ProofSnapshot",
    "ProofSession",
    "SessionError",
    "SessionResult",
]
