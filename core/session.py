# core/session.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Command interpreter that sequences user input into proof document calls

"""Text command layer on top of ``ProofDocument``.

A session accepts one command per line, collects the line indices and formula
a rule needs, calls the matching document operation and turns the outcome
into a status message. Bad input never raises: every command yields a
``SessionResult``.

Commands (short forms in brackets):
    assume F [a]        add a top-level assumption
    subproof F [s]      open a subproof assuming F
    end [n]             close the innermost subproof
    delete [d]          delete the last line
    reiterate I [r]     repeat line I at the current depth
    intro C ... [i]     introduction rule for connective C
    elim C ... [e]      elimination rule for connective C
    show                render the proof
    help [h]            list commands
    quit [q]            finish the session

Connectives: and [n], or [o], not [t], implies [i], iff [f], absurd [a].
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from parser import try_parse
from parser.ast_nodes import Formula
from utils.logger import get_logger
from utils.renderer import render_proof
from .document import ProofDocument

INDEX = "index"
FORMULA = "formula"

BAD_INDEX = "The input value is not a valid index"
BAD_EXPRESSION = "The input expression is not valid"


class SessionError(Exception):
    """Raised when a command script cannot be read."""


@dataclass(frozen=True)
class SessionResult:
    """Outcome of one command.

    Attributes:
        ok: Whether the command was carried out
        message: Status line for the user
    """

    ok: bool
    message: str = ""


@dataclass(frozen=True)
class RuleCommand:
    """How to collect arguments for one rule and what to say when it fails."""

    method: str
    arguments: Tuple[str, ...]
    hint: str


INTRODUCTION_RULES: Dict[str, RuleCommand] = {
    "and": RuleCommand("introduce_and", (INDEX, INDEX), "Selected assumptions are not valid"),
    "or": RuleCommand(
        "introduce_or",
        (INDEX, FORMULA),
        "Select the left or right prop used in the input expression",
    ),
    "not": RuleCommand(
        "introduce_not", (INDEX,), "Subproof assumption does not generate an absurdum"
    ),
    "implies": RuleCommand("introduce_implies", (INDEX,), "Invalid subproof"),
    "iff": RuleCommand(
        "introduce_iff", (INDEX, INDEX), "Select the left subproof then the right subproof"
    ),
    "absurd": RuleCommand(
        "introduce_absurd", (INDEX, INDEX), "The selected lines do not contradict each other"
    ),
}

ELIMINATION_RULES: Dict[str, RuleCommand] = {
    "and": RuleCommand(
        "eliminate_and",
        (INDEX, FORMULA),
        "Select first the AND statement to eliminate, then one of its sides",
    ),
    "or": RuleCommand(
        "eliminate_or", (INDEX, INDEX, INDEX), "Select the or to eliminate then the 2 subproofs"
    ),
    "not": RuleCommand(
        "eliminate_not", (INDEX,), "Expression selected is not a double negation"
    ),
    "implies": RuleCommand(
        "eliminate_implies",
        (INDEX, INDEX),
        "Choose the implication to eliminate then the truth",
    ),
    "iff": RuleCommand(
        "eliminate_iff",
        (INDEX, INDEX),
        "Choose the double implication to eliminate then the truth",
    ),
    "absurd": RuleCommand(
        "eliminate_absurd",
        (INDEX, FORMULA),
        "The assumption you selected is not an absurdum",
    ),
}

CONNECTIVE_ALIASES = {
    "n": "and",
    "o": "or",
    "t": "not",
    "i": "implies",
    "f": "iff",
    "a": "absurd",
}

COMMAND_ALIASES = {
    "a": "assume",
    "s": "subproof",
    "n": "end",
    "d": "delete",
    "r": "reiterate",
    "i": "intro",
    "e": "elim",
    "h": "help",
    "q": "quit",
}

HELP_TEXT = "   ".join(
    [
        "[a]ssume F",
        "[s]ubproof F",
        "e[n]d",
        "[d]elete",
        "[r]eiterate I",
        "[i]ntro C ...",
        "[e]lim C ...",
        "show",
        "[q]uit",
    ]
)


def load_script(path: Path) -> List[str]:
    """Read a command script, dropping blank lines and ``#`` comments.

    Raises:
        SessionError: If the file cannot be read
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SessionError(f"Script file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise SessionError(f"Could not read script file {path}: {e}") from e

    commands = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            commands.append(stripped)
    return commands


class ProofSession:
    """Interactive driver for one proof document.

    Attributes:
        document: The proof being built
        unicode: Render formulas with logic symbols rather than ASCII
        finished: Set once ``quit`` has been executed
    """

    def __init__(self, document: Optional[ProofDocument] = None, unicode: bool = True):
        self.document = document if document is not None else ProofDocument()
        self.unicode = unicode
        self.finished = False
        self._logger = get_logger()
        self._handlers: Dict[str, Callable[[str], SessionResult]] = {
            "assume": self._assume,
            "subproof": self._subproof,
            "end": self._end,
            "delete": self._delete,
            "reiterate": self._reiterate,
            "intro": lambda rest: self._apply_rule("intro", INTRODUCTION_RULES, rest),
            "elim": lambda rest: self._apply_rule("elim", ELIMINATION_RULES, rest),
            "show": self._show,
            "help": lambda rest: SessionResult(True, HELP_TEXT),
            "quit": self._quit,
        }

    def execute(self, command: str) -> SessionResult:
        """Run a single command line and report the outcome."""
        parts = command.strip().split(None, 1)
        if not parts:
            return SessionResult(False, "Empty command")

        name = parts[0].lower()
        name = COMMAND_ALIASES.get(name, name)
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if handler is None:
            result = SessionResult(False, f"Unknown command '{parts[0]}'")
        else:
            result = handler(rest)

        self._logger.command_result(command.strip(), result.ok, result.message)
        return result

    def run(self, commands: List[str], stop_on_error: bool = False) -> List[SessionResult]:
        """Execute commands in order until ``quit`` (or the first failure)."""
        results = []
        for command in commands:
            result = self.execute(command)
            results.append(result)
            if self.finished or (stop_on_error and not result.ok):
                break
        return results

    # ------------------------------------------------------------------
    # Structural commands
    # ------------------------------------------------------------------

    def _assume(self, rest: str) -> SessionResult:
        formula = try_parse(rest)
        if formula is None:
            return SessionResult(False, BAD_EXPRESSION)
        if not self.document.add_assumption(formula):
            return SessionResult(
                False, "Assumptions can only be added before the first deduction"
            )
        return self._added()

    def _subproof(self, rest: str) -> SessionResult:
        formula = try_parse(rest)
        if formula is None:
            return SessionResult(False, BAD_EXPRESSION)
        self.document.add_subproof(formula)
        return self._added()

    def _end(self, rest: str) -> SessionResult:
        if not self.document.end_subproof():
            return SessionResult(False, "No subproof is open")
        return SessionResult(True, f"Closed subproof, now at depth {self.document.current_depth}")

    def _delete(self, rest: str) -> SessionResult:
        if not self.document.delete_last_line():
            return SessionResult(False, "The proof is empty")
        return SessionResult(True, f"Deleted line {len(self.document)}")

    def _reiterate(self, rest: str) -> SessionResult:
        index = _parse_index(rest)
        if index is None:
            return SessionResult(False, BAD_INDEX)
        if not self.document.reiterate(index):
            return SessionResult(False, "Invalid index")
        return self._added()

    def _show(self, rest: str) -> SessionResult:
        return SessionResult(True, render_proof(self.document.snapshot(), unicode=self.unicode))

    def _quit(self, rest: str) -> SessionResult:
        self.finished = True
        return SessionResult(True, "Bye")

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _apply_rule(self, kind: str, table: Dict[str, RuleCommand], rest: str) -> SessionResult:
        parts = rest.split(None, 1)
        if not parts:
            return SessionResult(False, f"Choose a connective to {kind}: {', '.join(table)}")

        connective = parts[0].lower()
        connective = CONNECTIVE_ALIASES.get(connective, connective)
        rule = table.get(connective)
        if rule is None:
            return SessionResult(False, f"Unknown connective '{parts[0]}'")

        arguments = _collect_arguments(rule.arguments, parts[1] if len(parts) > 1 else "")
        if isinstance(arguments, SessionResult):
            return arguments

        if not getattr(self.document, rule.method)(*arguments):
            return SessionResult(False, rule.hint)
        return self._added()

    def _added(self) -> SessionResult:
        index = len(self.document) - 1
        return SessionResult(True, f"Added line {index}: {self.document[index].formula}")


def _parse_index(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _collect_arguments(shape: Tuple[str, ...], text: str):
    """Split ``text`` into the indices and trailing formula a rule expects.

    Returns the argument list, or a failed ``SessionResult`` describing the
    first argument that could not be read.
    """
    index_count = sum(1 for kind in shape if kind == INDEX)
    wants_formula = FORMULA in shape

    tokens = text.split(None, index_count) if wants_formula else text.split()
    expected = index_count + (1 if wants_formula else 0)
    if len(tokens) != expected:
        return SessionResult(False, f"Expected {expected} argument(s), got {len(tokens)}")

    arguments: List[object] = []
    for token in tokens[:index_count]:
        index = _parse_index(token)
        if index is None:
            return SessionResult(False, BAD_INDEX)
        arguments.append(index)

    if wants_formula:
        formula: Optional[Formula] = try_parse(tokens[-1])
        if formula is None:
            return SessionResult(False, BAD_EXPRESSION)
        arguments.append(formula)

    return arguments
