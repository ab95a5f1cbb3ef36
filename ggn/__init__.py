"""
GGN - General Gameplay Notation rules engine

A rule-agnostic engine for pseudo-legal moves in abstract strategy board
games. A GGN document lists, for each piece, origin and target, the
conditions under which the move is permitted and the board diff it
produces. The engine provides:
- Structural and logical validation of documents
- Evaluation of one move against a board, a hand and the active player
- Enumeration of every pseudo-legal move of a position

Higher-level legality (check, repetition, ko) is left to the caller.
"""

import logging
from typing import Any

from .engine_core import Ruleset, Transition, MoveTransitions
from .errors import (
    GGNError,
    StructuralError,
    LogicalConsistencyError,
    RulesetLookupError,
    InvalidArgumentError,
)
from .spec_schema import DROP_ORIGIN, ruleset_json_schema

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse(data: Any, validate: bool | None = None) -> Ruleset:
    """Build an immutable Ruleset from a raw GGN document."""
    return Ruleset(data, validate=validate)


def is_valid(data: Any) -> bool:
    """True if the document passes structural and logical validation."""
    try:
        Ruleset(data, validate=True)
    except (StructuralError, LogicalConsistencyError):
        return False
    return True


__all__ = [
    "DROP_ORIGIN",
    "GGNError",
    "InvalidArgumentError",
    "LogicalConsistencyError",
    "MoveTransitions",
    "Ruleset",
    "RulesetLookupError",
    "StructuralError",
    "Transition",
    "is_valid",
    "parse",
    "ruleset_json_schema",
]
