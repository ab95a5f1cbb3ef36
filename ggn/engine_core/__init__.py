"""
Engine Core - Evaluation of GGN rules against concrete positions.

The engine core is the runtime that:
1. Freezes a validated GGN document into a Ruleset
2. Navigates actor -> origin -> target down to one Engine
3. Evaluates rules against a board, a hand and the active player
4. Enumerates every pseudo-legal move of a position
"""

from .transition import Transition
from .engine import Engine, context_holds, rule_matches, state_holds
from .navigation import Source, Destination
from .move_generator import MoveGenerator, MoveTransitions, pseudo_legal_transitions
from .ruleset import Ruleset

__all__ = [
    "Transition",
    "Engine",
    "context_holds",
    "rule_matches",
    "state_holds",
    "Source",
    "Destination",
    "MoveGenerator",
    "MoveTransitions",
    "pseudo_legal_transitions",
    "Ruleset",
]
