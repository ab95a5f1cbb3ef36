"""
Move Generator - Enumerates every permitted move in a ruleset.

The generator is used by:
1. Legality layers that filter pseudo-legal moves further
2. UIs listing available moves (and promotion choices)
3. Bots enumerating candidate moves

Design: the walk follows the ruleset's declared order (actor, then
origin, then target) and prunes as early as it can:
- actors of the other side are skipped before any square is looked at
- origins whose piece is absent (or not in hand) are skipped
- only then are the rules of each target evaluated
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import NamedTuple, TYPE_CHECKING

from ..spec_schema.actor import actor_side, player_side
from .arguments import check_evaluation_arguments
from .engine import Board, Engine, Hand, context_holds
from .transition import Transition

if TYPE_CHECKING:
    from .ruleset import Ruleset

logger = logging.getLogger(__name__)


class MoveTransitions(NamedTuple):
    """One permitted move and all of its outcomes."""
    actor: str
    origin: str
    target: str
    transitions: list[Transition]


@dataclass
class MoveGenerator:
    """
    Generates pseudo-legal moves for a position.

    Stateless - the ruleset is immutable and snapshots belong to the caller.
    """
    ruleset: Ruleset

    def generate(self, board: Board, hand: Hand, active_player: str) -> list[MoveTransitions]:
        """
        Generate every move the active player may make.

        Raises InvalidArgumentError if board, hand or active_player are
        malformed. Moves with no matching rule are left out.
        """
        check_evaluation_arguments(board, hand, active_player)

        side = player_side(active_player)
        moves = []

        for actor, sources in self.ruleset.tables.items():
            if actor_side(actor) is not side:
                continue

            for origin, destinations in sources.items():
                if not context_holds(actor, origin, board, hand, active_player):
                    continue

                for target, rules in destinations.items():
                    engine = Engine(actor=actor, origin=origin, target=target, rules=rules)
                    transitions = engine.matching_transitions(board, active_player)
                    if transitions:
                        moves.append(MoveTransitions(actor, origin, target, transitions))

        logger.debug("Generated %d move(s) for %s", len(moves), active_player)
        return moves


def pseudo_legal_transitions(
    ruleset: Ruleset, board: Board, hand: Hand, active_player: str
) -> list[MoveTransitions]:
    """
    Convenience function to get every pseudo-legal move.

    Creates a MoveGenerator and generates moves.
    """
    generator = MoveGenerator(ruleset=ruleset)
    return generator.generate(board, hand, active_player)
