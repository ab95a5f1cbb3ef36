"""
Engine - Evaluates the rules of one actor/origin/target move.

Evaluation has two ordered phases:
1. Context: the actor must be on its origin square (or available in hand
   for drops) and must belong to the active player. Failing this returns
   no transitions without looking at a single rule.
2. Rules: every rule whose require entries all hold and whose prevent
   entries all fail yields a Transition, in declared order.

All matching rules are collected, not just the first: a promotion square
legitimately offers several outcomes at once.
"""

from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from ..spec_schema.actor import actor_side, base_form, player_side
from ..spec_schema.rule_dsl import (
    DROP_ORIGIN,
    OccupationKind,
    OccupationState,
    RuleList,
    TransitionRule,
)
from .arguments import check_evaluation_arguments
from .transition import Transition

logger = logging.getLogger(__name__)

Board = Mapping[str, Optional[str]]
Hand = Mapping[str, int]


@dataclass(frozen=True)
class Engine:
    """
    Evaluator for one actor moving from origin to target.

    Built by Destination.to(); holds a view of the ruleset's rule tuple,
    never a copy.
    """
    actor: str
    origin: str
    target: str
    rules: RuleList

    @property
    def is_drop(self) -> bool:
        return self.origin == DROP_ORIGIN

    def evaluate(self, board: Board, hand: Hand, active_player: str) -> list[Transition]:
        """
        Return every transition the current position permits.

        Raises InvalidArgumentError if board, hand or active_player are
        malformed. Returns an empty list if the actor is not in place or
        not owned by the active player.
        """
        check_evaluation_arguments(board, hand, active_player)

        if not self.context_holds(board, hand, active_player):
            return []
        return self.matching_transitions(board, active_player)

    def context_holds(self, board: Board, hand: Hand, active_player: str) -> bool:
        """Context phase only: piece in place and owned by the active player."""
        return context_holds(self.actor, self.origin, board, hand, active_player)

    def matching_transitions(self, board: Board, active_player: str) -> list[Transition]:
        """Rule phase only; assumes the context has already been checked."""
        transitions = [
            Transition.from_rule(rule)
            for rule in self.rules
            if rule_matches(rule, board, active_player)
        ]
        if transitions:
            logger.debug(
                "%s %s->%s: %d of %d rule(s) matched",
                self.actor, self.origin, self.target, len(transitions), len(self.rules),
            )
        return transitions


def context_holds(
    actor: str, origin: str, board: Board, hand: Hand, active_player: str
) -> bool:
    """The actor is on its origin (or in hand for drops) and belongs to the active player."""
    if origin == DROP_ORIGIN:
        if hand.get(base_form(actor), 0) <= 0:
            return False
    elif board.get(origin) != actor:
        return False

    return actor_side(actor) is player_side(active_player)


def rule_matches(rule: TransitionRule, board: Board, active_player: str) -> bool:
    """Every require entry holds (AND) and no prevent entry holds (NOR)."""
    for square, state in rule.require.items():
        if not state_holds(state, board.get(square), active_player):
            return False
    for square, state in rule.prevent.items():
        if state_holds(state, board.get(square), active_player):
            return False
    return True


def state_holds(state: OccupationState, occupant: str | None, active_player: str) -> bool:
    """Whether a square holding `occupant` is in the given occupation state."""
    kind = state.kind
    if kind is OccupationKind.EMPTY:
        return occupant is None
    if kind is OccupationKind.ENEMY:
        return occupant is not None and actor_side(occupant) is not player_side(active_player)
    return occupant == state.actor
