"""
Argument Checks - Validation of caller-supplied evaluation snapshots.

Board, hand and active player come from the caller on every query. They
are checked once, before any context or rule evaluation, and rejected
with InvalidArgumentError when malformed.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any

from ..errors import InvalidArgumentError
from ..spec_schema.actor import is_actor_id, is_base_actor_id, is_player_id
from ..spec_schema.rule_dsl import DROP_ORIGIN


def check_board(board: Any) -> None:
    """Board: square label -> actor id or None."""
    if not isinstance(board, Mapping):
        raise InvalidArgumentError(f"board must be a mapping, got {type(board).__name__}")

    for square, piece in board.items():
        if not isinstance(square, str) or not square:
            raise InvalidArgumentError(
                f"Invalid square label: {square!r}. Must be a non-empty string.",
                context={"square": square},
            )
        if square == DROP_ORIGIN:
            raise InvalidArgumentError(
                f"Square label cannot be '{DROP_ORIGIN}' (reserved for drops)",
                context={"square": square},
            )
        if piece is not None and not is_actor_id(piece):
            raise InvalidArgumentError(
                f"Invalid piece at square {square}: {piece!r}. "
                f"Must be an actor id (e.g. 'CHESS:P', 'shogi:+p') or None.",
                context={"square": square, "piece": piece},
            )


def check_hand(hand: Any) -> None:
    """Hand: base-form actor id -> non-negative count."""
    if not isinstance(hand, Mapping):
        raise InvalidArgumentError(f"hand must be a mapping, got {type(hand).__name__}")

    for piece, count in hand.items():
        if not is_base_actor_id(piece):
            raise InvalidArgumentError(
                f"Invalid piece in hand: {piece!r}. "
                f"Must be a base-form actor id without modifiers (e.g. 'SHOGI:P').",
                context={"piece": piece},
            )
        # bool is an int subclass but never a count
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidArgumentError(
                f"Invalid count for piece {piece}: {count!r}. Must be a non-negative integer.",
                context={"piece": piece, "count": count},
            )


def check_active_player(active_player: Any) -> None:
    """Active player: letters only, all uppercase or all lowercase."""
    if not isinstance(active_player, str):
        raise InvalidArgumentError(
            f"active_player must be a string, got {type(active_player).__name__}"
        )
    if not active_player:
        raise InvalidArgumentError("active_player cannot be empty")
    if not is_player_id(active_player):
        raise InvalidArgumentError(
            f"Invalid active_player: {active_player!r}. Must be alphabetic and "
            f"all uppercase or all lowercase (e.g. 'CHESS', 'shogi').",
            context={"active_player": active_player},
        )


def check_evaluation_arguments(board: Any, hand: Any, active_player: Any) -> None:
    """Check all three snapshots; raises InvalidArgumentError on the first problem."""
    check_board(board)
    check_hand(hand)
    check_active_player(active_player)
