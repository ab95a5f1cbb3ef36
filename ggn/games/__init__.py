"""
Games module - Sample GGN documents.

Each module exposes factory functions returning fresh raw documents, so
callers can mutate them freely before building a Ruleset.
"""

from .chess import create_chess_rules, create_king_rules, create_white_pawn_rules
from .shogi import create_shogi_rules

__all__ = [
    "create_chess_rules",
    "create_king_rules",
    "create_white_pawn_rules",
    "create_shogi_rules",
]
