"""
Chess Rule Fragments

Hand-authored GGN documents covering the chess moves that exercise every
feature of the format:
- Quiet moves and captures ("empty" / "enemy")
- Double pawn push (path squares in require)
- Promotion fan-out (several rules on one target)
- Castling and en passant (multi-square diffs, exact occupants)

These are fragments, not full rulesets: only the squares needed by the
examples and tests are listed.
"""

from typing import Any


def create_white_pawn_rules() -> dict[str, Any]:
    """White pawn pushes, a capture, en passant and promotion."""
    return {
        "CHESS:P": {
            "e2": {
                "e3": [
                    {"require": {"e3": "empty"}, "perform": {"e2": None, "e3": "CHESS:P"}},
                ],
                "e4": [
                    {
                        "require": {"e3": "empty", "e4": "empty"},
                        "perform": {"e2": None, "e4": "CHESS:P"},
                    },
                ],
                "d3": [
                    {"require": {"d3": "enemy"}, "perform": {"e2": None, "d3": "CHESS:P"}},
                ],
            },
            "d5": {
                "e6": [
                    {
                        "require": {"e5": "chess:p", "e6": "empty"},
                        "perform": {"d5": None, "e5": None, "e6": "CHESS:P"},
                    },
                ],
            },
            "e7": {
                "e8": [
                    {"require": {"e8": "empty"}, "perform": {"e7": None, "e8": piece}}
                    for piece in ("CHESS:Q", "CHESS:R", "CHESS:B", "CHESS:N")
                ],
            },
        },
    }


def create_king_rules() -> dict[str, Any]:
    """Kings of both sides, with white kingside castling."""
    return {
        "CHESS:K": {
            "e1": {
                "e2": [
                    {"prevent": {"e2": "CHESS:P"}, "perform": {"e1": None, "e2": "CHESS:K"}},
                ],
                "f1": [
                    {"require": {"f1": "empty"}, "perform": {"e1": None, "f1": "CHESS:K"}},
                    {"require": {"f1": "enemy"}, "perform": {"e1": None, "f1": "CHESS:K"}},
                ],
                "g1": [
                    {
                        "require": {"f1": "empty", "g1": "empty", "h1": "CHESS:R"},
                        "perform": {"e1": None, "f1": "CHESS:R", "g1": "CHESS:K", "h1": None},
                    },
                ],
            },
        },
        "chess:k": {
            "e8": {
                "e7": [
                    {"require": {"e7": "empty"}, "perform": {"e8": None, "e7": "chess:k"}},
                    {"require": {"e7": "enemy"}, "perform": {"e8": None, "e7": "chess:k"}},
                ],
            },
        },
    }


def create_chess_rules() -> dict[str, Any]:
    """All chess fragments merged into one document."""
    return {**create_white_pawn_rules(), **create_king_rules()}
