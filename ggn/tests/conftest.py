"""
Pytest fixtures for GGN tests.
"""

import pytest

from ..config import reset_settings
from ..engine_core import Ruleset
from ..games import create_chess_rules, create_shogi_rules


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read GGN_* environment variables in every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def chess_rules() -> Ruleset:
    """Chess fragments (pawn, kings, castling, promotion)."""
    return Ruleset(create_chess_rules())


@pytest.fixture
def shogi_rules() -> Ruleset:
    """Shogi fragments (captures to hand, drops)."""
    return Ruleset(create_shogi_rules())


@pytest.fixture
def pawn_push_data() -> dict:
    """The two-square pawn push, alone."""
    return {
        "CHESS:P": {
            "e2": {
                "e4": [
                    {
                        "require": {"e3": "empty", "e4": "empty"},
                        "perform": {"e2": None, "e4": "CHESS:P"},
                    },
                ],
            },
        },
    }


@pytest.fixture
def opening_board() -> dict:
    """White king, rook and pawn at home; a black knight on d3."""
    return {
        "e1": "CHESS:K",
        "e2": "CHESS:P",
        "e3": None,
        "e4": None,
        "d3": "chess:n",
        "f1": None,
        "g1": None,
        "h1": "CHESS:R",
        "e8": "chess:k",
        "e7": None,
    }
