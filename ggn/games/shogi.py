"""
Shogi Rule Fragments

Shogi adds the two features chess lacks: captured pieces go to the hand
("gain") and can be dropped back on the board from "*" ("drop").
Promoted pieces use the "+" prefix but return to hand in base form.
"""

from typing import Any

from ..spec_schema.rule_dsl import DROP_ORIGIN


def create_shogi_rules() -> dict[str, Any]:
    """Sente pawn moves, captures with promotion, and pawn drops."""
    return {
        "SHOGI:P": {
            "5g": {
                "5f": [
                    {"require": {"5f": "empty"}, "perform": {"5g": None, "5f": "SHOGI:P"}},
                    {
                        "require": {"5f": "enemy"},
                        "prevent": {"5f": "shogi:+r"},
                        "perform": {"5g": None, "5f": "SHOGI:P"},
                        "gain": "SHOGI:P",
                    },
                ],
            },
            "5d": {
                "5c": [
                    {"require": {"5c": "empty"}, "perform": {"5d": None, "5c": "SHOGI:P"}},
                    {"require": {"5c": "empty"}, "perform": {"5d": None, "5c": "SHOGI:+P"}},
                ],
            },
            DROP_ORIGIN: {
                "5e": [
                    {
                        "require": {"5e": "empty"},
                        "prevent": {"5g": "SHOGI:P", "5f": "SHOGI:P", "5d": "SHOGI:P"},
                        "perform": {"5e": "SHOGI:P"},
                        "drop": "SHOGI:P",
                    },
                ],
            },
        },
        "SHOGI:+P": {
            "5c": {
                "5b": [
                    {"require": {"5b": "enemy"}, "perform": {"5c": None, "5b": "SHOGI:+P"}, "gain": "SHOGI:P"},
                ],
            },
        },
        "shogi:p": {
            "5c": {
                "5d": [
                    {"require": {"5d": "empty"}, "perform": {"5c": None, "5d": "shogi:p"}},
                ],
            },
            DROP_ORIGIN: {
                "5e": [
                    {"require": {"5e": "empty"}, "perform": {"5e": "shogi:p"}, "drop": "shogi:p"},
                ],
            },
        },
    }
