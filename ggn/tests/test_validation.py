"""
Tests for logical consistency validation.

Tests:
- Contradictions between require and prevent
- Implicit origin requirements
- Drop origin consistency
- Warnings and the validate switch
"""

import pytest

from .. import is_valid
from ..engine_core import Ruleset
from ..errors import LogicalConsistencyError
from ..spec_schema.document import parse_document
from ..spec_schema.validation import IssueKind, check_rules, validate_rules


def _contradiction_data() -> dict:
    return {
        "CHESS:P": {
            "e2": {
                "e4": [
                    {
                        "require": {"d2": "empty"},
                        "prevent": {"d2": "empty"},
                        "perform": {"e2": None, "e4": "CHESS:P"},
                    },
                ],
            },
        },
    }


class TestContradictions:
    """Tests for squares both required and prevented."""

    def test_contradiction_raises(self):
        """Required and prevented to be empty at once."""
        with pytest.raises(LogicalConsistencyError) as exc_info:
            Ruleset(_contradiction_data())
        error = exc_info.value
        assert "Logical contradiction detected" in error.message
        assert "d2" in error.message
        assert error.context["actor"] == "CHESS:P"
        assert error.context["origin"] == "e2"
        assert error.context["target"] == "e4"
        assert error.context["rule_index"] == 0
        assert error.context["square"] == "d2"
        assert error.context["state"] == "empty"

    def test_exact_state_contradiction(self):
        data = {
            "CHESS:K": {
                "e1": {
                    "g1": [
                        {
                            "require": {"h1": "CHESS:R"},
                            "prevent": {"h1": "CHESS:R"},
                            "perform": {"e1": None, "g1": "CHESS:K"},
                        },
                    ],
                },
            },
        }
        with pytest.raises(LogicalConsistencyError):
            Ruleset(data)

    def test_same_square_different_state_is_fine(self):
        """Require enemy but prevent one specific enemy."""
        data = {
            "CHESS:P": {
                "e2": {
                    "d3": [
                        {
                            "require": {"d3": "enemy"},
                            "prevent": {"d3": "chess:k"},
                            "perform": {"e2": None, "d3": "CHESS:P"},
                        },
                    ],
                },
            },
        }
        ruleset = Ruleset(data)
        assert ruleset.warnings == ()

    def test_validation_can_be_skipped(self):
        """validate=False builds the ruleset anyway."""
        ruleset = Ruleset(_contradiction_data(), validate=False)
        engine = ruleset.select("CHESS:P").from_("e2").to("e4")
        board = {"e2": "CHESS:P", "d2": None}
        assert engine.evaluate(board, {}, "CHESS") == []


class TestImplicitRequirements:
    """Tests for restating the origin in require."""

    def test_origin_requirement_rejected(self):
        data = {
            "CHESS:K": {
                "e1": {
                    "e2": [
                        {
                            "require": {"e1": "CHESS:K", "e2": "empty"},
                            "perform": {"e1": None, "e2": "CHESS:K"},
                        },
                    ],
                },
            },
        }
        with pytest.raises(LogicalConsistencyError) as exc_info:
            Ruleset(data)
        assert "Implicit requirement duplication detected" in exc_info.value.message
        assert exc_info.value.context["square"] == "e1"

    def test_other_piece_on_origin_not_flagged(self):
        """Only the mover itself is implicit."""
        tables = parse_document({
            "CHESS:K": {
                "e1": {"e2": [{"require": {"e1": "CHESS:Q"}, "perform": {"e2": "CHESS:K"}}]},
            },
        })
        assert check_rules(tables).valid


class TestDropConsistency:
    """Tests for drops and the hand."""

    def test_drop_without_drop_field(self):
        data = {"SHOGI:P": {"*": {"5e": [{"perform": {"5e": "SHOGI:P"}}]}}}
        with pytest.raises(LogicalConsistencyError) as exc_info:
            Ruleset(data)
        assert exc_info.value.issues[0].kind is IssueKind.DROP_MISMATCH

    def test_drop_of_other_piece(self):
        data = {"SHOGI:P": {"*": {"5e": [{"perform": {"5e": "SHOGI:P"}, "drop": "SHOGI:L"}]}}}
        assert not is_valid(data)

    def test_modified_actor_drops_base_form(self):
        """A promoted actor dropped from hand removes its base piece."""
        data = {"SHOGI:+P": {"*": {"5e": [{"perform": {"5e": "SHOGI:+P"}, "drop": "SHOGI:P"}]}}}
        assert is_valid(data)

    def test_board_move_cannot_drop(self):
        data = {
            "SHOGI:P": {"5g": {"5f": [{"perform": {"5g": None, "5f": "SHOGI:P"}, "drop": "SHOGI:P"}]}},
        }
        with pytest.raises(LogicalConsistencyError):
            Ruleset(data)


class TestValidationResult:
    """Tests for check_rules and validate_rules."""

    def test_every_issue_collected(self):
        data = _contradiction_data()
        data["SHOGI:P"] = {"*": {"5e": [{"perform": {"5e": "SHOGI:P"}}]}}
        result = check_rules(parse_document(data))
        assert not result.valid
        kinds = [issue.kind for issue in result.issues]
        assert kinds == [IssueKind.CONTRADICTION, IssueKind.DROP_MISMATCH]
        assert len(result.errors) == 2

        with pytest.raises(LogicalConsistencyError) as exc_info:
            validate_rules(parse_document(data))
        assert len(exc_info.value.issues) == 2

    def test_empty_rule_list_warns(self, caplog):
        """Legal, but flagged and logged."""
        with caplog.at_level("WARNING", logger="ggn"):
            ruleset = Ruleset({"CHESS:P": {"e2": {"e4": []}}})
        assert len(ruleset.warnings) == 1
        assert "can never match" in ruleset.warnings[0]
        assert "can never match" in caplog.text

    def test_sample_games_are_consistent(self, chess_rules, shogi_rules):
        assert chess_rules.warnings == ()
        assert shogi_rules.warnings == ()

    def test_is_valid(self, pawn_push_data):
        assert is_valid(pawn_push_data)
        assert not is_valid(_contradiction_data())
        assert not is_valid({"CHESS:P": {}})
