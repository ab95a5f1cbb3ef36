"""GGN document schema - identifiers, rule DSL, structure and consistency checks."""

from .actor import (
    ActorId,
    Side,
    actor_side,
    base_form,
    is_actor_id,
    is_base_actor_id,
    is_player_id,
    player_side,
)
from .rule_dsl import (
    DROP_ORIGIN,
    OccupationKind,
    OccupationState,
    TransitionRule,
)
from .document import TransitionRuleModel, parse_document, ruleset_json_schema
from .validation import (
    ConsistencyIssue,
    IssueKind,
    ValidationResult,
    check_rules,
    validate_rules,
)

__all__ = [
    "ActorId",
    "Side",
    "actor_side",
    "base_form",
    "is_actor_id",
    "is_base_actor_id",
    "is_player_id",
    "player_side",
    "DROP_ORIGIN",
    "OccupationKind",
    "OccupationState",
    "TransitionRule",
    "TransitionRuleModel",
    "parse_document",
    "ruleset_json_schema",
    "ConsistencyIssue",
    "IssueKind",
    "ValidationResult",
    "check_rules",
    "validate_rules",
]
