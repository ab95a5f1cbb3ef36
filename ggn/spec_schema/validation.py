"""
Rule Validation - Logical consistency checks for rule tables.

Structure is already guaranteed by the document schema. This pass looks
for rules that are well-formed but make no sense:
1. Contradictions: a square required and prevented in the same state
2. Implicit requirements: require restating that the mover sits on its origin
3. Drop mismatches: drop origins that do not take the mover from hand,
   or board origins that do

Empty rule lists are reported as warnings; they never match but are legal.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from ..errors import LogicalConsistencyError
from .actor import base_form
from .rule_dsl import DROP_ORIGIN, OccupationState, RuleTables, TransitionRule


class IssueKind(Enum):
    """Kinds of logical inconsistency."""
    CONTRADICTION = "contradiction"
    IMPLICIT_REQUIREMENT = "implicit_requirement"
    DROP_MISMATCH = "drop_mismatch"


@dataclass(frozen=True)
class ConsistencyIssue:
    """One inconsistent rule, located down to the offending square."""
    kind: IssueKind
    actor: str
    origin: str
    target: str
    rule_index: int
    message: str
    square: str | None = None
    state: str | None = None

    def context(self) -> dict[str, object]:
        ctx: dict[str, object] = {
            "actor": self.actor,
            "origin": self.origin,
            "target": self.target,
            "rule_index": self.rule_index,
        }
        if self.square is not None:
            ctx["square"] = self.square
        if self.state is not None:
            ctx["state"] = self.state
        return ctx


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]
    issues: list[ConsistencyIssue] = field(default_factory=list)


def check_rules(tables: RuleTables) -> ValidationResult:
    """
    Check every rule of a ruleset for logical consistency.

    Never raises; see validate_rules() for the failing variant.
    """
    issues: list[ConsistencyIssue] = []
    warnings: list[str] = []

    for actor, sources in tables.items():
        for origin, destinations in sources.items():
            for target, rules in destinations.items():
                if not rules:
                    warnings.append(
                        f"{actor} {origin}->{target} has no transition rules and can never match"
                    )
                for index, rule in enumerate(rules):
                    issues.extend(_check_rule(actor, origin, target, index, rule))

    return ValidationResult(
        valid=len(issues) == 0,
        errors=[issue.message for issue in issues],
        warnings=warnings,
        issues=issues,
    )


def validate_rules(tables: RuleTables) -> ValidationResult:
    """
    Validate rule tables, raising on the first inconsistency.

    Raises LogicalConsistencyError naming actor, origin, target, rule
    index and the conflicting square/state. The error carries every
    issue found, not just the first.
    """
    result = check_rules(tables)
    if result.issues:
        first = result.issues[0]
        raise LogicalConsistencyError(
            first.message,
            context=first.context(),
            issues=result.issues,
        )
    return result


def _check_rule(
    actor: str, origin: str, target: str, index: int, rule: TransitionRule
) -> list[ConsistencyIssue]:
    issues = []
    issues.extend(_find_contradictions(actor, origin, target, index, rule))

    implicit = _find_implicit_requirement(actor, origin, target, index, rule)
    if implicit:
        issues.append(implicit)

    mismatch = _find_drop_mismatch(actor, origin, target, index, rule)
    if mismatch:
        issues.append(mismatch)

    return issues


def _find_contradictions(
    actor: str, origin: str, target: str, index: int, rule: TransitionRule
) -> list[ConsistencyIssue]:
    """Squares required and prevented in the same state."""
    issues = []
    for square, state in rule.require.items():
        if rule.prevent.get(square) != state:
            continue
        issues.append(ConsistencyIssue(
            kind=IssueKind.CONTRADICTION,
            actor=actor,
            origin=origin,
            target=target,
            rule_index=index,
            square=square,
            state=state.literal,
            message=(
                f"Logical contradiction detected in {actor} {origin}->{target} "
                f"rule #{index}: square '{square}' is both required and prevented "
                f"to be '{state.literal}'"
            ),
        ))
    return issues


def _find_implicit_requirement(
    actor: str, origin: str, target: str, index: int, rule: TransitionRule
) -> ConsistencyIssue | None:
    """A require entry stating that the actor stands on its own origin."""
    if origin == DROP_ORIGIN:
        return None
    if rule.require.get(origin) != OccupationState.exact(actor):
        return None
    return ConsistencyIssue(
        kind=IssueKind.IMPLICIT_REQUIREMENT,
        actor=actor,
        origin=origin,
        target=target,
        rule_index=index,
        square=origin,
        state=actor,
        message=(
            f"Implicit requirement duplication detected in {actor} {origin}->{target} "
            f"rule #{index}: requiring '{origin}' to hold '{actor}' is already "
            f"implicit in the move origin"
        ),
    )


def _find_drop_mismatch(
    actor: str, origin: str, target: str, index: int, rule: TransitionRule
) -> ConsistencyIssue | None:
    """Drops must take the actor from hand; board moves must not."""
    if origin == DROP_ORIGIN:
        expected = base_form(actor)
        if rule.drop == expected:
            return None
        message = (
            f"Drop mismatch detected in {actor} {origin}->{target} rule #{index}: "
            f"a drop must remove '{expected}' from hand, got {rule.drop!r}"
        )
    else:
        if rule.drop is None:
            return None
        message = (
            f"Drop mismatch detected in {actor} {origin}->{target} rule #{index}: "
            f"a move from board square '{origin}' cannot remove '{rule.drop}' from hand"
        )
    return ConsistencyIssue(
        kind=IssueKind.DROP_MISMATCH,
        actor=actor,
        origin=origin,
        target=target,
        rule_index=index,
        square=origin,
        state=rule.drop,
        message=message,
    )
