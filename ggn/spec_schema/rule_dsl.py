"""
Rule DSL - Transition rules and occupation states.

A GGN document maps actor -> origin -> target -> [TransitionRule].
Each rule is a precondition/effect pair:
- require: every square must be in the stated occupation (AND)
- prevent: no square may be in the stated occupation (NOR)
- perform: the board diff applied when the rule matches
- gain/drop: a base-form piece entering or leaving the mover's hand

Key design decisions:
- OccupationState is a closed tagged union (EMPTY, ENEMY, EXACT)
- Rules are frozen once built; the engine never copies or mutates them
- The origin "*" is reserved for drops from hand
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

# Origin label meaning "from hand"
DROP_ORIGIN = "*"

EMPTY_LITERAL = "empty"
ENEMY_LITERAL = "enemy"


class OccupationKind(Enum):
    """Tags of the occupation-state union."""
    EMPTY = "empty"
    ENEMY = "enemy"
    EXACT = "exact"


@dataclass(frozen=True)
class OccupationState:
    """
    Expected content of one square.

    Examples:
    - OccupationState.empty()              -> square is vacant
    - OccupationState.enemy()              -> square holds an opposing piece
    - OccupationState.exact("chess:p")     -> square holds exactly "chess:p"
    """
    kind: OccupationKind
    actor: str | None = None

    @classmethod
    def empty(cls) -> OccupationState:
        return cls(kind=OccupationKind.EMPTY)

    @classmethod
    def enemy(cls) -> OccupationState:
        return cls(kind=OccupationKind.ENEMY)

    @classmethod
    def exact(cls, actor: str) -> OccupationState:
        return cls(kind=OccupationKind.EXACT, actor=actor)

    @classmethod
    def parse(cls, literal: str) -> OccupationState:
        """Build a state from its document literal."""
        if literal == EMPTY_LITERAL:
            return cls.empty()
        if literal == ENEMY_LITERAL:
            return cls.enemy()
        return cls.exact(literal)

    @property
    def literal(self) -> str:
        """Document form: "empty", "enemy" or the actor id."""
        if self.kind is OccupationKind.EXACT:
            return self.actor
        return self.kind.value

    def __str__(self) -> str:
        return self.literal


def _frozen(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class TransitionRule:
    """
    One conditional outcome of a move.

    `perform` keeps the document's key order; it becomes Transition.diff
    unchanged when the rule matches.
    """
    perform: Mapping[str, str | None]
    require: Mapping[str, OccupationState] = field(default_factory=dict)
    prevent: Mapping[str, OccupationState] = field(default_factory=dict)
    gain: str | None = None
    drop: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "perform", _frozen(self.perform))
        object.__setattr__(self, "require", _frozen(self.require))
        object.__setattr__(self, "prevent", _frozen(self.prevent))

    @classmethod
    def from_literals(
        cls,
        perform: Mapping[str, str | None],
        require: Mapping[str, str] | None = None,
        prevent: Mapping[str, str] | None = None,
        gain: str | None = None,
        drop: str | None = None,
    ) -> TransitionRule:
        """Build a rule from document literals (strings for states)."""
        return cls(
            perform=perform,
            require={sq: OccupationState.parse(v) for sq, v in (require or {}).items()},
            prevent={sq: OccupationState.parse(v) for sq, v in (prevent or {}).items()},
            gain=gain,
            drop=drop,
        )

    def to_literals(self) -> dict[str, Any]:
        """Document form of this rule; empty optional fields are omitted."""
        data: dict[str, Any] = {}
        if self.require:
            data["require"] = {sq: s.literal for sq, s in self.require.items()}
        if self.prevent:
            data["prevent"] = {sq: s.literal for sq, s in self.prevent.items()}
        data["perform"] = dict(self.perform)
        if self.gain is not None:
            data["gain"] = self.gain
        if self.drop is not None:
            data["drop"] = self.drop
        return data

    def __hash__(self):
        return hash((
            frozenset(self.perform.items()),
            frozenset(self.require.items()),
            frozenset(self.prevent.items()),
            self.gain,
            self.drop,
        ))


# Aliases for the nested tables a ruleset is made of
RuleList = tuple[TransitionRule, ...]
DestinationTable = Mapping[str, RuleList]
SourceTable = Mapping[str, DestinationTable]
RuleTables = Mapping[str, SourceTable]
