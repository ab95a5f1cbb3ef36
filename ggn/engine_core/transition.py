"""
Transition - Result value of a matching transition rule.

A transition is what the board and hand look like after a move, expressed
as changes only:
- diff: square -> actor id (or None for a vacated square)
- gain: base-form piece entering the mover's hand
- drop: base-form piece leaving the mover's hand

Whether a transition is a capture, a promotion or a castle is for the
caller to decide.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ..spec_schema.rule_dsl import TransitionRule


@dataclass(frozen=True)
class Transition:
    """Immutable board diff plus optional hand gain/drop."""
    diff: Mapping[str, str | None]
    gain: str | None = None
    drop: str | None = None

    def __post_init__(self):
        if not isinstance(self.diff, MappingProxyType):
            object.__setattr__(self, "diff", MappingProxyType(dict(self.diff)))

    @classmethod
    def from_rule(cls, rule: TransitionRule) -> Transition:
        """Transition produced by a matching rule; diff is its perform map."""
        return cls(diff=rule.perform, gain=rule.gain, drop=rule.drop)

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly form."""
        return {"diff": dict(self.diff), "gain": self.gain, "drop": self.drop}

    def __hash__(self):
        return hash((frozenset(self.diff.items()), self.gain, self.drop))
