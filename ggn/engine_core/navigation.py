"""
Navigation - Source and Destination views over a ruleset.

    ruleset.select("CHESS:P")   -> Source       (one actor)
           .from_("e2")         -> Destination  (one origin)
           .to("e4")            -> Engine       (one target)

The views hold references into the ruleset's frozen tables and carry no
validation of their own. Any intermediate view can be kept and reused.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..errors import RulesetLookupError
from ..spec_schema.rule_dsl import DestinationTable, SourceTable
from .engine import Engine


@dataclass(frozen=True)
class Source:
    """All origins of one actor."""
    actor: str
    table: SourceTable

    def from_(self, origin: str) -> Destination:
        """Narrow to one origin square (or "*" for drops)."""
        try:
            destinations = self.table[origin]
        except (KeyError, TypeError):
            raise RulesetLookupError(
                f"Origin not found for {self.actor}: {origin!r}",
                context={"actor": self.actor, "origin": origin},
            ) from None
        return Destination(actor=self.actor, origin=origin, table=destinations)

    def origins(self) -> list[str]:
        return list(self.table)

    def __contains__(self, origin: object) -> bool:
        return origin in self.table


@dataclass(frozen=True)
class Destination:
    """All targets of one actor from one origin."""
    actor: str
    origin: str
    table: DestinationTable

    def to(self, target: str) -> Engine:
        """Narrow to one target square and return its evaluator."""
        try:
            rules = self.table[target]
        except (KeyError, TypeError):
            raise RulesetLookupError(
                f"Target not found for {self.actor} from {self.origin}: {target!r}",
                context={"actor": self.actor, "origin": self.origin, "target": target},
            ) from None
        return Engine(actor=self.actor, origin=self.origin, target=target, rules=rules)

    def targets(self) -> list[str]:
        return list(self.table)

    def __contains__(self, target: object) -> bool:
        return target in self.table
