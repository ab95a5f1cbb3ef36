"""
Ruleset - Immutable container of every actor's transition rules.

A ruleset is built once from a raw GGN document:
1. The document is checked against the schema (StructuralError)
2. Optionally, every rule is checked for logical consistency
   (LogicalConsistencyError)
3. The tables are frozen for the rest of the ruleset's lifetime

Queries either navigate select -> from_ -> to and evaluate one engine, or
enumerate everything the active player can do with
pseudo_legal_transitions().
"""

from __future__ import annotations
import logging
from typing import Any, TYPE_CHECKING

from ..config import get_settings
from ..errors import RulesetLookupError
from ..spec_schema.document import parse_document
from ..spec_schema.rule_dsl import RuleTables
from ..spec_schema.validation import validate_rules
from .move_generator import MoveGenerator, MoveTransitions
from .navigation import Source

if TYPE_CHECKING:
    from .engine import Board, Hand

logger = logging.getLogger(__name__)


class Ruleset:
    """
    The pseudo-legal move rules of one or more games.

    Usage:
        ruleset = Ruleset(document)

        # One move
        engine = ruleset.select("CHESS:P").from_("e2").to("e4")
        transitions = engine.evaluate(board, hand, "CHESS")

        # Everything
        for actor, origin, target, transitions in ruleset.pseudo_legal_transitions(
            board, hand, "CHESS"
        ):
            ...
    """

    __slots__ = ("_tables", "_warnings")

    def __init__(self, data: Any, validate: bool | None = None):
        if validate is None:
            validate = get_settings().validate

        tables = parse_document(data)
        warnings: tuple[str, ...] = ()
        if validate:
            warnings = tuple(validate_rules(tables).warnings)
        for warning in warnings:
            logger.warning(warning)

        object.__setattr__(self, "_tables", tables)
        object.__setattr__(self, "_warnings", warnings)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built ruleset: %d actor(s), %d rule(s), validated=%s",
                len(tables), self.rule_count(), validate,
            )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def select(self, actor: str) -> Source:
        """
        Narrow to one actor's rules.

        Raises RulesetLookupError if the actor is not in the ruleset.
        Matching is exact, including case.
        """
        try:
            table = self._tables[actor]
        except (KeyError, TypeError):
            raise RulesetLookupError(
                f"Actor not found: {actor!r}", context={"actor": actor}
            ) from None
        return Source(actor=actor, table=table)

    def pseudo_legal_transitions(
        self, board: Board, hand: Hand, active_player: str
    ) -> list[MoveTransitions]:
        """Every permitted move for the active player, in declared order."""
        return MoveGenerator(ruleset=self).generate(board, hand, active_player)

    @property
    def tables(self) -> RuleTables:
        """Frozen actor -> origin -> target -> rules tables."""
        return self._tables

    @property
    def warnings(self) -> tuple[str, ...]:
        """Non-fatal findings from construction (empty when unvalidated)."""
        return self._warnings

    def actors(self) -> list[str]:
        return list(self._tables)

    def rule_count(self) -> int:
        return sum(
            len(rules)
            for sources in self._tables.values()
            for destinations in sources.values()
            for rules in destinations.values()
        )

    def to_data(self) -> dict[str, Any]:
        """Plain nested-dict copy of the document, for external encoders."""
        return {
            actor: {
                origin: {
                    target: [rule.to_literals() for rule in rules]
                    for target, rules in destinations.items()
                }
                for origin, destinations in sources.items()
            }
            for actor, sources in self._tables.items()
        }

    def __contains__(self, actor: object) -> bool:
        return actor in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"Ruleset(actors={len(self._tables)}, rules={self.rule_count()})"
