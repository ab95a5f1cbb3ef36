"""
GGN Error Hierarchy

Every error raised by the engine inherits from GGNError, so callers can
catch the whole family at once or pick a single failure class.

Error classes:
- StructuralError: the raw document does not match the schema
- LogicalConsistencyError: a rule contradicts itself or restates the origin
- RulesetLookupError: unknown actor, origin or target
- InvalidArgumentError: malformed board, hand or active player

Usage:
    from ggn.errors import GGNError, RulesetLookupError

    try:
        engine = ruleset.select("CHESS:K").from_("e1").to("e2")
    except RulesetLookupError as e:
        logger.info("No such move: %s", e.message)
"""

from __future__ import annotations
from typing import Any

__all__ = [
    "GGNError",
    "StructuralError",
    "LogicalConsistencyError",
    "RulesetLookupError",
    "InvalidArgumentError",
]


class GGNError(Exception):
    """
    Base exception for all GGN errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra fields naming what failed
    """
    code: str = "GGN_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class StructuralError(GGNError, ValueError):
    """
    Raised when a raw document does not match the interchange schema.

    Always raised at construction time. `errors` lists every schema
    violation found, one line each.
    """
    code: str = "STRUCTURAL_ERROR"

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or []
        super().__init__(message, context={"error_count": len(self.errors)} if self.errors else None)


class LogicalConsistencyError(GGNError, ValueError):
    """
    Raised when the optional validation pass rejects a rule.

    The context names the first offending rule; `issues` holds every
    issue found in the document.
    """
    code: str = "LOGICAL_CONSISTENCY_ERROR"

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        issues: list[Any] | None = None,
    ):
        self.issues = issues or []
        super().__init__(message, context=context)


class RulesetLookupError(GGNError, KeyError):
    """Raised when an actor, origin or target is not in the ruleset."""
    code: str = "LOOKUP_ERROR"


class InvalidArgumentError(GGNError, ValueError):
    """Raised when board, hand or active player are malformed."""
    code: str = "INVALID_ARGUMENT"
