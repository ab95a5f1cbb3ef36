"""
Actor Identifiers - Parsing and classification of NAMESPACE:code ids.

An actor id looks like "CHESS:K", "shogi:+p" or "MAKRUK:R'":
- NAMESPACE: ASCII letters, all uppercase or all lowercase
- code: optional "+"/"-" prefix, one letter, optional "'" suffix

The letter's case must match the namespace's case. That shared case is
what tells the two sides apart: uppercase ids belong to the first side,
lowercase ids to the second.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum

SEPARATOR = ":"

# Patterns shared with the document schema (pydantic uses the Rust engine,
# so these avoid Python-only syntax).
ACTOR_PATTERN = r"^([A-Z]+:[-+]?[A-Z]'?|[a-z]+:[-+]?[a-z]'?)$"
BASE_ACTOR_PATTERN = r"^([A-Z]+:[A-Z]|[a-z]+:[a-z])$"
PLAYER_PATTERN = r"^([A-Z]+|[a-z]+)$"

_ACTOR_RE = re.compile(r"\A([A-Za-z]+):([-+]?)([A-Za-z])('?)\Z")
_BASE_ACTOR_RE = re.compile(BASE_ACTOR_PATTERN)
_PLAYER_RE = re.compile(PLAYER_PATTERN)


class Side(Enum):
    """The two sides of a game, encoded by identifier case."""
    UPPER = "upper"
    LOWER = "lower"

    @property
    def opponent(self) -> Side:
        return Side.LOWER if self is Side.UPPER else Side.UPPER


@dataclass(frozen=True)
class ActorId:
    """
    A parsed actor identifier.

    Example:
        ActorId.parse("shogi:+p") -> namespace="shogi", prefix="+",
        letter="p", suffix=""
    """
    namespace: str
    letter: str
    prefix: str = ""
    suffix: str = ""

    @classmethod
    def parse(cls, identifier: str) -> ActorId:
        """Parse an identifier, raising ValueError if it is malformed."""
        if not isinstance(identifier, str):
            raise ValueError(f"Actor id must be a string, got {type(identifier).__name__}")
        match = _ACTOR_RE.match(identifier)
        if not match:
            raise ValueError(f"Invalid actor id: {identifier!r}")
        namespace, prefix, letter, suffix = match.groups()
        if not _same_case(namespace, letter):
            raise ValueError(
                f"Invalid actor id: {identifier!r} (namespace and letter case differ)"
            )
        return cls(namespace=namespace, letter=letter, prefix=prefix, suffix=suffix)

    def __str__(self) -> str:
        return f"{self.namespace}{SEPARATOR}{self.prefix}{self.letter}{self.suffix}"

    @property
    def side(self) -> Side:
        return Side.UPPER if self.namespace.isupper() else Side.LOWER

    @property
    def is_base(self) -> bool:
        return not self.prefix and not self.suffix

    @property
    def base(self) -> ActorId:
        """The same piece with prefix and suffix removed."""
        return ActorId(namespace=self.namespace, letter=self.letter)


def _same_case(namespace: str, letter: str) -> bool:
    return (namespace.isupper() and letter.isupper()) or (
        namespace.islower() and letter.islower()
    )


def is_actor_id(value: object) -> bool:
    """True if value is a well-formed actor id string."""
    if not isinstance(value, str):
        return False
    match = _ACTOR_RE.match(value)
    return bool(match) and _same_case(match.group(1), match.group(3))


def is_base_actor_id(value: object) -> bool:
    """True if value is a well-formed actor id without prefix or suffix."""
    return isinstance(value, str) and bool(_BASE_ACTOR_RE.fullmatch(value))


def is_player_id(value: object) -> bool:
    """True if value can name the active player ("CHESS", "shogi", ...)."""
    return isinstance(value, str) and bool(_PLAYER_RE.fullmatch(value))


def base_form(identifier: str) -> str:
    """Strip modifiers: "shogi:+p" -> "shogi:p", "CHESS:R'" -> "CHESS:R"."""
    return str(ActorId.parse(identifier).base)


def actor_side(identifier: str) -> Side:
    """Side owning an actor id, read from its namespace case."""
    namespace = identifier.split(SEPARATOR, 1)[0]
    return Side.UPPER if namespace.isupper() else Side.LOWER


def player_side(player: str) -> Side:
    """Side an active player identifier stands for."""
    return Side.UPPER if player.isupper() else Side.LOWER
