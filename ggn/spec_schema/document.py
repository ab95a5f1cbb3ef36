"""
Document Schema - Pydantic models for the GGN interchange shape.

The raw document is a nested mapping:

    ActorId -> Origin -> Target -> [TransitionRule]

This module defines the exact structural contract for that shape and turns
a raw mapping into frozen rule tables. Anything the schema rejects is
reported as a StructuralError with one line per violation.

Constraints:
- Identifiers must match the actor patterns, with consistent case
- "perform" is mandatory and non-empty; unknown rule keys are rejected
- Source and destination tables must not be empty
- "*" is only valid as an origin, never as a square
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

from ..errors import StructuralError
from .actor import ACTOR_PATTERN, BASE_ACTOR_PATTERN
from .rule_dsl import DROP_ORIGIN, RuleTables, TransitionRule

SCHEMA_KEY = "$schema"

OCCUPATION_PATTERN = r"^(empty|enemy|[A-Z]+:[-+]?[A-Z]'?|[a-z]+:[-+]?[a-z]'?)$"


def _not_drop_origin(label: str) -> str:
    if label == DROP_ORIGIN:
        raise ValueError(f"'{DROP_ORIGIN}' is reserved for drops and cannot name a square")
    return label


ActorIdStr = Annotated[str, StringConstraints(strict=True, pattern=ACTOR_PATTERN)]
BaseActorIdStr = Annotated[str, StringConstraints(strict=True, pattern=BASE_ACTOR_PATTERN)]
OccupationStr = Annotated[str, StringConstraints(strict=True, pattern=OCCUPATION_PATTERN)]
OriginStr = Annotated[str, StringConstraints(strict=True, min_length=1)]
SquareStr = Annotated[
    str,
    StringConstraints(strict=True, min_length=1),
    AfterValidator(_not_drop_origin),
]


class TransitionRuleModel(BaseModel):
    """Schema of one transition rule."""
    require: Optional[dict[SquareStr, OccupationStr]] = Field(
        None, description="Squares that must all be in the stated state"
    )
    prevent: Optional[dict[SquareStr, OccupationStr]] = Field(
        None, description="Squares that must not be in the stated state"
    )
    perform: dict[SquareStr, Optional[ActorIdStr]] = Field(
        ..., min_length=1, description="Board diff; null empties a square"
    )
    gain: Optional[BaseActorIdStr] = Field(None, description="Piece added to the mover's hand")
    drop: Optional[BaseActorIdStr] = Field(None, description="Piece removed from the mover's hand")

    model_config = {"extra": "forbid", "frozen": True}

    def to_rule(self) -> TransitionRule:
        return TransitionRule.from_literals(
            perform=self.perform,
            require=self.require,
            prevent=self.prevent,
            gain=self.gain,
            drop=self.drop,
        )


DestinationModel = Annotated[dict[SquareStr, list[TransitionRuleModel]], Field(min_length=1)]
SourceModel = Annotated[dict[OriginStr, DestinationModel], Field(min_length=1)]
DocumentModel = dict[ActorIdStr, SourceModel]

_DOCUMENT_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(DocumentModel)


def _format_error(error: dict[str, Any]) -> str:
    location = " -> ".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]


def parse_document(data: Any) -> RuleTables:
    """
    Validate a raw document and build frozen rule tables.

    Returns nested read-only mappings that preserve the document order.
    Raises StructuralError if the document does not match the schema.
    """
    if isinstance(data, Mapping) and isinstance(data.get(SCHEMA_KEY), str):
        data = {key: value for key, value in data.items() if key != SCHEMA_KEY}

    try:
        document = _DOCUMENT_ADAPTER.validate_python(data)
    except ValidationError as exc:
        errors = [_format_error(error) for error in exc.errors()]
        raise StructuralError(
            f"GGN document does not match the schema ({len(errors)} error(s))",
            errors=errors,
        ) from exc

    return MappingProxyType({
        actor: MappingProxyType({
            origin: MappingProxyType({
                target: tuple(model.to_rule() for model in models)
                for target, models in destinations.items()
            })
            for origin, destinations in sources.items()
        })
        for actor, sources in document.items()
    })


def ruleset_json_schema() -> dict[str, Any]:
    """JSON Schema of the interchange document, generated from the models."""
    schema = _DOCUMENT_ADAPTER.json_schema()
    schema["title"] = "General Gameplay Notation (GGN)"
    return schema
