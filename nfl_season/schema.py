"""Typed view of the game-center JSON document.

Only the fields the season table needs are modelled. Everything else in the
feed (drives, player stats, ...) is ignored.
"""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator


class SchemaError(ValueError):
    """Game document is missing the expected home/away structure."""


class TeamSide(BaseModel):
    """One side of a game: team code and per-period score series."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    abbr: str = Field(min_length=1)
    score: list[StrictInt] = Field(min_length=1)

    @field_validator("score", mode="before")
    @classmethod
    def _score_values(cls, v: Any) -> Any:
        # Live feed keys quarters and the total by period ("1".."5", "T")
        if isinstance(v, dict):
            return list(v.values())
        return v

    @property
    def final_score(self) -> int:
        return max(self.score)


class GameDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    home: TeamSide
    away: TeamSide


def parse_game_document(payload: Any) -> GameDocument:
    """Validate a decoded game-center payload.

    The payload is a container whose first element is the game object, either
    a JSON object keyed by game ID or a JSON array.
    """
    if isinstance(payload, dict):
        game = next(iter(payload.values()), None)
    elif isinstance(payload, list):
        game = payload[0] if payload else None
    else:
        raise SchemaError(f"Expected a JSON object or array, got {type(payload).__name__}")

    if not isinstance(game, dict):
        raise SchemaError("First element of the game document is not an object")
    try:
        return GameDocument.model_validate(game)
    except ValidationError as e:
        raise SchemaError(f"Malformed game document: {e}") from e
