"""Pydantic schemas for payload and JSON file validation."""

import math
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .constants import MULTIPLIER_VALUES
from .errors import DeckError
from .models import Multiplier, Role
from .roles import normalize_role


def coerce_number(value: Any) -> float:
    """
    Best-effort numeric conversion for untrusted input.

    Numbers and bools convert directly, strings are parsed (blank counts
    as 0), everything else and any non-finite result becomes 0.
    """
    if isinstance(value, (int, float)):
        try:
            numeric = float(value)
        except OverflowError:
            # Integers beyond float range are infinite
            return 0.0
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            numeric = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    return numeric if math.isfinite(numeric) else 0.0


def positive_int_or_none(value: Any) -> Optional[int]:
    """Return value as an int if it is a positive integer, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float) and value.is_integer() and value > 0:
        return int(value)
    return None


class CardPayload(BaseModel):
    """Untrusted card object as it arrives over the wire."""

    name: str
    role: Role
    points: float = 0.0
    value: float = 0.0
    multiplier: Optional[Multiplier] = None
    playerId: Optional[int] = None
    tournamentPoints: Optional[float] = None

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        """Require a non-blank string; surrounding whitespace is dropped."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError('name must be a non-empty string')
        return v.strip()

    @field_validator('role', mode='before')
    @classmethod
    def validate_role(cls, v):
        """Resolve aliases to the canonical role."""
        if v is None or v == '':
            raise ValueError('role is required')
        try:
            return normalize_role(v)
        except DeckError as e:
            raise ValueError(e.message) from e

    @field_validator('points', 'value', mode='before')
    @classmethod
    def coerce_numeric(cls, v):
        return coerce_number(v)

    @field_validator('tournamentPoints', mode='before')
    @classmethod
    def coerce_tournament_points(cls, v):
        if v is None:
            return None
        return coerce_number(v)

    @field_validator('multiplier', mode='before')
    @classmethod
    def drop_unknown_multiplier(cls, v):
        """Keep only the exact known labels; anything else is dropped."""
        if isinstance(v, str) and v in {m.value for m in Multiplier}:
            return v
        return None

    @field_validator('playerId', mode='before')
    @classmethod
    def drop_invalid_player_id(cls, v):
        return positive_int_or_none(v)

    class Config:
        extra = 'ignore'


class PlayerRecord(BaseModel):
    """Live player statistics record."""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    nickname: Optional[str] = None
    kills: int = Field(default=0, ge=0)
    deaths: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    cs: int = Field(default=0, ge=0)
    gold: Optional[int] = Field(default=0, ge=0)
    region_id: Optional[int] = None

    class Config:
        extra = 'ignore'


class PlayersFile(BaseModel):
    """Complete players.json file structure."""

    players: list[PlayerRecord]

    class Config:
        extra = 'forbid'


class ScoringConfig(BaseModel):
    """Scoring weights and multiplier factors."""

    kill_points: int = Field(default=3, ge=0)
    assist_points: int = Field(default=2, ge=0)
    death_penalty: int = Field(default=1, ge=0)
    cs_per_point: int = Field(default=10, ge=1)
    gold_per_point: int = Field(default=500, ge=1)
    multipliers: dict[str, float] = Field(
        default_factory=lambda: {label.value: factor for label, factor in MULTIPLIER_VALUES.items()}
    )

    @field_validator('multipliers')
    @classmethod
    def validate_multipliers(cls, v):
        """Ensure every label is a known multiplier with a positive factor."""
        valid_labels = {m.value for m in Multiplier}
        for label, factor in v.items():
            if label not in valid_labels:
                raise ValueError(f'Invalid multiplier label: {label}')
            if factor <= 0:
                raise ValueError(f'Invalid factor for {label}: {factor}')
        return v

    class Config:
        extra = 'forbid'
