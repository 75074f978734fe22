"""Data models for the riftdeck engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Role(str, Enum):
    """The five deck slots, declared in canonical order."""
    TOP = 'Top'
    JGL = 'Jgl'
    MID = 'Mid'
    ADC = 'Adc'
    SUPP = 'Supp'

    def __str__(self) -> str:
        return self.value

    @property
    def field(self) -> str:
        """Attribute name of this role's slot on a Deck."""
        return self.name.lower()


class Multiplier(str, Enum):
    CAPTAIN = 'Captain'
    VICE_CAPTAIN = 'Vice-captain'

    def __str__(self) -> str:
        return self.value


def _wire(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class Card:
    """A drafted player occupying one role slot."""
    name: str
    role: Role
    points: float = 0.0
    value: float = 0.0
    multiplier: Optional[Multiplier] = None
    player_id: Optional[int] = None
    tournament_points: Optional[float] = None  # Written by the scoring engine

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'name': self.name,
            'role': _wire(self.role),
            'points': self.points,
            'value': self.value,
        }
        if self.multiplier is not None:
            data['multiplier'] = _wire(self.multiplier)
        if self.player_id is not None:
            data['playerId'] = self.player_id
        if self.tournament_points is not None:
            data['tournamentPoints'] = self.tournament_points
        return data


@dataclass(frozen=True)
class Deck:
    """
    One optional card per role plus an optional owner.

    Decks are values: every rule-engine operation returns a new Deck
    and never touches the one passed in.
    """
    top: Optional[Card] = None
    jgl: Optional[Card] = None
    mid: Optional[Card] = None
    adc: Optional[Card] = None
    supp: Optional[Card] = None
    user_id: Optional[int] = None

    def slot(self, role: Role) -> Optional[Card]:
        return getattr(self, Role(role).field)

    @property
    def slots(self) -> Dict[Role, Optional[Card]]:
        """Fresh role -> card dict in canonical order."""
        return {role: self.slot(role) for role in Role}

    def with_slot(self, role: Role, card: Optional[Card]) -> 'Deck':
        """Copy with one slot changed; always a plain Deck, never a CompleteDeck."""
        values = {slot_role.field: self.slot(slot_role) for slot_role in Role}
        values[Role(role).field] = card
        return Deck(user_id=self.user_id, **values)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'slots': {
                role.value: card.to_dict() if card is not None else None
                for role, card in self.slots.items()
            }
        }
        if self.user_id is not None:
            data['userId'] = self.user_id
        return data


@dataclass(frozen=True)
class CompleteDeck(Deck):
    """A deck whose every role holds a card."""
    top: Card
    jgl: Card
    mid: Card
    adc: Card
    supp: Card


@dataclass(frozen=True)
class DeckSummary:
    complete: bool
    missing_roles: List[Role]
    total_value: float
    currency_cap: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'complete': self.complete,
            'missingRoles': [role.value for role in self.missing_roles],
            'totalValue': self.total_value,
        }
        if self.currency_cap is not None:
            data['currencyCap'] = self.currency_cap
        return data


@dataclass
class PlayerStats:
    """Live player record supplied by the persistence layer."""
    id: int
    name: str
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    cs: int = 0
    gold: Optional[int] = 0
    nickname: Optional[str] = None
    region_id: Optional[int] = None

    @property
    def display_name(self) -> str:
        return self.nickname or self.name


@dataclass
class DeckScoreEntry:
    """Score of one filled, resolved role."""
    role: Role
    player_id: Optional[int]
    player_name: str
    base_score: int
    multiplier: float
    multiplier_label: Optional[Multiplier]
    total_score: int
    breakdown: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'role': self.role.value,
            'playerId': self.player_id,
            'playerName': self.player_name,
            'baseScore': self.base_score,
            'multiplier': self.multiplier,
            'totalScore': self.total_score,
            'breakdown': dict(self.breakdown),
        }
        if self.multiplier_label is not None:
            data['multiplierLabel'] = _wire(self.multiplier_label)
        return data


@dataclass
class DeckScoreResult:
    deck: Deck
    total_score: int
    entries: List[DeckScoreEntry] = field(default_factory=list)
    missing_roles: List[Role] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            'deck': self.deck.to_dict(),
            'totalScore': self.total_score,
            'entries': [entry.to_dict() for entry in self.entries],
            'missingRoles': [role.value for role in self.missing_roles],
        }


@dataclass
class GameScore:
    """Intermediate result of a tournament run: one scored game."""
    game_number: int
    result: DeckScoreResult


@dataclass
class TournamentSummary:
    """Aggregate over every game of a tournament run."""
    games_played: int = 0
    total_score: int = 0
    role_totals: Dict[Role, int] = field(default_factory=dict)
    best_game: Optional[GameScore] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            'gamesPlayed': self.games_played,
            'totalScore': self.total_score,
            'roleTotals': {role.value: total for role, total in self.role_totals.items()},
            'bestGame': (
                {
                    'gameNumber': self.best_game.game_number,
                    'totalScore': self.best_game.result.total_score,
                }
                if self.best_game is not None
                else None
            ),
        }
