"""Payload parsing and response shaping at the API boundary.

Everything arriving here is untrusted: request bodies decoded from JSON,
path parameters, stored documents. Cards go through the CardPayload schema;
decks degrade to an empty deck instead of failing when their outer shape is
wrong.
"""

import logging
import math
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from .deck_manager import calculate_value, create_deck, summarize
from .errors import DeckError, DeckErrorCode, DeckPayloadError, DeckPayloadErrorCode
from .models import Card, Deck, PlayerStats, Role
from .roles import try_normalize_role
from .schemas import CardPayload, PlayersFile, positive_int_or_none
from .utils import load_json

logger = logging.getLogger('riftdeck.deck_io')


def parse_card(payload: Any, role_hint: Any = None) -> Card:
    """
    Turn an untrusted object into a Card.

    Args:
        payload: Decoded JSON value
        role_hint: Role that overrides the payload's own 'role' field
            (used when the card sits under a known slot key)

    Returns:
        Validated Card. Unknown multipliers and invalid player ids are
        dropped; unparsable numbers become 0.

    Raises:
        DeckPayloadError: INVALID_CARD if payload is not an object or lacks
            a non-empty name or a resolvable role
    """
    if not isinstance(payload, dict):
        raise DeckPayloadError(DeckPayloadErrorCode.INVALID_CARD, 'Card payload must be an object.')

    role_candidate = role_hint if role_hint is not None else payload.get('role')
    data = dict(payload)
    data['role'] = role_candidate

    try:
        parsed = CardPayload.model_validate(data)
    except ValidationError as e:
        logger.debug(f'Rejected card payload: {e}')
        raise DeckPayloadError(
            DeckPayloadErrorCode.INVALID_CARD,
            'Card payload is missing mandatory fields.',
            {'name': payload.get('name'), 'role': role_candidate},
        ) from e

    return Card(
        name=parsed.name,
        role=parsed.role,
        points=parsed.points,
        value=parsed.value,
        multiplier=parsed.multiplier,
        player_id=parsed.playerId,
        tournament_points=parsed.tournamentPoints,
    )


def parse_deck(payload: Any) -> Deck:
    """
    Turn an untrusted object into a Deck.

    Never fails on shape: a non-object payload gives a fresh empty deck,
    a non-object 'slots' is treated as no slots, and slot keys that are not
    roles are skipped. Card values are still parsed strictly.

    Raises:
        DeckPayloadError: INVALID_CARD if a slot holds a malformed card object
    """
    if not isinstance(payload, dict):
        logger.debug(f'Deck payload is {type(payload).__name__}, using empty deck')
        return create_deck()

    slots_input = payload.get('slots')
    if not isinstance(slots_input, dict):
        slots_input = {}

    slots: dict[Role, Optional[Card]] = {}
    for key, value in slots_input.items():
        role = try_normalize_role(key)
        if role is None:
            logger.debug(f'Skipping unknown slot key: {key!r}')
            continue

        # Arrays are rejected as cards rather than read as an empty slot
        if isinstance(value, (dict, list)):
            slots[role] = parse_card(value, role)
        else:
            slots[role] = None

    user_id = positive_int_or_none(payload.get('userId'))
    return create_deck(user_id=user_id, slots=slots)


def parse_user_id(value: Any) -> int:
    """
    Validate a user identifier.

    Integers, integral floats and integer strings (as path parameters
    arrive) are accepted when positive.

    Raises:
        DeckPayloadError: INVALID_USER_ID otherwise
    """
    user_id: Optional[int] = None
    if isinstance(value, str):
        text = value.strip()
        try:
            numeric = float(text) if text else math.nan
        except ValueError:
            numeric = math.nan
        user_id = positive_int_or_none(numeric)
    else:
        user_id = positive_int_or_none(value)

    if user_id is None:
        raise DeckPayloadError(
            DeckPayloadErrorCode.INVALID_USER_ID,
            'User identifier must be a positive integer.',
            {'value': value},
        )
    return user_id


def to_deck_response(deck: Deck, currency_cap: Optional[float] = None) -> dict[str, Any]:
    """Deck plus its summary, as sent to clients."""
    return {
        'deck': deck.to_dict(),
        'summary': summarize(deck, currency_cap=currency_cap).to_dict(),
    }


def check_budget(deck: Deck, currency: float) -> float:
    """
    Check a deck's total value against a user's currency.

    This is the budget cap enforced by the service layer after a card
    change; the rule engine itself never calls it.

    Returns:
        The deck's total value

    Raises:
        DeckError: CURRENCY_LIMIT_EXCEEDED if the total exceeds currency
    """
    total_value = calculate_value(deck)
    if total_value > currency:
        raise DeckError(
            DeckErrorCode.CURRENCY_LIMIT_EXCEEDED,
            'Deck value exceeds available currency.',
            {
                'totalValue': total_value,
                'currency': currency,
                'overBudgetBy': total_value - currency,
            },
        )
    return total_value


def error_response(error: Exception) -> tuple[int, dict[str, Any]]:
    """
    Map an error to an HTTP status and JSON body.

    Typed deck and payload errors become 400 responses whose 'error'
    field carries the distinct code. Anything else is a 500.
    """
    if isinstance(error, (DeckError, DeckPayloadError)):
        return 400, error.to_dict()

    logger.error(f'Unexpected deck operation failure: {error!r}')
    return 500, {'error': 'DECK_OPERATION_FAILED'}


def load_players(path: Path | str) -> list[PlayerStats]:
    """
    Load live player records from a players JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file does not match the PlayersFile schema
    """
    players_file = load_json(path, schema=PlayersFile)
    return [
        PlayerStats(
            id=record.id,
            name=record.name,
            kills=record.kills,
            deaths=record.deaths,
            assists=record.assists,
            cs=record.cs,
            gold=record.gold,
            nickname=record.nickname,
            region_id=record.region_id,
        )
        for record in players_file.players
    ]
