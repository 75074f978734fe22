"""Deck rule engine: building, mutating and validating decks.

Every function here is pure. Mutation-style operations (add, remove,
replace, upsert) return a new Deck and raise DeckError without touching
their input, so one deck can be handed to several operations safely.
"""

from dataclasses import replace
from typing import Any, Mapping, Optional

from .constants import REQUIRED_ROLES, UNIQUE_MULTIPLIERS
from .errors import DeckError, DeckErrorCode
from .models import Card, CompleteDeck, Deck, DeckSummary, Multiplier, Role
from .roles import normalize_role


def _pin_role(card: Card, role: Role) -> Card:
    """Re-tag a card with its slot's canonical role."""
    if card.role is role:
        return card
    return replace(card, role=role)


def create_deck(
    user_id: Optional[int] = None,
    slots: Optional[Mapping[Any, Optional[Card]]] = None,
) -> Deck:
    """
    Build a deck with all five roles present.

    Args:
        user_id: Optional owner id
        slots: Partial role -> card mapping; keys may be aliases. Missing
            roles default to empty, and each card is re-tagged with the
            canonical role of the slot it is placed in.

    Raises:
        DeckError: ROLE_NOT_FOUND if a slot key is not a role
    """
    values: dict[str, Optional[Card]] = {role.field: None for role in REQUIRED_ROLES}
    for key, card in (slots or {}).items():
        role = normalize_role(key)
        values[role.field] = _pin_role(card, role) if card else None
    return Deck(user_id=user_id, **values)


def create_empty_deck() -> Deck:
    return create_deck()


def clone_deck(deck: Deck) -> Deck:
    return create_deck(user_id=deck.user_id, slots=deck.slots)


def _assert_multiplier_available(
    deck: Deck, multiplier: Optional[Multiplier], ignored_role: Optional[Role] = None
) -> None:
    if not multiplier or multiplier not in UNIQUE_MULTIPLIERS:
        return

    for role in REQUIRED_ROLES:
        if role is ignored_role:
            continue
        existing = deck.slot(role)
        if existing is not None and existing.multiplier == multiplier:
            label = Multiplier(multiplier).value
            raise DeckError(
                DeckErrorCode.MULTIPLIER_CONFLICT,
                f'Only one {label.lower()} card is allowed per deck.',
                {'multiplier': label, 'conflictRole': role.value},
            )


def _validate_card_role(card: Card, role: Role) -> None:
    if normalize_role(card.role) is not role:
        raise DeckError(
            DeckErrorCode.ROLE_MISMATCH,
            f'Card role ({card.role}) does not match requested slot ({role.value}).',
            {'card': card.to_dict(), 'role': role.value},
        )


def add_card(deck: Deck, card: Card) -> Deck:
    """
    Place a card in the slot named by its own role.

    Raises:
        DeckError: ROLE_NOT_FOUND, MULTIPLIER_CONFLICT or ROLE_ALREADY_OCCUPIED
    """
    role = normalize_role(card.role)
    _validate_card_role(card, role)
    _assert_multiplier_available(deck, card.multiplier)

    occupant = deck.slot(role)
    if occupant is not None:
        raise DeckError(
            DeckErrorCode.ROLE_ALREADY_OCCUPIED,
            f'Role {role.value} already has a card assigned.',
            {'role': role.value, 'occupiedBy': occupant.to_dict()},
        )

    return deck.with_slot(role, _pin_role(card, role))


def remove_card(deck: Deck, role_input: Any) -> Deck:
    """
    Empty a role slot.

    Raises:
        DeckError: ROLE_NOT_FOUND or ROLE_EMPTY
    """
    role = normalize_role(role_input)
    if deck.slot(role) is None:
        raise DeckError(
            DeckErrorCode.ROLE_EMPTY,
            f'Role {role.value} does not have a card to remove.',
            {'role': role.value},
        )
    return deck.with_slot(role, None)


def replace_card(deck: Deck, role_input: Any, new_card: Card) -> Deck:
    """
    Swap the card in an occupied slot.

    The replaced card's own multiplier does not count as a conflict, so a
    captain can be swapped for another captain in the same slot.

    Raises:
        DeckError: ROLE_NOT_FOUND, ROLE_MISMATCH, MULTIPLIER_CONFLICT or ROLE_EMPTY
    """
    role = normalize_role(role_input)
    _validate_card_role(new_card, role)
    _assert_multiplier_available(deck, new_card.multiplier, role)

    if deck.slot(role) is None:
        raise DeckError(
            DeckErrorCode.ROLE_EMPTY,
            f'Role {role.value} is empty. Use add_card instead.',
            {'role': role.value},
        )

    return deck.with_slot(role, _pin_role(new_card, role))


def upsert_card(deck: Deck, role_input: Any, card: Card) -> Deck:
    """Add-or-replace: replace_card checks without the occupancy requirement."""
    role = normalize_role(role_input)
    _validate_card_role(card, role)
    _assert_multiplier_available(deck, card.multiplier, role)
    return deck.with_slot(role, _pin_role(card, role))


def is_complete(deck: Deck) -> bool:
    return all(deck.slot(role) is not None for role in REQUIRED_ROLES)


def missing_roles(deck: Deck) -> list[Role]:
    return [role for role in REQUIRED_ROLES if deck.slot(role) is None]


def calculate_value(deck: Deck) -> float:
    # Empty slots contribute nothing
    total = 0.0
    for role in REQUIRED_ROLES:
        card = deck.slot(role)
        if card is not None:
            total += card.value
    return total


def summarize(deck: Deck, currency_cap: Optional[float] = None) -> DeckSummary:
    missing = missing_roles(deck)
    return DeckSummary(
        complete=not missing,
        missing_roles=missing,
        total_value=calculate_value(deck),
        currency_cap=currency_cap,
    )


def ensure_unique_multipliers(deck: Deck) -> None:
    """
    Check a whole deck for repeated multiplier labels.

    Raises:
        DeckError: MULTIPLIER_CONFLICT naming the first other role holding the label
    """
    for role in REQUIRED_ROLES:
        card = deck.slot(role)
        if card is not None and card.multiplier:
            _assert_multiplier_available(deck, card.multiplier, role)


def ensure_complete(deck: Deck) -> CompleteDeck:
    """
    Narrow a deck to a CompleteDeck before it is saved as final.

    Raises:
        DeckError: ROLE_EMPTY with every missing role in meta['missingRoles']
    """
    missing = missing_roles(deck)
    if missing:
        raise DeckError(
            DeckErrorCode.ROLE_EMPTY,
            'Deck is incomplete - every role must have a card before saving.',
            {'missingRoles': [role.value for role in missing]},
        )

    return CompleteDeck(
        user_id=deck.user_id,
        **{role.field: deck.slot(role) for role in REQUIRED_ROLES},
    )
