"""Report-style validation for decks and scoring results.

Unlike the rule engine, these checks never raise: they collect
human-readable messages so a caller can show every problem at once.
"""

from collections import Counter

from .constants import REQUIRED_ROLES
from .models import Deck, DeckScoreEntry, DeckScoreResult, Multiplier
from .roles import try_normalize_role

MAX_ENTRY_SCORE = 200
MIN_ENTRY_SCORE = -30


def validate_deck(deck: Deck) -> list[str]:
    """
    Validate a deck that may not have come through the rule engine.

    Checks:
    - Each card's role agrees with the slot it occupies
    - Blank card names
    - Multiplier labels used at most once
    - No player drafted into two slots

    Args:
        deck: Deck to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    owner = f'Deck of user {deck.user_id}' if deck.user_id is not None else 'Deck'

    names = []
    labels = Counter()
    for role in REQUIRED_ROLES:
        card = deck.slot(role)
        if card is None:
            continue

        if try_normalize_role(card.role) is not role:
            errors.append(f'{owner} has {card.name} ({card.role}) in the {role.value} slot')

        if not card.name or not card.name.strip():
            errors.append(f'{owner} has a card without a name in the {role.value} slot')
        else:
            names.append(card.name.strip().lower())

        if card.multiplier:
            labels[Multiplier(card.multiplier).value] += 1

    for label, count in sorted(labels.items()):
        if count > 1:
            errors.append(f'{owner} has {count} {label} cards (max 1)')

    duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
    if duplicates:
        errors.append(f'{owner} has duplicate players: {", ".join(duplicates)}')

    return errors


def validate_entry_score(entry: DeckScoreEntry) -> list[str]:
    """
    Check that one role's score is reasonable and internally consistent.

    Sanity checks:
    - Total score in a plausible range
    - Breakdown sums to the base score
    - Total equals base score times multiplier (within rounding)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    if entry.total_score > MAX_ENTRY_SCORE:
        warnings.append(
            f'{entry.player_name} scored {entry.total_score} pts (unusually high - check the stat feed)'
        )
    elif entry.total_score < MIN_ENTRY_SCORE:
        warnings.append(
            f'{entry.player_name} scored {entry.total_score} pts (unusually low - check the stat feed)'
        )

    if entry.breakdown:
        breakdown_sum = sum(entry.breakdown.values())
        if breakdown_sum != entry.base_score:
            warnings.append(
                f'{entry.player_name} breakdown sum ({breakdown_sum}) != base score ({entry.base_score})'
            )

    if abs(entry.base_score * entry.multiplier - entry.total_score) > 0.5:
        warnings.append(
            f'{entry.player_name} total ({entry.total_score}) does not match '
            f'{entry.base_score} x {entry.multiplier}'
        )

    return warnings


def validate_score_result(result: DeckScoreResult) -> list[str]:
    """
    Validate a whole deck score.

    Returns:
        List of warning messages: per-entry warnings, a total that does not
        match its entries, and roles that could not be scored
    """
    warnings = []

    for entry in result.entries:
        warnings.extend(validate_entry_score(entry))

    entries_total = sum(entry.total_score for entry in result.entries)
    if entries_total != result.total_score:
        warnings.append(f'Deck total ({result.total_score}) != sum of entries ({entries_total})')

    if result.missing_roles:
        roles = ', '.join(role.value for role in result.missing_roles)
        warnings.append(f'Roles not scored: {roles}')

    return warnings
