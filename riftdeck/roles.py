"""Role normalization: free-form role spellings -> canonical Role."""

from typing import Any, Optional

from .constants import ROLE_ALIAS_MAP
from .errors import DeckError, DeckErrorCode
from .models import Role

_CANONICAL = {role.value: role for role in Role}


def normalize_role(value: Any) -> Role:
    """
    Map a role spelling or alias to its canonical Role.

    Canonical spellings in correct case ('Top', 'Jgl', 'Mid', 'Adc', 'Supp')
    pass through without alias lookup. Anything else is trimmed, lowercased
    and resolved through ROLE_ALIAS_MAP.

    Raises:
        DeckError: ROLE_NOT_FOUND if the input matches no role or alias
    """
    if isinstance(value, Role):
        return value
    if isinstance(value, str) and value in _CANONICAL:
        return _CANONICAL[value]

    mapped = ROLE_ALIAS_MAP.get(str(value).strip().lower())
    if mapped is None:
        raise DeckError(DeckErrorCode.ROLE_NOT_FOUND, f'Unsupported role: {value}', {'role': value})
    return mapped


def try_normalize_role(value: Any) -> Optional[Role]:
    """Like normalize_role, but returns None for empty or unknown input."""
    if value is None or value == '':
        return None
    try:
        return normalize_role(value)
    except DeckError:
        return None
