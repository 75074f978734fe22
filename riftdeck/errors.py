"""Typed errors raised by the deck rule engine and the payload parser.

Each taxonomy is a single exception class tagged with a closed ``Enum`` code
plus a free-form ``meta`` dict, so callers match on ``error.code`` instead of
on exception subclasses.
"""

from enum import Enum
from typing import Any, Optional


class DeckErrorCode(str, Enum):
    ROLE_NOT_FOUND = 'ROLE_NOT_FOUND'
    ROLE_ALREADY_OCCUPIED = 'ROLE_ALREADY_OCCUPIED'
    ROLE_EMPTY = 'ROLE_EMPTY'
    ROLE_MISMATCH = 'ROLE_MISMATCH'
    CURRENCY_LIMIT_EXCEEDED = 'CURRENCY_LIMIT_EXCEEDED'
    MULTIPLIER_CONFLICT = 'MULTIPLIER_CONFLICT'


class DeckPayloadErrorCode(str, Enum):
    INVALID_CARD = 'INVALID_CARD'
    INVALID_DECK = 'INVALID_DECK'
    INVALID_USER_ID = 'INVALID_USER_ID'


class _TaggedError(Exception):
    """Shared shape: stable code, human message, diagnostic metadata."""

    def __init__(self, code: Enum, message: str, meta: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = dict(meta) if meta else {}

    def to_dict(self) -> dict[str, Any]:
        """Wire body for the API layer."""
        body: dict[str, Any] = {'error': self.code.value, 'message': self.message}
        if self.meta:
            body['meta'] = self.meta
        return body

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.code.value}, {self.message!r}, meta={self.meta!r})'


class DeckError(_TaggedError):
    """Deck rule violation."""

    code: DeckErrorCode

    def __init__(self, code: DeckErrorCode, message: str, meta: Optional[dict[str, Any]] = None):
        super().__init__(DeckErrorCode(code), message, meta)


class DeckPayloadError(_TaggedError):
    """Malformed external payload."""

    code: DeckPayloadErrorCode

    def __init__(
        self, code: DeckPayloadErrorCode, message: str, meta: Optional[dict[str, Any]] = None
    ):
        super().__init__(DeckPayloadErrorCode(code), message, meta)
