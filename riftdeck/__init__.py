from .models import (
    Card,
    CompleteDeck,
    Deck,
    DeckScoreEntry,
    DeckScoreResult,
    DeckSummary,
    GameScore,
    Multiplier,
    PlayerStats,
    Role,
    TournamentSummary,
)
from .errors import DeckError, DeckErrorCode, DeckPayloadError, DeckPayloadErrorCode
from .constants import REQUIRED_ROLES
from .roles import normalize_role, try_normalize_role
from .deck_manager import (
    add_card,
    calculate_value,
    clone_deck,
    create_deck,
    create_empty_deck,
    ensure_complete,
    ensure_unique_multipliers,
    is_complete,
    missing_roles,
    remove_card,
    replace_card,
    summarize,
    upsert_card,
)
from .deck_io import (
    check_budget,
    error_response,
    load_players,
    parse_card,
    parse_deck,
    parse_user_id,
    to_deck_response,
)
from .scoring import (
    calculate_player_score,
    resolve_multiplier,
    round_half_up,
    score_player_stats,
)
from .deck_scorer import TournamentRun, score_deck
from .validators import validate_deck, validate_score_result

__all__ = [
    # Models
    'Card',
    'CompleteDeck',
    'Deck',
    'DeckScoreEntry',
    'DeckScoreResult',
    'DeckSummary',
    'GameScore',
    'Multiplier',
    'PlayerStats',
    'Role',
    'TournamentSummary',
    'REQUIRED_ROLES',
    # Errors
    'DeckError',
    'DeckErrorCode',
    'DeckPayloadError',
    'DeckPayloadErrorCode',
    # Roles
    'normalize_role',
    'try_normalize_role',
    # Deck rule engine
    'add_card',
    'calculate_value',
    'clone_deck',
    'create_deck',
    'create_empty_deck',
    'ensure_complete',
    'ensure_unique_multipliers',
    'is_complete',
    'missing_roles',
    'remove_card',
    'replace_card',
    'summarize',
    'upsert_card',
    # Payload boundary
    'check_budget',
    'error_response',
    'load_players',
    'parse_card',
    'parse_deck',
    'parse_user_id',
    'to_deck_response',
    # Scoring
    'calculate_player_score',
    'resolve_multiplier',
    'round_half_up',
    'score_player_stats',
    'score_deck',
    'TournamentRun',
    # Validation
    'validate_deck',
    'validate_score_result',
]
