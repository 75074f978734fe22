"""Constants and mappings for the riftdeck engine."""

from .models import Multiplier, Role

# Canonical role order used for iteration, summaries and error metadata
REQUIRED_ROLES = [Role.TOP, Role.JGL, Role.MID, Role.ADC, Role.SUPP]

# Labels that may appear on at most one card per deck
UNIQUE_MULTIPLIERS = [Multiplier.CAPTAIN, Multiplier.VICE_CAPTAIN]

# Lowercased aliases -> canonical role
ROLE_ALIAS_MAP = {
    'top': Role.TOP,
    'jg': Role.JGL,
    'jgl': Role.JGL,
    'jungle': Role.JGL,
    'mid': Role.MID,
    'middle': Role.MID,
    'adc': Role.ADC,
    'bot': Role.ADC,
    'bottom': Role.ADC,
    'support': Role.SUPP,
    'supp': Role.SUPP,
    'sup': Role.SUPP,
}

# Default multiplier factors (overridable via ScoringConfig)
MULTIPLIER_VALUES = {
    Multiplier.CAPTAIN: 2.0,
    Multiplier.VICE_CAPTAIN: 1.5,
}
