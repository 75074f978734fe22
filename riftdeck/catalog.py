"""Built-in demo card catalog."""

from dataclasses import dataclass
from typing import Optional

from .deck_manager import add_card, create_deck
from .models import Card, Deck, Multiplier, Role


@dataclass(frozen=True)
class SampleCard:
    """A catalog entry: a card plus its catalog id and blurb."""
    id: str
    card: Card
    description: str


def _make(
    card_id: str,
    name: str,
    role: Role,
    points: float,
    value: float,
    description: str,
    multiplier: Optional[Multiplier] = None,
) -> SampleCard:
    return SampleCard(
        id=card_id,
        card=Card(name=name, role=role, points=points, value=value, multiplier=multiplier),
        description=description,
    )


SAMPLE_CARDS = [
    _make('jgl-flay', 'FlayMaster', Role.JGL, 14, 9, 'Aggressive jungler built around early ganks.'),
    _make('mid-arcana', 'Arcana', Role.MID, 16, 10, 'Control mid laner with a strong laning phase.', Multiplier.CAPTAIN),
    _make('top-stone', 'Stonewall', Role.TOP, 12, 8, 'Tank top laner with a huge engage.'),
    _make('adc-skybolt', 'Skybolt', Role.ADC, 18, 11, 'Late-game hypercarry.', Multiplier.VICE_CAPTAIN),
    _make('sup-ember', 'Emberlight', Role.SUPP, 10, 6, 'Enchanter who keeps the team alive with shields and heals.'),
    _make('jgl-phantom', 'Phantom V', Role.JGL, 13, 7, 'Farming jungler who scales into mid-game.'),
    _make('mid-sage', 'Sage of Dawn', Role.MID, 15, 9, 'Long-range mage with heavy crowd control.'),
    _make('top-rift', 'Riftbreaker', Role.TOP, 11, 7, 'Bruiser mixing offense and defense.'),
    _make('adc-viper', 'Scarlet Viper', Role.ADC, 17, 10, 'Backline marksman who lives on positioning.'),
    _make('sup-warden', 'Warden Sol', Role.SUPP, 9, 5, 'Playmaking support who starts fights and guards the carry.'),
]


def get_sample_cards(role: Optional[Role] = None) -> list[SampleCard]:
    """All catalog entries, or only those for one role."""
    if role is None:
        return list(SAMPLE_CARDS)
    return [entry for entry in SAMPLE_CARDS if entry.card.role is role]


def find_sample_card(card_id: str) -> Optional[SampleCard]:
    for entry in SAMPLE_CARDS:
        if entry.id == card_id:
            return entry
    return None


def build_sample_deck(user_id: Optional[int] = None) -> Deck:
    """Complete demo deck: the first catalog card of each role."""
    deck = create_deck(user_id=user_id)
    for role in Role:
        deck = add_card(deck, get_sample_cards(role)[0].card)
    return deck
