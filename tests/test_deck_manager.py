"""Unit tests for the deck rule engine."""

import pytest

from riftdeck.deck_manager import (
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
from riftdeck.errors import DeckError, DeckErrorCode
from riftdeck.models import Card, CompleteDeck, Deck, Multiplier, Role


def make_card(name, role, value=5, multiplier=None, **kwargs):
    return Card(name=name, role=role, points=10, value=value, multiplier=multiplier, **kwargs)


@pytest.fixture
def full_deck():
    return create_deck(
        user_id=7,
        slots={
            Role.TOP: make_card('Zeus', Role.TOP, value=8),
            Role.JGL: make_card('Oner', Role.JGL, value=9),
            Role.MID: make_card('Faker', Role.MID, value=12, multiplier=Multiplier.CAPTAIN),
            Role.ADC: make_card('Gumayusi', Role.ADC, value=10, multiplier=Multiplier.VICE_CAPTAIN),
            Role.SUPP: make_card('Keria', Role.SUPP, value=7),
        },
    )


class TestCreateDeck:
    """Tests for deck construction."""

    def test_empty_deck(self):
        deck = create_empty_deck()
        assert all(card is None for card in deck.slots.values())
        assert list(deck.slots) == [Role.TOP, Role.JGL, Role.MID, Role.ADC, Role.SUPP]
        assert deck.user_id is None

    def test_partial_slots(self):
        deck = create_deck(user_id=3, slots={Role.MID: make_card('Faker', Role.MID)})
        assert deck.user_id == 3
        assert deck.mid.name == 'Faker'
        assert deck.top is None and deck.supp is None

    def test_card_retagged_with_slot_role(self):
        """A card placed under a slot key takes that slot's role."""
        deck = create_deck(slots={'bot': make_card('Ruler', Role.MID)})
        assert deck.adc.role is Role.ADC
        assert deck.mid is None

    def test_unknown_slot_key(self):
        with pytest.raises(DeckError) as exc_info:
            create_deck(slots={'coach': make_card('kkOma', Role.MID)})
        assert exc_info.value.code is DeckErrorCode.ROLE_NOT_FOUND

    def test_clone_is_equal_but_new(self, full_deck):
        copy = clone_deck(full_deck)
        assert copy == full_deck
        assert copy is not full_deck


class TestAddCard:
    """Tests for add_card."""

    def test_add_to_empty_slot(self):
        deck = create_empty_deck()
        card = make_card('Faker', Role.MID)
        updated = add_card(deck, card)
        assert updated.mid == card
        assert deck.mid is None  # Input untouched

    def test_alias_role_on_card(self):
        """A card declaring an alias role lands in the canonical slot."""
        updated = add_card(create_empty_deck(), make_card('Keria', 'support'))
        assert updated.supp.role is Role.SUPP

    def test_occupied_slot(self, full_deck):
        with pytest.raises(DeckError) as exc_info:
            add_card(full_deck, make_card('Chovy', Role.MID))
        assert exc_info.value.code is DeckErrorCode.ROLE_ALREADY_OCCUPIED
        assert exc_info.value.meta['role'] == 'Mid'
        assert exc_info.value.meta['occupiedBy']['name'] == 'Faker'

    def test_unknown_card_role(self):
        with pytest.raises(DeckError) as exc_info:
            add_card(create_empty_deck(), make_card('Nobody', 'coach'))
        assert exc_info.value.code is DeckErrorCode.ROLE_NOT_FOUND

    @pytest.mark.parametrize('role', [Role.TOP, Role.JGL, Role.ADC, Role.SUPP])
    def test_second_captain_conflicts_anywhere(self, role):
        """A second Captain fails regardless of the slot it targets."""
        deck = create_deck(slots={Role.MID: make_card('Faker', Role.MID, multiplier=Multiplier.CAPTAIN)})
        with pytest.raises(DeckError) as exc_info:
            add_card(deck, make_card('Other', role, multiplier=Multiplier.CAPTAIN))
        assert exc_info.value.code is DeckErrorCode.MULTIPLIER_CONFLICT
        assert exc_info.value.meta == {'multiplier': 'Captain', 'conflictRole': 'Mid'}

    def test_captain_and_vice_captain_coexist(self):
        deck = add_card(
            create_empty_deck(), make_card('Faker', Role.MID, multiplier=Multiplier.CAPTAIN)
        )
        deck = add_card(deck, make_card('Keria', Role.SUPP, multiplier=Multiplier.VICE_CAPTAIN))
        assert deck.mid.multiplier is Multiplier.CAPTAIN
        assert deck.supp.multiplier is Multiplier.VICE_CAPTAIN

    def test_conflict_checked_before_occupancy(self, full_deck):
        """A captain aimed at an occupied slot reports the conflict first."""
        with pytest.raises(DeckError) as exc_info:
            add_card(full_deck, make_card('Kiin', Role.TOP, multiplier=Multiplier.CAPTAIN))
        assert exc_info.value.code is DeckErrorCode.MULTIPLIER_CONFLICT

    def test_add_then_remove_round_trip(self):
        original = create_deck(user_id=1, slots={Role.TOP: make_card('Zeus', Role.TOP)})
        updated = add_card(original, make_card('Faker', Role.MID))
        assert remove_card(updated, Role.MID) == original


class TestRemoveCard:
    """Tests for remove_card."""

    def test_remove(self, full_deck):
        updated = remove_card(full_deck, 'jungle')
        assert updated.jgl is None
        assert full_deck.jgl is not None

    def test_remove_empty(self):
        with pytest.raises(DeckError) as exc_info:
            remove_card(create_empty_deck(), 'Top')
        assert exc_info.value.code is DeckErrorCode.ROLE_EMPTY
        assert exc_info.value.meta == {'role': 'Top'}


class TestReplaceCard:
    """Tests for replace_card."""

    def test_replace(self, full_deck):
        updated = replace_card(full_deck, 'top', make_card('Kiin', Role.TOP))
        assert updated.top.name == 'Kiin'
        assert full_deck.top.name == 'Zeus'

    def test_replace_empty_slot(self):
        with pytest.raises(DeckError) as exc_info:
            replace_card(create_empty_deck(), Role.TOP, make_card('Kiin', Role.TOP))
        assert exc_info.value.code is DeckErrorCode.ROLE_EMPTY

    def test_role_mismatch(self, full_deck):
        with pytest.raises(DeckError) as exc_info:
            replace_card(full_deck, Role.TOP, make_card('Chovy', Role.MID))
        assert exc_info.value.code is DeckErrorCode.ROLE_MISMATCH
        assert exc_info.value.meta['role'] == 'Top'

    def test_replace_captain_with_captain_in_same_slot(self, full_deck):
        """The replaced card's own multiplier does not conflict."""
        updated = replace_card(
            full_deck, Role.MID, make_card('Chovy', Role.MID, multiplier=Multiplier.CAPTAIN)
        )
        assert updated.mid.name == 'Chovy'

    def test_captain_elsewhere_conflicts(self, full_deck):
        with pytest.raises(DeckError) as exc_info:
            replace_card(full_deck, Role.TOP, make_card('Kiin', Role.TOP, multiplier=Multiplier.CAPTAIN))
        assert exc_info.value.code is DeckErrorCode.MULTIPLIER_CONFLICT
        assert exc_info.value.meta['conflictRole'] == 'Mid'


class TestUpsertCard:
    """Tests for upsert_card."""

    def test_upsert_into_empty(self):
        updated = upsert_card(create_empty_deck(), 'sup', make_card('Keria', Role.SUPP))
        assert updated.supp.name == 'Keria'

    def test_upsert_over_existing(self, full_deck):
        updated = upsert_card(full_deck, Role.SUPP, make_card('Lehends', Role.SUPP))
        assert updated.supp.name == 'Lehends'

    def test_upsert_mismatch(self):
        with pytest.raises(DeckError) as exc_info:
            upsert_card(create_empty_deck(), Role.SUPP, make_card('Faker', Role.MID))
        assert exc_info.value.code is DeckErrorCode.ROLE_MISMATCH


class TestDeckSummary:
    """Tests for completeness, value and summary."""

    def test_empty_deck_summary(self):
        summary = summarize(create_empty_deck())
        assert summary.complete is False
        assert summary.total_value == 0
        assert summary.missing_roles == [Role.TOP, Role.JGL, Role.MID, Role.ADC, Role.SUPP]

    def test_full_deck_summary(self, full_deck):
        summary = summarize(full_deck)
        assert summary.complete is True
        assert summary.missing_roles == []
        assert summary.total_value == 46

    def test_value_matches_filled_slots(self, full_deck):
        deck = remove_card(full_deck, Role.ADC)
        assert calculate_value(deck) == sum(c.value for c in deck.slots.values() if c is not None)
        assert missing_roles(deck) == [Role.ADC]
        assert not is_complete(deck)

    def test_summary_to_dict(self, full_deck):
        data = summarize(remove_card(full_deck, Role.TOP), currency_cap=50).to_dict()
        assert data == {
            'complete': False,
            'missingRoles': ['Top'],
            'totalValue': 38,
            'currencyCap': 50,
        }


class TestEnsureComplete:
    """Tests for ensure_complete and ensure_unique_multipliers."""

    def test_complete(self, full_deck):
        complete = ensure_complete(full_deck)
        assert isinstance(complete, CompleteDeck)
        assert complete.user_id == 7
        assert complete.slots == full_deck.slots

    def test_removing_from_complete_deck_gives_plain_deck(self, full_deck):
        complete = ensure_complete(full_deck)
        deck = remove_card(complete, 'Top')
        assert not isinstance(deck, CompleteDeck)
        assert type(deck) is Deck
        assert deck.top is None
        assert deck.user_id == 7
        assert isinstance(complete, CompleteDeck)
        assert complete.top is not None

    def test_replacing_in_complete_deck_gives_plain_deck(self, full_deck):
        complete = ensure_complete(full_deck)
        deck = replace_card(complete, Role.TOP, make_card('Kiin', Role.TOP))
        assert type(deck) is Deck
        assert deck.top.name == 'Kiin'

    def test_incomplete_lists_every_missing_role(self, full_deck):
        deck = remove_card(remove_card(full_deck, Role.JGL), Role.SUPP)
        with pytest.raises(DeckError) as exc_info:
            ensure_complete(deck)
        assert exc_info.value.code is DeckErrorCode.ROLE_EMPTY
        assert exc_info.value.meta == {'missingRoles': ['Jgl', 'Supp']}

    def test_unique_multipliers_ok(self, full_deck):
        ensure_unique_multipliers(full_deck)

    def test_duplicate_multipliers_detected(self):
        deck = Deck(
            top=make_card('Zeus', Role.TOP, multiplier=Multiplier.CAPTAIN),
            mid=make_card('Faker', Role.MID, multiplier=Multiplier.CAPTAIN),
        )
        with pytest.raises(DeckError) as exc_info:
            ensure_unique_multipliers(deck)
        assert exc_info.value.code is DeckErrorCode.MULTIPLIER_CONFLICT
        assert exc_info.value.meta['conflictRole'] == 'Mid'
