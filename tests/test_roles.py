"""Unit tests for role normalization."""

import pytest

from riftdeck.constants import REQUIRED_ROLES, ROLE_ALIAS_MAP
from riftdeck.errors import DeckError, DeckErrorCode
from riftdeck.models import Role
from riftdeck.roles import normalize_role, try_normalize_role


class TestNormalizeRole:
    """Tests for normalize_role."""

    def test_canonical_names_pass_through(self):
        """Canonical spellings map to themselves."""
        for role in REQUIRED_ROLES:
            assert normalize_role(role.value) is role

    def test_role_members_pass_through(self):
        assert normalize_role(Role.SUPP) is Role.SUPP

    @pytest.mark.parametrize(
        'alias,expected',
        [
            ('jg', Role.JGL),
            ('jgl', Role.JGL),
            ('jungle', Role.JGL),
            ('middle', Role.MID),
            ('bot', Role.ADC),
            ('bottom', Role.ADC),
            ('sup', Role.SUPP),
            ('support', Role.SUPP),
            ('supp', Role.SUPP),
        ],
    )
    def test_aliases(self, alias, expected):
        assert normalize_role(alias) is expected

    def test_case_and_whitespace_ignored(self):
        """Aliases are matched after trimming and lowercasing."""
        assert normalize_role('  BOT ') is Role.ADC
        assert normalize_role('TOP') is Role.TOP
        assert normalize_role('Jungle') is Role.JGL

    def test_idempotent(self):
        """normalize(normalize(x)) == normalize(x) for every alias."""
        for alias in list(ROLE_ALIAS_MAP) + [r.value for r in Role]:
            once = normalize_role(alias)
            assert normalize_role(once) is once
            assert normalize_role(once.value) is once

    def test_unknown_role(self):
        with pytest.raises(DeckError) as exc_info:
            normalize_role('carry')
        assert exc_info.value.code is DeckErrorCode.ROLE_NOT_FOUND
        assert exc_info.value.meta == {'role': 'carry'}

    def test_empty_string(self):
        with pytest.raises(DeckError):
            normalize_role('')


class TestTryNormalizeRole:
    """Tests for the soft variant used by the parser."""

    def test_resolves(self):
        assert try_normalize_role('mid') is Role.MID

    def test_unknown_is_none(self):
        assert try_normalize_role('coach') is None

    def test_empty_is_none(self):
        assert try_normalize_role(None) is None
        assert try_normalize_role('') is None
