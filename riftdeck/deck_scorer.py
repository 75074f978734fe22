"""Scoring engine: a deck against a collection of live player records."""

import logging
from dataclasses import replace
from typing import Iterable, Iterator, Optional

from .constants import REQUIRED_ROLES
from .models import (
    Deck,
    DeckScoreEntry,
    DeckScoreResult,
    GameScore,
    PlayerStats,
    Role,
    TournamentSummary,
)
from .schemas import ScoringConfig
from .scoring import resolve_multiplier, round_half_up, score_player_stats

logger = logging.getLogger('riftdeck.deck_scorer')


def _index_players(
    players: Iterable[PlayerStats],
) -> tuple[dict[int, PlayerStats], dict[str, PlayerStats]]:
    by_id: dict[int, PlayerStats] = {}
    by_name: dict[str, PlayerStats] = {}
    for player in players:
        by_id[player.id] = player
        by_name[player.name.lower()] = player
        if player.nickname:
            by_name[player.nickname.lower()] = player
    return by_id, by_name


def score_deck(
    deck: Deck,
    players: Iterable[PlayerStats],
    config: Optional[ScoringConfig] = None,
) -> DeckScoreResult:
    """
    Score every filled role of a deck.

    Each card resolves to a player by player_id first, then by its
    lowercased name against player names and nicknames. A resolved card
    scores round(base * multiplier); an unresolved one gets 0 tournament
    points and its role is reported missing alongside empty roles.

    Args:
        deck: Deck to score (not modified)
        players: Live player records
        config: Scoring weights (default: get_config())

    Returns:
        DeckScoreResult whose deck is a copy carrying tournament_points
    """
    by_id, by_name = _index_players(players)

    entries: list[DeckScoreEntry] = []
    missing: list[Role] = []
    scored_cards = {}

    for role in REQUIRED_ROLES:
        card = deck.slot(role)
        if card is None:
            missing.append(role)
            continue

        candidate = by_id.get(card.player_id) if card.player_id else None
        if candidate is None:
            candidate = by_name.get(card.name.lower())

        if candidate is None:
            logger.warning(f'No player record for {card.name} ({role.value}), scoring 0')
            scored_cards[role.field] = replace(card, tournament_points=0)
            missing.append(role)
            continue

        base_score, breakdown = score_player_stats(candidate, config)
        factor = resolve_multiplier(card.multiplier, config)
        total = round_half_up(base_score * factor)

        scored_cards[role.field] = replace(card, tournament_points=total)
        entries.append(
            DeckScoreEntry(
                role=role,
                player_id=candidate.id,
                player_name=candidate.display_name,
                base_score=base_score,
                multiplier=factor,
                multiplier_label=card.multiplier,
                total_score=total,
                breakdown=breakdown,
            )
        )

    return DeckScoreResult(
        deck=replace(deck, **scored_cards),
        total_score=sum(entry.total_score for entry in entries),
        entries=entries,
        missing_roles=missing,
    )


class TournamentRun:
    """
    Score one deck across a sequence of games.

    Iterating yields a GameScore per game as soon as that game's player
    records are consumed from ``games``; once the iteration is exhausted
    ``summary`` holds the aggregate.

    Example:
        run = TournamentRun(deck, [game_1_players, game_2_players])
        for game in run:
            print(game.game_number, game.result.total_score)
        print(run.summary.total_score)
    """

    def __init__(
        self,
        deck: Deck,
        games: Iterable[Iterable[PlayerStats]],
        config: Optional[ScoringConfig] = None,
    ):
        self.deck = deck
        self.games = games
        self.config = config
        self.summary = TournamentSummary()
        self.finished = False

    def __iter__(self) -> Iterator[GameScore]:
        summary = TournamentSummary(role_totals={role: 0 for role in REQUIRED_ROLES})
        self.summary = summary
        self.finished = False

        for number, players in enumerate(self.games, start=1):
            result = score_deck(self.deck, players, self.config)
            game = GameScore(game_number=number, result=result)

            summary.games_played = number
            summary.total_score += result.total_score
            for entry in result.entries:
                summary.role_totals[entry.role] += entry.total_score
            if summary.best_game is None or result.total_score > summary.best_game.result.total_score:
                summary.best_game = game

            logger.debug(f'Game {number}: {result.total_score} pts')
            yield game

        self.finished = True

    def run(self) -> TournamentSummary:
        """Consume every game and return the aggregate."""
        for _game in self:
            pass
        return self.summary
