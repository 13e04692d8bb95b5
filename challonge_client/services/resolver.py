"""
services/resolver.py — Relation Resolver
-----------------------------------------
Joins the flattened participant and match lists of a tournament response
into the tournament's owned collections, then links every match to its
participants by id.

Resolution never fails on a missing id: byes and undecided winners show
up as id 0 or as ids not in the participant list, and simply resolve to
None. Running it again on the same tournament gives the same references.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from challonge_client.errors import InvariantViolation
from challonge_client.services.records import Match, Participant, Tournament, unwrap
from challonge_client.services.status_helpers import is_match_complete

log = logging.getLogger(__name__)


def check_winner(match: Match, strict: bool = False) -> bool:
    """
    Check that a set winner id is one of the two slot ids.

    The service guarantees this, so a mismatch is only logged unless
    strict is set, in which case InvariantViolation is raised.

    Returns:
        True if consistent (or no winner yet), False otherwise
    """
    if not match.winner_id:
        return True
    if match.winner_id in (match.player_one_id, match.player_two_id):
        return True

    message = (
        f"match {match.id} winner {match.winner_id} is neither "
        f"player {match.player_one_id} nor {match.player_two_id}"
    )
    if strict:
        raise InvariantViolation(message)
    log.warning(f"[RESOLVER] {message}")
    return False


def resolve_match(match: Match, tournament: Tournament, strict: bool = False) -> Match:
    """Resolve one match against tournament's participants."""
    check_winner(match, strict=strict)
    match.resolve_participants(tournament)
    return match


def tally_records(tournament: Tournament) -> None:
    """Recompute every participant's wins and losses from completed matches."""
    for participant in tournament.participants:
        participant.wins = 0
        participant.losses = 0

    for match in tournament.matches:
        if not is_match_complete(match.state) or match.winner is None:
            continue
        match.winner.wins += 1
        for player in (match.player_one, match.player_two):
            if player is not None and player is not match.winner:
                player.losses += 1


def resolve_relations(
    tournament: Tournament,
    participant_envelopes: Optional[Iterable[Any]],
    match_envelopes: Optional[Iterable[Any]],
    strict: bool = False,
) -> Tournament:
    """
    Populate tournament.participants and tournament.matches from envelope lists.

    Participants are loaded first (service order kept) so that every
    match can be linked against them. Mutates and returns tournament.
    """
    tournament.participants = [
        Participant.from_wire(item) for item in unwrap(participant_envelopes, "participant")
    ]
    tournament.matches = [
        resolve_match(Match.from_wire(item), tournament, strict=strict)
        for item in unwrap(match_envelopes, "match")
    ]
    tally_records(tournament)

    log.debug(
        f"[RESOLVER] Tournament {tournament.id} resolved: "
        f"{len(tournament.participants)} participants, {len(tournament.matches)} matches"
    )
    return tournament


def re_resolve(tournament: Tournament, strict: bool = False) -> Tournament:
    """
    Re-link existing matches after the participant list changed.

    Every match is re-linked and the tally rebuilt before any winner check
    runs, so a strict failure never leaves a stale reference behind.
    """
    for match in tournament.matches:
        match.resolve_participants(tournament)
    tally_records(tournament)
    for match in tournament.matches:
        check_winner(match, strict=strict)
    return tournament


def tournament_from_wire(payload: dict, strict: bool = False) -> Tournament:
    """
    Build a resolved Tournament from a decoded response body.

    Accepts either the {"tournament": {...}} envelope or the bare object.
    Nested "participants" / "matches" lists are only present when the
    request asked for them; absent lists give empty collections.
    """
    data = payload.get("tournament", payload) if isinstance(payload, dict) else {}
    if not isinstance(data, dict):
        data = {}

    tournament = Tournament.from_wire(data)
    return resolve_relations(
        tournament,
        data.get("participants"),
        data.get("matches"),
        strict=strict,
    )
