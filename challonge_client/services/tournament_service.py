"""
services/tournament_service.py — Tournament Operations over the Challonge API
==============================================================================
Fetch, create and start tournaments, manage participants and report match
results. Each operation is one gateway call followed by resolution of the
returned records into the caller's Tournament.

Lifecycle on the service side:
  pending → underway → awaiting_review → complete

Local state rules:
  - Collections are only changed after the service confirms the call.
  - Removing a participant re-links matches so no match keeps a
    reference to a participant the tournament no longer owns.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional, Union

import aiohttp

from challonge_client.config.client_config import ChallongeConfig
from challonge_client.errors import (
    ChallongeError,
    NotFoundError,
    RemoteError,
    TournamentStateError,
)
from challonge_client.services.gateway import ChallongeGateway
from challonge_client.services.records import Match, Participant, Tournament
from challonge_client.services.resolver import (
    re_resolve,
    resolve_match,
    tally_records,
    tournament_from_wire,
)
from challonge_client.services.status_enums import TournamentState, TournamentType
from challonge_client.services.status_helpers import is_tournament_underway

log = logging.getLogger(__name__)

# Short names accepted by create_tournament()
TYPE_ALIASES = {
    "": TournamentType.SINGLE_ELIMINATION.value,
    "single": TournamentType.SINGLE_ELIMINATION.value,
    "double": TournamentType.DOUBLE_ELIMINATION.value,
}


def response_errors(body: Any) -> list[str]:
    """Error strings from a decoded body (empty when the call succeeded)."""
    if not isinstance(body, dict):
        return []
    errors = body.get("errors") or []
    if isinstance(errors, str):
        return [errors]
    return [str(e) for e in errors]


class TournamentService:
    """
    Operations on Challonge tournaments.

    Provides:
    - fetch / create / start tournaments
    - add / remove participants
    - submit match results

    The gateway passed in is the only client handle used.
    """

    def __init__(self, gateway: ChallongeGateway, *, strict: bool = False):
        self.gateway = gateway
        self.strict = strict

    @classmethod
    def from_config(
        cls,
        config: ChallongeConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> "TournamentService":
        return cls(ChallongeGateway.from_config(config, session=session), strict=config.strict)

    async def _call(
        self,
        method: str,
        route: str,
        params: Optional[dict[str, Any]] = None,
        *,
        context: str,
    ) -> Any:
        """Send one request; a non-empty error list becomes RemoteError."""
        body = await self.gateway.request(method, route, params)
        errors = response_errors(body)
        if errors:
            log.warning(f"[TOURNAMENT-SERVICE] {context}: {errors}")
            raise RemoteError(errors, context)
        return body

    # -------------------------------------------------------------------------
    # Tournaments
    # -------------------------------------------------------------------------

    async def fetch_tournament(
        self,
        identifier: str,
        *,
        include_participants: bool = True,
        include_matches: bool = True,
    ) -> Tournament:
        """
        Fetch a tournament and resolve its participants and matches.

        Args:
            identifier: Tournament id, url, or "subdomain-url"
            include_participants: Ask the service to embed participants
            include_matches: Ask the service to embed matches
        """
        params = {}
        if include_participants:
            params["include_participants"] = 1
        if include_matches:
            params["include_matches"] = 1

        body = await self._call(
            "GET",
            f"tournaments/{identifier}",
            params,
            context="unable to retrieve tournament",
        )
        tournament = tournament_from_wire(body, strict=self.strict)
        tournament.sub_url = str(identifier)
        return tournament

    async def create_tournament(
        self,
        name: str,
        url: str,
        subdomain: str = "",
        open_signup: bool = False,
        tournament_type: str = "single",
    ) -> Tournament:
        """
        Create a new tournament.

        tournament_type takes "single" (default) or "double"; anything else
        is sent unchanged, e.g. "round robin" or "swiss".
        """
        params = {
            "tournament[name]": name,
            "tournament[url]": url,
            "tournament[open_signup]": open_signup,
            "tournament[tournament_type]": TYPE_ALIASES.get(tournament_type, tournament_type),
        }
        if subdomain:
            params["tournament[subdomain]"] = subdomain

        body = await self._call(
            "POST", "tournaments", params, context="unable to create tournament"
        )
        tournament = tournament_from_wire(body, strict=self.strict)
        log.info(f"[TOURNAMENT-SERVICE] Created tournament {tournament.id} ({tournament.get_url()})")
        return tournament

    async def start_tournament(self, tournament: Tournament) -> Tournament:
        """
        Start a pending tournament.

        The response embeds participants and matches; on success the
        caller's tournament is refreshed in place and returned.

        Raises:
            RemoteError: The service refused to start it
            TournamentStateError: The call succeeded but the tournament
                is not underway afterwards
        """
        body = await self._call(
            "POST",
            f"tournaments/{tournament.get_url()}/start",
            {"include_participants": 1, "include_matches": 1},
            context="error starting tournament",
        )
        started = tournament_from_wire(body, strict=self.strict)

        if not is_tournament_underway(started.state):
            log.warning(
                f"[TOURNAMENT-SERVICE] Tournament {tournament.get_url()} has state "
                f"{started.state!r} after start"
            )
            raise TournamentStateError(
                started.state,
                f"tournament has state {started.state!r}, expected "
                f"{TournamentState.UNDERWAY.value!r}",
            )

        _refresh(tournament, started)
        log.info(f"[TOURNAMENT-SERVICE] Tournament {tournament.name!r} started")
        return tournament

    # -------------------------------------------------------------------------
    # Participants
    # -------------------------------------------------------------------------

    async def add_participant(
        self, tournament: Tournament, name: str, misc: str = ""
    ) -> Participant:
        """Register a participant and append it to tournament.participants."""
        body = await self._call(
            "POST",
            f"tournaments/{tournament.get_url()}/participants",
            {"participant[name]": name, "participant[misc]": misc},
            context="unable to add participant",
        )
        data = body.get("participant") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise ChallongeError("unable to add participant: response carried no participant")

        participant = Participant.from_wire(data)
        tournament.participants.append(participant)
        tournament.participants_count += 1
        log.info(
            f"[TOURNAMENT-SERVICE] Added participant {participant.id} ({participant.name!r}) "
            f"to {tournament.get_url()}"
        )
        return participant

    async def remove_participant(
        self, tournament: Tournament, name_or_id: Union[str, int]
    ) -> Participant:
        """
        Remove a participant looked up by id (int) or display name (str).

        Raises:
            NotFoundError: No such participant in tournament.participants
        """
        if isinstance(name_or_id, int) and not isinstance(name_or_id, bool):
            participant = tournament.get_participant(name_or_id)
        else:
            participant = tournament.get_participant_by_name(str(name_or_id))

        if participant is None or not participant.id:
            raise NotFoundError(
                f"participant {name_or_id!r} not found in tournament {tournament.get_url()!r}"
            )

        await self.remove_participant_by_id(tournament, participant.id)
        return participant

    async def remove_participant_by_id(
        self, tournament: Tournament, participant_id: int
    ) -> None:
        """
        Delete a participant on the service, then drop it locally.

        Matches are re-linked afterwards so none of them still points at
        the removed participant.
        """
        await self._call(
            "DELETE",
            f"tournaments/{tournament.get_url()}/participants/{participant_id}",
            context="unable to delete participant",
        )

        before = len(tournament.participants)
        tournament.participants = [
            p for p in tournament.participants if p.id != participant_id
        ]
        removed = before - len(tournament.participants)
        tournament.participants_count = max(0, tournament.participants_count - removed)
        # The delete is already confirmed; a winner mismatch is only logged here
        re_resolve(tournament)

        log.info(
            f"[TOURNAMENT-SERVICE] Removed participant {participant_id} from {tournament.get_url()}"
        )

    # -------------------------------------------------------------------------
    # Matches
    # -------------------------------------------------------------------------

    async def submit_match(self, tournament: Tournament, match: Match) -> Match:
        """
        Report a match's scores and winner.

        Sends Match.submitted_scores and winner_id (left out when 0). The
        service's record is resolved first, then replaces the local match with
        the same id (or is appended if the tournament lacks it) and returned.
        Other matches the result unlocks are only visible after fetching the
        tournament again.
        """
        params = {
            "match[scores_csv]": match.submitted_scores,
            "match[winner_id]": match.winner_id or None,
        }
        body = await self._call(
            "PUT",
            f"tournaments/{tournament.get_url()}/matches/{match.id}",
            params,
            context=f"unable to submit match {match.id}",
        )
        data = body.get("match") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise ChallongeError(f"unable to submit match {match.id}: response carried no match")

        updated = resolve_match(Match.from_wire(data), tournament, strict=self.strict)

        for i, existing in enumerate(tournament.matches):
            if existing.id == updated.id:
                tournament.matches[i] = updated
                break
        else:
            tournament.matches.append(updated)

        tally_records(tournament)
        log.info(
            f"[TOURNAMENT-SERVICE] Match {updated.id} in {tournament.get_url()} -> "
            f"{updated.state} ({updated.scores_csv})"
        )
        return updated


def _refresh(target: Tournament, source: Tournament) -> None:
    """Copy every field of source onto target, keeping target's sub_url if set."""
    sub_url = target.sub_url
    for f in fields(Tournament):
        setattr(target, f.name, getattr(source, f.name))
    if sub_url:
        target.sub_url = sub_url
