"""
services/records.py — Challonge Resource Records
=================================================
Plain data shapes for tournaments, participants and matches, plus the
queries a resolved tournament answers (lookups, state filters).

The service wraps every list item one level deeper
({"participant": {...}}, {"match": {...}}); unwrap() strips that layer
and nothing else in the package sees an envelope.

Ownership:
  Tournament owns its participants and matches.
  Match.player_one / player_two / winner borrow from tournament.participants
  and are only valid for the tournament that resolved them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional, Union

from challonge_client.services.status_enums import ALL, MatchState
from challonge_client.services.status_helpers import state_matches_filter

log = logging.getLogger(__name__)

# One set of a scores_csv field, e.g. "3-1" or "-1-2"
_SET_PATTERN = re.compile(r"^\s*(-?\d+)\s*-\s*(-?\d+)\s*$")


# -----------------------------------------------------------------------------
# Wire helpers
# -----------------------------------------------------------------------------


def unwrap(envelopes: Optional[Iterable[Any]], key: str) -> List[dict]:
    """Strip the single-key wrapper from each item of a list response.

    Items that are already bare objects are passed through unchanged.
    """
    items = []
    for envelope in envelopes or []:
        if isinstance(envelope, dict) and isinstance(envelope.get(key), dict):
            items.append(envelope[key])
        elif isinstance(envelope, dict):
            items.append(envelope)
    return items


def _as_int(value: Any) -> int:
    """Wire ids and counters; null or garbage becomes 0 (never resolves)."""
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        log.debug(f"[RECORDS] Could not parse integer: {value!r}")
        return 0


def _as_time(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        log.debug(f"[RECORDS] Could not parse timestamp: {value!r}")
        return None


def parse_scores(scores_csv: Optional[str]) -> List[tuple[int, int]]:
    """Split "3-1,2-3" into [(3, 1), (2, 3)]. Malformed sets are skipped."""
    sets = []
    for chunk in (scores_csv or "").split(","):
        if not chunk.strip():
            continue
        m = _SET_PATTERN.match(chunk)
        if not m:
            log.debug(f"[RECORDS] Skipping malformed score set: {chunk!r}")
            continue
        sets.append((int(m.group(1)), int(m.group(2))))
    return sets


def score_totals(scores_csv: Optional[str]) -> tuple[int, int]:
    """
    Collapse a scores_csv into one score per player.

    A single set gives its two numbers as-is. With several sets each
    player's score is the number of sets they won.
    """
    sets = parse_scores(scores_csv)
    if not sets:
        return 0, 0
    if len(sets) == 1:
        return sets[0]
    one = sum(1 for a, b in sets if a > b)
    two = sum(1 for a, b in sets if b > a)
    return one, two


# -----------------------------------------------------------------------------
# Data Classes
# -----------------------------------------------------------------------------


@dataclass
class Participant:
    """Tournament participant."""

    id: int
    name: str = ""
    misc: str = ""  # Free-form tag set by the organizer
    seed: int = 0
    wins: int = 0  # Derived from completed matches
    losses: int = 0

    @classmethod
    def from_wire(cls, data: dict) -> "Participant":
        return cls(
            id=_as_int(data.get("id")),
            name=data.get("display_name") or data.get("name") or "",
            misc=data.get("misc") or "",
            seed=_as_int(data.get("seed")),
        )


@dataclass
class Match:
    """Bracket match. Slot ids of 0 mean the slot is not decided yet."""

    id: int
    identifier: str = ""
    state: str = MatchState.PENDING.value
    round: int = 0
    player_one_id: int = 0
    player_two_id: int = 0
    winner_id: int = 0
    loser_id: int = 0
    scores_csv: str = ""
    player_one_score: int = 0
    player_two_score: int = 0
    updated_at: Optional[datetime] = None

    # Resolved references into the owning tournament's participants
    player_one: Optional[Participant] = field(default=None, repr=False, compare=False)
    player_two: Optional[Participant] = field(default=None, repr=False, compare=False)
    winner: Optional[Participant] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_wire(cls, data: dict) -> "Match":
        scores_csv = data.get("scores_csv") or ""
        one, two = score_totals(scores_csv)
        return cls(
            id=_as_int(data.get("id")),
            identifier=str(data.get("identifier") or ""),
            state=data.get("state") or MatchState.PENDING.value,
            round=_as_int(data.get("round")),
            player_one_id=_as_int(data.get("player1_id")),
            player_two_id=_as_int(data.get("player2_id")),
            winner_id=_as_int(data.get("winner_id")),
            loser_id=_as_int(data.get("loser_id")),
            scores_csv=scores_csv,
            player_one_score=one,
            player_two_score=two,
            updated_at=_as_time(data.get("updated_at")),
        )

    def resolve_participants(self, tournament: "Tournament") -> None:
        """Point the three references at tournament's participants (None if unknown)."""
        self.player_one = tournament.get_participant(self.player_one_id)
        self.player_two = tournament.get_participant(self.player_two_id)
        self.winner = tournament.get_participant(self.winner_id)

    def involves(self, participant_id: int) -> bool:
        return bool(participant_id) and participant_id in (
            self.player_one_id,
            self.player_two_id,
        )

    @property
    def submitted_scores(self) -> str:
        """
        Score string sent when reporting this match.

        The fetched scores_csv is sent as-is while the player scores still
        agree with it, so per-set detail survives a resubmit.
        """
        if self.scores_csv and score_totals(self.scores_csv) == (
            self.player_one_score,
            self.player_two_score,
        ):
            return self.scores_csv
        return f"{self.player_one_score}-{self.player_two_score}"


@dataclass
class Tournament:
    """Tournament with its owned participant and match collections."""

    id: int = 0
    name: str = ""
    url: str = ""
    subdomain: str = ""
    state: str = ""
    tournament_type: str = ""
    description: str = ""
    game_name: str = ""
    full_url: str = ""
    participants_count: int = 0
    open_signup: bool = False
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    sub_url: str = ""  # Identifier the caller fetched this tournament by

    participants: List[Participant] = field(default_factory=list, repr=False)
    matches: List[Match] = field(default_factory=list, repr=False)

    @classmethod
    def from_wire(cls, data: dict) -> "Tournament":
        """Scalar fields only; relations are joined by the resolver."""
        return cls(
            id=_as_int(data.get("id")),
            name=data.get("name") or "",
            url=data.get("url") or "",
            subdomain=data.get("subdomain") or "",
            state=data.get("state") or "",
            tournament_type=data.get("tournament_type") or "",
            description=data.get("description") or "",
            game_name=data.get("game_name") or "",
            full_url=data.get("full_challonge_url") or "",
            participants_count=_as_int(data.get("participants_count")),
            open_signup=bool(data.get("open_signup")),
            created_at=_as_time(data.get("created_at")),
            started_at=_as_time(data.get("started_at")),
            updated_at=_as_time(data.get("updated_at")),
        )

    def get_url(self) -> str:
        """Route identifier: "subdomain-url" for organization tournaments, else "url"."""
        if self.subdomain:
            return f"{self.subdomain}-{self.url}"
        return self.url

    # -------------------------------------------------------------------------
    # Participant lookups
    # -------------------------------------------------------------------------

    def find_participant(
        self, predicate: Callable[[Participant], bool]
    ) -> Optional[Participant]:
        """Return the first participant satisfying predicate, or None."""
        for participant in self.participants:
            if predicate(participant):
                return participant
        return None

    def get_participant(self, participant_id: Optional[int]) -> Optional[Participant]:
        if not participant_id:
            return None
        return self.find_participant(lambda p: p.id == participant_id)

    def get_participant_by_name(self, name: str) -> Optional[Participant]:
        return self.find_participant(lambda p: p.name == name)

    def get_participant_by_misc(self, misc: str) -> Optional[Participant]:
        return self.find_participant(lambda p: p.misc == misc)

    # -------------------------------------------------------------------------
    # Match queries
    # -------------------------------------------------------------------------

    def get_match(self, match_id: int) -> Optional[Match]:
        """Match by id, re-resolved against the current participant list."""
        for match in self.matches:
            if match.id == match_id:
                match.resolve_participants(self)
                return match
        return None

    def get_matches(self, state: Union[str, MatchState] = ALL) -> List[Match]:
        """
        Resolve every match, then return those passing the state filter.

        state is ALL ("all") or a MatchState / its string value.
        Original order is kept.
        """
        matches = []
        for match in self.matches:
            match.resolve_participants(self)
            if state_matches_filter(match.state, state):
                matches.append(match)
        return matches

    def get_open_matches(self) -> List[Match]:
        return self.get_matches(MatchState.OPEN)

    def get_open_match_for_participant(
        self, participant: Participant
    ) -> Optional[Match]:
        """First open match where participant holds either slot."""
        for match in self.get_open_matches():
            if match.involves(participant.id):
                return match
        return None

