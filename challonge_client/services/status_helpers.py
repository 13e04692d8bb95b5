# challonge_client/services/status_helpers.py
from __future__ import annotations

from enum import Enum
from typing import Union

from challonge_client.services.status_enums import ALL, MatchState, TournamentState


def state_value(state: Union[str, Enum, None]) -> str:
    """Normalize an enum member or plain string to its wire value."""
    if isinstance(state, Enum):
        return state.value
    return state or ""


# ── Tournament state helpers ───────────────────────────────────────────────


def is_tournament_underway(state: str) -> bool:
    return state == TournamentState.UNDERWAY.value


# ── Match state helpers ────────────────────────────────────────────────────


def is_match_complete(state: str) -> bool:
    return state == MatchState.COMPLETE.value


def state_matches_filter(state: str, state_filter: Union[str, MatchState]) -> bool:
    """True if a match state passes a get_matches() filter ("all" passes everything)."""
    wanted = state_value(state_filter)
    return wanted == ALL or state == wanted
