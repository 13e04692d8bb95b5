"""
challonge_client — Client-side model for the Challonge bracket service

Fetches tournaments, participants and matches over the Challonge v1 API
and links them into an in-memory graph that answers lookups, open-match
queries and match-state diffs between polls.
"""

from challonge_client.config import ChallongeConfig, load_challonge_config
from challonge_client.errors import (
    ChallongeError,
    InvariantViolation,
    NotFoundError,
    RemoteError,
    TournamentStateError,
    TransportError,
)
from challonge_client.services import (
    ALL,
    ChallongeGateway,
    Match,
    MatchState,
    Participant,
    Tournament,
    TournamentService,
    TournamentState,
    diff_matches,
    resolve_relations,
    tournament_from_wire,
)

__version__ = "1.0.0"

__all__ = [
    "ALL",
    "ChallongeConfig",
    "ChallongeError",
    "ChallongeGateway",
    "InvariantViolation",
    "Match",
    "MatchState",
    "NotFoundError",
    "Participant",
    "RemoteError",
    "Tournament",
    "TournamentService",
    "TournamentState",
    "TournamentStateError",
    "TransportError",
    "diff_matches",
    "load_challonge_config",
    "resolve_relations",
    "tournament_from_wire",
]
