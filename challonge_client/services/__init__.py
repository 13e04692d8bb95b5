"""
services/ — Challonge resource model and API operations
=======================================================
Contains:
- Resource records and tournament queries
- Relation resolver and match snapshot diff
- HTTP gateway and tournament operations
"""

from challonge_client.services.gateway import ChallongeGateway
from challonge_client.services.match_diff import diff_matches
from challonge_client.services.records import Match, Participant, Tournament, unwrap
from challonge_client.services.resolver import (
    re_resolve,
    resolve_match,
    resolve_relations,
    tally_records,
    tournament_from_wire,
)
from challonge_client.services.status_enums import (
    ALL,
    MatchState,
    TournamentState,
    TournamentType,
)
from challonge_client.services.tournament_service import TournamentService

__all__ = [
    "ALL",
    "ChallongeGateway",
    "Match",
    "MatchState",
    "Participant",
    "Tournament",
    "TournamentService",
    "TournamentState",
    "TournamentType",
    "diff_matches",
    "re_resolve",
    "resolve_match",
    "resolve_relations",
    "tally_records",
    "tournament_from_wire",
    "unwrap",
]
