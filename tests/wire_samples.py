"""
Wire payload builders shaped like Challonge v1 responses.
"""

from typing import Optional


def participant_envelope(
    participant_id: int, name: str, misc: str = "", seed: int = 1
) -> dict:
    return {
        "participant": {
            "id": participant_id,
            "name": name,
            "display_name": name,
            "misc": misc or None,
            "seed": seed,
        }
    }


def match_envelope(
    match_id: int,
    player1_id: Optional[int],
    player2_id: Optional[int],
    *,
    state: str = "open",
    winner_id: Optional[int] = None,
    loser_id: Optional[int] = None,
    scores_csv: str = "",
    identifier: str = "A",
    round: int = 1,
) -> dict:
    return {
        "match": {
            "id": match_id,
            "identifier": identifier,
            "state": state,
            "round": round,
            "player1_id": player1_id,
            "player2_id": player2_id,
            "winner_id": winner_id,
            "loser_id": loser_id,
            "scores_csv": scores_csv,
            "updated_at": "2015-01-19T16:57:17-05:00",
        }
    }


def tournament_payload(
    participants=None,
    matches=None,
    *,
    tournament_id: int = 1,
    url: str = "spring_cup",
    subdomain: Optional[str] = None,
    state: str = "pending",
    name: str = "Spring Cup",
) -> dict:
    data = {
        "id": tournament_id,
        "name": name,
        "url": url,
        "subdomain": subdomain,
        "state": state,
        "tournament_type": "single elimination",
        "full_challonge_url": f"https://challonge.com/{url}",
        "participants_count": len(participants or []),
        "open_signup": False,
        "created_at": "2015-01-19T16:47:30-05:00",
        "started_at": None,
        "updated_at": "2015-01-19T16:57:17-05:00",
    }
    if participants is not None:
        data["participants"] = participants
    if matches is not None:
        data["matches"] = matches
    return {"tournament": data}


def scenario_payload(state: str = "underway") -> dict:
    """Two participants (10, 11) and one open match (100) between them."""
    return tournament_payload(
        [participant_envelope(10, "Alice", "alice#1"), participant_envelope(11, "Bob", "bob#2", seed=2)],
        [match_envelope(100, 10, 11, winner_id=0)],
        state=state,
    )


def bracket_payload(state: str = "underway") -> dict:
    """
    Four-player single elimination, first round done on one side:

      200: 1 beat 2 (complete)
      201: 3 vs 4   (open)
      202: 1 vs ?   (pending)
    """
    return tournament_payload(
        [
            participant_envelope(1, "Ann", "a", seed=1),
            participant_envelope(2, "Ben", "b", seed=4),
            participant_envelope(3, "Cat", "c", seed=2),
            participant_envelope(4, "Dan", "d", seed=3),
        ],
        [
            match_envelope(200, 1, 2, state="complete", winner_id=1, loser_id=2, scores_csv="3-1", identifier="A"),
            match_envelope(201, 3, 4, state="open", identifier="B"),
            match_envelope(202, 1, None, state="pending", identifier="C", round=2),
        ],
        state=state,
    )
