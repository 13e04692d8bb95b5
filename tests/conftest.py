"""
Shared fixtures for the challonge_client test suite.

NOTE: With `asyncio_mode = auto` in pyproject.toml, pytest-asyncio manages
the event loop. Do NOT define a custom event_loop fixture here.
"""

import pytest

from challonge_client.services.resolver import tournament_from_wire
from wire_samples import bracket_payload, scenario_payload, tournament_payload


@pytest.fixture
def scenario():
    """Resolved tournament: participants 10/11, open match 100."""
    return tournament_from_wire(scenario_payload())


@pytest.fixture
def bracket():
    """Resolved four-player bracket, see wire_samples.bracket_payload."""
    return tournament_from_wire(bracket_payload())


@pytest.fixture
def pending_tournament():
    """Freshly created tournament with no participants or matches yet."""
    tournament = tournament_from_wire(tournament_payload([], []))
    tournament.sub_url = "spring_cup"
    return tournament
