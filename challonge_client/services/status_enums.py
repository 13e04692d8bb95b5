"""
Status Enums for Challonge Resources

Canonical tournament and match states as reported by the service.
All services should import from here.
"""

from enum import Enum


class TournamentState(str, Enum):
    """Tournament lifecycle states."""

    PENDING = "pending"  # Created, accepting participants
    CHECKING_IN = "checking_in"
    CHECKED_IN = "checked_in"
    UNDERWAY = "underway"  # Started, matches in play
    AWAITING_REVIEW = "awaiting_review"  # All matches done, not finalized
    COMPLETE = "complete"  # Finalized


class MatchState(str, Enum):
    """Match lifecycle states."""

    PENDING = "pending"  # Waiting on an earlier match to decide a slot
    OPEN = "open"  # Both slots decided, ready to play
    COMPLETE = "complete"  # Result recorded


# Filter value meaning "every match regardless of state"
ALL = "all"


class TournamentType(str, Enum):
    """Bracket formats understood by the create endpoint."""

    SINGLE_ELIMINATION = "single elimination"
    DOUBLE_ELIMINATION = "double elimination"
    ROUND_ROBIN = "round robin"
    SWISS = "swiss"
