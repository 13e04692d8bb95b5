"""
services/match_diff.py — Match Snapshot Diff
---------------------------------------------
Compares two match lists of the same tournament fetched at different
times and reports the matches whose state moved (e.g. open → complete).

Matches are paired by id, so a snapshot that was reordered or gained
matches between polls still diffs correctly.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from challonge_client.services.records import Match

log = logging.getLogger(__name__)


def diff_matches(before: Iterable[Match], after: Iterable[Match]) -> List[Match]:
    """
    Return the matches of `after` whose state differs from `before`.

    - A match with no counterpart in `before` counts as changed.
    - Matches missing from `after` are ignored.
    - Result order follows `after`.
    """
    previous = {match.id: match.state for match in before}

    changed = []
    for match in after:
        if match.id not in previous or previous[match.id] != match.state:
            changed.append(match)

    if changed:
        log.debug(f"[MATCH-DIFF] {len(changed)} match(es) changed state")
    return changed
