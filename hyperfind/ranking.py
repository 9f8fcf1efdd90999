#===============================================================================
#  HyperFind | ranking.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Scores catalog entries against the typed query (substring first, then
#  Jaro-Winkler similarity) with a small usage nudge. With an empty query the
#  score is purely frequency/recency based.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from rapidfuzz.distance import JaroWinkler

from .constants import (
    IDLE_COUNT_WEIGHT,
    QUERY_USAGE_WEIGHT,
    SIMILARITY_SCALE,
    SIMILARITY_THRESHOLD,
    SUBSTRING_BONUS,
)
from .models import AppEntry, UsageEntry, UsageMap

Scored = Tuple[int, AppEntry]


def is_idle_query(query: str) -> bool:
    return not (query or "").strip()


def score_match(name: str, query: str) -> Optional[int]:
    """Score one display name against the query, or None if it doesn't match.

    - substring (case-insensitive): 1000 minus one point per extra character
    - otherwise Jaro-Winkler similarity * 1000, dropped below 0.75
    """
    query = (query or "").strip()
    if not query:
        return 0

    name_l = name.lower()
    query_l = query.lower()

    if query_l in name_l:
        penalty = max(0, len(name) - len(query))
        return SUBSTRING_BONUS - penalty

    similarity = JaroWinkler.similarity(name_l, query_l)
    if similarity < SIMILARITY_THRESHOLD:
        return None
    return int(similarity * SIMILARITY_SCALE)


def idle_score(entry: UsageEntry) -> int:
    return entry.count * IDLE_COUNT_WEIGHT + entry.last_used


def sort_key(scored: Scored):
    # Total order: score desc, then name (case-insensitive, then exact), then key.
    score, app = scored
    return (-score, app.display_name.lower(), app.display_name, app.key)


def score_apps(apps: Iterable[AppEntry], query: str, usage: UsageMap) -> List[Scored]:
    """Unsorted (score, app) pairs for every entry that qualifies."""
    if is_idle_query(query):
        return [
            (idle_score(usage[app.key]), app)
            for app in apps
            if app.key in usage
        ]

    scored: List[Scored] = []
    for app in apps:
        score = score_match(app.display_name, query)
        if score is None:
            continue
        entry = usage.get(app.key)
        if entry is not None:
            score += entry.count * QUERY_USAGE_WEIGHT
        scored.append((score, app))
    return scored


def rank(apps: Iterable[AppEntry], query: str, usage: UsageMap) -> List[Scored]:
    """Scored entries, best first. Query mode is never truncated here."""
    return sorted(score_apps(apps, query, usage), key=sort_key)
