#!/usr/bin/env python3
"""
Ranking Modes - Unconstrained and strict ordering of scored pairs.

Unconstrained mode (event -> volunteers) is for discovery: anything with a
positive score is suggested, best first.

Strict mode (volunteer -> events) is for filtering: an event is matchable only
if location and date both fit. Nothing is dropped; matchable events come first,
ordered by how many required skills the volunteer covers.

Both sorts rely on Python's stable sort, so ties keep input order.
"""

from typing import List, Optional, Tuple
import logging

from core.matcher.models import (
    CompatibilityScore, Event, EventRanking, MatchCandidate, Volunteer
)

logger = logging.getLogger(__name__)


def rank_unconstrained(
    event: Event,
    scored: List[Tuple[Volunteer, CompatibilityScore]],
    min_score: int = 1,
    top_k: Optional[int] = None
) -> List[MatchCandidate]:
    """
    Rank volunteers for one event.

    Args:
        event: Event being staffed
        scored: (volunteer, score) pairs in directory order
        min_score: Lowest score still suggested (never below 1)
        top_k: Optional truncation after sorting

    Returns:
        Match candidates sorted by score descending
    """
    threshold = max(1, min_score)

    candidates = [
        MatchCandidate(
            volunteer_id=volunteer.id,
            event_id=event.id,
            score=result.score,
            matching_skills=list(result.matching_skills),
            location_compatible=result.location_compatible,
            date_compatible=result.date_compatible,
            volunteer=volunteer,
        )
        for volunteer, result in scored
        if result.score >= threshold
    ]

    candidates.sort(key=lambda c: c.score, reverse=True)

    if top_k:
        candidates = candidates[:top_k]

    logger.debug(
        f"Unconstrained ranking for event {event.id}: "
        f"{len(candidates)} of {len(scored)} candidates kept"
    )
    return candidates


def rank_strict(
    volunteer: Volunteer,
    scored: List[Tuple[Event, CompatibilityScore]]
) -> List[EventRanking]:
    """
    Rank events for one volunteer, matchable events first.

    Args:
        volunteer: Volunteer being placed
        scored: (event, score) pairs in registry order

    Returns:
        One EventRanking per input event
    """
    rankings = [
        EventRanking(
            event=event,
            matchable=result.matchable,
            skill_match_count=len(result.matching_skills),
            matching_skills=list(result.matching_skills),
            location_compatible=result.location_compatible,
            date_compatible=result.date_compatible,
            score=result.score,
        )
        for event, result in scored
    ]

    matchable = [r for r in rankings if r.matchable]
    not_matchable = [r for r in rankings if not r.matchable]
    matchable.sort(key=lambda r: r.skill_match_count, reverse=True)

    logger.debug(
        f"Strict ranking for volunteer {volunteer.id}: "
        f"{len(matchable)} matchable, {len(not_matchable)} not matchable"
    )
    return matchable + not_matchable
