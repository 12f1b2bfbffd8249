"""
Eligibility filter - drops volunteers already registered for an event.
"""

from typing import Iterable, List

from core.matcher.models import Volunteer


def filter_eligible(volunteers: Iterable[Volunteer], excluded_ids: Iterable[str]) -> List[Volunteer]:
    """
    Return volunteers whose id is not excluded, keeping directory order.

    Args:
        volunteers: Full volunteer directory snapshot.
        excluded_ids: Ids already registered for the event.

    Returns:
        Candidate volunteers.
    """
    excluded = set(excluded_ids or ())
    return [v for v in volunteers if v.id not in excluded]
