"""
Tests for unconstrained (event -> volunteers) and strict (volunteer -> events) ranking.
"""
import pytest

from core.matcher.eligibility import filter_eligible
from core.matcher.models import CompatibilityScore, Event, Volunteer
from core.matcher.ranking import rank_strict, rank_unconstrained


def _score(score, skills=(), location=False, date=False):
    return CompatibilityScore(
        score=score,
        matching_skills=list(skills),
        location_compatible=location,
        date_compatible=date,
    )


class TestRankUnconstrained:

    @pytest.fixture
    def event(self):
        return Event(id="E1")

    def test_sorted_descending_and_zero_dropped(self, event):
        scored = [
            (Volunteer(id="a"), _score(10)),
            (Volunteer(id="b"), _score(0)),
            (Volunteer(id="c"), _score(45)),
            (Volunteer(id="d"), _score(20)),
        ]
        ranked = rank_unconstrained(event, scored)
        assert [c.volunteer_id for c in ranked] == ["c", "d", "a"]
        assert all(c.score > 0 for c in ranked)
        assert all(c.event_id == "E1" for c in ranked)

    def test_ties_keep_directory_order(self, event):
        scored = [(Volunteer(id=vid), _score(20)) for vid in ("x", "y", "z")]
        ranked = rank_unconstrained(event, scored)
        assert [c.volunteer_id for c in ranked] == ["x", "y", "z"]

    def test_min_score_and_top_k(self, event):
        scored = [(Volunteer(id=str(i)), _score(i * 10)) for i in range(6)]
        ranked = rank_unconstrained(event, scored, min_score=20, top_k=2)
        assert [c.score for c in ranked] == [50, 40]

    def test_min_score_never_admits_zero(self, event):
        ranked = rank_unconstrained(event, [(Volunteer(id="a"), _score(0))], min_score=0)
        assert ranked == []

    def test_candidate_carries_breakdown(self, event):
        volunteer = Volunteer(id="a")
        ranked = rank_unconstrained(event, [(volunteer, _score(30, ["Teamwork"], location=True))])
        assert ranked[0].matching_skills == ["Teamwork"]
        assert ranked[0].location_compatible
        assert not ranked[0].date_compatible
        assert ranked[0].volunteer is volunteer


class TestRankStrict:

    def test_matchable_first_by_skill_count_then_rest_in_order(self):
        events = [Event(id=eid) for eid in ("e1", "e2", "e3", "e4", "e5")]
        scored = [
            (events[0], _score(10, ["A"], location=True, date=False)),
            (events[1], _score(45, ["A"], location=True, date=True)),
            (events[2], _score(0)),
            (events[3], _score(55, ["A", "B"], location=True, date=True)),
            (events[4], _score(35, [], location=True, date=True)),
        ]
        ranked = rank_strict(Volunteer(id="v"), scored)

        assert [r.event.id for r in ranked] == ["e4", "e2", "e5", "e1", "e3"]
        assert [r.matchable for r in ranked] == [True, True, True, False, False]
        assert ranked[0].skill_match_count == 2

    def test_every_event_returned(self):
        scored = [(Event(id=str(i)), _score(0)) for i in range(4)]
        ranked = rank_strict(Volunteer(id="v"), scored)
        assert len(ranked) == 4
        assert not any(r.matchable for r in ranked)

    def test_skill_ties_keep_registry_order(self):
        scored = [(Event(id=eid), _score(35, location=True, date=True)) for eid in ("p", "q")]
        assert [r.event.id for r in rank_strict(Volunteer(id="v"), scored)] == ["p", "q"]


class TestFilterEligible:

    def test_excludes_registered_and_keeps_order(self):
        volunteers = [Volunteer(id=vid) for vid in ("a", "b", "c", "d")]
        assert [v.id for v in filter_eligible(volunteers, {"b", "d"})] == ["a", "c"]

    def test_empty_exclusion(self):
        volunteers = [Volunteer(id="a")]
        assert filter_eligible(volunteers, None) == volunteers
