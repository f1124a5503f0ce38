"""
Unit tests for DestinationSelector.

Tests candidate filtering, the relaxation order and track choice.
"""

import random
import pytest

from yardmaster.core.models import Industry, IndustryType, Track, TrainRoute
from yardmaster.core.services.destination_selector import (
    DestinationSelector, DestinationRule, find_least_occupied_track
)


@pytest.fixture
def long_route():
    return TrainRoute(
        id="r", name="Valley Local", route_number="12",
        originating_yard_id="yardA", terminating_yard_id="yardB",
        stations=["yardA", "town1", "town2", "yardB"],
    )


@pytest.fixture
def yards():
    origin = Industry(id="ya", name="A Yard", location_id="yardA", industry_type=IndustryType.YARD)
    terminus = Industry(id="yb", name="B Yard", location_id="yardB", industry_type=IndustryType.YARD)
    return origin, terminus


class TestCandidates:
    """Test candidate filtering along a route."""

    def test_freight_on_route_only(self, long_route, yards):
        industries = list(yards) + [
            Industry(id="f1", name="Cannery", location_id="town1", industry_type=IndustryType.FREIGHT),
            Industry(id="p1", name="Depot", location_id="town1", industry_type=IndustryType.PASSENGER),
            Industry(id="f2", name="Feed Mill", location_id="town2", industry_type="freight"),
            Industry(id="off", name="Elsewhere", location_id="other", industry_type=IndustryType.FREIGHT),
        ]
        candidates, rule = DestinationSelector(industries).candidates_for_route(long_route, *yards)

        assert rule is DestinationRule.FREIGHT_ON_ROUTE
        assert [i.id for i in candidates] == ["f1", "f2"]

    def test_yard_locations_excluded(self, long_route, yards):
        industries = list(yards) + [
            Industry(id="yf", name="Team Track", location_id="yardA", industry_type=IndustryType.FREIGHT),
        ]
        candidates, rule = DestinationSelector(industries).candidates_for_route(long_route, *yards)

        assert rule is DestinationRule.TERMINUS_FALLBACK
        assert candidates == [yards[1]]

    def test_relaxes_to_any_industry(self, long_route, yards):
        depot = Industry(id="p1", name="Depot", location_id="town2", industry_type=IndustryType.PASSENGER)
        candidates, rule = DestinationSelector(list(yards) + [depot]).candidates_for_route(long_route, *yards)

        assert rule is DestinationRule.ANY_ON_ROUTE
        assert candidates == [depot]

    def test_terminus_fallback(self, long_route, yards):
        candidates, rule = DestinationSelector(list(yards)).candidates_for_route(long_route, *yards)

        assert rule is DestinationRule.TERMINUS_FALLBACK
        assert candidates == [yards[1]]


class TestChoice:
    """Test destination draws."""

    def test_choose_uses_injected_source(self, first_choice, last_choice):
        options = [
            Industry(id="a", name="A", location_id="x"),
            Industry(id="b", name="B", location_id="x"),
        ]
        assert DestinationSelector([], first_choice).choose(options).id == "a"
        assert DestinationSelector([], last_choice).choose(options).id == "b"

    def test_seeded_source_is_repeatable(self):
        options = [Industry(id=str(n), name=str(n), location_id="x") for n in range(10)]
        first_selector = DestinationSelector([], random.Random(7))
        second_selector = DestinationSelector([], random.Random(7))
        first = [first_selector.choose(options).id for _ in range(5)]
        second = [second_selector.choose(options).id for _ in range(5)]
        assert first == second

    def test_choose_empty_raises(self):
        with pytest.raises(ValueError):
            DestinationSelector([]).choose([])


class TestTracks:
    """Test track selection for a destination."""

    def test_least_occupied_track_ties_go_first(self):
        tracks = [
            Track(id="t1", max_cars=3, placed_cars=["a"]),
            Track(id="t2", max_cars=3, placed_cars=[]),
            Track(id="t3", max_cars=3, placed_cars=[]),
        ]
        assert find_least_occupied_track(tracks).id == "t2"

    def test_least_occupied_track_empty(self):
        assert find_least_occupied_track([]) is None

    def test_destination_for_industry_with_tracks(self):
        industry = Industry(id="f1", name="Cannery", location_id="town1", tracks=[
            Track(id="t1", max_cars=2, placed_cars=["a", "b"]),
            Track(id="t2", max_cars=2, placed_cars=["c"]),
        ])
        target = DestinationSelector([]).destination_for(industry).immediate_destination

        assert target.industry_id == "f1"
        assert target.location_id == "town1"
        assert target.track_id == "t2"

    def test_destination_for_trackless_industry(self):
        industry = Industry(id="f1", name="Cannery", location_id="town1")
        destination = DestinationSelector([]).destination_for(industry)

        assert destination.immediate_destination.track_id is None
        assert destination.final_destination is None

    def test_full_track_is_still_assigned(self, caplog):
        industry = Industry(id="f1", name="Cannery", location_id="town1", tracks=[
            Track(id="t1", name="Dock", max_cars=1, placed_cars=["a"]),
        ])
        destination = DestinationSelector([]).destination_for(industry)

        assert destination.immediate_destination.track_id == "t1"
        assert "full" in caplog.text
