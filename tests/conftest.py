"""
Global pytest configuration and fixtures.
"""

import random
import pytest

from yardmaster.core.models import (
    Location, LocationType, Industry, IndustryType, Track, RollingStock,
    CarPosition, TrainRoute, RouteType, Switchlist, SwitchlistStatus
)


class FirstChoice:
    """Deterministic stand-in for random.Random that always picks the first item."""

    def __init__(self):
        self.calls = []

    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[0]


class LastChoice:
    """Deterministic stand-in for random.Random that always picks the last item."""

    def choice(self, seq):
        return seq[-1]


def make_car(car_id, industry_id=None, track_id="t1", **kwargs):
    """Build a car, optionally positioned at an industry."""
    location = CarPosition(industry_id=industry_id, track_id=track_id) if industry_id else None
    return RollingStock(
        id=car_id,
        road_name=kwargs.pop("road_name", "UP"),
        road_number=kwargs.pop("road_number", car_id),
        aar_type=kwargs.pop("aar_type", "XM"),
        home_yard=kwargs.pop("home_yard", "ind_origin"),
        current_location=location,
        **kwargs
    )


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def last_choice():
    return LastChoice()


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def locations():
    """Origin yard, one mid-route town and a terminating yard."""
    return [
        Location(id="originLoc", station_name="Starting Yard", block="YARD",
                 location_type=LocationType.FIDDLE_YARD),
        Location(id="midLoc", station_name="Echo Lake, WA", block="ECHO"),
        Location(id="termLoc", station_name="Ending Yard", block="YARD2",
                 location_type=LocationType.FIDDLE_YARD),
    ]


@pytest.fixture
def industries():
    """A yard at each end and one freight customer between them."""
    return [
        Industry(id="ind_origin", name="Starting Yard", location_id="originLoc",
                 industry_type=IndustryType.YARD, block_name="YARD",
                 tracks=[Track(id="ot1", name="Yard 1", max_cars=10, placed_cars=["C1", "C2"])]),
        Industry(id="IndMid", name="Echo Lake Factory", location_id="midLoc",
                 industry_type=IndustryType.FREIGHT, block_name="ECHO",
                 tracks=[Track(id="mt1", name="Dock", max_cars=4, placed_cars=["C3"])]),
        Industry(id="ind_term", name="Ending Yard", location_id="termLoc",
                 industry_type=IndustryType.YARD, block_name="YARD2",
                 tracks=[Track(id="tt1", name="Arrival", max_cars=10)]),
    ]


@pytest.fixture
def rolling_stock():
    """C1 and C2 in the origin yard, C3 at the factory, C4 unplaced."""
    return [
        make_car("C1", "ind_origin", "ot1"),
        make_car("C2", "ind_origin", "ot1", road_name="BNSF"),
        make_car("C3", "IndMid", "mt1", road_name="CSX"),
        make_car("C4"),
    ]


@pytest.fixture
def route():
    return TrainRoute(
        id="route1",
        name="Test Route",
        route_number="TR-101",
        route_type=RouteType.FREIGHT,
        originating_yard_id="originLoc",
        terminating_yard_id="termLoc",
        stations=["originLoc", "midLoc", "termLoc"],
    )


@pytest.fixture
def switchlist():
    return Switchlist(
        id="switchlist1",
        train_route_id="route1",
        name="Test Switchlist",
        created_at="2023-01-01T00:00:00+00:00",
        status=SwitchlistStatus.CREATED,
    )


@pytest.fixture
def car_factory():
    return make_car
