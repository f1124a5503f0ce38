"""
Unit tests for PositionIndex.

Tests single-occupancy bookkeeping, batch moves and reverse lookups.
"""

import threading
import pytest

from yardmaster.core.interfaces import IPositionIndex
from yardmaster.core.services.position_index import PositionIndex


def locations_holding(index, car_id, location_ids):
    return [loc for loc in location_ids if car_id in index.get_occupants(loc)]


class TestSetPosition:
    """Test single car moves."""

    def test_implements_interface(self):
        assert isinstance(PositionIndex(), IPositionIndex)

    def test_set_and_get_position(self):
        index = PositionIndex()
        index.set_position("car1", "locA")

        assert index.get_position("car1") == "locA"
        assert index.get_occupants("locA") == ["car1"]

    def test_move_removes_from_previous_location(self):
        index = PositionIndex()
        index.set_position("car1", "locA")
        index.set_position("car1", "locB")

        assert index.get_position("car1") == "locB"
        assert index.get_occupants("locA") == []
        assert index.get_occupants("locB") == ["car1"]

    def test_set_position_twice_is_idempotent(self):
        index = PositionIndex()
        index.set_position("car1", "locA")
        index.set_position("car1", "locA")

        assert index.get_occupants("locA") == ["car1"]

    def test_occupants_in_insertion_order(self):
        index = PositionIndex()
        for car_id in ("c3", "c1", "c2"):
            index.set_position(car_id, "locA")

        assert index.get_occupants("locA") == ["c3", "c1", "c2"]

    def test_unknown_lookups_are_empty(self):
        index = PositionIndex()

        assert index.get_position("ghost") is None
        assert index.get_occupants("nowhere") == []

    def test_occupants_returns_copy(self):
        index = PositionIndex()
        index.set_position("car1", "locA")

        index.get_occupants("locA").append("intruder")

        assert index.get_occupants("locA") == ["car1"]

    def test_single_occupancy_over_move_sequence(self):
        index = PositionIndex()
        locations = ["locA", "locB", "locC"]
        moves = [
            ("car1", "locA"), ("car2", "locA"), ("car1", "locB"),
            ("car2", "locC"), ("car1", "locA"), ("car1", "locA"),
        ]
        for car_id, loc in moves:
            index.set_position(car_id, loc)
            for car in ("car1", "car2"):
                assert len(locations_holding(index, car, locations)) <= 1

        assert locations_holding(index, "car1", locations) == ["locA"]
        assert locations_holding(index, "car2", locations) == ["locC"]


class TestSetPositions:
    """Test batch moves."""

    def test_swap_two_cars(self):
        index = PositionIndex()
        index.set_position("A", "locB")
        index.set_position("B", "locA")

        index.set_positions({"A": "locA", "B": "locB"})

        assert index.get_position("A") == "locA"
        assert index.get_position("B") == "locB"
        assert index.get_occupants("locA") == ["A"]
        assert index.get_occupants("locB") == ["B"]

    def test_chain_through_shared_location(self):
        index = PositionIndex()
        index.set_position("A", "loc1")
        index.set_position("B", "loc2")

        index.set_positions({"A": "loc2", "B": "loc3"})

        assert index.get_occupants("loc1") == []
        assert index.get_occupants("loc2") == ["A"]
        assert index.get_occupants("loc3") == ["B"]

    def test_batch_leaves_other_cars_alone(self):
        index = PositionIndex()
        index.set_position("other", "loc1")

        index.set_positions({"A": "loc1"})

        assert index.get_occupants("loc1") == ["other", "A"]

    def test_empty_batch(self):
        index = PositionIndex()
        index.set_positions({})
        assert len(index) == 0

    def test_concurrent_batches_keep_single_occupancy(self):
        index = PositionIndex()
        locations = ["loc1", "loc2"]
        index.set_positions({"A": "loc1", "B": "loc2"})

        def swap_many():
            for _ in range(200):
                index.set_positions({"A": "loc2", "B": "loc1"})
                index.set_positions({"A": "loc1", "B": "loc2"})

        threads = [threading.Thread(target=swap_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert index.get_positions() == {"A": "loc1", "B": "loc2"}
        for car in ("A", "B"):
            assert len(locations_holding(index, car, locations)) == 1


class TestUnoccupied:
    """Test the empty-location filter."""

    def test_get_unoccupied(self):
        index = PositionIndex()
        index.set_position("car1", "locA")

        assert index.get_unoccupied(["locC", "locA", "locB"]) == ["locC", "locB"]

    def test_location_emptied_by_move_is_unoccupied(self):
        index = PositionIndex()
        index.set_position("car1", "locA")
        index.set_position("car1", "locB")

        assert index.get_unoccupied(["locA", "locB"]) == ["locA"]


class TestRemoveAndBuild:
    """Test removal and construction helpers."""

    def test_remove_known_car(self):
        index = PositionIndex()
        index.set_position("car1", "locA")

        assert index.remove("car1") is True
        assert "car1" not in index
        assert index.get_occupants("locA") == []

    def test_remove_unknown_car(self):
        assert PositionIndex().remove("ghost") is False

    def test_clear(self):
        index = PositionIndex()
        index.set_positions({"A": "loc1", "B": "loc2"})
        index.clear()

        assert len(index) == 0
        assert index.get_positions() == {}

    def test_from_rolling_stock(self, rolling_stock):
        index = PositionIndex.from_rolling_stock(rolling_stock)

        assert index.get_occupants("ind_origin") == ["C1", "C2"]
        assert index.get_position("C3") == "IndMid"
        assert index.get_position("C4") is None

    def test_from_industries_keys_by_track(self, industries):
        index = PositionIndex.from_industries(industries)

        assert index.get_occupants("ot1") == ["C1", "C2"]
        assert index.get_position("C3") == "mt1"
        assert index.get_unoccupied(["ot1", "mt1", "tt1"]) == ["tt1"]
