"""
Position Index Implementation

Bidirectional map of car -> location and location -> cars. Keys are opaque
strings, so the same index serves industry-level and track-level positions.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from ..interfaces.i_position_index import IPositionIndex
from ..models.industry import Industry
from ..models.rolling_stock import RollingStock


class PositionIndex(IPositionIndex):
    """Thread-safe position bookkeeping with a single occupancy per car."""

    def __init__(self):
        self._car_positions: Dict[str, str] = {}
        self._location_cars: Dict[str, List[str]] = {}
        self._lock = threading.RLock()
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_rolling_stock(cls, rolling_stock: Iterable[RollingStock]) -> 'PositionIndex':
        """Index every positioned car by the industry it sits at."""
        index = cls()
        index.set_positions({
            car.id: car.current_location.industry_id
            for car in rolling_stock
            if car.current_location is not None
        })
        return index

    @classmethod
    def from_industries(cls, industries: Iterable[Industry]) -> 'PositionIndex':
        """Index every placed car by the track listing it."""
        positions: Dict[str, str] = {}
        for industry in industries:
            for track in industry.tracks:
                for car_id in track.placed_cars:
                    positions[car_id] = track.id
        index = cls()
        index.set_positions(positions)
        return index

    def _remove_car_from_location(self, car_id: str, location_id: str) -> None:
        cars = self._location_cars.get(location_id)
        if not cars:
            return
        remaining = [existing for existing in cars if existing != car_id]
        if remaining:
            self._location_cars[location_id] = remaining
        else:
            del self._location_cars[location_id]

    def _add_car_to_location(self, car_id: str, location_id: str) -> None:
        self._location_cars.setdefault(location_id, []).append(car_id)

    def set_position(self, car_id: str, location_id: str) -> None:
        """Move a car, dropping it from wherever it was before."""
        with self._lock:
            previous = self._car_positions.get(car_id)
            if previous is not None:
                self._remove_car_from_location(car_id, previous)

            self._car_positions[car_id] = location_id
            self._add_car_to_location(car_id, location_id)

    def set_positions(self, positions: Dict[str, str]) -> None:
        """Clear every car in the batch, then apply all new positions."""
        with self._lock:
            for car_id in positions:
                previous = self._car_positions.get(car_id)
                if previous is not None:
                    self._remove_car_from_location(car_id, previous)

            for car_id, location_id in positions.items():
                self._car_positions[car_id] = location_id
                self._add_car_to_location(car_id, location_id)

        self.logger.debug(f"Applied {len(positions)} car positions")

    def get_position(self, car_id: str) -> Optional[str]:
        with self._lock:
            return self._car_positions.get(car_id)

    def get_positions(self) -> Dict[str, str]:
        """Copy of the full car -> location map."""
        with self._lock:
            return dict(self._car_positions)

    def get_occupants(self, location_id: str) -> List[str]:
        with self._lock:
            return list(self._location_cars.get(location_id, []))

    def get_unoccupied(self, location_ids: Iterable[str]) -> List[str]:
        with self._lock:
            return [
                location_id for location_id in location_ids
                if not self._location_cars.get(location_id)
            ]

    def remove(self, car_id: str) -> bool:
        """
        Drop a car from the index.

        Returns:
            True if the car was placed, False if it was unknown
        """
        with self._lock:
            previous = self._car_positions.pop(car_id, None)
            if previous is None:
                return False
            self._remove_car_from_location(car_id, previous)
            return True

    def clear(self) -> None:
        with self._lock:
            self._car_positions.clear()
            self._location_cars.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._car_positions)

    def __contains__(self, car_id: object) -> bool:
        with self._lock:
            return car_id in self._car_positions
