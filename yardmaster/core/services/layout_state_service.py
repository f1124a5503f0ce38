"""
Layout State Service

Explicit car placement on industry tracks: spotting and pulling cars,
seeding cars into their home yards, resetting the whole layout and keeping
car records in step with the tracks that list them.
"""

import logging
from typing import Dict, List, Tuple

from ..exceptions import (
    CarNotOnTrackError,
    CarTypeNotAcceptedError,
    NoTracksError,
    TrackCapacityError,
    TrackNotFoundError,
)
from ..models.industry import Industry, Track
from ..models.rolling_stock import CarPosition, RollingStock
from .destination_selector import find_least_occupied_track
from .position_index import PositionIndex


class LayoutStateService:
    """Value-returning placement operations over industries and cars."""

    def __init__(self, enforce_capacity: bool = True):
        """
        Initialize the layout state service.

        Args:
            enforce_capacity: Refuse placements onto full tracks
        """
        self.enforce_capacity = enforce_capacity
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def find_least_occupied_track(tracks: List[Track]) -> Track:
        """
        Find the track with the fewest cars.

        Raises:
            NoTracksError: If ``tracks`` is empty
        """
        track = find_least_occupied_track(tracks)
        if track is None:
            raise NoTracksError("No tracks available")
        return track

    def find_track_for_car(self, tracks: List[Track], aar_type: str) -> Track:
        """
        Find the least occupied track that accepts a car type.

        Falls back to every track when none of them accepts the type.

        Raises:
            NoTracksError: If ``tracks`` is empty
        """
        eligible = [track for track in tracks if track.accepts(aar_type)]
        if tracks and not eligible:
            self.logger.warning(
                f"No tracks accept car type {aar_type}; falling back to any track"
            )
            eligible = tracks
        return self.find_least_occupied_track(eligible)

    def place_car_at_track(self, industry: Industry, track_id: str, car: RollingStock) -> Industry:
        """
        Spot a car on a track.

        Returns:
            A new Industry with the car appended to the track

        Raises:
            TrackNotFoundError: If the track is not part of the industry
            CarTypeNotAcceptedError: If the track restricts car types
            TrackCapacityError: If the track is full and capacity is enforced
        """
        track = industry.get_track(track_id)
        if track is None:
            raise TrackNotFoundError(f"Track '{track_id}' not found at '{industry.name}'")

        if not track.accepts(car.aar_type):
            raise CarTypeNotAcceptedError(
                f"Track {track.name or track.id} does not accept car type {car.aar_type}"
            )

        if track.is_full:
            if self.enforce_capacity:
                raise TrackCapacityError(
                    f"Track {track.name or track.id} is at maximum capacity ({track.max_cars} cars)"
                )
            self.logger.warning(
                f"Placing {car.reporting_marks} on full track {track.name or track.id} "
                f"({track.occupancy}/{track.max_cars})"
            )

        updated = track.with_placed_cars(track.placed_cars + [car.id])
        return industry.with_track(updated)

    @staticmethod
    def remove_car_from_track(industry: Industry, track_id: str, car_id: str) -> Industry:
        """
        Pull a car off a track.

        Raises:
            TrackNotFoundError: If the track is not part of the industry
            CarNotOnTrackError: If the car is not on that track
        """
        track = industry.get_track(track_id)
        if track is None:
            raise TrackNotFoundError(f"Track '{track_id}' not found at '{industry.name}'")
        if car_id not in track.placed_cars:
            raise CarNotOnTrackError(f"Car '{car_id}' not found on track {track.name or track.id}")

        placed = list(track.placed_cars)
        placed.remove(car_id)
        return industry.with_track(track.with_placed_cars(placed))

    @staticmethod
    def update_car_location(car: RollingStock, industry_id: str, track_id: str) -> RollingStock:
        return car.with_location(CarPosition(industry_id=industry_id, track_id=track_id))

    def initialize_layout_state(
        self,
        industries: List[Industry],
        rolling_stock: List[RollingStock],
    ) -> List[Industry]:
        """
        Place every unplaced car in its home yard.

        Each car without a current location goes on the least occupied track
        of the YARD industry named by its ``home_yard``, preferring tracks that
        accept its car type. Cars whose yard is missing or has no tracks are
        skipped with a warning, as are cars the chosen track refuses.

        Returns:
            New industry list in input order
        """
        industry_map: Dict[str, Industry] = {industry.id: industry for industry in industries}
        yard_ids = {industry.id for industry in industries if industry.is_yard}

        for car in rolling_stock:
            if car.current_location is not None:
                continue

            if car.home_yard not in yard_ids:
                self.logger.warning(
                    f"Home yard '{car.home_yard}' not found for car {car.reporting_marks}"
                )
                continue

            yard = industry_map[car.home_yard]
            try:
                track = self.find_track_for_car(yard.tracks, car.aar_type)
                industry_map[yard.id] = self.place_car_at_track(yard, track.id, car)
            except (NoTracksError, TrackCapacityError, CarTypeNotAcceptedError) as e:
                self.logger.warning(f"Error placing car {car.reporting_marks}: {e}")

        return [industry_map[industry.id] for industry in industries]

    def reset_layout_state(
        self,
        industries: List[Industry],
        rolling_stock: List[RollingStock],
    ) -> Tuple[List[Industry], List[RollingStock]]:
        """
        Return every car to its home industry.

        All tracks are emptied first, then each car is spotted on the least
        occupied track of its home industry (a YARD or FREIGHT industry named
        by ``home_yard``), preferring tracks that accept its car type. Cars
        already on the layout are moved too. A reset never refuses a car for
        capacity or car type; it only warns.

        Cars without a usable home industry come back with no current
        location.

        Returns:
            Tuple of (industries in input order, cars in input order)
        """
        industry_map: Dict[str, Industry] = {
            industry.id: industry.with_tracks([track.with_placed_cars([]) for track in industry.tracks])
            for industry in industries
        }
        home_ids = {
            industry.id for industry in industries
            if (industry.is_yard or industry.is_freight) and not industry.is_virtual
        }
        self.logger.info(f"Resetting {len(rolling_stock)} cars across {len(home_ids)} home industries")

        cars: List[RollingStock] = []
        for car in rolling_stock:
            if car.home_yard not in home_ids:
                self.logger.warning(
                    f"Home industry '{car.home_yard}' not found for car {car.reporting_marks}"
                )
                cars.append(car.with_location(None))
                continue

            home = industry_map[car.home_yard]
            try:
                track = self.find_track_for_car(home.tracks, car.aar_type)
            except NoTracksError:
                self.logger.warning(f"Home industry '{home.name}' has no tracks for car {car.reporting_marks}")
                cars.append(car.with_location(None))
                continue

            if track.is_full:
                self.logger.warning(
                    f"Resetting {car.reporting_marks} onto full track {track.name or track.id} "
                    f"({track.occupancy}/{track.max_cars})"
                )
            industry_map[home.id] = home.with_track(track.with_placed_cars(track.placed_cars + [car.id]))
            cars.append(self.update_car_location(car, home.id, track.id))

        return [industry_map[industry.id] for industry in industries], cars

    @staticmethod
    def sync_rolling_stock_locations(
        industries: List[Industry],
        rolling_stock: List[RollingStock],
    ) -> List[RollingStock]:
        """
        Rewrite each car's current location from the tracks listing it.

        Cars not listed on any track come back with no current location.
        """
        car_locations: Dict[str, CarPosition] = {}
        for industry in industries:
            for track in industry.tracks:
                for car_id in track.placed_cars:
                    car_locations[car_id] = CarPosition(industry_id=industry.id, track_id=track.id)

        return [car.with_location(car_locations.get(car.id)) for car in rolling_stock]

    @staticmethod
    def build_position_index(industries: List[Industry]) -> PositionIndex:
        """Position index keyed by track id."""
        return PositionIndex.from_industries(industries)
