"""
Off-Layout Routing Service

Routes cars bound for off-layout locations through a fiddle yard. The
fiddle yard becomes the car's immediate destination and the off-layout
industry its final destination.
"""

import logging
from typing import Dict, List, Optional

from ..models.industry import Industry
from ..models.location import Location
from ..models.rolling_stock import CarDestination, DestinationRef, RollingStock


class OffLayoutRoutingService:
    """Fiddle yard lookup and two-stage destinations over a fixed snapshot."""

    def __init__(self, locations: List[Location], industries: List[Industry]):
        """
        Initialize the routing service.

        Args:
            locations: Every location on the layout
            industries: Every industry on the layout
        """
        self._locations: Dict[str, Location] = {location.id: location for location in locations}
        self._industries = list(industries)
        self.fiddle_yards = [location for location in locations if location.is_fiddle_yard]
        self.logger = logging.getLogger(__name__)

    def get_nearest_fiddle_yard(self, origin_location_id: str) -> Optional[Location]:
        """
        Find the fiddle yard a car leaves the layout through.

        A fiddle yard in the origin's block is preferred; otherwise the
        first fiddle yard is used.

        Args:
            origin_location_id: On-layout location the car departs from

        Returns:
            Fiddle yard location, or None if the origin is unknown or the
            layout has no fiddle yards
        """
        origin = self._locations.get(origin_location_id)
        if origin is None:
            return None

        for fiddle_yard in self.fiddle_yards:
            if fiddle_yard.block == origin.block:
                return fiddle_yard
        return self.fiddle_yards[0] if self.fiddle_yards else None

    def get_yard_industry(self, fiddle_yard_id: str) -> Optional[Industry]:
        """First YARD industry inside a fiddle yard location."""
        for industry in self._industries:
            if industry.location_id == fiddle_yard_id and industry.is_yard:
                return industry
        return None

    def create_off_layout_destination(
        self,
        origin_location_id: str,
        final_location_id: str,
        final_industry_id: str,
        final_track_id: Optional[str] = None,
    ) -> Optional[CarDestination]:
        """
        Build a destination that stages a car in a fiddle yard.

        The immediate destination is the first track of the fiddle yard's
        yard industry; the final destination is the off-layout target.

        Returns:
            CarDestination, or None when no fiddle yard with a tracked yard
            industry can be found
        """
        fiddle_yard = self.get_nearest_fiddle_yard(origin_location_id)
        if fiddle_yard is None:
            self.logger.warning(f"No fiddle yard found for origin '{origin_location_id}'")
            return None

        yard_industry = self.get_yard_industry(fiddle_yard.id)
        if yard_industry is None or not yard_industry.tracks:
            self.logger.warning(f"Fiddle yard '{fiddle_yard.get_display_name()}' has no yard tracks")
            return None

        return CarDestination(
            immediate_destination=DestinationRef(
                location_id=fiddle_yard.id,
                industry_id=yard_industry.id,
                track_id=yard_industry.tracks[0].id,
            ),
            final_destination=DestinationRef(
                location_id=final_location_id,
                industry_id=final_industry_id,
                track_id=final_track_id,
            ),
        )

    def route_car(
        self,
        car: RollingStock,
        origin_location_id: str,
        final: DestinationRef,
    ) -> Optional[RollingStock]:
        """
        Give a car an off-layout destination.

        Returns:
            Copy of the car with the new destination, or None if it cannot
            be routed
        """
        destination = self.create_off_layout_destination(
            origin_location_id, final.location_id, final.industry_id, final.track_id
        )
        if destination is None:
            return None
        self.logger.info(
            f"Routing {car.reporting_marks} to '{final.industry_id}' "
            f"via '{destination.immediate_destination.industry_id}'"
        )
        return car.with_destination(destination)

    def is_off_layout_location(self, location_id: str) -> bool:
        location = self._locations.get(location_id)
        return location is not None and location.is_off_layout
