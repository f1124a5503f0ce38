"""
Train Builder Implementation

Builds a train for a route from a snapshot of car positions: cars in the
originating yard depart for industries along the route, and cars already at
those industries are picked up for the terminating yard.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions import MissingReferenceError
from ..interfaces.i_train_builder import ITrainBuilder
from ..models.industry import Industry
from ..models.location import Location
from ..models.rolling_stock import RollingStock
from ..models.switchlist import Switchlist, SwitchlistStatus
from ..models.train_route import TrainRoute
from .destination_selector import DestinationRule, DestinationSelector
from .switchlist_service import SwitchlistService
from .yard_resolver import VIRTUAL_YARD_PREFIX, YardResolution, YardResolver


@dataclass(frozen=True)
class BuildResult:
    """
    Outcome of one train build.

    ``assigned`` holds copies of the departing and picked-up cars carrying
    their new destinations, departing cars first. ``available`` holds the
    untouched cars in input order.
    """

    assigned: List[RollingStock]
    available: List[RollingStock]
    departing_ids: List[str]
    pickup_ids: List[str]
    origin_yard: YardResolution
    terminus_yard: YardResolution
    destination_rule: DestinationRule
    status: SwitchlistStatus
    switchlist: Optional[Switchlist] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def departing(self) -> List[RollingStock]:
        ids = set(self.departing_ids)
        return [car for car in self.assigned if car.id in ids]

    @property
    def pickups(self) -> List[RollingStock]:
        ids = set(self.pickup_ids)
        return [car for car in self.assigned if car.id in ids]

    @property
    def virtual_industry_ids(self) -> List[str]:
        """Ids of placeholder yards that must not be persisted as industries."""
        return [
            resolution.industry_id
            for resolution in (self.origin_yard, self.terminus_yard)
            if resolution.is_virtual
        ]

    @property
    def is_empty(self) -> bool:
        return not self.assigned

    def to_dict(self) -> Dict[str, Any]:
        return {
            "assigned": [car.to_dict() for car in self.assigned],
            "available": [car.to_dict() for car in self.available],
            "departingIds": list(self.departing_ids),
            "pickupIds": list(self.pickup_ids),
            "originYardId": self.origin_yard.industry_id,
            "terminusYardId": self.terminus_yard.industry_id,
            "destinationRule": self.destination_rule.value,
            "status": self.status.value,
            "warnings": list(self.warnings),
            "virtualIndustryIds": self.virtual_industry_ids,
        }


class TrainBuilder(ITrainBuilder):
    """Allocates cars to a train over explicit input snapshots."""

    def __init__(
        self,
        rng: Any = None,
        warn_on_full_track: bool = True,
        virtual_yard_prefix: str = VIRTUAL_YARD_PREFIX,
    ):
        """
        Initialize the train builder.

        Args:
            rng: Object with a ``choice(seq)`` method; a fresh
                ``random.Random`` when omitted
            warn_on_full_track: Log when a destination track is already full
            virtual_yard_prefix: Id prefix for synthesized yard industries
        """
        self.rng = rng if rng is not None else random.Random()
        self.warn_on_full_track = warn_on_full_track
        self.virtual_yard_prefix = virtual_yard_prefix
        self.logger = logging.getLogger(__name__)

    def build_train(
        self,
        route: TrainRoute,
        industries: List[Industry],
        locations: List[Location],
        rolling_stock: List[RollingStock],
        switchlist: Optional[Switchlist] = None,
    ) -> BuildResult:
        """Resolve both yards, partition the cars and assign destinations."""
        resolver = YardResolver(industries, locations, self.virtual_yard_prefix)
        warnings: List[str] = []

        origin = self._resolve_yard(resolver, route, "origin", route.originating_yard_id, warnings)
        terminus = self._resolve_yard(resolver, route, "terminus", route.terminating_yard_id, warnings)

        selector = DestinationSelector(industries, self.rng, self.warn_on_full_track)
        candidates, rule = selector.candidates_for_route(route, origin.industry, terminus.industry)
        if rule is DestinationRule.ANY_ON_ROUTE:
            warnings.append(f"No freight industries on route '{route.name}'; using any industry along the route")
        elif rule is DestinationRule.TERMINUS_FALLBACK:
            warnings.append(f"No industries along route '{route.name}'; departing cars sent to the terminus yard")

        industry_locations = {industry.id: industry.location_id for industry in industries}
        pickup_stations = set(route.intermediate_stations) - {
            origin.industry.location_id, terminus.industry.location_id
        }
        pickup_destination = selector.destination_for(terminus.industry)

        departing: List[RollingStock] = []
        pickups: List[RollingStock] = []
        available: List[RollingStock] = []

        for car in rolling_stock:
            industry_id = car.current_industry_id
            if industry_id is None:
                available.append(car)
            elif industry_id == origin.industry.id:
                target = selector.choose(candidates)
                departing.append(car.with_destination(selector.destination_for(target)))
                self.logger.debug(f"{car.reporting_marks} departs for '{target.name}'")
            elif industry_locations.get(industry_id) in pickup_stations:
                pickups.append(car.with_destination(pickup_destination))
                self.logger.debug(f"{car.reporting_marks} picked up for '{terminus.industry.name}'")
            else:
                available.append(car)

        updated_switchlist = SwitchlistService.start(switchlist) if switchlist is not None else None
        status = updated_switchlist.status if updated_switchlist is not None else SwitchlistStatus.IN_PROGRESS

        self.logger.info(
            f"Built train for route '{route.name}': {len(departing)} cars from "
            f"'{origin.industry.name}', {len(pickups)} cars picked up, "
            f"{len(available)} left available"
        )

        return BuildResult(
            assigned=departing + pickups,
            available=available,
            departing_ids=[car.id for car in departing],
            pickup_ids=[car.id for car in pickups],
            origin_yard=origin,
            terminus_yard=terminus,
            destination_rule=rule,
            status=status,
            switchlist=updated_switchlist,
            warnings=warnings,
        )

    def _resolve_yard(
        self,
        resolver: YardResolver,
        route: TrainRoute,
        role: str,
        location_id: str,
        warnings: List[str],
    ) -> YardResolution:
        resolution = resolver.resolve(location_id)
        if not resolution.is_found:
            self.logger.error(f"Cannot build route '{route.name}': {role} yard location '{location_id}' not found")
            raise MissingReferenceError(role, location_id, route.id)
        if resolution.is_degraded:
            warnings.append(f"{role.capitalize()} yard resolved to {resolution.describe()}")
        return resolution
