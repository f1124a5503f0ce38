"""
Destination Selector

Chooses where departing cars go. Candidates are industries at stations
between the two yards, preferring freight customers; each car draws its
destination independently from an injected random source.
"""

import logging
import random
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from ..models.industry import Industry, Track
from ..models.rolling_stock import CarDestination, DestinationRef
from ..models.train_route import TrainRoute


class DestinationRule(Enum):
    """Which candidate filter produced the destination list."""

    FREIGHT_ON_ROUTE = "freight_on_route"
    ANY_ON_ROUTE = "any_on_route"
    TERMINUS_FALLBACK = "terminus_fallback"


def find_least_occupied_track(tracks: Sequence[Track]) -> Optional[Track]:
    """Track with the fewest placed cars; the earlier track wins ties."""
    least: Optional[Track] = None
    for track in tracks:
        if least is None or track.occupancy < least.occupancy:
            least = track
    return least


class DestinationSelector:
    """Selects immediate destinations for cars leaving the originating yard."""

    def __init__(self, industries: List[Industry], rng: Any = None, warn_on_full_track: bool = True):
        """
        Initialize the selector.

        Args:
            industries: Every industry on the layout
            rng: Object with a ``choice(seq)`` method, e.g. ``random.Random``
            warn_on_full_track: Log when a chosen track is already full
        """
        self.industries = list(industries)
        self.rng = rng if rng is not None else random.Random()
        self.warn_on_full_track = warn_on_full_track
        self.logger = logging.getLogger(__name__)

    def candidates_for_route(
        self,
        route: TrainRoute,
        origin_yard: Industry,
        terminus_yard: Industry,
    ) -> Tuple[List[Industry], DestinationRule]:
        """
        Build the candidate list for a route.

        Returns:
            Tuple of (candidate industries, rule that produced them). The
            TERMINUS_FALLBACK list holds only the terminus yard.
        """
        excluded = {
            route.originating_yard_id,
            route.terminating_yard_id,
            origin_yard.location_id,
            terminus_yard.location_id,
        }
        stations = set(route.stations)
        on_route = [
            industry for industry in self.industries
            if industry.location_id in stations and industry.location_id not in excluded
        ]

        freight = [industry for industry in on_route if industry.is_freight]
        if freight:
            return freight, DestinationRule.FREIGHT_ON_ROUTE

        if on_route:
            self.logger.warning(
                f"No freight industries on route '{route.name}', "
                f"using any of {len(on_route)} industries along the route"
            )
            return on_route, DestinationRule.ANY_ON_ROUTE

        self.logger.warning(
            f"No industries between the yards on route '{route.name}', "
            f"sending cars to terminus '{terminus_yard.name}'"
        )
        return [terminus_yard], DestinationRule.TERMINUS_FALLBACK

    def choose(self, candidates: Sequence[Industry]) -> Industry:
        """Pick one candidate uniformly at random."""
        if not candidates:
            raise ValueError("No destination candidates to choose from")
        return self.rng.choice(list(candidates))

    def destination_for(self, industry: Industry) -> CarDestination:
        """Immediate destination on the industry's least occupied track."""
        track = find_least_occupied_track(industry.tracks)
        if track is not None and self.warn_on_full_track and track.is_full:
            self.logger.warning(
                f"Track '{track.name or track.id}' at '{industry.name}' is full "
                f"({track.occupancy}/{track.max_cars}); assigning anyway"
            )
        return CarDestination(
            immediate_destination=DestinationRef(
                location_id=industry.location_id,
                industry_id=industry.id,
                track_id=track.id if track is not None else None,
            )
        )
