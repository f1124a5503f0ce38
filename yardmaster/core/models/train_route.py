"""
Train Route Model

A route runs from an originating yard, through an ordered list of stations,
to a terminating yard. Yard and station ids all refer to locations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any


class RouteType(str, Enum):
    """Enumeration of train route types."""

    MIXED = "MIXED"
    PASSENGER = "PASSENGER"
    FREIGHT = "FREIGHT"


@dataclass(frozen=True)
class TrainRoute:
    """Immutable data class representing a train route."""

    id: str
    name: str
    route_number: str
    originating_yard_id: str
    terminating_yard_id: str
    stations: List[str] = field(default_factory=list)
    route_type: RouteType = RouteType.MIXED
    description: Optional[str] = None
    owner_id: Optional[str] = None

    def __post_init__(self):
        """Validate route data."""
        if not self.id:
            raise ValueError("Train route id cannot be empty")
        if not self.originating_yard_id or not self.terminating_yard_id:
            raise ValueError("Originating and terminating yards cannot be empty")
        if not isinstance(self.stations, list):
            object.__setattr__(self, 'stations', list(self.stations))

    @property
    def yard_location_ids(self) -> List[str]:
        return [self.originating_yard_id, self.terminating_yard_id]

    @property
    def intermediate_stations(self) -> List[str]:
        """Stations in travel order, excluding both yard locations."""
        yards = set(self.yard_location_ids)
        return [station for station in self.stations if station not in yards]

    def serves(self, location_id: str) -> bool:
        """Check whether a location lies between the two yards."""
        return location_id in self.intermediate_stations

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "_id": self.id,
            "name": self.name,
            "routeNumber": self.route_number,
            "routeType": self.route_type.value,
            "originatingYardId": self.originating_yard_id,
            "terminatingYardId": self.terminating_yard_id,
            "stations": list(self.stations),
        }
        if self.description is not None:
            data["description"] = self.description
        if self.owner_id is not None:
            data["ownerId"] = self.owner_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TrainRoute':
        raw_type = data.get("routeType") or RouteType.MIXED.value
        try:
            route_type = RouteType(str(raw_type).upper())
        except ValueError:
            route_type = RouteType.MIXED
        return cls(
            id=data["_id"],
            name=data.get("name", ""),
            route_number=data.get("routeNumber", ""),
            originating_yard_id=data["originatingYardId"],
            terminating_yard_id=data["terminatingYardId"],
            stations=list(data.get("stations") or []),
            route_type=route_type,
            description=data.get("description"),
            owner_id=data.get("ownerId"),
        )

    def __str__(self) -> str:
        return f"{self.route_number} {self.name}".strip()
