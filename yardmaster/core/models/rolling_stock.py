"""
Rolling Stock Model

Data models for cars, where they sit and where they are routed.
"""

from dataclasses import dataclass, replace
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class CarPosition:
    """The industry track a car currently occupies."""

    industry_id: str
    track_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"industryId": self.industry_id, "trackId": self.track_id}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CarPosition':
        return cls(industry_id=data["industryId"], track_id=data.get("trackId", ""))


@dataclass(frozen=True)
class DestinationRef:
    """A routing target: location, industry and optionally a track."""

    location_id: str
    industry_id: str
    track_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "locationId": self.location_id,
            "industryId": self.industry_id,
        }
        if self.track_id is not None:
            data["trackId"] = self.track_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DestinationRef':
        return cls(
            location_id=data.get("locationId", ""),
            industry_id=data["industryId"],
            track_id=data.get("trackId"),
        )


@dataclass(frozen=True)
class CarDestination:
    """
    Routing for one car.

    The immediate destination is the next industry the car moves to on this
    switchlist. The final destination is a longer-horizon target, set only
    when a car is routed off the layout through a fiddle yard.
    """

    immediate_destination: DestinationRef
    final_destination: Optional[DestinationRef] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"immediateDestination": self.immediate_destination.to_dict()}
        if self.final_destination is not None:
            data["finalDestination"] = self.final_destination.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CarDestination':
        final = data.get("finalDestination")
        return cls(
            immediate_destination=DestinationRef.from_dict(data["immediateDestination"]),
            final_destination=DestinationRef.from_dict(final) if final else None,
        )


@dataclass(frozen=True)
class RollingStock:
    """
    Immutable data class representing a single car.

    Copies are returned for every change of position or destination; the
    originals handed in by callers are never modified.
    """

    id: str
    road_name: str
    road_number: str
    aar_type: str = ""
    description: str = ""
    color: str = ""
    note: str = ""
    home_yard: str = ""
    current_location: Optional[CarPosition] = None
    destination: Optional[CarDestination] = None
    owner_id: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Rolling stock id cannot be empty")
        # Road numbers arrive as ints from some exports
        if not isinstance(self.road_number, str):
            object.__setattr__(self, 'road_number', str(self.road_number))

    @property
    def reporting_marks(self) -> str:
        """Road name and number, e.g. ``"UP 12345"``."""
        return f"{self.road_name} {self.road_number}".strip()

    @property
    def current_industry_id(self) -> Optional[str]:
        if self.current_location is None:
            return None
        return self.current_location.industry_id

    @property
    def has_destination(self) -> bool:
        return self.destination is not None

    def with_destination(self, destination: Optional[CarDestination]) -> 'RollingStock':
        return replace(self, destination=destination)

    def without_destination(self) -> 'RollingStock':
        return replace(self, destination=None)

    def with_location(self, location: Optional[CarPosition]) -> 'RollingStock':
        return replace(self, current_location=location)

    def to_dict(self) -> Dict[str, Any]:
        """Convert car to its record representation."""
        data: Dict[str, Any] = {
            "_id": self.id,
            "roadName": self.road_name,
            "roadNumber": self.road_number,
            "aarType": self.aar_type,
            "description": self.description,
            "color": self.color,
            "note": self.note,
            "homeYard": self.home_yard,
        }
        if self.current_location is not None:
            data["currentLocation"] = self.current_location.to_dict()
        if self.destination is not None:
            data["destination"] = self.destination.to_dict()
        if self.owner_id is not None:
            data["ownerId"] = self.owner_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RollingStock':
        """Create RollingStock from its record representation."""
        location = data.get("currentLocation")
        destination = data.get("destination")
        return cls(
            id=data["_id"],
            road_name=data.get("roadName", ""),
            road_number=data.get("roadNumber", ""),
            aar_type=data.get("aarType", ""),
            description=data.get("description", ""),
            color=data.get("color", ""),
            note=data.get("note", ""),
            home_yard=data.get("homeYard", ""),
            current_location=CarPosition.from_dict(location) if location else None,
            destination=CarDestination.from_dict(destination) if destination else None,
            owner_id=data.get("ownerId"),
        )

    def __str__(self) -> str:
        return self.reporting_marks
