"""
Industry Model

Data models for industries and the tracks they own.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Dict, Any, Union


class IndustryType(str, Enum):
    """Enumeration of industry classifications."""

    FREIGHT = "FREIGHT"
    YARD = "YARD"
    PASSENGER = "PASSENGER"


def industry_type_name(industry_type: Union[IndustryType, str, None]) -> str:
    """Return the raw classification string of an industry type value."""
    if industry_type is None:
        return ""
    if isinstance(industry_type, IndustryType):
        return industry_type.value
    return str(industry_type)


@dataclass(frozen=True)
class Track:
    """
    A track inside an industry.

    ``placed_cars`` lists occupant car ids in placement order. The
    ``max_cars`` bound is declared data; nothing here enforces it. A track
    with no ``max_cars`` has no limit and is never full.
    """

    id: str
    name: str = ""
    max_cars: Optional[int] = None
    placed_cars: List[str] = field(default_factory=list)
    length: Optional[float] = None
    capacity: Optional[int] = None
    accepted_car_types: List[str] = field(default_factory=list)
    owner_id: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Track id cannot be empty")
        if self.max_cars is not None and self.max_cars < 0:
            raise ValueError("Track max_cars cannot be negative")
        if not isinstance(self.placed_cars, list):
            object.__setattr__(self, 'placed_cars', list(self.placed_cars))
        if not isinstance(self.accepted_car_types, list):
            object.__setattr__(self, 'accepted_car_types', list(self.accepted_car_types))

    @property
    def occupancy(self) -> int:
        """Number of cars currently placed on the track."""
        return len(self.placed_cars)

    @property
    def is_full(self) -> bool:
        """Check if the track holds at least ``max_cars`` cars."""
        return self.max_cars is not None and self.occupancy >= self.max_cars

    @property
    def free_spaces(self) -> Optional[int]:
        """Room left on the track, or None when it has no limit."""
        if self.max_cars is None:
            return None
        return max(self.max_cars - self.occupancy, 0)

    def accepts(self, aar_type: str) -> bool:
        """Check whether a car type may be spotted on this track."""
        return not self.accepted_car_types or aar_type in self.accepted_car_types

    def with_placed_cars(self, placed_cars: List[str]) -> 'Track':
        return replace(self, placed_cars=list(placed_cars))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "_id": self.id,
            "name": self.name,
            "placedCars": list(self.placed_cars),
            "acceptedCarTypes": list(self.accepted_car_types),
        }
        if self.max_cars is not None:
            data["maxCars"] = self.max_cars
        if self.length is not None:
            data["length"] = self.length
        if self.capacity is not None:
            data["capacity"] = self.capacity
        if self.owner_id is not None:
            data["ownerId"] = self.owner_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Track':
        max_cars = data.get("maxCars")
        return cls(
            id=data["_id"],
            name=data.get("name", ""),
            max_cars=int(max_cars) if max_cars is not None else None,
            placed_cars=list(data.get("placedCars") or []),
            length=data.get("length"),
            capacity=data.get("capacity"),
            accepted_car_types=list(data.get("acceptedCarTypes") or []),
            owner_id=data.get("ownerId"),
        )


@dataclass(frozen=True)
class Industry:
    """
    Immutable data class representing an industry at a location.

    ``industry_type`` keeps whatever classification the record carried:
    an ``IndustryType`` when it matched exactly, otherwise the raw string
    (upstream data is not always consistently cased).
    """

    id: str
    name: str
    location_id: str
    industry_type: Union[IndustryType, str] = IndustryType.FREIGHT
    block_name: str = ""
    tracks: List[Track] = field(default_factory=list)
    description: Optional[str] = None
    owner_id: Optional[str] = None
    is_virtual: bool = False

    def __post_init__(self):
        """Validate industry data after initialization."""
        if not self.id:
            raise ValueError("Industry id cannot be empty")
        if not isinstance(self.tracks, list):
            object.__setattr__(self, 'tracks', list(self.tracks))

    @property
    def type_name(self) -> str:
        """Raw classification string, e.g. ``"YARD"`` or ``"yard"``."""
        return industry_type_name(self.industry_type)

    def is_type(self, industry_type: IndustryType) -> bool:
        """Case-insensitive classification check."""
        return self.type_name.upper() == industry_type.value

    @property
    def is_yard(self) -> bool:
        return self.is_type(IndustryType.YARD)

    @property
    def is_freight(self) -> bool:
        return self.is_type(IndustryType.FREIGHT)

    @property
    def placed_car_ids(self) -> List[str]:
        """All car ids placed on any of this industry's tracks."""
        return [car_id for track in self.tracks for car_id in track.placed_cars]

    def get_track(self, track_id: str) -> Optional[Track]:
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    def with_track(self, updated: Track) -> 'Industry':
        """Return a copy with the track of the same id replaced."""
        return replace(
            self,
            tracks=[updated if track.id == updated.id else track for track in self.tracks],
        )

    def with_tracks(self, tracks: List[Track]) -> 'Industry':
        return replace(self, tracks=list(tracks))

    def to_dict(self) -> Dict[str, Any]:
        """Convert industry to its record representation."""
        data: Dict[str, Any] = {
            "_id": self.id,
            "name": self.name,
            "locationId": self.location_id,
            "blockName": self.block_name,
            "industryType": self.type_name,
            "tracks": [track.to_dict() for track in self.tracks],
        }
        if self.description is not None:
            data["description"] = self.description
        if self.owner_id is not None:
            data["ownerId"] = self.owner_id
        if self.is_virtual:
            data["isVirtual"] = True
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Industry':
        """Create Industry from its record representation."""
        raw_type = data.get("industryType", IndustryType.FREIGHT.value)
        try:
            industry_type: Union[IndustryType, str] = IndustryType(raw_type)
        except ValueError:
            industry_type = raw_type
        return cls(
            id=data["_id"],
            name=data.get("name", ""),
            location_id=data.get("locationId", ""),
            industry_type=industry_type,
            block_name=data.get("blockName", ""),
            tracks=[Track.from_dict(track) for track in data.get("tracks") or []],
            description=data.get("description"),
            owner_id=data.get("ownerId"),
        )

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Industry(id='{self.id}', name='{self.name}', type='{self.type_name}')"
