"""
Location Model

Pure data model for layout locations (towns, sidings and fiddle yards).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class LocationType(str, Enum):
    """Enumeration of where a location sits relative to the layout."""

    ON_LAYOUT = "ON_LAYOUT"
    OFF_LAYOUT = "OFF_LAYOUT"
    FIDDLE_YARD = "FIDDLE_YARD"


@dataclass(frozen=True)
class Location:
    """
    Immutable data class representing a location on the layout.

    Locations are grouped into blocks for display; the block carries no
    meaning for train building.
    """

    id: str
    station_name: str
    block: str = ""
    description: Optional[str] = None
    location_type: LocationType = LocationType.ON_LAYOUT
    owner_id: Optional[str] = None

    def __post_init__(self):
        """Validate location data after initialization."""
        if not self.id:
            raise ValueError("Location id cannot be empty")

    @property
    def is_off_layout(self) -> bool:
        return self.location_type == LocationType.OFF_LAYOUT

    @property
    def is_fiddle_yard(self) -> bool:
        return self.location_type == LocationType.FIDDLE_YARD

    def get_display_name(self) -> str:
        """Get the display name for the location."""
        return self.station_name or self.id

    def to_dict(self) -> Dict[str, Any]:
        """Convert location to its record representation."""
        data: Dict[str, Any] = {
            "_id": self.id,
            "stationName": self.station_name,
            "block": self.block,
            "locationType": self.location_type.value,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.owner_id is not None:
            data["ownerId"] = self.owner_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Location':
        """Create Location from its record representation."""
        raw_type = data.get("locationType") or LocationType.ON_LAYOUT.value
        try:
            location_type = LocationType(str(raw_type).upper())
        except ValueError:
            location_type = LocationType.ON_LAYOUT
        return cls(
            id=data["_id"],
            station_name=data.get("stationName", ""),
            block=data.get("block", ""),
            description=data.get("description"),
            location_type=location_type,
            owner_id=data.get("ownerId"),
        )

    def __str__(self) -> str:
        return self.get_display_name()
