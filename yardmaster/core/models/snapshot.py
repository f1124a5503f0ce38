"""
Layout Snapshot Model

Everything one train build reads, as exported by the record store.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from .industry import Industry
from .location import Location
from .rolling_stock import RollingStock
from .switchlist import Switchlist
from .train_route import TrainRoute


def _records(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Return the record list stored under ``key``, checking its shape."""
    records = data.get(key) or []
    if not isinstance(records, list):
        raise TypeError(f"'{key}' must be a list of records")
    for record in records:
        if not isinstance(record, dict):
            raise TypeError(f"'{key}' holds a non-object record: {record!r}")
    return records


@dataclass(frozen=True)
class LayoutSnapshot:
    """A route plus the full layout state it runs over."""

    route: TrainRoute
    industries: List[Industry] = field(default_factory=list)
    locations: List[Location] = field(default_factory=list)
    rolling_stock: List[RollingStock] = field(default_factory=list)
    switchlist: Optional[Switchlist] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LayoutSnapshot':
        """
        Create a snapshot from a record document.

        Raises:
            KeyError: If the route or a required record field is missing
            TypeError: If the document or one of its records is not an object
        """
        if not isinstance(data, dict):
            raise TypeError("Snapshot document must be an object")
        for key in ("route", "switchlist"):
            if data.get(key) is not None and not isinstance(data[key], dict):
                raise TypeError(f"'{key}' must be an object")

        switchlist = data.get("switchlist")
        return cls(
            route=TrainRoute.from_dict(data["route"]),
            industries=[Industry.from_dict(item) for item in _records(data, "industries")],
            locations=[Location.from_dict(item) for item in _records(data, "locations")],
            rolling_stock=[RollingStock.from_dict(item) for item in _records(data, "rollingStock")],
            switchlist=Switchlist.from_dict(switchlist) if switchlist else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "route": self.route.to_dict(),
            "industries": [industry.to_dict() for industry in self.industries],
            "locations": [location.to_dict() for location in self.locations],
            "rollingStock": [car.to_dict() for car in self.rolling_stock],
        }
        if self.switchlist is not None:
            data["switchlist"] = self.switchlist.to_dict()
        return data
