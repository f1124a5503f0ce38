"""
Switchlist Model

A switchlist is the work order tying a train route to a set of car moves.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Dict, Any


class SwitchlistStatus(str, Enum):
    """Switchlist lifecycle states, in the only order they may advance."""

    CREATED = "CREATED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @property
    def rank(self) -> int:
        return list(SwitchlistStatus).index(self)

    @property
    def is_terminal(self) -> bool:
        return self is SwitchlistStatus.COMPLETED


@dataclass(frozen=True)
class Switchlist:
    """Immutable data class representing a switchlist."""

    id: str
    train_route_id: str
    name: str
    created_at: str
    status: SwitchlistStatus = SwitchlistStatus.CREATED
    notes: Optional[str] = None
    owner_id: Optional[str] = None

    def with_status(self, status: SwitchlistStatus) -> 'Switchlist':
        return replace(self, status=status)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "_id": self.id,
            "trainRouteId": self.train_route_id,
            "name": self.name,
            "createdAt": self.created_at,
            "status": self.status.value,
        }
        if self.notes is not None:
            data["notes"] = self.notes
        if self.owner_id is not None:
            data["ownerId"] = self.owner_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Switchlist':
        return cls(
            id=data["_id"],
            train_route_id=data.get("trainRouteId", ""),
            name=data.get("name", ""),
            created_at=data.get("createdAt", ""),
            status=SwitchlistStatus(data.get("status", SwitchlistStatus.CREATED.value)),
            notes=data.get("notes"),
            owner_id=data.get("ownerId"),
        )
