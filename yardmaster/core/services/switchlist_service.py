"""
Switchlist Service

Status workflow and manual car assignment for switchlists. Every operation
returns new values; nothing is stored here.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from ..exceptions import InvalidStatusTransitionError, SwitchlistError
from ..models.rolling_stock import CarDestination, RollingStock
from ..models.switchlist import Switchlist, SwitchlistStatus

logger = logging.getLogger(__name__)


class SwitchlistService:
    """Forward-only switchlist lifecycle: CREATED -> IN_PROGRESS -> COMPLETED."""

    @staticmethod
    def create_switchlist(
        train_route_id: str,
        name: str,
        notes: Optional[str] = None,
        owner_id: Optional[str] = None,
        now: Optional[datetime] = None,
        switchlist_id: Optional[str] = None,
    ) -> Switchlist:
        """Create a new switchlist in the CREATED state."""
        if not train_route_id:
            raise SwitchlistError("A switchlist needs a train route")
        if not name or not name.strip():
            raise SwitchlistError("A switchlist needs a name")

        created_at = (now or datetime.now(timezone.utc)).isoformat()
        switchlist = Switchlist(
            id=switchlist_id or uuid.uuid4().hex,
            train_route_id=train_route_id,
            name=name.strip(),
            created_at=created_at,
            status=SwitchlistStatus.CREATED,
            notes=notes,
            owner_id=owner_id,
        )
        logger.info(f"Created switchlist '{switchlist.name}' for route {train_route_id}")
        return switchlist

    @staticmethod
    def transition(switchlist: Switchlist, target: SwitchlistStatus) -> Switchlist:
        """
        Move a switchlist to ``target``.

        Staying in the same state is a no-op. Skipping straight from CREATED
        to COMPLETED is refused, as is any move backwards.

        Raises:
            InvalidStatusTransitionError: If the move is not allowed
        """
        current = switchlist.status
        if target is current:
            return switchlist
        if target.rank != current.rank + 1:
            raise InvalidStatusTransitionError(current, target)

        logger.info(f"Switchlist '{switchlist.name}': {current.value} -> {target.value}")
        return switchlist.with_status(target)

    @staticmethod
    def start(switchlist: Switchlist) -> Switchlist:
        """CREATED -> IN_PROGRESS; no-op once work has started."""
        if switchlist.status is not SwitchlistStatus.CREATED:
            return switchlist
        return SwitchlistService.transition(switchlist, SwitchlistStatus.IN_PROGRESS)

    @staticmethod
    def complete(switchlist: Switchlist) -> Switchlist:
        """IN_PROGRESS -> COMPLETED."""
        return SwitchlistService.transition(switchlist, SwitchlistStatus.COMPLETED)

    @staticmethod
    def can_build(switchlist: Switchlist, cars: Iterable[RollingStock]) -> bool:
        """
        Check whether a train may be built for this switchlist.

        A build is refused once the switchlist is COMPLETED or while any car
        still carries a destination from an earlier build.
        """
        if switchlist.status.is_terminal:
            return False
        return not any(car.has_destination for car in cars)

    @staticmethod
    def assign_car(
        switchlist: Switchlist,
        car: RollingStock,
        destination: CarDestination,
    ) -> Tuple[Switchlist, RollingStock]:
        """
        Manually route a car on this switchlist.

        Returns:
            Tuple of (switchlist, now IN_PROGRESS if it was CREATED; routed car)
        """
        if switchlist.status.is_terminal:
            raise SwitchlistError(f"Switchlist '{switchlist.name}' is completed")
        logger.debug(f"Assigned {car.reporting_marks} on switchlist '{switchlist.name}'")
        return SwitchlistService.start(switchlist), car.with_destination(destination)

    @staticmethod
    def release_car(switchlist: Switchlist, car: RollingStock) -> RollingStock:
        """Roll back an assignment, clearing the car's destination."""
        if switchlist.status.is_terminal:
            raise SwitchlistError(
                f"Cannot release {car.reporting_marks}: switchlist '{switchlist.name}' is completed"
            )
        logger.debug(f"Released {car.reporting_marks} from switchlist '{switchlist.name}'")
        return car.without_destination()
