"""
Exceptions raised by the core services.

Lookups never raise; only whole operations that cannot proceed do.
"""

from typing import Optional


class YardmasterException(Exception):
    """Base exception for all core errors."""

    pass


class TrainBuildError(YardmasterException):
    """Exception for failures that abort a train build."""

    pass


class MissingReferenceError(TrainBuildError):
    """A route yard refers to a location that is not in the supplied set."""

    def __init__(self, role: str, location_id: str, route_id: Optional[str] = None):
        self.role = role
        self.location_id = location_id
        self.route_id = route_id
        route_part = f" on route '{route_id}'" if route_id else ""
        super().__init__(
            f"{role.capitalize()} yard location '{location_id}'{route_part} not found"
        )


class SwitchlistError(YardmasterException):
    """Base exception for switchlist workflow errors."""

    pass


class InvalidStatusTransitionError(SwitchlistError):
    """Exception for a status change the switchlist lifecycle does not allow."""

    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move switchlist from {current.value} to {target.value}")


class LayoutStateError(YardmasterException):
    """Base exception for car placement errors."""

    pass


class NoTracksError(LayoutStateError):
    """Exception for an industry with no tracks to place cars on."""

    pass


class TrackNotFoundError(LayoutStateError):
    """Exception for a track id missing from its industry."""

    pass


class TrackCapacityError(LayoutStateError):
    """Exception for a placement onto a track that is already full."""

    pass


class CarTypeNotAcceptedError(LayoutStateError):
    """Exception for a car type the track does not accept."""

    pass


class CarNotOnTrackError(LayoutStateError):
    """Exception for removing a car that is not on the given track."""

    pass
