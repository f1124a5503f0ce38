"""
Core Package

Core services, interfaces, and models for car positions and train building.
"""

# Import interfaces
from .interfaces import IPositionIndex, ITrainBuilder

# Import models
from .models import (
    Location, LocationType, Industry, IndustryType, Track, RollingStock,
    CarPosition, CarDestination, DestinationRef, TrainRoute, RouteType,
    Switchlist, SwitchlistStatus
)

# Import services
from .services import (
    PositionIndex, YardResolver, YardResolution, DestinationSelector,
    SwitchlistService, TrainBuilder, BuildResult, LayoutStateService, OffLayoutRoutingService,
    ServiceFactory
)

from .exceptions import (
    YardmasterException, TrainBuildError, MissingReferenceError,
    SwitchlistError, InvalidStatusTransitionError, LayoutStateError
)

__all__ = [
    # Interfaces
    'IPositionIndex',
    'ITrainBuilder',

    # Models
    'Location',
    'LocationType',
    'Industry',
    'IndustryType',
    'Track',
    'RollingStock',
    'CarPosition',
    'CarDestination',
    'DestinationRef',
    'TrainRoute',
    'RouteType',
    'Switchlist',
    'SwitchlistStatus',

    # Services
    'PositionIndex',
    'YardResolver',
    'YardResolution',
    'DestinationSelector',
    'SwitchlistService',
    'TrainBuilder',
    'BuildResult',
    'LayoutStateService',
    'OffLayoutRoutingService',
    'ServiceFactory',

    # Exceptions
    'YardmasterException',
    'TrainBuildError',
    'MissingReferenceError',
    'SwitchlistError',
    'InvalidStatusTransitionError',
    'LayoutStateError',
]
