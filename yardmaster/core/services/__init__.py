"""
Core Services Package

Service implementations for position tracking and train building.
"""

from .position_index import PositionIndex
from .yard_resolver import YardResolver, YardResolution, ResolutionKind, YardMatchRule
from .destination_selector import DestinationSelector, DestinationRule, find_least_occupied_track
from .switchlist_service import SwitchlistService
from .train_builder import TrainBuilder, BuildResult
from .layout_state_service import LayoutStateService
from .off_layout_routing import OffLayoutRoutingService
from .service_factory import ServiceFactory

__all__ = [
    'PositionIndex',
    'YardResolver',
    'YardResolution',
    'ResolutionKind',
    'YardMatchRule',
    'DestinationSelector',
    'DestinationRule',
    'find_least_occupied_track',
    'SwitchlistService',
    'TrainBuilder',
    'BuildResult',
    'LayoutStateService',
    'OffLayoutRoutingService',
    'ServiceFactory',
]
