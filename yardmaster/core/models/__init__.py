"""
Core Models Package

Data models for locations, industries, rolling stock, routes and switchlists.
"""

from .location import Location, LocationType
from .industry import Industry, IndustryType, Track, industry_type_name
from .rolling_stock import RollingStock, CarPosition, CarDestination, DestinationRef
from .train_route import TrainRoute, RouteType
from .switchlist import Switchlist, SwitchlistStatus
from .snapshot import LayoutSnapshot

__all__ = [
    'Location',
    'LocationType',
    'Industry',
    'IndustryType',
    'Track',
    'industry_type_name',
    'RollingStock',
    'CarPosition',
    'CarDestination',
    'DestinationRef',
    'TrainRoute',
    'RouteType',
    'Switchlist',
    'SwitchlistStatus',
    'LayoutSnapshot',
]
