"""
Train Builder Interface

Defines the contract for allocating cars to a train along a route.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

from ..models.industry import Industry
from ..models.location import Location
from ..models.rolling_stock import RollingStock
from ..models.switchlist import Switchlist
from ..models.train_route import TrainRoute

if TYPE_CHECKING:
    from ..services.train_builder import BuildResult


class ITrainBuilder(ABC):
    """Interface for train building operations."""

    @abstractmethod
    def build_train(
        self,
        route: TrainRoute,
        industries: List[Industry],
        locations: List[Location],
        rolling_stock: List[RollingStock],
        switchlist: Optional[Switchlist] = None,
    ) -> 'BuildResult':
        """
        Decide which cars leave the originating yard and which are picked up.

        Args:
            route: Route the train runs
            industries: Every industry on the layout
            locations: Every location on the layout
            rolling_stock: Snapshot of all cars with their current positions
            switchlist: Work order to move to IN_PROGRESS, if any

        Returns:
            BuildResult with assigned and still-available cars

        Raises:
            MissingReferenceError: If a yard location is not in ``locations``
        """
        pass
