"""
Position Index Interface

Defines the contract for tracking which single place each car occupies.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional


class IPositionIndex(ABC):
    """Interface for car position bookkeeping."""

    @abstractmethod
    def set_position(self, car_id: str, location_id: str) -> None:
        """
        Move a car to a location, removing it from its previous one.

        Args:
            car_id: Car identifier
            location_id: Location (or track) identifier
        """
        pass

    @abstractmethod
    def set_positions(self, positions: Dict[str, str]) -> None:
        """
        Move several cars at once.

        Every car in the batch is cleared from its previous location before
        any new position is applied.

        Args:
            positions: Mapping of car id to new location id
        """
        pass

    @abstractmethod
    def get_position(self, car_id: str) -> Optional[str]:
        """
        Get the location a car occupies.

        Returns:
            Location id or None if the car is not placed
        """
        pass

    @abstractmethod
    def get_occupants(self, location_id: str) -> List[str]:
        """
        Get the cars at a location in insertion order.

        Returns:
            List of car ids, empty if none
        """
        pass

    @abstractmethod
    def get_unoccupied(self, location_ids: Iterable[str]) -> List[str]:
        """
        Filter a list of locations down to the ones with no cars.

        Returns:
            Location ids with zero occupants, in input order
        """
        pass
