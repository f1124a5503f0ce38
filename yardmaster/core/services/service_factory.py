"""
Service Factory

Creates core service instances from application configuration.
"""

import logging
import random
from typing import List, Optional

from ...managers.config_manager import ConfigData
from ..models.industry import Industry
from ..models.location import Location
from .layout_state_service import LayoutStateService
from .off_layout_routing import OffLayoutRoutingService
from .position_index import PositionIndex
from .switchlist_service import SwitchlistService
from .train_builder import TrainBuilder


class ServiceFactory:
    """Factory for creating configured core services."""

    def __init__(self, config: Optional[ConfigData] = None):
        """
        Initialize the service factory.

        Args:
            config: Application configuration, defaults when None
        """
        self.config = config or ConfigData()
        self.logger = logging.getLogger(__name__)
        self.logger.info("Initialized ServiceFactory")

    def create_random_source(self, seed: Optional[int] = None) -> random.Random:
        """Random source for destination draws; ``seed`` overrides config."""
        if seed is None:
            seed = self.config.builder.random_seed
        return random.Random(seed)

    def create_train_builder(self, seed: Optional[int] = None) -> TrainBuilder:
        """Create a train builder, one per build."""
        builder_config = self.config.builder
        return TrainBuilder(
            rng=self.create_random_source(seed),
            warn_on_full_track=builder_config.warn_on_full_track,
            virtual_yard_prefix=builder_config.virtual_yard_prefix,
        )

    def create_layout_state_service(self) -> LayoutStateService:
        return LayoutStateService(enforce_capacity=self.config.layout.enforce_track_capacity)

    @staticmethod
    def create_off_layout_routing_service(
        locations: List[Location],
        industries: List[Industry],
    ) -> OffLayoutRoutingService:
        return OffLayoutRoutingService(locations, industries)

    @staticmethod
    def create_position_index() -> PositionIndex:
        return PositionIndex()

    @staticmethod
    def get_switchlist_service() -> SwitchlistService:
        return SwitchlistService()
