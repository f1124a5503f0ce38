"""
Yard Resolver

Route yards are stored as location ids while cars sit at industries, so the
builder needs "the yard industry at this location". Resolution walks a fixed
fallback chain and reports which rule matched, so callers can tell real data
from degraded matches and from placeholder (virtual) yards.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from ..models.industry import Industry, IndustryType
from ..models.location import Location

logger = logging.getLogger(__name__)

VIRTUAL_YARD_PREFIX = "virtual-yard-"


class ResolutionKind(Enum):
    """Outcome of a yard lookup."""

    RESOLVED = "resolved"
    VIRTUAL = "virtual"
    NOT_FOUND = "not_found"


class YardMatchRule(Enum):
    """Fallback rules, in the order they are tried."""

    EXACT_TYPE = "exact_type"
    TYPE_CASE_INSENSITIVE = "type_case_insensitive"
    NAME_CONTAINS_YARD = "name_contains_yard"
    ANY_INDUSTRY = "any_industry"
    VIRTUAL = "virtual"


@dataclass(frozen=True)
class YardResolution:
    """
    Tagged result of resolving a yard location.

    ``industry`` is None only for NOT_FOUND. A VIRTUAL industry exists only
    for display and must never be written back as a stored industry.
    """

    kind: ResolutionKind
    location_id: str
    industry: Optional[Industry] = None
    rule: Optional[YardMatchRule] = None

    @classmethod
    def resolved(cls, location_id: str, industry: Industry, rule: YardMatchRule) -> 'YardResolution':
        return cls(ResolutionKind.RESOLVED, location_id, industry, rule)

    @classmethod
    def virtual(cls, location_id: str, industry: Industry) -> 'YardResolution':
        return cls(ResolutionKind.VIRTUAL, location_id, industry, YardMatchRule.VIRTUAL)

    @classmethod
    def not_found(cls, location_id: str) -> 'YardResolution':
        return cls(ResolutionKind.NOT_FOUND, location_id)

    @property
    def is_resolved(self) -> bool:
        return self.kind is ResolutionKind.RESOLVED

    @property
    def is_virtual(self) -> bool:
        return self.kind is ResolutionKind.VIRTUAL

    @property
    def is_found(self) -> bool:
        return self.kind is not ResolutionKind.NOT_FOUND

    @property
    def is_degraded(self) -> bool:
        """True when anything other than an exact YARD match was used."""
        return self.is_found and self.rule is not YardMatchRule.EXACT_TYPE

    @property
    def industry_id(self) -> Optional[str]:
        return self.industry.id if self.industry is not None else None

    def describe(self) -> str:
        if not self.is_found:
            return f"no yard for location '{self.location_id}'"
        return f"'{self.industry.name}' ({self.industry.id}) via {self.rule.value}"


_MATCH_CHAIN: List[tuple] = [
    (YardMatchRule.EXACT_TYPE,
     lambda industry: industry.industry_type == IndustryType.YARD),
    (YardMatchRule.TYPE_CASE_INSENSITIVE,
     lambda industry: industry.type_name.upper() == IndustryType.YARD.value),
    (YardMatchRule.NAME_CONTAINS_YARD,
     lambda industry: "yard" in (industry.name or "").lower()),
    (YardMatchRule.ANY_INDUSTRY,
     lambda industry: True),
]


class YardResolver:
    """Resolves yard location ids to industries over a fixed snapshot."""

    def __init__(
        self,
        industries: List[Industry],
        locations: List[Location],
        virtual_prefix: str = VIRTUAL_YARD_PREFIX,
    ):
        """
        Initialize the resolver.

        Args:
            industries: Every industry on the layout
            locations: Every location on the layout
            virtual_prefix: Id prefix for synthesized yard industries
        """
        self.virtual_prefix = virtual_prefix
        self._locations: Dict[str, Location] = {location.id: location for location in locations}
        self._industries_by_location: Dict[str, List[Industry]] = {}
        for industry in industries:
            self._industries_by_location.setdefault(industry.location_id, []).append(industry)

    def get_location(self, location_id: str) -> Optional[Location]:
        return self._locations.get(location_id)

    def industries_at(self, location_id: str) -> List[Industry]:
        return list(self._industries_by_location.get(location_id, []))

    def resolve(self, location_id: str) -> YardResolution:
        """
        Find the yard industry at a location.

        Tries, in order: exact YARD type, YARD in any casing, a name
        containing "yard", any industry at all, and finally a synthesized
        virtual yard. Returns NOT_FOUND only when the location is unknown.
        """
        location = self._locations.get(location_id)
        if location is None:
            logger.warning(f"Yard location '{location_id}' not found")
            return YardResolution.not_found(location_id)

        candidates = self._industries_by_location.get(location_id, [])
        for rule, matches in _MATCH_CHAIN:
            industry = self._first(candidates, matches)
            if industry is not None:
                resolution = YardResolution.resolved(location_id, industry, rule)
                if resolution.is_degraded:
                    logger.warning(
                        f"Yard at '{location.get_display_name()}' resolved by fallback: "
                        f"{resolution.describe()}"
                    )
                return resolution

        virtual = self.make_virtual_yard(location)
        logger.warning(
            f"No industries at '{location.get_display_name()}', using virtual yard '{virtual.id}'"
        )
        return YardResolution.virtual(location_id, virtual)

    def make_virtual_yard(self, location: Location) -> Industry:
        """Synthesize a placeholder yard industry for a location."""
        return Industry(
            id=f"{self.virtual_prefix}{location.id}",
            name=f"{location.station_name} Yard",
            location_id=location.id,
            industry_type=IndustryType.YARD,
            block_name=location.block,
            tracks=[],
            owner_id=location.owner_id,
            is_virtual=True,
        )

    @staticmethod
    def _first(candidates: List[Industry], matches: Callable[[Industry], bool]) -> Optional[Industry]:
        for industry in candidates:
            if matches(industry):
                return industry
        return None
