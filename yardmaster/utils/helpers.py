"""
Helper utility functions for Yardmaster.

This module contains formatting helpers for build results and car routing.
"""

from typing import Dict, List, Optional

from ..core.models.industry import Industry
from ..core.models.location import Location
from ..core.models.rolling_stock import RollingStock
from ..core.services.train_builder import BuildResult


def pluralize(count: int, noun: str) -> str:
    """
    Format a count with a noun.

    Args:
        count: Number of items
        noun: Singular noun

    Returns:
        str: e.g. "1 car", "3 cars"
    """
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def format_destination(
    car: RollingStock,
    industries: Dict[str, Industry],
    locations: Dict[str, Location],
) -> str:
    """
    Format where a car is headed for display.

    Args:
        car: Car to describe
        industries: Industry lookup by id
        locations: Location lookup by id

    Returns:
        str: "Location - Industry", "Location - Industry via Fiddle Yard" for
        cars routed off the layout, or "Unassigned" when the car has none
    """
    if car.destination is None:
        return "Unassigned"

    immediate = car.destination.immediate_destination
    final = car.destination.final_destination
    if final is None:
        return _describe_stop(immediate.location_id, immediate.industry_id, industries, locations)

    staging = locations.get(immediate.location_id)
    staging_name = staging.get_display_name() if staging else "Unknown"
    return f"{_describe_stop(final.location_id, final.industry_id, industries, locations)} via {staging_name}"


def _describe_stop(
    location_id: str,
    industry_id: str,
    industries: Dict[str, Industry],
    locations: Dict[str, Location],
) -> str:
    location = locations.get(location_id)
    industry = industries.get(industry_id)
    location_name = location.get_display_name() if location else "Unknown"
    industry_name = industry.name if industry else "Unknown"
    return f"{location_name} - {industry_name}"


def format_build_summary(result: BuildResult) -> List[str]:
    """
    Summarize a build the way a crew reads it.

    Args:
        result: Result of a train build

    Returns:
        List[str]: Summary lines
    """
    origin_name = result.origin_yard.industry.name if result.origin_yard.industry else "origin yard"
    lines = [
        f"{pluralize(len(result.departing_ids), 'car')} assigned from {origin_name}",
        f"{pluralize(len(result.pickup_ids), 'car')} picked up from industries along the route",
        f"{pluralize(len(result.available), 'car')} left available",
    ]
    if result.virtual_industry_ids:
        lines.append(f"Virtual yards used: {', '.join(result.virtual_industry_ids)}")
    return lines


def group_cars_by_destination(cars: List[RollingStock]) -> Dict[Optional[str], List[RollingStock]]:
    """
    Group cars by immediate destination industry id.

    Cars without a destination are grouped under None.
    """
    groups: Dict[Optional[str], List[RollingStock]] = {}
    for car in cars:
        key = car.destination.immediate_destination.industry_id if car.destination else None
        groups.setdefault(key, []).append(car)
    return groups
