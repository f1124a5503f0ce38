"""
Version information for Yardmaster.

Centralized version management for the application and its build metadata.
"""

# Core application information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "Yardmaster"
__app_display_name__ = "Yardmaster - Car Positions & Train Building"
__description__ = "Car position tracking and switchlist train building for model railroads"

# Feature information
__features__ = [
    "Single-occupancy car position index",
    "Yard resolution with fallback and virtual yards",
    "Random destination assignment along a route",
    "Pickup routing to the terminating yard",
    "Forward-only switchlist workflow",
]

__python_version_required__ = "3.9+"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_build_metadata() -> dict:
    """Get metadata for packaging."""
    return {
        "app_name": __app_name__,
        "version": __version__,
        "description": __description__,
        "features": list(__features__),
    }
