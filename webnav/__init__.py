"""Page objects, scenario world and lifecycle hooks for browser BDD suites."""

from .config import WorldParameters
from .exceptions import (
    BrowserNotStartedError,
    NavigationTabNotFoundError,
    UnknownSiteError,
    WebNavError,
)
from .lifecycle import ScenarioInfo, ScenarioLifecycle, ScenarioStatus
from .sites import SiteProfile, get_site_profile, load_site_profiles
from .world import ScenarioState, World

__version__ = "0.1.0"

__all__ = [
    "BrowserNotStartedError",
    "NavigationTabNotFoundError",
    "ScenarioInfo",
    "ScenarioLifecycle",
    "ScenarioState",
    "ScenarioStatus",
    "SiteProfile",
    "UnknownSiteError",
    "WebNavError",
    "World",
    "WorldParameters",
    "get_site_profile",
    "load_site_profiles",
]
