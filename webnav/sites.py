"""Site profiles.

Selectors and navigation paths for each target site are loaded from YAML so
that they can be updated when a site changes without touching the page
objects. The packaged ``sites.yaml`` is used unless ``WEBNAV_SITES_FILE``
points at another file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import UnknownSiteError

DEFAULT_SITES_FILE = Path(__file__).parent / "sites.yaml"
SITES_FILE_ENV = "WEBNAV_SITES_FILE"


@dataclass(frozen=True)
class SiteProfile:
    """Where one site keeps its navigation menu and footer."""

    key: str
    name: str
    variant: str
    base_url: str
    navigation_container: str = "header"
    navigation_tabs: Dict[str, str] = field(default_factory=dict)
    footer: str = "footer"
    consent_buttons: List[str] = field(default_factory=list)
    loading_indicators: str = '[class*="loading"], [class*="spinner"]'
    footer_sections: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, key: str, data: Dict[str, Any]) -> "SiteProfile":
        missing = [name for name in ("base_url", "variant") if not data.get(name)]
        if missing:
            raise ValueError(f"Site profile '{key}' is missing: {', '.join(missing)}")
        return cls(
            key=key,
            name=data.get("name", key),
            variant=data["variant"],
            base_url=data["base_url"].rstrip("/"),
            navigation_container=data.get("navigation_container", "header"),
            navigation_tabs=dict(data.get("navigation_tabs") or {}),
            footer=data.get("footer", "footer"),
            consent_buttons=list(data.get("consent_buttons") or []),
            loading_indicators=data.get(
                "loading_indicators", '[class*="loading"], [class*="spinner"]'
            ),
            footer_sections=list(data.get("footer_sections") or []),
        )

    def path_for_tab(self, tab_name: str) -> Optional[str]:
        """Path the named tab links to, or None when the tab is not mapped."""
        return self.navigation_tabs.get(tab_name)

    def matches(self, key_or_name: str) -> bool:
        wanted = key_or_name.strip().lower()
        return wanted in (self.key.lower(), self.name.lower())


def _sites_file(path: Optional[Path | str]) -> Path:
    if path is not None:
        return Path(path)
    override = os.environ.get(SITES_FILE_ENV)
    if override:
        return Path(override)
    return DEFAULT_SITES_FILE


def load_site_profiles(path: Optional[Path | str] = None) -> Dict[str, SiteProfile]:
    """Load every site profile from YAML.

    :param path: File to read; defaults to ``$WEBNAV_SITES_FILE`` or the
        packaged ``sites.yaml``
    :return: Profiles keyed by their YAML key, in file order
    """
    sites_file = _sites_file(path)
    with open(sites_file, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{sites_file} must contain a mapping of site profiles")

    return {key: SiteProfile.from_dict(key, data or {}) for key, data in raw.items()}


def get_site_profile(
    key_or_name: str, profiles: Optional[Dict[str, SiteProfile]] = None
) -> SiteProfile:
    """Find a profile by YAML key or display name (case-insensitive)."""
    if profiles is None:
        profiles = load_site_profiles()

    if key_or_name in profiles:
        return profiles[key_or_name]
    for profile in profiles.values():
        if profile.matches(key_or_name):
            return profile
    raise UnknownSiteError(key_or_name, list(profiles))
