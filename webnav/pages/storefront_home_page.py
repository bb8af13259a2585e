"""Homepage of the e-commerce demo store."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from playwright.sync_api import expect

from .home_page import HomePage


class StorefrontHomePage(HomePage):
    variant = "storefront"

    def verify_footer_section_visible(self, section_name: str) -> None:
        heading = self.footer.get_by_text(
            re.compile(rf"^\s*{re.escape(section_name)}\s*$", re.IGNORECASE)
        ).first
        expect(heading).to_be_visible(timeout=self.timeout)

    def verify_footer_sections_visible(self, section_names: Optional[Iterable[str]] = None) -> None:
        """Verify footer column headings, defaulting to the site profile's list."""
        if section_names is None:
            section_names = self.site.footer_sections if self.site else []
        for section_name in section_names:
            self.verify_footer_section_visible(section_name)

    def open_category(self, tab_name: str) -> None:
        """Click a category tab and wait until its page is loaded."""
        self.click_navigation_tab(tab_name)
        path = self.site.path_for_tab(tab_name) if self.site else None
        if path:
            self.page.wait_for_url(f"**{path}*")
        self.page.wait_for_load_state("domcontentloaded")
