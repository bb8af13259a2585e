"""Homepage of the corporate marketing site.

Adds the Contact Us section found in the site's footer: the section title,
the global headquarters label and the address block.
"""

from __future__ import annotations

import re
from typing import Mapping

from playwright.sync_api import expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..utils.constants import TIMEOUTS
from .home_page import HomePage

HEADQUARTERS_PATTERN = re.compile("GLOBAL HEADQUARTERS", re.IGNORECASE)


class CorporateHomePage(HomePage):
    variant = "corporate"

    def wait_for_contact_us_visible(self) -> None:
        self.scroll_to_bottom()
        contact_us = self.footer.get_by_text("Contact Us").first
        contact_us.wait_for(state="visible", timeout=TIMEOUTS["MEDIUM"])

    def verify_contact_us_title_visible(self) -> None:
        title = self.footer.get_by_text("Contact Us").first
        expect(title).to_be_visible(timeout=self.timeout)

    def verify_global_headquarters_visible(self) -> None:
        label = self.footer.get_by_text(HEADQUARTERS_PATTERN).first
        expect(label).to_be_visible(timeout=self.timeout)

    def verify_address_contains(self, address_part: str) -> None:
        expect(self.footer).to_contain_text(address_part, timeout=self.timeout)

    def get_headquarters_address(self) -> str:
        """Text of the address block, or the whole footer if there is none."""
        address = self.footer.locator('[class*="address"], [class*="location"]').first
        try:
            address.wait_for(state="visible", timeout=TIMEOUTS["SHORT"])
            return address.text_content() or ""
        except PlaywrightTimeoutError:
            return self.footer.text_content() or ""

    def verify_contact_us_content(self, expected_content: Mapping[str, str]) -> None:
        """Check every expected text is in the footer.

        The section title is matched case-insensitively since the site
        renders it in upper case.
        """
        for content_type, expected_text in expected_content.items():
            expect(self.footer).to_contain_text(
                expected_text,
                timeout=self.timeout,
                ignore_case=content_type == "Section Title",
            )
