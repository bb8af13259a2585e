"""HomePage - the page object interface shared by every target site.

Encapsulates the top navigation menu and the footer. What differs between
sites (container selectors, tab paths) comes from the ``SiteProfile``; the
per-site subclasses only add operations a single site supports.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..exceptions import NavigationTabNotFoundError
from ..sites import SiteProfile
from ..utils.constants import TIMEOUTS
from .base_page import BasePage

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """Homepage navigation and footer operations for one site."""

    variant = "generic"

    def __init__(
        self,
        page: Page,
        base_url: Optional[str] = None,
        site: Optional[SiteProfile] = None,
        timeout: int = TIMEOUTS["ELEMENT_VISIBLE"],
    ):
        if base_url is None:
            if site is None:
                raise ValueError("HomePage needs a base_url or a site profile")
            base_url = site.base_url
        super().__init__(page, base_url, site=site, timeout=timeout)

        container = site.navigation_container if site else "header"
        footer = site.footer if site else "footer"
        self.navigation_bar: Locator = page.locator(container).first
        self.footer: Locator = page.locator(footer).first
        self.body: Locator = page.locator("body")

    @property
    def site_name(self) -> Optional[str]:
        return self.site.name if self.site else None

    def _navigation_links(self) -> Locator:
        """Every link in the navigation container that is a known tab."""
        paths = list(self.site.navigation_tabs.values()) if self.site else []
        if not paths:
            return self.navigation_bar.locator("a")
        return self.navigation_bar.locator(
            ", ".join(f'a[href*="{path}"]' for path in paths)
        )

    def _navigation_tab(self, tab_name: str) -> Locator:
        """Locator for one tab, by its mapped path or else by its label.

        Path-based lookup avoids matching the duplicate labels of a
        collapsed mobile menu.
        """
        path = self.site.path_for_tab(tab_name) if self.site else None
        if path:
            return self.navigation_bar.locator(f'a[href*="{path}"]').first
        return self.navigation_bar.get_by_role("link", name=tab_name).first

    # -- Page state --

    def open(self) -> None:
        """Navigate to the homepage, wait for it to load and accept cookies."""
        self.navigate("/")
        self.wait_for_page_load()
        self.handle_cookie_consent()

    def wait_for_homepage_ready(self) -> None:
        self.page.wait_for_load_state("domcontentloaded")
        self.page.wait_for_load_state("networkidle")

    # -- Navigation --

    def get_navigation_tab_names(self) -> List[str]:
        """Labels of the navigation tabs, in page order."""
        links = self._navigation_links()
        links.first.wait_for(state="visible", timeout=self.timeout)

        names = []
        for link in links.all():
            text = link.text_content()
            if text and text.strip():
                names.append(text.strip())
        return names

    def verify_navigation_tab_visible(self, tab_name: str) -> None:
        """Verify that a navigation tab exists in the navigation container.

        Only DOM attachment is required, so tabs hidden in an off-screen or
        collapsed menu still count.

        :raises NavigationTabNotFoundError: if the tab never attaches
        """
        tab = self._navigation_tab(tab_name)
        try:
            tab.wait_for(state="attached", timeout=self.timeout)
        except PlaywrightTimeoutError as e:
            raise NavigationTabNotFoundError(tab_name, self.site_name) from e

        if tab.count() == 0:
            raise NavigationTabNotFoundError(tab_name, self.site_name)

    def verify_all_navigation_tabs_visible(self, tab_names: Iterable[str]) -> None:
        """Verify tabs one by one, stopping at the first missing one."""
        for tab_name in tab_names:
            self.verify_navigation_tab_visible(tab_name)

    def click_navigation_tab(self, tab_name: str) -> None:
        tab = self.navigation_bar.locator(f'a:has-text("{tab_name}")').first
        self.wait_and_click(tab)

    # -- Header, footer and page content --

    def verify_link_exists(self, link_text: str) -> None:
        """At least one link with this text exists, visible or not."""
        links = self.page.locator(f'a:has-text("{link_text}")')
        expect(links).not_to_have_count(0, timeout=self.timeout)

    def verify_header_link_visible(self, link_text: str) -> None:
        link = self.navigation_bar.locator(f'a:has-text("{link_text}")').first
        expect(link).to_be_visible(timeout=self.timeout)

    def wait_for_button_visible(self, button_text: str) -> None:
        button = self.page.locator(
            f'a:has-text("{button_text}"), button:has-text("{button_text}")'
        ).first
        button.wait_for(state="visible", timeout=TIMEOUTS["MEDIUM"])

    def scroll_to_footer(self) -> None:
        self.scroll_to_bottom()
        self.footer.wait_for(state="visible", timeout=self.timeout)

    def verify_footer_contains(self, texts: Iterable[str], ignore_case: bool = True) -> None:
        """Every text is present somewhere in the footer."""
        for text in texts:
            expect(self.footer).to_contain_text(
                text, timeout=self.timeout, ignore_case=ignore_case
            )
            logger.info('Footer contains "%s"', text)

    def verify_page_contains(self, content: Mapping[str, str]) -> None:
        """Check each expected text, keyed by content type, is in the page body."""
        for content_type, expected_text in content.items():
            expect(self.body).to_contain_text(expected_text, timeout=self.timeout)
            logger.info('Verified %s: "%s"', content_type, expected_text)
