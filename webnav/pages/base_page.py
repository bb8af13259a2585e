"""BasePage - common functionality shared by every page object.

Covers navigation, visibility checks, waiting and screenshots. Page objects
only ever keep lazy Playwright locators, so each operation re-resolves its
elements against the live page.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..sites import SiteProfile
from ..utils.constants import SCREENSHOTS_DIR, TIMEOUTS
from ..utils.helpers import epoch_ms

logger = logging.getLogger(__name__)

DEFAULT_CONSENT_BUTTONS = (
    'button:has-text("ACCEPT ALL")',
    'button:has-text("Accept All")',
    'button:has-text("Accept")',
)
DEFAULT_LOADING_INDICATORS = '[class*="loading"], [class*="spinner"]'


class BasePage:
    """Base class for all page objects.

    :param page: Playwright page the object is bound to
    :param base_url: Absolute URL that relative paths are resolved against
    :param site: Profile with the site's consent and loading selectors
    :param timeout: Default wait for element checks, in milliseconds
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        site: Optional[SiteProfile] = None,
        timeout: int = TIMEOUTS["ELEMENT_VISIBLE"],
    ):
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.site = site
        self.timeout = timeout

    def navigate(self, path: str = "/") -> None:
        """Navigate to ``path`` relative to the base URL.

        Returns once ``domcontentloaded`` fires; navigation errors are not
        caught.
        """
        if not path.startswith("/"):
            path = f"/{path}"
        url = f"{self.base_url}{path}"
        logger.debug("Navigating to %s", url)
        self.page.goto(url, wait_until="domcontentloaded")

    def wait_for_page_load(self, state: str = "networkidle") -> None:
        self.page.wait_for_load_state(state)

    def is_element_visible(self, locator: Locator, timeout: Optional[int] = None) -> bool:
        """Check whether ``locator`` becomes visible within ``timeout``.

        A timeout is reported as ``False`` instead of failing the step, and
        so is any other automation error (strict-mode violation, closed page).
        """
        if timeout is None:
            timeout = self.timeout
        try:
            locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError:
            return False
        except PlaywrightError as e:
            logger.debug("Visibility check failed: %s", e)
            return False
        return True

    def scroll_to_element(self, locator: Locator) -> None:
        locator.scroll_into_view_if_needed()

    def scroll_to_bottom(self) -> None:
        """Scroll to the end of the document and let the animation settle."""
        self.page.evaluate("window.scrollTo(0, document.body.scrollHeight)")
        self.page.wait_for_timeout(TIMEOUTS["ANIMATION"])

    def wait_and_click(self, locator: Locator) -> None:
        locator.wait_for(state="visible")
        locator.click()

    def get_current_url(self) -> str:
        return self.page.url

    def get_title(self) -> str:
        return self.page.title()

    def take_screenshot(self, name: str, directory: str = SCREENSHOTS_DIR) -> Path:
        """Save a full-page screenshot as ``<directory>/<name>-<epoch-ms>.png``."""
        path = Path(directory) / f"{name}-{epoch_ms()}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path), full_page=True)
        return path

    def handle_cookie_consent(self) -> bool:
        """Accept a cookie consent banner if one shows up.

        Best effort: a missing banner or a failed click never fails the
        scenario.

        :return: True if a consent button was clicked
        """
        buttons = self.site.consent_buttons if self.site else DEFAULT_CONSENT_BUTTONS
        if not buttons:
            return False

        accept_button = self.page.locator(", ".join(buttons)).first
        try:
            if not self.is_element_visible(accept_button, timeout=TIMEOUTS["SHORT"]):
                return False
            accept_button.click()
            self.page.wait_for_timeout(500)
        except PlaywrightError as e:
            logger.debug("Cookie consent not handled: %s", e)
            return False
        logger.info("Accepted cookie consent banner")
        return True

    def wait_for_loading_complete(self) -> bool:
        """Wait for loading spinners to disappear.

        Best effort, bounded by 10 seconds.

        :return: True if no loading indicator is left visible
        """
        selector = (
            self.site.loading_indicators if self.site else DEFAULT_LOADING_INDICATORS
        )
        try:
            self.page.locator(selector).first.wait_for(
                state="hidden", timeout=TIMEOUTS["ELEMENT_VISIBLE"]
            )
        except PlaywrightError as e:
            logger.debug("Loading indicators still present: %s", e)
            return False
        return True
