"""Page objects.

``home_page_for`` picks the HomePage implementation named by a site
profile's ``variant``.
"""

from typing import Dict, Optional, Type

from playwright.sync_api import Page

from ..sites import SiteProfile
from ..utils.constants import TIMEOUTS
from .base_page import BasePage
from .corporate_home_page import CorporateHomePage
from .home_page import HomePage
from .storefront_home_page import StorefrontHomePage

HOME_PAGE_VARIANTS: Dict[str, Type[HomePage]] = {
    CorporateHomePage.variant: CorporateHomePage,
    StorefrontHomePage.variant: StorefrontHomePage,
}


def home_page_for(
    page: Page,
    site: SiteProfile,
    base_url: Optional[str] = None,
    timeout: int = TIMEOUTS["ELEMENT_VISIBLE"],
) -> HomePage:
    """Build the homepage object for ``site``, bound to ``page``."""
    page_class = HOME_PAGE_VARIANTS.get(site.variant, HomePage)
    return page_class(page, base_url=base_url or site.base_url, site=site, timeout=timeout)


__all__ = [
    "BasePage",
    "CorporateHomePage",
    "HOME_PAGE_VARIANTS",
    "HomePage",
    "StorefrontHomePage",
    "home_page_for",
]
