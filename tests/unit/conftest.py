"""Shared fixtures for unit tests.

Page objects are exercised against ``MockPage`` fakes built from the
packaged site profiles, so no browser is needed.
"""

import pytest

from webnav.sites import load_site_profiles
from tests.unit.mocks import MockPage

STOREFRONT_LINKS = [
    ("/computers", "Computers"),
    ("/electronics", "Electronics"),
    ("/apparel", "Apparel"),
    ("/digital-downloads", "Digital downloads"),
    ("/books", "Books"),
    ("/jewelry", "Jewelry"),
    ("/gift-cards", "Gift Cards"),
]

CORPORATE_LINKS = [
    ("/services", "Services"),
    ("/industries", "Industries"),
    ("/insights", "Insights"),
    ("/about", "About"),
    ("/careers", "Careers"),
    ("/contact", "Contact Us"),
]


@pytest.fixture
def sites():
    return load_site_profiles()


@pytest.fixture
def storefront_site(sites):
    return sites["storefront"]


@pytest.fixture
def corporate_site(sites):
    return sites["corporate"]


@pytest.fixture
def storefront_page() -> MockPage:
    return MockPage(
        links=list(STOREFRONT_LINKS),
        texts=["INFORMATION", "CUSTOMER SERVICE", "MY ACCOUNT", "FOLLOW US"],
        origin="https://demo.nopcommerce.com",
    )


@pytest.fixture
def corporate_page() -> MockPage:
    return MockPage(
        links=list(CORPORATE_LINKS),
        texts=["Contact Us", "GLOBAL HEADQUARTERS", "41 University Drive, Newtown, PA 18940"],
        buttons=["ACCEPT ALL"],
        origin="https://www.epam.com",
    )
