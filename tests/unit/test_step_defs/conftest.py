"""Unit test conftest for step definitions.

Overrides the root ``world`` fixture with a ``MockWorld`` whose page
objects are mocks, so step functions can be called directly without a
browser.
"""

from unittest.mock import MagicMock

import pytest

from webnav.pages import CorporateHomePage, StorefrontHomePage
from webnav.sites import load_site_profiles
from tests.unit.mocks import MockWorld


@pytest.fixture
def storefront_home() -> MagicMock:
    """Mock storefront homepage object."""
    return MagicMock(spec=StorefrontHomePage)


@pytest.fixture
def corporate_home() -> MagicMock:
    """Mock corporate homepage object."""
    return MagicMock(spec=CorporateHomePage)


@pytest.fixture
def world(storefront_home: MagicMock) -> MockWorld:
    """Mock World bound to the storefront homepage.

    Provides a clean, isolated world for each unit test.
    """
    return MockWorld(home_page=storefront_home)


@pytest.fixture
def corporate_world(corporate_home: MagicMock) -> MockWorld:
    return MockWorld(home_page=corporate_home, site=load_site_profiles()["corporate"])
