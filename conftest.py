"""Root conftest.py - step discovery and scenario lifecycle for pytest-bdd.

- Every ``tests/step_defs/*_steps.py`` module is loaded as a plugin so its
  steps are visible to all feature tests.
- Suite hooks run the ``ScenarioLifecycle`` before/after the session.
- The ``world`` fixture gives each scenario its own World and browser, and
  releases them when the scenario ends, whatever the outcome.
- Scenarios tagged ``@e2e`` hit live websites and are skipped unless
  ``--run-e2e`` (or ``RUN_E2E=true``) is given.
"""

import logging
import os
from pathlib import Path

import pytest

from webnav import ScenarioInfo, ScenarioLifecycle, ScenarioStatus, WorldParameters
from webnav.config import BROWSER_ENGINES

logger = logging.getLogger(__name__)

STEP_DEFS_DIR = Path(__file__).parent / "tests" / "step_defs"

pytest_plugins = [
    f"tests.step_defs.{step_file.stem}"
    for step_file in sorted(STEP_DEFS_DIR.glob("*_steps.py"))
]

LIFECYCLE_KEY = pytest.StashKey[ScenarioLifecycle]()
E2E_MARKER = "e2e"


def pytest_addoption(parser):
    group = parser.getgroup("webnav", "browser end-to-end scenarios")
    group.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run scenarios tagged @e2e against the live websites",
    )
    group.addoption("--site", default=None, help="site profile key or name (default: storefront)")
    group.addoption(
        "--site-base-url", default=None, help="override the base URL of the selected site"
    )
    group.addoption(
        "--default-timeout", type=int, default=None, help="default Playwright timeout in ms"
    )
    group.addoption(
        "--browser-engine", choices=BROWSER_ENGINES, default=None, help="browser to launch"
    )


def _e2e_enabled(config) -> bool:
    return config.getoption("run_e2e") or os.environ.get("RUN_E2E", "").lower() == "true"


def pytest_configure(config):
    parameters = WorldParameters.from_pytest_config(config)
    config.stash[LIFECYCLE_KEY] = ScenarioLifecycle(parameters)


def pytest_sessionstart(session):
    if _e2e_enabled(session.config):
        session.config.stash[LIFECYCLE_KEY].before_all()


def pytest_sessionfinish(session, exitstatus):  # noqa: ARG001
    if _e2e_enabled(session.config):
        session.config.stash[LIFECYCLE_KEY].after_all()


def pytest_collection_modifyitems(config, items):
    if _e2e_enabled(config):
        return
    skip_e2e = pytest.mark.skip(reason="live website scenario; use --run-e2e to run")
    for item in items:
        if E2E_MARKER in item.keywords:
            item.add_marker(skip_e2e)


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):  # noqa: ARG001
    """Keep each phase's report on the item so fixtures can read the outcome."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


def _scenario_info(node) -> ScenarioInfo:
    scenario = getattr(getattr(node, "obj", None), "__scenario__", None)
    name = getattr(scenario, "name", None) or node.name
    tags = tuple(marker.name for marker in node.iter_markers())
    return ScenarioInfo(name=name, tags=tags)


def _scenario_status(node) -> ScenarioStatus:
    setup = getattr(node, "rep_setup", None)
    call = getattr(node, "rep_call", None)
    if (setup is not None and setup.failed) or (call is not None and call.failed):
        return ScenarioStatus.FAILED
    if call is None or call.skipped:
        return ScenarioStatus.SKIPPED
    return ScenarioStatus.PASSED


@pytest.fixture(scope="session")
def scenario_lifecycle(pytestconfig) -> ScenarioLifecycle:
    return pytestconfig.stash[LIFECYCLE_KEY]


@pytest.fixture(scope="session")
def world_parameters(scenario_lifecycle) -> WorldParameters:
    return scenario_lifecycle.parameters


@pytest.fixture
def world(request, scenario_lifecycle):
    """Scenario-scoped World with a running browser.

    The browser is closed after the scenario even if it failed; a failed
    scenario gets a screenshot attached to its report properties.
    """
    scenario = _scenario_info(request.node)
    world = scenario_lifecycle.before_each(scenario)

    yield world

    scenario_lifecycle.after_each(world, scenario, _scenario_status(request.node))
    for attachment in scenario.attachments:
        request.node.user_properties.append(
            (attachment.media_type, str(attachment.path or attachment.name))
        )
