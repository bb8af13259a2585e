"""Scenario lifecycle hooks.

The hooks that run before and after the whole suite and around every
scenario. They are plain methods so the runner glue in the root
``conftest.py`` stays thin:

- ``before_all``: create the report and screenshot directories
- ``before_each``: build a World and start its browser
- ``after_each``: screenshot on failure, then always close the browser
- ``after_all``: log the completion marker
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .config import WorldParameters
from .sites import SiteProfile, load_site_profiles
from .utils.constants import REPORTS_DIR
from .utils.helpers import failure_screenshot_name
from .world import ScenarioState, World

logger = logging.getLogger(__name__)

SLOW_TAG = "slow"


class ScenarioStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class Attachment:
    name: str
    media_type: str
    data: bytes
    path: Optional[Path] = None


@dataclass
class ScenarioInfo:
    """What the runner tells the hooks about one scenario."""

    name: str
    tags: Tuple[str, ...] = ()
    attachments: List[Attachment] = field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        return tag.lstrip("@") in {t.lstrip("@") for t in self.tags}

    def attach(
        self, name: str, data: bytes, media_type: str, path: Optional[Path] = None
    ) -> Attachment:
        attachment = Attachment(name=name, media_type=media_type, data=data, path=path)
        self.attachments.append(attachment)
        return attachment


class ScenarioLifecycle:
    """Suite and scenario hooks sharing one set of world parameters.

    :param parameters: Configuration handed to every World
    :param world_factory: Builds a World; replaced in unit tests
    """

    def __init__(
        self,
        parameters: WorldParameters,
        sites: Optional[Dict[str, SiteProfile]] = None,
        world_factory: Optional[Callable[..., World]] = None,
        reports_dir: str = REPORTS_DIR,
    ):
        self.parameters = parameters
        self.sites = sites if sites is not None else load_site_profiles()
        self.world_factory = world_factory or World
        self.reports_dir = Path(reports_dir)
        self.scenarios_run = 0

    def before_all(self) -> None:
        logger.info("Starting E2E test suite")
        self.reports_dir.mkdir(parents=True, exist_ok=True)
        Path(self.parameters.screenshots_dir).mkdir(parents=True, exist_ok=True)

    def before_each(self, scenario: ScenarioInfo) -> World:
        """Build the scenario's World and start its browser."""
        logger.info("Starting scenario: %s", scenario.name)
        world = self.world_factory(
            parameters=self.parameters, sites=self.sites, scenario_name=scenario.name
        )
        world.init_browser()

        if scenario.has_tag(SLOW_TAG):
            world.set_default_timeout(self.parameters.slow_timeout)
            logger.info("Raised default timeout to %dms for slow scenario", self.parameters.slow_timeout)

        self.scenarios_run += 1
        return world

    def after_each(self, world: World, scenario: ScenarioInfo, status: ScenarioStatus) -> None:
        """Capture a screenshot if the scenario failed, then close the browser.

        A failing screenshot is logged only, so the original test failure
        stays the one that is reported.
        """
        logger.info("Scenario '%s' - %s", scenario.name, status.value)
        try:
            if status == ScenarioStatus.FAILED:
                self._capture_failure(world, scenario)
            if world.console_errors:
                logger.info(
                    "Console errors during '%s': %s", scenario.name, "; ".join(world.console_errors)
                )
        finally:
            world.close_browser()
            world.state = ScenarioState.DONE

    def _capture_failure(self, world: World, scenario: ScenarioInfo) -> None:
        name = failure_screenshot_name(scenario.name)
        try:
            screenshot = world.take_screenshot(name)
        except Exception as e:  # noqa: BLE001
            logger.error("Failed to capture screenshot for '%s': %s", scenario.name, e)
            return
        path = world.screenshot_path(name)
        scenario.attach(name, screenshot, "image/png", path=path)
        logger.info("Screenshot saved: %s", path)

    def after_all(self) -> None:
        logger.info(
            "E2E test suite completed (%d scenarios). Reports available in: %s/",
            self.scenarios_run,
            self.reports_dir,
        )
