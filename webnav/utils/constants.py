"""Test constants.

Timing, viewport and report-location values. Per-site facts (URLs, tab
paths, footer sections) live in the site profiles, ``webnav/sites.yaml``.
"""

# Milliseconds
TIMEOUTS = {
    "DEFAULT": 30000,
    "SHORT": 5000,
    "MEDIUM": 15000,
    "LONG": 60000,
    "PAGE_LOAD": 30000,
    "ELEMENT_VISIBLE": 10000,
    "ANIMATION": 1000,
}

VIEWPORTS = {
    "DESKTOP": {"width": 1920, "height": 1080},
    "LAPTOP": {"width": 1366, "height": 768},
    "TABLET": {"width": 768, "height": 1024},
    "MOBILE": {"width": 375, "height": 812},
}

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

REPORTS_DIR = "reports"
SCREENSHOTS_DIR = "reports/screenshots"
