"""Helper script to run the unit tests with coverage programmatically."""

import sys
from pathlib import Path
import coverage
import pytest

# Add project root to Python path to ensure modules are found
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# Measure the library and the step definitions that bind it to Gherkin
cov = coverage.Coverage(source=["webnav", "tests.step_defs"])
cov.start()

# Unit tests only; they need neither a browser nor network access
exit_code = pytest.main(["tests/unit/"])

cov.stop()
cov.save()

cov.report(show_missing=True)
sys.exit(exit_code)
