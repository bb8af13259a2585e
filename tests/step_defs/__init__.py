"""Step definitions package for BDD tests.

Step modules are organized by page area. The root conftest.py discovers
every ``*_steps.py`` module here and loads it as a pytest plugin so that
pytest-bdd can find the steps from any test module.
"""
