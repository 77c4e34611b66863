"""
XYZ Bank test suites.

  - unit: framework tests against fake Playwright pages (no browser)
  - ui_testing: page objects, fixtures and live browser scenarios

Kept importable so `run_tests.py` and the unit tests can reach the page
objects as `testsuites.ui_testing.pages`.
"""
