# conftest.py

pytest_plugins = [
    "demoshop_e2e.fixtures.browser",
    "demoshop_e2e.reporting.plugin",
]
