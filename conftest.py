"""
Early pytest configuration plugin.

This file is loaded early by pytest to set up the test environment
before any test modules are imported.
"""

import os


def pytest_configure(config):
    """
    Configure pytest and set early test environment variables.

    This hook runs very early in the pytest lifecycle, before test
    collection and imports, ensuring the test environment is ready.
    """
    # Overrides from the developer's shell would leak into config tests
    for name in list(os.environ):
        if name.startswith("RADIUS_VSA_"):
            os.environ.pop(name)

    # Mark that we're in test mode
    os.environ["RADIUS_VSA_ENV"] = "test"
