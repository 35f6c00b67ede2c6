# tests/e2e/conftest.py

import pytest

from demoshop_e2e.exceptions import DataFileError


@pytest.fixture
def logged_in_journey(journey):
    """A journey logged in as the stored user, registering one first when no run has yet."""
    try:
        journey.context.require_credentials()
    except DataFileError:
        journey.log.warning("No stored credentials; registering a new user")
        journey.register_new_user()
        return journey
    journey.pages.home.navigate_to_home()
    journey.login()
    return journey
