"""
Live API test fixtures.

These tests hit the REAL Peloton API to check that response shapes still
match what peloton_client.model expects. They require a valid session.

Provide credentials via environment variables:
  PELOTON_SESSION_TOKEN = "peloton_session_id=..." (+ PELOTON_USER_ID)
  or
  PELOTON_USERNAME      = account username or email
  PELOTON_PASSWORD      = account password

Run: pytest tests/spec/ -v
"""

import os

import pytest

from peloton_client import Peloton
from peloton_client.client_factory import create_client_from_env


@pytest.fixture(scope="session")
def peloton():
    """
    Logged-in Peloton facade shared by the whole session.
    Skips all live tests if no credentials are available.
    """
    if not (
        os.environ.get("PELOTON_SESSION_TOKEN")
        or (os.environ.get("PELOTON_USERNAME") and os.environ.get("PELOTON_PASSWORD"))
    ):
        pytest.skip("No Peloton credentials: set PELOTON_SESSION_TOKEN or PELOTON_USERNAME+PELOTON_PASSWORD")

    peloton = Peloton(create_client_from_env())
    if peloton.client.user_id is None:
        peloton.set_token(peloton.get_token(), user_id=peloton.me()["id"])
    yield peloton
    peloton.close()


@pytest.fixture(scope="session")
def latest_workout(peloton):
    page = peloton.workouts(limit=1)
    if not page.get("data"):
        pytest.skip("No workouts found")
    return page["data"][0]
