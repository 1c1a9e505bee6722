"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator instance."""
    from pocketcalc import Calculator

    return Calculator()


@pytest.fixture
def pending_division():
    """Provide the state after typing ``5 /``."""
    from pocketcalc import DEFAULT_STATE, append_digit, choose_operator

    return choose_operator(append_digit(DEFAULT_STATE, "5"), "/")


@pytest.fixture
def error_state(pending_division):
    """Provide the state after ``5 / 0 =``."""
    from pocketcalc import compute_result

    return compute_result(pending_division)
