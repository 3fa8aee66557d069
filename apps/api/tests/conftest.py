"""
Pytest configuration and fixtures

The engine is pure, so fixtures are plain values: a profile, a fixed "now"
and a plan generated from them. Nothing touches the network or disk.
"""
import pytest
import sys
import os

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.plan_engine import generate_plan
from tests.profile_factory import FIXED_NOW, make_profile


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def profile():
    return make_profile()


@pytest.fixture
def plan(profile, fixed_now):
    return generate_plan(profile, now=fixed_now)
