"""Shared fixtures."""

import pytest

from launch_sim.config import create_test_config

from designs import make_basic_rocket, make_cockpit_rocket


@pytest.fixture
def basic_rocket():
    return make_basic_rocket()


@pytest.fixture
def offset_rocket():
    return make_basic_rocket(engine_x=10.0)


@pytest.fixture
def cockpit_rocket():
    return make_cockpit_rocket()


@pytest.fixture
def config():
    return create_test_config()
