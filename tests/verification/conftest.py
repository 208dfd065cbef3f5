"""
Verification Test Suite for HoopLab.

These tests compare sampled trajectories against the analytical
projectile solution and check the properties every shot must have.

Test Categories:
- Kinematic: apex, flight time, range, aiming
- Properties: unimodal height, symmetry, idempotence, degenerate throws
"""

import pytest

from hooplab.dynamics.launch import LaunchParameters, Target


# -----------------------------------------------------------------------------
# Common Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def classic_throw():
    """10 m/s at 45 deg from the floor, g = 9.8."""
    return LaunchParameters.from_degrees(10.0, 45.0, position=(0.0, 0.0), gravity=9.8)


@pytest.fixture
def classic_basket():
    """Basket on the floor where the classic throw lands."""
    return Target((10.2, 0.0), radius=0.5)
