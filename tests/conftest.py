"""Pytest configuration and shared fixtures for door hardware tests."""

from __future__ import annotations

import pytest

from doorhardware.domain.placement import HardwarePlacementService
from doorhardware.domain.value_objects import DoorLeafConfig, HingeSide


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared leaf fixtures
# =============================================================================


@pytest.fixture
def standard_leaf() -> DoorLeafConfig:
    """A 2000 x 900 x 40mm hollow-core leaf hung on the left."""
    return DoorLeafConfig(height=2000, width=900, leaf_thickness=40)


@pytest.fixture
def tall_leaf() -> DoorLeafConfig:
    """A 2400mm leaf, tall enough to need three hinges."""
    return DoorLeafConfig(height=2400, width=900, leaf_thickness=44)


@pytest.fixture
def right_hung_leaf() -> DoorLeafConfig:
    return DoorLeafConfig(
        height=2000, width=900, leaf_thickness=40, hinge_side=HingeSide.RIGHT
    )


@pytest.fixture
def service() -> HardwarePlacementService:
    """Placement service with the standard configuration."""
    return HardwarePlacementService()
