import pytest

from safcost.pathways import PathwayId
from safcost.scenario import Scenario, default_scenario


@pytest.fixture
def scenario():
    """Fresh scenario with the application defaults."""
    return Scenario()


@pytest.fixture
def hefa():
    """HEFA at 100 kton/yr with the Baseline preset."""
    return default_scenario(PathwayId.HEFA)
