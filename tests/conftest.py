"""Root-level pytest fixtures for the climraster test suite.

Provides shared configuration fixtures and grid factories. Tests use these
fixtures instead of building raw dict configs.
"""

import pytest
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from climraster.schemas import ParamConfig, UserConfig, resolve_config
from tests.helpers.fake_grid import make_climatology


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_quiet(make_config):
    ...     config = make_config(ensemble_notice=False)
    ...     assert config.raster.ensemble_notice is False
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user)
        return resolve_config(param_config, None)

    return _make


# =============================================================================
# Grid Fixtures
# =============================================================================

@pytest.fixture
def make_grid():
    """Factory for deterministic climatology grids."""
    return make_climatology


@pytest.fixture
def ensemble_grid():
    """Single variable, three members on a 2x2 grid."""
    return make_climatology({"member": 3, "lat": 2, "lon": 2})


@pytest.fixture
def multimember_multigrid():
    """Two variables, four members each, on a 3x3 grid."""
    return make_climatology({"var": 2, "member": 4, "lat": 3, "lon": 3})


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
