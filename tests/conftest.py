"""
Shared fixtures: an engine seeded from copies of the packaged data
(day pass 35, night pass 19; holidays 2019-02-18, 2019-02-25, 2019-03-04).
"""
import shutil

import pytest
from fastapi.testclient import TestClient

from lift_pass.config.settings import Settings, get_data_dir
from lift_pass.engine import PricingEngine


@pytest.fixture
def seed_dir(tmp_path):
    """Writable copy of the seed CSVs."""
    for name in ('base_prices.csv', 'holidays.csv'):
        shutil.copy(get_data_dir() / name, tmp_path / name)
    return tmp_path


@pytest.fixture
def settings(seed_dir):
    return Settings(
        base_prices_csv=seed_dir / 'base_prices.csv',
        holidays_csv=seed_dir / 'holidays.csv',
    )


@pytest.fixture
def engine(settings):
    return PricingEngine(settings)


@pytest.fixture
def client(engine):
    """API client wired to the seeded engine."""
    from lift_pass.api.main import app
    from lift_pass.api.state import get_engine

    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
