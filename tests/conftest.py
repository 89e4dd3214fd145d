"""Shared test fixtures."""
import pytest

from alloylab import create_app
from alloylab.services.comparison_service import REFERENCE_COMPOSITION
from alloylab.services.composition import DEFAULT_COMPOSITION
from alloylab.services.snapshot_service import clear_cache


@pytest.fixture(scope='session')
def app():
    """Create application for the test session."""
    app = create_app('testing')
    yield app


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture(autouse=True)
def fresh_snapshot_cache():
    """Each test starts with an empty evaluation cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def default_comp():
    """Default design: 316L-type stainless with V/Ti microalloying."""
    return dict(DEFAULT_COMPOSITION)


@pytest.fixture
def pure_iron():
    return {'Fe': 100.0}


@pytest.fixture
def plain_carbon_comp():
    """Low-carbon plain steel with Ms above every quench temperature."""
    return {'C': 0.20, 'Mn': 0.50, 'Si': 0.25}


@pytest.fixture
def sigma_prone_comp():
    """High Cr, low Ni, Mo-bearing composition."""
    return {'Cr': 20.0, 'Ni': 5.0, 'Mo': 3.0}


@pytest.fixture
def baseline_comp():
    """Reference 304-type stainless used for comparison deltas."""
    return dict(REFERENCE_COMPOSITION)
