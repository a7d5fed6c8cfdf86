"""
Pytest configuration and fixtures for MCDM engine tests.
"""
import pytest
import numpy as np
import pandas as pd


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from the default configuration."""
    from mcdm_engine.config import reset_config
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_matrix():
    """Supplier selection: price (min), quality (max), delivery days (min), service (max)."""
    return np.array([
        [250.0, 7.0, 12.0, 6.0],
        [200.0, 6.0, 8.0, 7.0],
        [300.0, 9.0, 16.0, 8.0],
        [275.0, 8.0, 10.0, 5.0],
        [225.0, 5.0, 14.0, 9.0],
    ])


@pytest.fixture
def sample_weights():
    return np.array([0.35, 0.25, 0.2, 0.2])


@pytest.fixture
def sample_directions():
    return ['min', 'max', 'min', 'max']


@pytest.fixture
def sample_frame(sample_matrix):
    """Labelled version of ``sample_matrix``."""
    return pd.DataFrame(
        sample_matrix,
        index=['S1', 'S2', 'S3', 'S4', 'S5'],
        columns=['Price', 'Quality', 'Delivery', 'Service'],
    )


@pytest.fixture
def sample_criteria():
    return [
        {'name': 'Price', 'weight': 0.35, 'direction': 'min'},
        {'name': 'Quality', 'weight': 0.25, 'direction': 'max'},
        {'name': 'Delivery', 'weight': 0.2, 'direction': 'min'},
        {'name': 'Service', 'weight': 0.2, 'direction': 'max'},
    ]


@pytest.fixture
def dominant_matrix():
    """A3 is best on every (max) criterion, A1 worst on every criterion."""
    return np.array([
        [1.0, 2.0, 3.0],
        [2.0, 3.0, 4.0],
        [3.0, 4.0, 5.0],
    ])


@pytest.fixture
def random_problems():
    """Seeded random problems with mixed directions."""
    rng = np.random.RandomState(42)
    problems = []
    for _ in range(10):
        n, m = rng.randint(2, 8), rng.randint(1, 6)
        matrix = rng.uniform(0.5, 100.0, size=(n, m))
        weights = rng.uniform(0.0, 1.0, size=m)
        directions = ['max' if flag else 'min' for flag in rng.rand(m) > 0.5]
        problems.append((matrix, weights, directions))
    return problems


@pytest.fixture
def fuzzy_matrix():
    """Three alternatives rated with triangular fuzzy numbers."""
    from mcdm_engine.mcdm.fuzzy import TriangularFuzzyNumber as TFN
    return [
        [TFN(5, 7, 9), TFN(3, 5, 7), TFN(1, 3, 5)],
        [TFN(7, 9, 10), TFN(5, 7, 9), TFN(3, 5, 7)],
        [TFN(3, 5, 7), TFN(1, 3, 5), TFN(5, 7, 9)],
    ]


@pytest.fixture
def sample_payload():
    """Extraction-shaped payload with crisp cells."""
    return {
        'method': 'TOPSIS',
        'criteria': [
            {'name': 'Price', 'weight': 0.4, 'direction': 'min'},
            {'name': 'Quality', 'weight': 0.35, 'direction': 'max'},
            {'name': 'Capacity', 'weight': 0.25, 'direction': 'max'},
        ],
        'alternatives': ['Alpha', 'Beta', 'Gamma'],
        'matrix': [
            [250, 16, 12],
            [200, 16, 8],
            [300, 32, 16],
        ],
        'logicModule': {'aggregation': 'Distance-to-Ideal'},
    }
