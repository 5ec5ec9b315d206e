"""
Pytest configuration file
Shared fixtures: a small feature table and a fitted model on disk
"""

import sys
from pathlib import Path

import joblib
import numpy as np
import pytest
from sklearn.linear_model import LinearRegression

PROJECT_ROOT = Path(__file__).parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


FEATURE_ROWS = [
    "Chicago,12.5,0.65,1013.0",
    "  Denver ,8.0,0.30,1020.5",
    "Seattle,10.0,0.85,1009.0",
    "OnlyCity",
    "Boston,3.0,bad,1011.0",
    "",
]


@pytest.fixture(scope="session")
def project_root():
    """Provide the project root directory"""
    return PROJECT_ROOT


@pytest.fixture
def features_csv(tmp_path):
    """Feature table with good rows, a short row, a bad value and a blank line"""
    path = tmp_path / "weather-dataset.csv"
    path.write_text("\n".join(FEATURE_ROWS) + "\n", encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def fitted_model():
    """Two-output linear model over three features"""
    X = np.array([
        [12.5, 0.65, 1013.0],
        [8.0, 0.30, 1020.5],
        [10.0, 0.85, 1009.0],
        [20.0, 0.40, 1005.0],
        [15.0, 0.55, 1015.0],
    ])
    y = np.column_stack([X[:, 0] * 0.9 + 1.0, X[:, 1] * 100.0])
    return LinearRegression().fit(X, y)


@pytest.fixture
def model_path(tmp_path, fitted_model):
    path = tmp_path / "weather-model.joblib"
    joblib.dump(fitted_model, path)
    return path


def pytest_configure(config):
    """Configure pytest settings"""
    config.addinivalue_line(
        "markers", "integration: test loads artifacts from disk end to end"
    )
