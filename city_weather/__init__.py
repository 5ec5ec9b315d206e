"""
city_weather package
Per-city weather prediction from a feature table and a pretrained model
"""
from .errors import (
    CityNotFoundError,
    DataLoadError,
    InferenceError,
    InvalidInputError,
    ModelLoadError,
    ModelUnavailableError,
)
from .feature_store import FeatureStore
from .model_artifact import ModelArtifact
from .model_loader import AppContext, create_predictor, load_artifacts
from .predictor import CityWeatherPredictor, PredictionResult

__version__ = "0.1.0"

__all__ = [
    'AppContext',
    'CityNotFoundError',
    'CityWeatherPredictor',
    'DataLoadError',
    'FeatureStore',
    'InferenceError',
    'InvalidInputError',
    'ModelArtifact',
    'ModelLoadError',
    'ModelUnavailableError',
    'PredictionResult',
    'create_predictor',
    'load_artifacts',
]
