"""
Prediction Module
Joins a city name to its features and runs the model
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import numpy as np
import pandas as pd

from .errors import (
    CityNotFoundError,
    InvalidInputError,
    ModelUnavailableError,
    PredictionError,
)
from .feature_store import FeatureStore
from .model_artifact import ModelArtifact
from .utils import format_prediction, is_blank, normalize_city_key

logger = logging.getLogger(__name__)

BATCH_COLUMNS = ['city', 'key', 'ok', 'error', 'message', 'prediction']


@dataclass(frozen=True)
class PredictionResult:
    """
    Outcome of one query: either model output or the error that stopped it
    """
    city: Optional[str]
    key: str = ""
    values: Optional[np.ndarray] = None
    error: Optional[PredictionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """Text shown to the user"""
        if self.error is not None:
            return self.error.render()
        return format_prediction(self.values)

    def to_dict(self) -> Dict:
        return {
            'city': self.city,
            'key': self.key,
            'ok': self.ok,
            'error': self.error.kind if self.error is not None else None,
            'message': self.render(),
            'prediction': self.values.tolist() if self.values is not None else None,
        }


class CityWeatherPredictor:
    """
    Main prediction orchestrator
    Holds no state beyond the two artifacts it was built with
    """

    def __init__(self, feature_store: FeatureStore, model: ModelArtifact):
        self.feature_store = feature_store
        self.model = model

    def evaluate(self, city: Optional[str]) -> PredictionResult:
        """
        Resolve features for a city and run the model

        Args:
            city: City name as typed by the user

        Returns:
            PredictionResult with output values or the failure kind
        """
        key = normalize_city_key(city)
        try:
            # Order matters: model state first, then input, then lookup
            if not self.model.is_ready:
                raise ModelUnavailableError(self.model.reason or "")
            if is_blank(city):
                raise InvalidInputError(repr(city))

            features = self.feature_store.lookup(key)
            if features is None:
                raise CityNotFoundError(key)

            values = self.model.infer(features)
        except PredictionError as e:
            logger.debug("Prediction for %r not made: %s", city, e.kind)
            return PredictionResult(city=city, key=key, error=e)

        logger.debug("Prediction for %r: %s", key, values)
        return PredictionResult(city=city, key=key, values=values)

    def predict(self, city: Optional[str]) -> str:
        """Single query entry point; always returns a message, never raises"""
        return self.evaluate(city).render()

    def predict_batch(self, cities: Iterable[str]) -> pd.DataFrame:
        """
        Generate predictions for multiple cities

        Args:
            cities: City names, one query each

        Returns:
            DataFrame with one row per input city, in input order
        """
        rows = [self.evaluate(city).to_dict() for city in cities]
        # object dtype keeps None as None in the error and prediction columns
        return pd.DataFrame(rows, columns=BATCH_COLUMNS, dtype=object)
