"""
Model Loading Module
One-time startup: loads the feature table and the model into an AppContext
"""
import logging
from dataclasses import dataclass
from typing import Optional

from . import config
from .errors import DataLoadError, ModelLoadError
from .feature_store import BAD_VALUE_POLICIES, FeatureStore
from .model_artifact import ModelArtifact
from .predictor import CityWeatherPredictor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContext:
    """Container for the artifacts loaded at startup"""
    feature_store: FeatureStore
    model: ModelArtifact

    @property
    def is_ready(self) -> bool:
        return self.feature_store.is_loaded and self.model.is_ready


def load_artifacts(features_path: Optional[str] = None,
                   model_path: Optional[str] = None,
                   on_bad_value: Optional[str] = None) -> AppContext:
    """
    Load all artifacts, degrading instead of failing

    A table that cannot be read leaves an empty store; a model that cannot
    be loaded leaves the artifact unavailable. Both are logged.

    Args:
        features_path: Feature table CSV (defaults to config.FEATURES_PATH)
        model_path: Serialized model (defaults to config.MODEL_PATH)
        on_bad_value: Policy for non-numeric feature fields

    Returns:
        AppContext, always
    """
    features_path = features_path or config.FEATURES_PATH
    model_path = model_path or config.MODEL_PATH
    on_bad_value = on_bad_value or config.BAD_VALUES
    if on_bad_value not in BAD_VALUE_POLICIES:
        logger.error("Unknown bad-value policy %r, using 'skip'", on_bad_value)
        on_bad_value = "skip"

    try:
        feature_store = FeatureStore.load(features_path, on_bad_value=on_bad_value)
    except DataLoadError:
        logger.exception("Error initializing feature table from %s", features_path)
        feature_store = FeatureStore.empty(source=features_path)

    try:
        model = ModelArtifact.load(model_path)
    except ModelLoadError as e:
        logger.exception("Error loading model from %s", model_path)
        model = ModelArtifact.unavailable(path=model_path, reason=str(e))

    return AppContext(feature_store=feature_store, model=model)


def create_predictor(features_path: Optional[str] = None,
                     model_path: Optional[str] = None,
                     on_bad_value: Optional[str] = None) -> CityWeatherPredictor:
    """
    Create a ready-to-use predictor instance

    Returns:
        CityWeatherPredictor; queries report an unavailable model rather than raising
    """
    context = load_artifacts(features_path, model_path, on_bad_value)
    return CityWeatherPredictor(feature_store=context.feature_store, model=context.model)
