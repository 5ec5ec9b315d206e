"""
Model Artifact Module
Loads a pretrained model from disk and runs single-row inference
"""
import logging
import os
from typing import Optional, Sequence, Union

import joblib
import numpy as np

from .errors import InferenceError, ModelLoadError, ModelUnavailableError

logger = logging.getLogger(__name__)


class ModelArtifact:
    """
    Loaded model in one of two states: unavailable or ready
    Only load() produces a ready artifact; nothing moves it back
    """

    def __init__(self, path: Optional[str] = None, reason: Optional[str] = None):
        # Always starts unavailable; load() is the only way to attach a model
        self._model = None
        self.path = path
        self.reason = reason

    @classmethod
    def unavailable(cls, path: Optional[str] = None, reason: Optional[str] = None) -> "ModelArtifact":
        return cls(path=path, reason=reason)

    @classmethod
    def load(cls, path: Union[str, "os.PathLike[str]"]) -> "ModelArtifact":
        """
        Deserialize a model saved with joblib

        Args:
            path: Model file (e.g. weather-model.joblib)

        Returns:
            Ready ModelArtifact

        Raises:
            ModelLoadError: file missing, empty, unreadable, or not a model
        """
        path = os.fspath(path)
        if not os.path.isfile(path):
            raise ModelLoadError(f"Model file is missing: {path}")
        if os.path.getsize(path) == 0:
            raise ModelLoadError(f"Model file is empty: {path}")

        try:
            model = joblib.load(path)
        except Exception as e:
            raise ModelLoadError(f"Error loading model {path}: {e}") from e

        if not callable(getattr(model, "predict", None)):
            raise ModelLoadError(f"Object in {path} has no predict() method: {type(model).__name__}")

        logger.info("Model successfully loaded from %s (%s)", path, type(model).__name__)
        artifact = cls(path=path)
        artifact._model = model
        return artifact

    @property
    def is_ready(self) -> bool:
        return self._model is not None

    def infer(self, features: Sequence[float]) -> np.ndarray:
        """
        Run the model on one feature vector

        Args:
            features: Feature vector for a single city

        Returns:
            Flat float array of model outputs
        """
        if not self.is_ready:
            raise ModelUnavailableError(self.reason or "model artifact is not loaded")

        X = np.asarray(features, dtype=float).reshape(1, -1)
        try:
            output = np.asarray(self._model.predict(X), dtype=float).reshape(-1)
        except Exception as e:
            # Includes non-numeric outputs such as class labels
            raise InferenceError(f"Model prediction failed: {e}") from e
        return output
