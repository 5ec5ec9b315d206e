"""
Error Types
Load-time failures and query-time prediction errors
"""


class CityWeatherError(Exception):
    """Base class for all city_weather errors"""


class ArtifactLoadError(CityWeatherError):
    """An artifact could not be loaded at startup"""


class DataLoadError(ArtifactLoadError):
    """Feature table could not be opened or read"""


class ModelLoadError(ArtifactLoadError):
    """Model file is missing, empty, or could not be deserialized"""


class PredictionError(CityWeatherError):
    """
    Query-time error with a fixed user-facing message
    Never escapes CityWeatherPredictor.predict
    """
    kind = "prediction_error"
    user_message = "Prediction could not be made."

    def render(self) -> str:
        return self.user_message


class ModelUnavailableError(PredictionError):
    kind = "model_unavailable"
    user_message = "Error: Model is not loaded. Please check the model artifact."


class InvalidInputError(PredictionError):
    kind = "invalid_input"
    user_message = "Invalid city name."


class CityNotFoundError(PredictionError):
    kind = "city_not_found"
    user_message = "City data not found!"


class InferenceError(PredictionError):
    """Model raised while computing the output"""
    kind = "inference_failed"
    user_message = "Error: Prediction failed"

    def render(self) -> str:
        detail = str(self.__cause__ or self)
        return f"{self.user_message}: {detail}" if detail else self.user_message
