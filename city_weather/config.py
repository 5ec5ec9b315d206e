import os

# Artifact locations, overridable from the environment
ARTIFACT_DIR = os.getenv("CITY_WEATHER_ARTIFACT_DIR", "OUTPUTS")
FEATURES_PATH = os.getenv("CITY_WEATHER_FEATURES", os.path.join(ARTIFACT_DIR, "weather-dataset.csv"))
MODEL_PATH = os.getenv("CITY_WEATHER_MODEL", os.path.join(ARTIFACT_DIR, "weather-model.joblib"))

# skip | nan | drop_row, see FeatureStore.load
BAD_VALUES = os.getenv("CITY_WEATHER_BAD_VALUES", "skip")

LOG_LEVEL = os.getenv("CITY_WEATHER_LOG_LEVEL", "INFO")
