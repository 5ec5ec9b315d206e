"""
Tests for CityWeatherPredictor query handling
"""

import io

import joblib
import numpy as np
import pytest
from sklearn.linear_model import LogisticRegression

from city_weather.errors import (
    CityNotFoundError,
    InferenceError,
    InvalidInputError,
    ModelUnavailableError,
)
from city_weather.feature_store import FeatureStore
from city_weather.model_artifact import ModelArtifact
from city_weather.predictor import CityWeatherPredictor
from city_weather.utils import format_prediction


@pytest.fixture
def store(features_csv):
    return FeatureStore.load(features_csv)


@pytest.fixture
def predictor(store, model_path):
    return CityWeatherPredictor(store, ModelArtifact.load(model_path))


@pytest.fixture
def offline_predictor(store):
    return CityWeatherPredictor(store, ModelArtifact.unavailable(reason="Model file is missing"))


class TestStatusMessages:

    @pytest.mark.parametrize("city", ["", "   ", "\t\n", None])
    def test_blank_input(self, predictor, city):
        assert predictor.predict(city) == InvalidInputError.user_message

    def test_unknown_city(self, predictor):
        assert predictor.predict("Nonexistent City") == CityNotFoundError.user_message

    @pytest.mark.parametrize("city", ["Chicago", "Nonexistent City", "", "   "])
    def test_model_unavailable_wins(self, offline_predictor, city):
        assert offline_predictor.predict(city) == ModelUnavailableError.user_message

    def test_fixed_message_text(self, predictor, offline_predictor):
        assert predictor.predict("") == "Invalid city name."
        assert predictor.predict("Atlantis") == "City data not found!"
        assert offline_predictor.predict("Chicago") == "Error: Model is not loaded. Please check the model artifact."

    def test_width_mismatch_reported_not_raised(self, predictor):
        # Boston's bad field leaves it with two features; the model wants three
        message = predictor.predict("Boston")
        assert message.startswith("Error: Prediction failed: ")


class TestPrediction:

    def test_output_rendering(self, predictor, fitted_model):
        features = np.array([[12.5, 0.65, 1013.0]])
        expected = fitted_model.predict(features).reshape(-1)
        message = predictor.predict("Chicago")
        assert message.startswith("Predicted Weather Values: [")
        assert message == format_prediction(expected)

    def test_lookup_is_case_insensitive(self, predictor):
        assert predictor.predict(" CHICAGO ") == predictor.predict("chicago")

    def test_repeated_queries_are_identical(self, predictor, store):
        before = store.lookup("denver").copy()
        first = predictor.predict("Denver")
        second = predictor.predict("Denver")
        assert first == second
        np.testing.assert_array_equal(store.lookup("denver"), before)


class TestEvaluate:

    def test_success_result(self, predictor):
        result = predictor.evaluate("Seattle")
        assert result.ok
        assert result.city == "Seattle"
        assert result.key == "seattle"
        assert result.values.shape == (2,)
        assert result.to_dict()['error'] is None

    @pytest.mark.parametrize("city,error_type", [
        ("", InvalidInputError),
        ("Atlantis", CityNotFoundError),
        ("Boston", InferenceError),
    ])
    def test_failure_kinds(self, predictor, city, error_type):
        result = predictor.evaluate(city)
        assert not result.ok
        assert isinstance(result.error, error_type)
        assert result.values is None
        assert result.to_dict()['error'] == error_type.kind

    def test_unavailable_kind(self, offline_predictor):
        result = offline_predictor.evaluate("Chicago")
        assert isinstance(result.error, ModelUnavailableError)


class TestBatch:

    def test_batch_rows_follow_input_order(self, predictor):
        cities = ["Seattle", "Atlantis", "", "chicago"]
        df = predictor.predict_batch(cities)
        assert len(df) == 4
        assert list(df['ok']) == [True, False, False, True]
        assert list(df['error']) == [None, "city_not_found", "invalid_input", None]
        assert list(df['city']) == cities
        assert list(df['key']) == ["seattle", "atlantis", "", "chicago"]
        assert df.loc[0, 'error'] is None
        assert df.loc[3, 'message'] == predictor.predict("Chicago")
        assert len(df.loc[0, 'prediction']) == 2

    def test_empty_batch(self, predictor):
        df = predictor.predict_batch([])
        assert df.empty
        assert list(df.columns) == ['city', 'key', 'ok', 'error', 'message', 'prediction']

    def test_batch_with_stream_store(self, model_path):
        store = FeatureStore.load(io.StringIO("Oslo,-2.0,0.7,1001.0\n"))
        predictor = CityWeatherPredictor(store, ModelArtifact.load(model_path))
        df = predictor.predict_batch(["oslo"])
        assert bool(df.loc[0, 'ok'])


class TestLabelModels:
    """Models whose outputs are not numbers"""

    @pytest.fixture
    def label_predictor(self, store, tmp_path):
        X = np.array([
            [12.5, 0.65, 1013.0],
            [8.0, 0.30, 1020.5],
            [10.0, 0.85, 1009.0],
            [20.0, 0.40, 1005.0],
        ])
        classifier = LogisticRegression().fit(X, ["rain", "sun", "rain", "sun"])
        path = tmp_path / "weather-classifier.joblib"
        joblib.dump(classifier, path)
        return CityWeatherPredictor(store, ModelArtifact.load(path))

    def test_string_labels_reported_not_raised(self, label_predictor):
        message = label_predictor.predict("Chicago")
        assert message.startswith("Error: Prediction failed: ")

    def test_string_labels_give_inference_error(self, label_predictor):
        result = label_predictor.evaluate("Seattle")
        assert isinstance(result.error, InferenceError)
        assert result.to_dict()['prediction'] is None
