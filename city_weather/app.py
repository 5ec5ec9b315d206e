"""
Command-line front end
Thin shell: loads artifacts once, then asks for a city and prints the prediction
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .feature_store import BAD_VALUE_POLICIES
from .model_loader import create_predictor


PROMPT = "Enter a city name to predict its weather: "
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="city-weather", description="Predict weather values for a city")
    parser.add_argument("--features", default=config.FEATURES_PATH, help="City feature table (CSV, no header)")
    parser.add_argument("--model", default=config.MODEL_PATH, help="Pretrained model saved with joblib")
    parser.add_argument("--city", help="City to predict; prompts on stdin when omitted")
    parser.add_argument("--batch", help="File with one city per line; prints results as CSV")
    parser.add_argument("--bad-values", default=config.BAD_VALUES, choices=BAD_VALUE_POLICIES,
                        help="How to treat non-numeric feature fields")
    parser.add_argument("--log-level", default=config.LOG_LEVEL.upper(),
                        choices=LOG_LEVELS)
    return parser


def read_cities(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8-sig") as f:
        return [line.strip() for line in f if line.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults (from the environment) against choices
    if args.bad_values not in BAD_VALUE_POLICIES:
        parser.error(f"invalid bad-values policy {args.bad_values!r} (choose from {', '.join(BAD_VALUE_POLICIES)})")
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    predictor = create_predictor(args.features, args.model, args.bad_values)

    if args.batch:
        try:
            cities = read_cities(args.batch)
        except OSError as e:
            parser.error(f"cannot read batch file {args.batch}: {e}")
        results = predictor.predict_batch(cities)
        results.to_csv(sys.stdout, index=False)
        return 0

    if args.city is not None:
        city = args.city.strip()
    else:
        try:
            city = input(PROMPT).strip()
        except EOFError:
            city = ""

    weather = predictor.predict(city)
    print(f"Predicted weather for '{city}': {weather}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
