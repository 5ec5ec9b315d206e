from __future__ import annotations

import math
from typing import List, Optional

import numpy as np


PREDICTION_LABEL = "Predicted Weather Values"


def normalize_city_key(city: Optional[str]) -> str:
    return (city or "").strip().lower()


def is_blank(city: Optional[str]) -> bool:
    return not normalize_city_key(city)


def split_row(line: str) -> List[str]:
    # Trailing empty fields do not count as columns
    fields = line.rstrip("\r\n").split(",")
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def format_vector(values: np.ndarray, precision: int = 4) -> str:
    return np.array2string(
        np.asarray(values, dtype=float),
        precision=precision,
        floatmode="fixed",
        separator=", ",
        max_line_width=10_000,
    )


def format_prediction(values: np.ndarray) -> str:
    return f"{PREDICTION_LABEL}: {format_vector(values)}"


def parse_feature(field: str) -> float:
    """Strict float parse: no digit separators, no inf/nan"""
    if "_" in field:
        raise ValueError(f"not a plain number: {field!r}")
    value = float(field)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {field!r}")
    return value
