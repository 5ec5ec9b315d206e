"""
Feature Store Module
Parses the city feature table into an in-memory lookup
"""
import logging
import math
import os
from typing import Dict, Iterable, List, Optional, TextIO, Union

import numpy as np
import pandas as pd

from .errors import DataLoadError
from .utils import normalize_city_key, parse_feature, split_row

logger = logging.getLogger(__name__)

# What to do with a feature field that is not a number
BAD_VALUE_POLICIES = ("skip", "nan", "drop_row")

FeatureSource = Union[str, "os.PathLike[str]", TextIO]


class FeatureStore:
    """
    Read-only mapping of normalized city name -> feature vector
    Built once from a comma-separated table, never mutated afterwards
    """

    def __init__(self, vectors: Optional[Dict[str, np.ndarray]] = None, source: Optional[str] = None):
        self._vectors: Dict[str, np.ndarray] = {}
        for city, vector in (vectors or {}).items():
            frozen = np.asarray(vector, dtype=float).copy()
            frozen.flags.writeable = False
            self._vectors[normalize_city_key(city)] = frozen
        self.source = source
        self.is_loaded = vectors is not None

    @classmethod
    def empty(cls, source: Optional[str] = None) -> "FeatureStore":
        """Store that holds nothing, used when the table could not be read"""
        return cls(None, source=source)

    @classmethod
    def load(cls, source: FeatureSource, on_bad_value: str = "skip") -> "FeatureStore":
        """
        Load a feature table

        Args:
            source: Path to the table or an open text stream
            on_bad_value: "skip" drops the bad position (vector gets shorter),
                "nan" keeps the position as NaN, "drop_row" discards the row

        Returns:
            Loaded FeatureStore

        Raises:
            DataLoadError: if the source cannot be opened or read
        """
        if on_bad_value not in BAD_VALUE_POLICIES:
            raise ValueError(f"on_bad_value must be one of {BAD_VALUE_POLICIES}, got {on_bad_value!r}")

        if hasattr(source, "read"):
            name = getattr(source, "name", "<stream>")
            vectors = cls._parse_lines(source, on_bad_value, name)
        else:
            name = os.fspath(source)
            try:
                with open(name, "r", encoding="utf-8-sig") as f:
                    vectors = cls._parse_lines(f, on_bad_value, name)
            except OSError as e:
                raise DataLoadError(f"Cannot read feature table {name}: {e}") from e

        logger.info("Loaded features for %d cities from %s", len(vectors), name)
        return cls(vectors, source=str(name))

    @staticmethod
    def _parse_lines(lines: Iterable[str], on_bad_value: str, name: str) -> Dict[str, np.ndarray]:
        vectors: Dict[str, np.ndarray] = {}
        try:
            for line in lines:
                parts = split_row(line)
                if len(parts) < 2:
                    continue

                city = normalize_city_key(parts[0])
                values: List[float] = []
                parsed = 0
                bad_row = False
                for field in parts[1:]:
                    try:
                        values.append(parse_feature(field))
                        parsed += 1
                    except ValueError:
                        logger.warning("Invalid feature data for city: %s (%r)", city, field)
                        if on_bad_value == "nan":
                            values.append(math.nan)
                        elif on_bad_value == "drop_row":
                            bad_row = True
                            break

                if bad_row or parsed == 0:
                    continue
                vectors[city] = np.array(values, dtype=float)
        except (OSError, UnicodeDecodeError) as e:
            raise DataLoadError(f"Failed while reading feature table {name}: {e}") from e
        return vectors

    def lookup(self, city: str) -> Optional[np.ndarray]:
        """Feature vector for a city, or None if the city is unknown"""
        return self._vectors.get(normalize_city_key(city))

    def cities(self) -> List[str]:
        return sorted(self._vectors)

    def __len__(self) -> int:
        return len(self._vectors)

    def __contains__(self, city: object) -> bool:
        return isinstance(city, str) and normalize_city_key(city) in self._vectors

    def to_frame(self) -> pd.DataFrame:
        """Feature table as a DataFrame indexed by city, short rows padded with NaN"""
        if not self._vectors:
            return pd.DataFrame(index=pd.Index([], name="city"))
        width = max(len(v) for v in self._vectors.values())
        rows = {
            city: np.pad(v, (0, width - len(v)), constant_values=np.nan)
            for city, v in self._vectors.items()
        }
        df = pd.DataFrame.from_dict(rows, orient="index", columns=[f"feature_{i + 1}" for i in range(width)])
        df.index.name = "city"
        return df.sort_index()
