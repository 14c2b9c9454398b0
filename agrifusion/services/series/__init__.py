"""Synthetic time-series generation."""
from .random_walk import (
    InvalidParameterError,
    RandomSource,
    SeriesRequest,
    TimeSeriesSample,
    generate_series,
)

__all__ = [
    "InvalidParameterError",
    "RandomSource",
    "SeriesRequest",
    "TimeSeriesSample",
    "generate_series",
]
