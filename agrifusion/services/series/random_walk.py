"""
Bounded random walk series generator.

Produces a dated sequence of (value, volume) samples that starts from a seed
value and moves by a uniform random delta each day, clamped into a fixed
range after every step. Used to simulate historical price data.
"""
import math
import random
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Protocol

import structlog

logger = structlog.get_logger()

PRICE_PRECISION = Decimal("0.01")


class InvalidParameterError(ValueError):
    """Raised when series generation parameters are out of range."""
    pass


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float:
        ...


@dataclass(frozen=True)
class TimeSeriesSample:
    """One point of a generated series."""
    date: date
    value: float
    volume: int


@dataclass(frozen=True)
class SeriesRequest:
    """
    Parameters for a bounded random walk.

    ``step_magnitude`` is the width of the delta interval: each step draws
    uniformly from ``[-step_magnitude / 2, +step_magnitude / 2]``.
    ``start_range`` and ``volume_range`` are half-open ``[low, high)``.
    """
    periods: int = 30
    seed_value: float | None = None
    min_value: float = 50.0
    max_value: float = 300.0
    step_magnitude: float = 10.0
    start_range: tuple[float, float] = (100.0, 200.0)
    volume_range: tuple[int, int] = (500, 5500)

    @property
    def bounds(self) -> tuple[float, float]:
        return self.min_value, self.max_value


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def validate_request(request: SeriesRequest) -> None:
    """
    Check generation parameters.

    Raises:
        InvalidParameterError: If any parameter is outside its allowed range.
    """
    if not isinstance(request.periods, int) or isinstance(request.periods, bool):
        raise InvalidParameterError(f"periods must be an integer, got {request.periods!r}")
    if request.periods < 0:
        raise InvalidParameterError(f"periods must be >= 0, got {request.periods}")

    for name in ("min_value", "max_value", "step_magnitude"):
        if not _is_number(getattr(request, name)):
            raise InvalidParameterError(f"{name} must be a finite number")
    if request.min_value > request.max_value:
        raise InvalidParameterError(
            f"min_value ({request.min_value}) must not exceed max_value ({request.max_value})"
        )
    if request.step_magnitude < 0:
        raise InvalidParameterError(f"step_magnitude must be >= 0, got {request.step_magnitude}")

    if request.seed_value is not None and not _is_number(request.seed_value):
        raise InvalidParameterError("seed_value must be a finite number")

    start_low, start_high = request.start_range
    if not (_is_number(start_low) and _is_number(start_high)) or start_low > start_high:
        raise InvalidParameterError(f"invalid start_range {request.start_range}")

    volume_low, volume_high = request.volume_range
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in request.volume_range):
        raise InvalidParameterError(f"volume_range ends must be integers, got {request.volume_range}")
    if volume_low < 0 or volume_low > volume_high:
        raise InvalidParameterError(f"invalid volume_range {request.volume_range}")


def clamp(value: float, low: float, high: float) -> float:
    """Constrain value to the closed interval [low, high]."""
    return max(low, min(high, value))


def round_price(value: float) -> float:
    """Round half-up to two decimal places (99.995 -> 100.0)."""
    amount = Decimal(str(value))
    if amount.as_tuple().exponent >= -2:
        return float(amount)
    # Keep every integer digit when quantizing large magnitudes
    context = Context(prec=max(28, amount.adjusted() + 3))
    return float(amount.quantize(PRICE_PRECISION, rounding=ROUND_HALF_UP, context=context))


def _draw_seed(request: SeriesRequest, rng: RandomSource) -> float:
    if request.seed_value is not None:
        return float(request.seed_value)
    low, high = request.start_range
    # Whole-number starting price
    return float(math.floor(rng.random() * (high - low)) + low)


def _draw_volume(request: SeriesRequest, rng: RandomSource) -> int:
    low, high = request.volume_range
    return math.floor(rng.random() * (high - low)) + low


def generate_series(
    request: SeriesRequest,
    rng: RandomSource | None = None,
    today: date | None = None,
) -> list[TimeSeriesSample]:
    """
    Generate a bounded random walk ending today.

    The first sample (``today - periods``) carries the clamped seed value;
    each later day applies one step and clamps again. The walk continues
    from the clamped, unrounded value; emitted values are rounded.

    Args:
        request: Generation parameters.
        rng: Randomness source. Defaults to a fresh ``random.Random()``.
        today: Last date of the series. Defaults to the current UTC date.

    Returns:
        ``periods + 1`` samples in ascending date order.

    Raises:
        InvalidParameterError: If the request is invalid.
    """
    validate_request(request)

    if rng is None:
        rng = random.Random()
    if today is None:
        today = datetime.now(timezone.utc).date()

    low, high = request.bounds
    half_step = request.step_magnitude / 2
    start = today - timedelta(days=request.periods)

    current = clamp(_draw_seed(request, rng), low, high)
    samples = []
    for offset in range(request.periods + 1):
        if offset > 0:
            current += (rng.random() * 2 - 1) * half_step
            current = clamp(current, low, high)
        samples.append(
            TimeSeriesSample(
                date=start + timedelta(days=offset),
                # Re-clamp in case rounding crosses a sub-cent bound
                value=clamp(round_price(current), low, high),
                volume=_draw_volume(request, rng),
            )
        )

    logger.debug(
        "Generated random walk series",
        periods=request.periods,
        first=samples[0].value,
        last=samples[-1].value,
    )
    return samples
