import math
import sys

import numpy as np

# Overflowed values are pinned here so every result stays a JSON number
MAX_MAGNITUDE = sys.float_info.max


def clamp_finite(value: float) -> float:
    """NaN -> 0.0, +/-inf -> +/-MAX_MAGNITUDE, anything else unchanged."""
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return math.copysign(MAX_MAGNITUDE, value)
    return value


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round with ties going toward +inf (2.5 -> 3, -2.5 -> -2).

    Python's round() does banker's rounding, which would turn a funnel stage
    of 37.5 into 38 but 36.5 into 36. Displayed numbers should not do that.
    Non-finite input is clamped first, so this never raises.
    """
    value = clamp_finite(value)
    scale = 10 ** ndigits
    scaled = value * scale + 0.5
    if not math.isfinite(scaled):
        # far beyond any fractional digit; nothing left to round
        return value
    return math.floor(scaled) / scale


def round_half_up_array(values: np.ndarray, ndigits: int = 0) -> np.ndarray:
    """Vectorized round_half_up, with the same clamping."""
    values = np.nan_to_num(
        np.asarray(values, dtype=float),
        nan=0.0,
        posinf=MAX_MAGNITUDE,
        neginf=-MAX_MAGNITUDE,
    )
    scale = 10 ** ndigits
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = values * scale + 0.5
        rounded = np.floor(scaled) / scale
    return np.where(np.isfinite(scaled), rounded, values)


def round_count(value: float) -> int:
    return int(round_half_up(value))


def round_ratio(value: float) -> float:
    return round_half_up(value, 2)
