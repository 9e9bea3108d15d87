import math
import sys

import numpy as np

from leadcalc.domain.rounding import (
    MAX_MAGNITUDE,
    clamp_finite,
    round_count,
    round_half_up,
    round_half_up_array,
    round_ratio,
)


def test_round_half_up_ties_go_up():
    assert round_half_up(37.5) == 38
    assert round_half_up(36.5) == 37
    assert round_half_up(-2.5) == -2
    assert round_ratio(0.125) == 0.13


def test_clamp_finite():
    assert clamp_finite(math.nan) == 0.0
    assert clamp_finite(math.inf) == MAX_MAGNITUDE
    assert clamp_finite(-math.inf) == -MAX_MAGNITUDE
    assert clamp_finite(12.5) == 12.5


def test_rounding_never_raises_on_non_finite():
    assert round_count(math.nan) == 0
    assert round_count(math.inf) == int(sys.float_info.max)
    assert round_count(-math.inf) == -int(sys.float_info.max)
    # 1e307 * 100 overflows while scaling for two decimals
    assert round_ratio(1e307) == 1e307
    assert round_ratio(math.inf) == MAX_MAGNITUDE


def test_round_half_up_array_matches_scalar():
    values = np.array([37.5, 36.5, -2.5, 0.125, math.nan, math.inf, -math.inf, 1e307])

    out = round_half_up_array(values, 2)

    assert list(out) == [round_half_up(v, 2) for v in values]
    assert np.isfinite(out).all()
