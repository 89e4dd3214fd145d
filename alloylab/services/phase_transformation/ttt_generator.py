"""TTT curve and quench cooling path generation.

The isothermal transformation boundary is a single C-curve whose nose
position is set by the carbon equivalent. The cooling path is a linear
cooling law for the chosen quench medium sampled on a geometric time grid.
Both can be merged onto a common temperature axis for overlay plotting.
"""
import math
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from ..elements import quench_config
from ..numeric import round_half_up


# TTT temperature grid (deg C)
TTT_START_TEMPERATURE = 720
TTT_END_TEMPERATURE = 150
TTT_TEMPERATURE_STEP = 20
TTT_MAX_TIME = 10000.0  # s

# Cooling path sampling
AUSTENITIZING_TEMPERATURE = 900.0  # deg C
AMBIENT_TEMPERATURE = 25.0  # deg C
COOLING_START_TIME = 0.1  # s
COOLING_TIME_FACTOR = 1.25
COOLING_MAX_TIME = 200.0  # s
COOLING_STOP_TEMPERATURE = 30.0  # deg C


class CurvePoint(NamedTuple):
    """One sample of a transformation or cooling curve."""
    temperature: float
    time: float


class OverlayPoint(NamedTuple):
    """TTT sample with the cooling-path time that falls in its bucket, if any."""
    temperature: float
    ttt_time: float
    cooling_time: Optional[float]


@dataclass(frozen=True)
class TTTCurve:
    """Isothermal transformation start boundary.

    Attributes
    ----------
    points : tuple of CurvePoint
        Samples ordered from highest to lowest temperature
    nose_temperature : float
        Temperature of minimum incubation time (deg C)
    nose_time : float
        Minimum incubation time (s)
    """
    points: Tuple[CurvePoint, ...]
    nose_temperature: float
    nose_time: float

    def to_dict(self) -> dict:
        return {
            'points': [p._asdict() for p in self.points],
            'nose_temperature': self.nose_temperature,
            'nose_time': self.nose_time,
        }


def generate_ttt_curve(ce: float) -> TTTCurve:
    """Generate the TTT C-curve for a given carbon equivalent.

    nose_time = 1 + 50*CE
    nose_temp = 550 - 30*CE
    t(T) = nose_time * exp(0.01 * (T - nose_temp)^2 / nose_time), capped at 10000 s

    Parameters
    ----------
    ce : float
        Carbon equivalent (wt%)

    Returns
    -------
    TTTCurve
    """
    nose_time = 1 + ce * 50
    nose_temp = 550 - ce * 30

    temperatures = np.arange(TTT_START_TEMPERATURE, TTT_END_TEMPERATURE - 1,
                             -TTT_TEMPERATURE_STEP)
    dt = temperatures - nose_temp
    exponent = 0.01 * dt * dt / nose_time
    # Clip before exp so that far-from-nose samples saturate instead of overflowing
    exponent = np.minimum(exponent, math.log(TTT_MAX_TIME / nose_time) + 1.0)
    times = np.minimum(nose_time * np.exp(exponent), TTT_MAX_TIME)

    points = tuple(
        CurvePoint(float(T), float(t)) for T, t in zip(temperatures, times)
    )
    return TTTCurve(points=points, nose_temperature=nose_temp, nose_time=nose_time)


def generate_cooling_path(quench_medium) -> Tuple[CurvePoint, ...]:
    """Sample the cooling curve of a quench medium.

    T(t) = max(25, 900 - rate*t), with t starting at 0.1 s and growing by
    25% per sample. Sampling stops after 200 s or once T <= 30 deg C (that
    sample is included). Times are reported to 0.1 s.

    Parameters
    ----------
    quench_medium : str
        'Water', 'Oil' or 'Air'; anything else uses the oil rate

    Returns
    -------
    tuple of CurvePoint
    """
    rate = quench_config(quench_medium).cooling_rate
    path = []
    t = COOLING_START_TIME
    while t <= COOLING_MAX_TIME:
        T = max(AMBIENT_TEMPERATURE, AUSTENITIZING_TEMPERATURE - rate * t)
        path.append(CurvePoint(T, round_half_up(t, 1)))
        if T <= COOLING_STOP_TEMPERATURE:
            break
        t *= COOLING_TIME_FACTOR
    return tuple(path)


def bucket_temperature(temperature: float, step: float = TTT_TEMPERATURE_STEP) -> float:
    """Round a temperature to the nearest multiple of step (ties round up)."""
    return round_half_up(temperature / step) * step


def merge_curves(ttt_points: Sequence[CurvePoint],
                 cooling_points: Sequence[CurvePoint]) -> List[OverlayPoint]:
    """Align a cooling path onto the TTT temperature samples.

    Cooling samples are bucketed to the nearest 20 deg C. Only buckets that
    exist on the TTT curve receive a cooling time; a later sample in the
    same bucket replaces an earlier one.

    Returns
    -------
    list of OverlayPoint
        Ordered by descending temperature
    """
    ttt_by_temp = {float(p.temperature): p.time for p in ttt_points}
    cooling_by_temp = {}
    for p in cooling_points:
        bucket = float(bucket_temperature(p.temperature))
        if bucket in ttt_by_temp:
            cooling_by_temp[bucket] = p.time

    return [
        OverlayPoint(T, ttt_by_temp[T], cooling_by_temp.get(T))
        for T in sorted(ttt_by_temp, reverse=True)
    ]
