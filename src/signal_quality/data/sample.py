"""Synthetic network measurements for demonstrations and testing."""

import numpy as np
import pandas as pd
from typing import Optional

from .loading import MEASUREMENT_COLUMNS


LOCALITIES = ["Downtown", "Suburbs", "Airport", "Mall", "University", "Hospital", "Park", "Stadium"]
NETWORK_TYPES = ["4G", "5G", "LTE", "3G"]

# Measurements are scattered uniformly around this point (Bangalore)
CENTRE_LATITUDE = 12.9716
CENTRE_LONGITUDE = 77.5946
SPREAD_DEGREES = 0.1


def generate_sample_data(
    n_samples: int = 50,
    seed: Optional[int] = None,
    now: Optional[pd.Timestamp] = None,
) -> pd.DataFrame:
    """
    Generate random network measurements.

    Args:
        n_samples: Number of measurements. Default: 50.
        seed: Seed for `numpy.random.default_rng`. Default: None.
        now: Latest possible timestamp. Timestamps fall within the 7 days
            before it. Default: current UTC time.

    Returns:
        pandas.DataFrame with columns `MEASUREMENT_COLUMNS`
    """
    if n_samples < 0:
        raise ValueError(f"n_samples must be non-negative, got {n_samples}.")

    rng = np.random.default_rng(seed)
    now = pd.Timestamp.now(tz="UTC") if now is None else pd.Timestamp(now)
    offsets = pd.to_timedelta(rng.uniform(0, 7 * 24 * 60 * 60, size=n_samples), unit="s")

    df = pd.DataFrame({
        "timestamp": (now - offsets).strftime("%Y-%m-%dT%H:%M:%S"),
        "locality": rng.choice(LOCALITIES, size=n_samples),
        "latitude": CENTRE_LATITUDE + (rng.uniform(size=n_samples) - 0.5) * SPREAD_DEGREES,
        "longitude": CENTRE_LONGITUDE + (rng.uniform(size=n_samples) - 0.5) * SPREAD_DEGREES,
        "signal_strength": rng.uniform(-120, -50, size=n_samples),
        "signal_quality": rng.uniform(0, 100, size=n_samples),
        "data_throughput": rng.uniform(0, 100, size=n_samples),
        "latency": rng.uniform(10, 210, size=n_samples),
        "network_type": rng.choice(NETWORK_TYPES, size=n_samples),
        "bb60c_measurement": rng.uniform(-120, -50, size=n_samples),
        "srsran_measurement": rng.uniform(-120, -50, size=n_samples),
        "bladerf_measurement": rng.uniform(-120, -50, size=n_samples),
    })

    return df[MEASUREMENT_COLUMNS]
