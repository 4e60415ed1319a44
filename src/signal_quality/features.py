"""Feature encoding for signal quality regression."""

import numpy as np
import pandas as pd
from typing import List, NamedTuple, Sequence, Union


N_FEATURES = 7

# Score assigned to each network type. Labels not listed here fall back
# to `DEFAULT_NETWORK_TYPE_SCORE`.
NETWORK_TYPE_SCORES = {
    "5G": 1.0,
    "4G": 0.8,
    "LTE": 0.6,
}
DEFAULT_NETWORK_TYPE_SCORE = 0.4


class Observation(NamedTuple):
    """
    A single network measurement.

    Attributes:
        signal_strength: Received signal strength in dBm
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        network_type: Network category label (e.g. '5G', '4G', 'LTE')
        signal_quality: Measured signal quality on a 0-100 scale
        data_throughput: Data throughput in Mbps. Default: 0.
        latency: Latency in ms. Default: 0.
    """

    signal_strength: float
    latitude: float
    longitude: float
    network_type: str
    signal_quality: float
    data_throughput: float = 0.0
    latency: float = 0.0


def category_score(network_type: str) -> float:
    """
    Return the numeric score of a network type label.

    Unknown labels score `DEFAULT_NETWORK_TYPE_SCORE` (0.4).
    """
    return NETWORK_TYPE_SCORES.get(network_type, DEFAULT_NETWORK_TYPE_SCORE)


def encode_features(
    signal_strength: float,
    latitude: float,
    longitude: float,
    network_type: str,
    data_throughput: float = 0.0,
    latency: float = 0.0,
) -> np.ndarray:
    """
    Encode one measurement as a feature vector.

    The layout is
        [1, signal_strength/100, latitude, longitude, category_score(network_type),
         data_throughput/100, latency/1000]
    where the leading 1 is the intercept term.

    Returns:
        features: Array of shape (7,)
    """
    return np.array(
        [
            1.0,
            float(signal_strength) / 100,
            float(latitude),
            float(longitude),
            category_score(network_type),
            float(data_throughput) / 100,
            float(latency) / 1000,
        ]
    )


def encode_observation(observation: Observation) -> np.ndarray:
    """Encode an `Observation` as a feature vector of shape (7,)."""
    return encode_features(
        observation.signal_strength,
        observation.latitude,
        observation.longitude,
        observation.network_type,
        observation.data_throughput,
        observation.latency,
    )


def observations_from_frame(df: pd.DataFrame) -> List[Observation]:
    """
    Convert a measurement `pandas.DataFrame` to a list of observations.

    `data_throughput` and `latency` are optional columns and default to 0.

    Args:
        df: DataFrame with columns 'signal_strength', 'latitude', 'longitude',
            'network_type' and 'signal_quality'
    """
    missing = [
        col
        for col in ["signal_strength", "latitude", "longitude", "network_type", "signal_quality"]
        if col not in df.columns
    ]
    if missing:
        raise ValueError(f"Measurement frame is missing columns: {missing}")

    throughput = df["data_throughput"] if "data_throughput" in df.columns else pd.Series(0.0, index=df.index)
    latency = df["latency"] if "latency" in df.columns else pd.Series(0.0, index=df.index)

    return [
        Observation(
            signal_strength=s,
            latitude=lat,
            longitude=lon,
            network_type=nt,
            signal_quality=q,
            data_throughput=tp,
            latency=lt,
        )
        for s, lat, lon, nt, q, tp, lt in zip(
            df["signal_strength"],
            df["latitude"],
            df["longitude"],
            df["network_type"],
            df["signal_quality"],
            throughput,
            latency,
        )
    ]


def build_feature_matrix(
    observations: Union[Sequence[Observation], pd.DataFrame]
) -> np.ndarray:
    """
    Encode a collection of observations as a feature matrix.

    Args:
        observations: Sequence of `Observation` or a measurement `pandas.DataFrame`

    Returns:
        X: Feature matrix of shape (n_samples, 7)
    """
    if isinstance(observations, pd.DataFrame):
        observations = observations_from_frame(observations)
    if len(observations) == 0:
        return np.empty((0, N_FEATURES))
    return np.vstack([encode_observation(obs) for obs in observations])
