"""
Validation and filtering of network measurement data.
"""

import pandas as pd
from typing import List, Optional, Tuple


REQUIRED_COLUMNS = [
    "latitude",
    "longitude",
    "signal_strength",
    "signal_quality",
    "network_type",
]


def find_missing_columns(df: pd.DataFrame) -> List[str]:
    """Return the required measurement columns absent from `df`."""
    return [col for col in REQUIRED_COLUMNS if col not in df.columns]


def validate_measurements(
    df: pd.DataFrame,
    verbose: bool = False
) -> Tuple[bool, List[str]]:
    """
    Validate a measurement frame.

    Checks:
    1. All required columns are present
    2. Signal quality lies in [0, 100]
    3. Data throughput and latency are non-negative (if present)

    Args:
        df: DataFrame with measurement data
        verbose: If True, print validation results

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = []

    missing = find_missing_columns(df)
    if missing:
        errors.append(f"Missing required columns: {missing}")

    if "signal_quality" in df.columns:
        out_of_range = ((df["signal_quality"] < 0) | (df["signal_quality"] > 100)).sum()
        if out_of_range:
            errors.append(f"Found {out_of_range} measurements with signal quality outside [0, 100]")

    for col in ["data_throughput", "latency"]:
        if col in df.columns:
            negative = (df[col] < 0).sum()
            if negative:
                errors.append(f"Found {negative} measurements with negative {col}")

    is_valid = len(errors) == 0

    if verbose:
        if is_valid:
            print("All validation checks passed")
        else:
            print(f"Validation failed with {len(errors)} error(s):")
            for error in errors:
                print(f"  {error}")

    return is_valid, errors


def filter_measurements(
    df: pd.DataFrame,
    locality: Optional[str] = None,
    network_type: Optional[str] = None,
    min_signal_strength: Optional[float] = None,
    max_latency: Optional[float] = None,
) -> pd.DataFrame:
    """
    Select measurements matching the given criteria.

    Criteria left as None are not applied.

    Args:
        df: DataFrame with measurement data
        locality: Keep only this locality
        network_type: Keep only this network type
        min_signal_strength: Keep measurements with signal strength >= this value (dBm)
        max_latency: Keep measurements with latency <= this value (ms)

    Returns:
        Filtered copy of `df`
    """
    mask = pd.Series(True, index=df.index)
    if locality:
        mask &= df["locality"] == locality
    if network_type:
        mask &= df["network_type"] == network_type
    if min_signal_strength is not None:
        mask &= df["signal_strength"] >= min_signal_strength
    if max_latency is not None:
        mask &= df["latency"] <= max_latency
    return df[mask].copy()
