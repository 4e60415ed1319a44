"""
Loading of network measurement files.

Measurement CSV files have a header row followed by one measurement per line.
Columns are read by position, so header names and the header's width are not
significant. Rows with fewer than 9 values are skipped.
"""

import pandas as pd

from .validation import validate_measurements


MEASUREMENT_COLUMNS = [
    "timestamp",
    "locality",
    "latitude",
    "longitude",
    "signal_strength",
    "signal_quality",
    "data_throughput",
    "latency",
    "network_type",
    "bb60c_measurement",
    "srsran_measurement",
    "bladerf_measurement",
]
TEXT_COLUMNS = ["timestamp", "locality", "network_type"]
MIN_COLUMNS = 9  # up to and including network_type


def standardise_measurements(df: pd.DataFrame) -> pd.DataFrame:
    """
    Assign standard column names by position and coerce column types.

    Numeric values that are missing or cannot be parsed become 0 and missing
    text becomes an empty string. Columns beyond the twelfth are dropped and
    absent trailing measurement columns are filled with 0.

    Args:
        df: `pandas.DataFrame` with at least 9 columns

    Returns:
        pandas.DataFrame with columns `MEASUREMENT_COLUMNS`
    """
    if df.shape[1] < MIN_COLUMNS:
        raise ValueError(
            f"Measurement data must have at least {MIN_COLUMNS} columns, got {df.shape[1]}."
        )

    df = df.iloc[:, :len(MEASUREMENT_COLUMNS)].copy()
    df.columns = MEASUREMENT_COLUMNS[:df.shape[1]]
    for col in MEASUREMENT_COLUMNS[df.shape[1]:]:
        df[col] = 0.0

    for col in MEASUREMENT_COLUMNS:
        if col in TEXT_COLUMNS:
            df[col] = df[col].fillna("").astype(str).str.strip()
        else:
            df[col] = pd.to_numeric(df[col].astype(str).str.strip(), errors="coerce").fillna(0.0).astype(float)

    return df


def load_measurements(file_path: str, verbose: bool = False) -> pd.DataFrame:
    """
    Load network measurements from CSV.

    Args:
        file_path: Path to CSV file
        verbose: Print progress messages. Default: False.

    Returns:
        pandas.DataFrame with columns `MEASUREMENT_COLUMNS`
    """
    if verbose:
        print(f"Loading measurement data from {file_path}...")

    # Header width does not limit the fields read from data rows
    df = pd.read_csv(
        file_path,
        header=None,
        skiprows=1,
        names=list(range(len(MEASUREMENT_COLUMNS))),
        dtype=str,
        index_col=False,
        skipinitialspace=True,
    )

    # Rows are padded with NaN up to 12 fields; a row without a network type
    # has fewer than 9 values
    n_rows = len(df)
    df = df[df[MIN_COLUMNS - 1].notna()].reset_index(drop=True)

    if len(df) == 0:
        raise ValueError(
            f"CSV must have a header row and at least one data row with {MIN_COLUMNS} values."
        )

    df = standardise_measurements(df)

    if verbose:
        print(f"  Loaded {len(df)} measurements")
        if n_rows > len(df):
            print(f"  Skipped {n_rows - len(df)} rows with fewer than {MIN_COLUMNS} values")
        validate_measurements(df, verbose=verbose)

    return df
