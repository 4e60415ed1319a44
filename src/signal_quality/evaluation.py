"""Evaluation metrics and summaries for signal quality predictions."""

import numpy as np
import pandas as pd
from typing import Optional

from .models.base import QualityModel


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate the root mean square error (RMSE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        rmse: Root mean square error
    """
    return np.sqrt(np.mean((y_pred - y_true)**2))


def mae(y_true: np.ndarray, y_pred: np.ndarray):
    """
    Calculate mean absolute error (MAE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mae: Mean absolute error
    """
    return np.mean(np.abs(y_pred - y_true))


def r2_score(y_true: np.ndarray, y_pred: np.ndarray):
    """
    Coefficient of determination of a set of predictions.

    Args:
        y_true: True values
        y_pred: Predicted values
    """
    sum_e = np.sum((y_true - y_pred)**2)
    sum_s = np.sum((y_true - np.mean(y_true))**2)
    return 1.0 - sum_e / sum_s


def prediction_accuracy(actual: float, predicted: Optional[float]) -> float:
    """
    Accuracy of one quality prediction on a 0-100 scale.

    Accuracy is 100 minus the absolute error, floored at 0. A missing
    prediction has accuracy 0.
    """
    if predicted is None or pd.isna(predicted):
        return 0.0
    return max(0.0, 100.0 - abs(predicted - actual))


def quality_band(quality: float) -> str:
    """Classify a signal quality as 'excellent', 'good', 'fair' or 'poor'."""
    if quality >= 80:
        return "excellent"
    elif quality >= 60:
        return "good"
    elif quality >= 40:
        return "fair"
    else:
        return "poor"


def summarize_measurements(df: pd.DataFrame) -> dict:
    """
    Summary statistics of a measurement frame.

    Averages are rounded to one decimal place. Quality counts use the
    'excellent' (>= 80) and 'poor' (< 40) bands.

    Returns:
        Dictionary of statistics, empty if `df` has no rows
    """
    if len(df) == 0:
        return {}

    return {
        "avg_signal_strength": round(float(df["signal_strength"].mean()), 1),
        "avg_throughput": round(float(df["data_throughput"].mean()), 1),
        "avg_latency": round(float(df["latency"].mean()), 1),
        "avg_quality": round(float(df["signal_quality"].mean()), 1),
        "total_points": len(df),
        "excellent_points": int((df["signal_quality"] >= 80).sum()),
        "poor_points": int((df["signal_quality"] < 40).sum()),
    }


def score_predictions(
    model: QualityModel, df: pd.DataFrame, limit: Optional[int] = 10
) -> pd.DataFrame:
    """
    Compare model predictions with observed quality.

    Args:
        model: Trained quality model
        df: Measurement frame
        limit: Score only the first `limit` rows. None scores every row.
            Default: 10.

    Returns:
        pandas.DataFrame with columns 'locality', 'network_type',
        'actual_quality', 'predicted_quality' and 'accuracy'. Predictions
        that could not be made are NaN with accuracy 0.
    """
    if limit is not None:
        df = df.head(limit)

    predicted = model.predict_frame(df)

    return pd.DataFrame({
        "locality": df["locality"] if "locality" in df.columns else "",
        "network_type": df["network_type"],
        "actual_quality": df["signal_quality"],
        "predicted_quality": predicted,
        "accuracy": [
            prediction_accuracy(a, p) for a, p in zip(df["signal_quality"], predicted)
        ],
    }, index=df.index)


def summarize_scores(scores: pd.DataFrame) -> dict:
    """
    Error metrics of a table produced by `score_predictions`.

    Rows without a prediction are excluded from RMSE, MAE and R²,
    and count as 0 in the mean accuracy. R² is NaN when fewer than two rows
    have predictions or the observed qualities are all equal.

    Returns:
        Dictionary with 'n_predicted', 'rmse', 'mae', 'r2' and 'mean_accuracy'
    """
    scored = scores[scores["predicted_quality"].notna()]
    y_true = scored["actual_quality"].to_numpy(dtype=float)
    y_pred = scored["predicted_quality"].to_numpy(dtype=float)

    if len(scored) == 0:
        return {
            "n_predicted": 0,
            "rmse": np.nan,
            "mae": np.nan,
            "r2": np.nan,
            "mean_accuracy": float(scores["accuracy"].mean()) if len(scores) else np.nan,
        }

    constant = np.allclose(y_true, y_true.mean())
    return {
        "n_predicted": len(scored),
        "rmse": float(rmse(y_true, y_pred)),
        "mae": float(mae(y_true, y_pred)),
        "r2": np.nan if len(scored) < 2 or constant else float(r2_score(y_true, y_pred)),
        "mean_accuracy": float(scores["accuracy"].mean()),
    }
