"""Linear signal quality model fitted by the normal equations."""

import numpy as np
import pandas as pd
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Union
from .base import QualityModel
from ..features import (
    N_FEATURES,
    Observation,
    build_feature_matrix,
    encode_features,
    observations_from_frame,
)
from ..regressors import LinearRegression


MIN_TRAINING_SAMPLES = 10


class FitStatus(Enum):
    """Outcome of a training run."""

    UNTRAINED = "untrained"
    TRAINED = "trained"
    DEGRADED = "degraded"  # trained, but on the singular fallback or zero coefficients


class FitResult(NamedTuple):
    """
    Immutable result of fitting a `SignalQualityModel`.

    Attributes:
        coefficients: Read-only array of shape (7,), or None if untrained
        status: `FitStatus` of the fit
        n_samples: Number of observations the fit used
        reason: Description of why a fit is degraded, empty otherwise
    """

    coefficients: Optional[np.ndarray] = None
    status: FitStatus = FitStatus.UNTRAINED
    n_samples: int = 0
    reason: str = ""

    @property
    def is_trained(self) -> bool:
        return self.coefficients is not None and len(self.coefficients) == N_FEATURES


UNTRAINED = FitResult()


def _frozen(values: np.ndarray) -> np.ndarray:
    values = np.array(values, dtype=float)
    values.setflags(write=False)
    return values


def fit(
    previous: FitResult,
    observations: Union[Sequence[Observation], pd.DataFrame],
    strict: bool = False,
    ridge: float = 0.0,
    verbose: bool = False,
) -> FitResult:
    """
    Fit linear regression coefficients to a set of observations.

    Targets are the observed qualities rescaled to [0, 1]. Coefficients are
    obtained from the normal equations β = (X^T X)^{-1} X^T y.

    With fewer than `MIN_TRAINING_SAMPLES` observations nothing is fitted and
    `previous` is returned unchanged. Unless `strict` is set, failures never
    propagate: a singular X^T X gives a DEGRADED result computed with the
    identity in place of the inverse, and any other error gives a DEGRADED
    result with all-zero coefficients.

    Args:
        previous: Result of the previous fit (`UNTRAINED` for a new model)
        observations: Sequence of `Observation` or a measurement `pandas.DataFrame`
        strict: If True, raise on singular or invalid data instead of degrading.
            Default: False.
        ridge: Value added to the diagonal of X^T X before inversion. Default: 0.
        verbose: Print progress messages. Default: False.

    Returns:
        result: New `FitResult`, or `previous` if there is not enough data
    """
    n_samples = len(observations)
    print(f"Training model with {n_samples} samples") if verbose else None

    if n_samples < MIN_TRAINING_SAMPLES:
        print(
            f"  Not enough data for training (need at least {MIN_TRAINING_SAMPLES})"
        ) if verbose else None
        return previous

    try:
        if isinstance(observations, pd.DataFrame):
            observations = observations_from_frame(observations)
        X = build_feature_matrix(observations)
        y = np.array([obs.signal_quality for obs in observations], dtype=float) / 100

        regressor = LinearRegression(ridge=ridge, strict=strict).fit(X, y)
        coefficients = regressor.get_params()

        if not np.all(np.isfinite(coefficients)):
            raise ValueError("Fitted coefficients are not finite.")

    except Exception as e:
        if strict:
            raise
        print(f"  Linear regression failed: {e}") if verbose else None
        return FitResult(
            coefficients=_frozen(np.zeros(N_FEATURES)),
            status=FitStatus.DEGRADED,
            n_samples=n_samples,
            reason=f"Linear regression failed: {e}",
        )

    if regressor.singular_:
        reason = "X^T X is singular; identity matrix used in place of its inverse"
        print(f"  Warning: {reason}") if verbose else None
        return FitResult(
            coefficients=_frozen(coefficients),
            status=FitStatus.DEGRADED,
            n_samples=n_samples,
            reason=reason,
        )

    print("  Model trained successfully") if verbose else None
    return FitResult(
        coefficients=_frozen(coefficients),
        status=FitStatus.TRAINED,
        n_samples=n_samples,
    )


class SignalQualityModel(QualityModel):
    """
    Linear regression model of signal quality.

    Each measurement is encoded as
        [1, signal_strength/100, latitude, longitude, network type score,
         data_throughput/100, latency/1000]
    and predictions are the fitted linear combination, rescaled to 0-100 and
    clamped to [0, 100].

    Attributes:
        strict: Raise on singular or invalid training data instead of degrading
        ridge: Value added to the diagonal of X^T X before inversion
        verbose: Print progress messages during training
        result: `FitResult` of the most recent successful call to `train()`
    """

    def __init__(self, strict: bool = False, ridge: float = 0.0, verbose: bool = False):
        """
        Create an untrained `SignalQualityModel`.

        Args:
            strict: If True, `train()` raises instead of degrading. Default: False.
            ridge: Non-negative ridge term. Default: 0 (plain least squares).
            verbose: Print progress messages. Default: False.
        """
        if ridge < 0:
            raise ValueError(f"ridge must be non-negative, got {ridge}.")
        self.strict = strict
        self.ridge = ridge
        self.verbose = verbose
        self.result = UNTRAINED

    @property
    def is_trained(self) -> bool:
        return self.result.is_trained

    @property
    def status(self) -> FitStatus:
        return self.result.status

    @property
    def coefficients(self) -> Optional[np.ndarray]:
        return self.result.coefficients

    def train(self, observations: Union[Sequence[Observation], pd.DataFrame]) -> FitResult:
        """
        Fit the model to observed measurements, replacing any previous fit.

        See `fit()` for the failure behaviour.

        Returns:
            result: The model's `FitResult` after training
        """
        self.result = fit(
            self.result,
            observations,
            strict=self.strict,
            ridge=self.ridge,
            verbose=self.verbose,
        )
        return self.result

    def predict(
        self,
        signal_strength: float,
        latitude: float,
        longitude: float,
        network_type: str,
        data_throughput: float = 0.0,
        latency: float = 0.0,
    ) -> Optional[float]:
        """
        Predict the signal quality of a single measurement.

        Returns:
            prediction: Quality clamped to [0, 100], or None if the model is not
                trained or the prediction cannot be computed
        """
        result = self.result
        if not result.is_trained:
            return None

        try:
            features = encode_features(
                signal_strength, latitude, longitude, network_type, data_throughput, latency
            )
            prediction = float(np.dot(result.coefficients, features)) * 100
        except (TypeError, ValueError):
            return None

        if not np.isfinite(prediction):
            return None
        return max(0.0, min(100.0, prediction))

    def __repr__(self):
        return (
            f"SignalQualityModel(status={self.status.value}, "
            f"strict={self.strict}, ridge={self.ridge})"
        )
