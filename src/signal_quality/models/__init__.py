"""Signal quality models."""

from .base import QualityModel
from .predictor import (
    FitResult,
    FitStatus,
    MIN_TRAINING_SAMPLES,
    SignalQualityModel,
    UNTRAINED,
    fit,
)

__all__ = [
    "QualityModel",
    "SignalQualityModel",
    "FitResult",
    "FitStatus",
    "MIN_TRAINING_SAMPLES",
    "UNTRAINED",
    "fit",
]
