"""Signal quality regression for network measurements."""

__version__ = "0.1.0"

from .features import (
    DEFAULT_NETWORK_TYPE_SCORE,
    NETWORK_TYPE_SCORES,
    Observation,
    build_feature_matrix,
    category_score,
    encode_features,
    encode_observation,
    observations_from_frame,
)

from .linalg import (
    SingularMatrixError,
    inverse,
    multiply,
    multiply_vector,
    transpose,
)

from .models import (
    FitResult,
    FitStatus,
    SignalQualityModel,
    fit,
)

__all__ = [
    # Feature encoding
    "DEFAULT_NETWORK_TYPE_SCORE",
    "NETWORK_TYPE_SCORES",
    "Observation",
    "build_feature_matrix",
    "category_score",
    "encode_features",
    "encode_observation",
    "observations_from_frame",

    # Matrix routines
    "SingularMatrixError",
    "inverse",
    "multiply",
    "multiply_vector",
    "transpose",

    # Models
    "FitResult",
    "FitStatus",
    "SignalQualityModel",
    "fit",
]
