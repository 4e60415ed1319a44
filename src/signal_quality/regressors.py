"""Regression methods for model fitting."""

import numpy as np
from .linalg import (
    SINGULAR_TOLERANCE,
    SingularMatrixError,
    inverse_with_status,
    multiply,
    multiply_vector,
    transpose,
)


class LinearRegression():
    """
    Ordinary Least Squares (OLS) linear regression.

    Fits a linear model by minimizing the squared residuals:
        minimize ||y - Xθ||²

    The solution is obtained via the normal equations:
        θ = (X^T X)^{-1} X^T y

    The inverse is computed by Gauss-Jordan elimination (see `linalg.inverse`).
    When X^T X is singular the identity matrix stands in for its inverse,
    so the fitted parameters reduce to X^T y and `singular_` is set.
    No intercept column is added; include one in X if required.

    Attributes:
        params: Fitted parameters (coefficients) of shape (n_features,)
        singular_: True if X^T X was singular during the last fit
        ridge: Non-negative value added to the diagonal of X^T X before inversion
        strict: If True, raise `SingularMatrixError` instead of using the identity

    Example:
        >>> regressor = LinearRegression()
        >>> regressor.fit(X_train, y_train)
        >>> predictions = regressor.predict(X_test)
        >>> coefficients = regressor.get_params()
    """

    def __init__(self, ridge: float = 0.0, strict: bool = False, tol: float = SINGULAR_TOLERANCE):
        """Initialize the linear regression model."""
        if ridge < 0:
            raise ValueError(f"ridge must be non-negative, got {ridge}.")
        self.ridge = ridge
        self.strict = strict
        self.tol = tol
        self.params = None
        self.singular_ = False

    def fit(self, X: np.ndarray, y: np.ndarray) -> "LinearRegression":
        """
        Fit the linear regression model using ordinary least squares.

        Args:
            X: Feature matrix of shape (n_samples, n_features)
            y: Target vector of shape (n_samples,)

        Returns:
            self: The fitted model
        """
        y = np.asarray(y, dtype=float)
        if len(y) != np.shape(X)[0]:
            raise ValueError(
                f"Dimensions in X ({np.shape(X)[0]}) and y ({len(y)}) do not match."
            )

        Xt = transpose(X)
        XtX = multiply(Xt, X)
        if self.ridge > 0:
            XtX = XtX + self.ridge * np.eye(XtX.shape[0])

        XtX_inv, singular = inverse_with_status(XtX, tol=self.tol)
        if singular and self.strict:
            raise SingularMatrixError(
                f"X^T X is singular to within tolerance {self.tol}."
            )

        Xty = multiply_vector(Xt, y)
        self.params = multiply_vector(XtX_inv, Xty)
        self.singular_ = singular
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Generate predictions using the fitted model.

        Args:
            X: Feature matrix of shape (n_samples, n_features)

        Returns:
            predictions: Predicted values of shape (n_samples,)
        """
        if self.params is None:
            raise ValueError("Model must be fitted before calling predict(). Call fit() first.")
        return np.einsum('i,ji->j', self.params, X)

    def get_params(self) -> np.ndarray:
        """
        Get the fitted parameters.

        Returns:
            params: Coefficient array of shape (n_features,)
        """
        return self.params

    def __repr__(self):
        return f"LinearRegression(ridge={self.ridge}, strict={self.strict})"
