"""Base interface for signal quality models."""

from abc import ABC, abstractmethod
import pandas as pd
from typing import Optional, Sequence, Union
from ..features import Observation


class QualityModel(ABC):
    """
    Base class for signal quality models.
    """

    @property
    @abstractmethod
    def is_trained(self) -> bool:
        """True once the model holds a usable set of parameters."""
        pass

    @abstractmethod
    def train(self, observations: Union[Sequence[Observation], pd.DataFrame]):
        """
        Fit model parameters to observed measurements.

        Args:
            observations: Sequence of `Observation` or a measurement `pandas.DataFrame`
                with columns 'signal_strength', 'latitude', 'longitude', 'network_type',
                'signal_quality' and optionally 'data_throughput' and 'latency'.
        """
        pass

    @abstractmethod
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
        Predict the signal quality (0-100) of a single measurement.

        Returns:
            prediction: Predicted quality, or None if no prediction can be made
        """
        pass

    def predict_frame(self, df: pd.DataFrame) -> pd.Series:
        """
        Predict the signal quality of every row in a measurement frame.

        Args:
            df: DataFrame with columns 'signal_strength', 'latitude', 'longitude',
                'network_type' and optionally 'data_throughput' and 'latency'

        Returns:
            predictions: `pandas.Series` aligned with `df`, NaN where no prediction
                could be made
        """
        throughput = df["data_throughput"] if "data_throughput" in df.columns else pd.Series(0.0, index=df.index)
        latency = df["latency"] if "latency" in df.columns else pd.Series(0.0, index=df.index)

        predictions = [
            self.predict(s, lat, lon, nt, tp, lt)
            for s, lat, lon, nt, tp, lt in zip(
                df["signal_strength"], df["latitude"], df["longitude"],
                df["network_type"], throughput, latency,
            )
        ]
        return pd.Series(predictions, index=df.index, name="predicted_quality", dtype=float)
