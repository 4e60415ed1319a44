"""
Script to train a signal quality model and print predictions.

Measurements are read from a CSV file, or generated at random when no file
is given. The model is trained on the (optionally filtered) measurements and
predictions are printed for the first rows together with their accuracy and
the RMSE, MAE and R² over those rows.
"""

import argparse

from signal_quality.data.loading import load_measurements
from signal_quality.data.sample import generate_sample_data
from signal_quality.data.validation import filter_measurements
from signal_quality.evaluation import (
    score_predictions,
    summarize_measurements,
    summarize_scores,
)
from signal_quality.models import FitStatus, SignalQualityModel


def main():
    parser = argparse.ArgumentParser(
        description="Train a linear signal quality model and print predictions"
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Measurement CSV file (default: generate sample data)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=50,
        help="Number of sample measurements to generate (default: 50)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for sample data",
    )
    parser.add_argument(
        "--locality",
        type=str,
        default=None,
        help="Only use measurements from this locality",
    )
    parser.add_argument(
        "--network-type",
        type=str,
        default=None,
        help="Only use measurements of this network type",
    )
    parser.add_argument(
        "--min-signal-strength",
        type=float,
        default=None,
        help="Only use measurements with signal strength >= this value (dBm)",
    )
    parser.add_argument(
        "--max-latency",
        type=float,
        default=None,
        help="Only use measurements with latency <= this value (ms)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Number of measurements to predict (default: 10)",
    )
    parser.add_argument(
        "--ridge",
        type=float,
        default=0.0,
        help="Ridge term added to X^T X before inversion (default: 0)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on singular or invalid training data instead of degrading",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages",
    )

    args = parser.parse_args()

    if args.csv is not None:
        df = load_measurements(args.csv, verbose=args.verbose)
    else:
        print(f"Generating {args.samples} sample measurements...") if args.verbose else None
        df = generate_sample_data(args.samples, seed=args.seed)

    df = filter_measurements(
        df,
        locality=args.locality,
        network_type=args.network_type,
        min_signal_strength=args.min_signal_strength,
        max_latency=args.max_latency,
    )

    print("\n=== Measurements ===")
    for key, value in summarize_measurements(df).items():
        print(f"{key}: {value}")

    model = SignalQualityModel(strict=args.strict, ridge=args.ridge, verbose=args.verbose)
    result = model.train(df)

    if not model.is_trained:
        print(f"\nModel not trained: {len(df)} measurements is not enough data")
        return

    if result.status == FitStatus.DEGRADED:
        print(f"\nWarning: {result.reason}")

    print("\n=== Predictions ===")
    scores = score_predictions(model, df, limit=args.limit)
    print(scores.to_string(index=False, float_format=lambda x: f"{x:.1f}"))
    metrics = summarize_scores(scores)
    print(f"\nRMSE: {metrics['rmse']:.2f}")
    print(f"MAE: {metrics['mae']:.2f}")
    print(f"R2: {metrics['r2']:.3f}")
    print(f"Mean accuracy: {metrics['mean_accuracy']:.1f}%")


if __name__ == "__main__":
    main()
