"""
Unit tests for measurement validation and filtering.
"""

import pandas as pd

from signal_quality.data.validation import (
    filter_measurements,
    find_missing_columns,
    validate_measurements,
)


def make_frame():
    return pd.DataFrame({
        'locality': ['Downtown', 'Airport', 'Downtown', 'Park'],
        'latitude': [12.97, 12.95, 12.99, 12.96],
        'longitude': [77.59, 77.60, 77.58, 77.61],
        'signal_strength': [-70.0, -95.0, -110.0, -60.0],
        'signal_quality': [85.0, 55.0, 20.0, 95.0],
        'data_throughput': [50.0, 20.0, 5.0, 90.0],
        'latency': [20.0, 80.0, 200.0, 15.0],
        'network_type': ['5G', '4G', '3G', '5G'],
    })


class TestFindMissingColumns:
    """Tests for `find_missing_columns`."""

    def test_complete(self):
        assert find_missing_columns(make_frame()) == []

    def test_missing(self):
        df = make_frame().drop(columns=['latitude', 'network_type'])
        assert find_missing_columns(df) == ['latitude', 'network_type']


class TestValidateMeasurements:
    """Tests for `validate_measurements`."""

    def test_valid_data(self):
        is_valid, errors = validate_measurements(make_frame())
        assert is_valid
        assert errors == []

    def test_missing_columns(self):
        is_valid, errors = validate_measurements(make_frame().drop(columns=['signal_quality']))
        assert not is_valid
        assert any('signal_quality' in e for e in errors)

    def test_quality_out_of_range(self):
        df = make_frame()
        df.loc[0, 'signal_quality'] = 120.0
        df.loc[1, 'signal_quality'] = -5.0
        is_valid, errors = validate_measurements(df)
        assert not is_valid
        assert errors == ['Found 2 measurements with signal quality outside [0, 100]']

    def test_negative_throughput_and_latency(self):
        df = make_frame()
        df.loc[2, 'data_throughput'] = -1.0
        df.loc[3, 'latency'] = -10.0
        is_valid, errors = validate_measurements(df)
        assert not is_valid
        assert len(errors) == 2

    def test_optional_columns(self):
        df = make_frame().drop(columns=['data_throughput', 'latency'])
        is_valid, _ = validate_measurements(df)
        assert is_valid

    def test_verbose(self, capsys):
        validate_measurements(make_frame(), verbose=True)
        assert 'All validation checks passed' in capsys.readouterr().out


class TestFilterMeasurements:
    """Tests for `filter_measurements`."""

    def test_no_filters(self):
        df = make_frame()
        pd.testing.assert_frame_equal(filter_measurements(df), df)

    def test_locality(self):
        result = filter_measurements(make_frame(), locality='Downtown')
        assert list(result['locality']) == ['Downtown', 'Downtown']

    def test_network_type(self):
        result = filter_measurements(make_frame(), network_type='5G')
        assert list(result.index) == [0, 3]

    def test_min_signal_strength(self):
        result = filter_measurements(make_frame(), min_signal_strength=-100)
        assert list(result['signal_strength']) == [-70.0, -95.0, -60.0]

    def test_min_signal_strength_inclusive(self):
        result = filter_measurements(make_frame(), min_signal_strength=-95)
        assert list(result.index) == [0, 1, 3]

    def test_max_latency(self):
        result = filter_measurements(make_frame(), max_latency=50)
        assert list(result['latency']) == [20.0, 15.0]

    def test_max_latency_inclusive(self):
        result = filter_measurements(make_frame(), max_latency=80)
        assert list(result.index) == [0, 1, 3]

    def test_signal_strength_and_latency(self):
        result = filter_measurements(make_frame(), min_signal_strength=-90, max_latency=100)
        assert list(result.index) == [0, 3]

    def test_combined(self):
        result = filter_measurements(make_frame(), locality='Downtown', min_signal_strength=-100)
        assert len(result) == 1
        assert result.iloc[0]['network_type'] == '5G'

    def test_returns_copy(self):
        df = make_frame()
        result = filter_measurements(df)
        result.loc[0, 'signal_quality'] = 0.0
        assert df.loc[0, 'signal_quality'] == 85.0
