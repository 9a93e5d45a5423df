import logging

import pandas as pd
import pytest

from splitcov.compress import (
    auto_window_size,
    compress_coverage,
    points_per_sample,
    running_median,
    shrink_data,
    smooth_coverage,
)

from ..util import coverage_table


class TestPointsPerSample:
    def test_counts_per_sample(self):
        df = coverage_table(['sample_1'] * 5 + ['sample_2'] * 5, ['contig'] * 10, range(1, 11))
        assert points_per_sample(df).tolist() == [5, 5]

    def test_sample_order(self):
        df = coverage_table(['a'] * 2 + ['b'] * 3, ['contig'] * 5, range(5))
        actual = points_per_sample(df, order=['b', 'a'])
        assert actual.index.tolist() == ['b', 'a']
        assert actual.tolist() == [3, 2]


class TestAutoWindowSize:
    def test_bumps_even_window(self):
        assert auto_window_size(999) == 3

    def test_larger_sample(self):
        assert auto_window_size(2000) == 7

    def test_odd_window_kept(self):
        assert auto_window_size(1000) == 3

    def test_small_sample(self):
        assert auto_window_size(10) == 1


class TestRunningMedian:
    def test_shrinking_edges(self):
        assert running_median([1, 4, 3, 4], 3).tolist() == [1, 3, 4, 4]

    def test_window_five(self):
        actual = running_median([5, 1, 9, 2, 8, 3, 7], 5)
        # edges use windows of 1 and 3 points
        assert actual.tolist() == [5, 5, 5, 3, 7, 7, 7]

    def test_window_one_is_identity(self):
        assert running_median([3, 1, 2], 1).tolist() == [3, 1, 2]

    def test_window_larger_than_values(self):
        assert running_median([3, 1, 2], 7).tolist() == [3, 2, 2]

    def test_even_window(self):
        with pytest.raises(ValueError):
            running_median([1, 2, 3], 2)


class TestSmoothCoverage:
    def test_smooths_each_sample(self):
        coverage = [1, 4, 3, 4]
        smoothed = [1, 3, 4, 4]
        df = coverage_table(
            ['sample_2'] * 8 + ['sample_1'] * 8,
            ['contig_1'] * 4 + ['contig_2'] * 4 + ['contig_1'] * 4 + ['contig_2'] * 4,
            coverage
            + [c * 10 for c in coverage]
            + [c * 100 for c in coverage]
            + [c * 1000 for c in coverage],
        )
        actual = smooth_coverage(df, window_size=3)
        # sample_1 is first as samples are visited in sorted order
        assert actual.tolist() == (
            [c * 100 for c in smoothed]
            + [c * 1000 for c in smoothed]
            + smoothed
            + [c * 10 for c in smoothed]
        )
        assert actual.index.tolist() == list(range(8, 16)) + list(range(0, 8))

    def test_realigns_to_rows(self):
        df = coverage_table(['b'] * 4 + ['a'] * 4, ['contig'] * 8, [1, 4, 3, 4] * 2)
        df['coverage'] = smooth_coverage(df, window_size=3)
        assert df['coverage'].tolist() == [1, 3, 4, 4] * 2


class TestShrinkData:
    def test_keeps_first_last_and_window_multiples(self):
        df = pd.DataFrame(
            {
                'sample_name': ['s1'] * 8 + ['s2'] * 8,
                'x_values': list(range(8)) * 2,
                'split_name': ['c1'] * 4 + ['c2'] * 4 + ['c1'] * 4 + ['c2'] * 4,
                'coverage': [10] * 16,
            }
        )
        actual = shrink_data(df, window_size=3)
        assert actual.index.tolist() == [0, 3, 6, 7, 8, 11, 14, 15]
        assert actual['x_values'].tolist() == [0, 3, 6, 7] * 2

    def test_last_point_per_sample(self):
        df = pd.DataFrame({'sample_name': ['s1'] * 5 + ['s2'] * 3, 'x_values': list(range(5)) + list(range(3))})
        actual = shrink_data(df, window_size=3)
        assert actual['x_values'].tolist() == [0, 3, 4, 0, 2]


@pytest.fixture
def large_table():
    size = 2000
    df = coverage_table(['a'] * size + ['b'] * 100, ['contig'] * (size + 100), [5] * (size + 100))
    df['x_values'] = list(range(size)) + list(range(100))
    return df


class TestCompressCoverage:
    def test_below_threshold_is_noop(self, large_table):
        actual = compress_coverage(large_table, window_size=3, compress_threshold=5000)
        assert actual is large_table

    def test_auto_window_from_largest_sample(self, large_table, caplog):
        with caplog.at_level(logging.WARNING, logger='splitcov'):
            actual = compress_coverage(large_table, window_size=0, compress_threshold=1000)
        assert 'different numbers of points' in caplog.text
        # window size 7 for 2000 points is used for both samples
        assert actual[actual.sample_name == 'a']['x_values'].tolist()[:3] == [0, 7, 14]
        assert actual[actual.sample_name == 'b']['x_values'].tolist() == list(range(0, 100, 7)) + [99]

    def test_given_window_size(self, large_table):
        actual = compress_coverage(large_table, window_size=101, compress_threshold=1000)
        assert actual[actual.sample_name == 'b']['x_values'].tolist() == [0, 99]
        assert len(actual[actual.sample_name == 'a']) == 21

    def test_input_not_modified(self, large_table):
        large_table.loc[1, 'coverage'] = 100
        compress_coverage(large_table, window_size=3, compress_threshold=1000)
        assert large_table.loc[1, 'coverage'] == 100

    def test_injected_logger(self, large_table, caplog):
        with caplog.at_level(logging.INFO, logger='splitcov.test'):
            compress_coverage(
                large_table,
                window_size=3,
                compress_threshold=5000,
                logger=logging.getLogger('splitcov.test'),
            )
        messages = [r.getMessage() for r in caplog.records if r.name == 'splitcov.test']
        assert messages and 'skipping compression' in messages[0]
