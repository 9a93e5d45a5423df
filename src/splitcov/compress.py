"""
smoothing and decimation of large coverage tracks ("compression")

Coverage is smoothed per sample with a running median and then only every
window_size-th point (plus the final point of each sample) is kept.
"""
import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .constants import AUTO_WINDOW_SIZE, COLUMNS
from .group import aggregate_by_group
from .util import logger as _logger


def points_per_sample(df: pd.DataFrame, order: Optional[Iterable] = None) -> pd.Series:
    """
    count the rows for each sample, indexed by sample name in group order
    """
    return aggregate_by_group(df, COLUMNS.coverage, COLUMNS.sample_name, len, order=order)


def auto_window_size(sample_size: int) -> int:
    """
    pick a running median window size which scales with the number of points

    Example:
        >>> auto_window_size(999)
        3
        >>> auto_window_size(2000)
        7
    """
    window_size = int(sample_size) * 3 // 1000
    if window_size % 2 == 0:
        window_size += 1
    return window_size


def running_median(values, window_size: int) -> np.ndarray:
    """
    centred running median. Points closer than half a window to either end use the
    largest symmetric window which fits

    Args:
        values: the values to smooth
        window_size: odd number of points in the window

    Example:
        >>> running_median([1, 4, 3, 4], 3).tolist()
        [1.0, 3.0, 4.0, 4.0]
    """
    if window_size < 1 or window_size % 2 == 0:
        raise ValueError('window size must be a positive odd integer', window_size)
    values = np.asarray(values, dtype=float)
    size = len(values)
    half = window_size // 2
    rolling = pd.Series(values).rolling(window_size, center=True, min_periods=window_size)
    result = rolling.median().to_numpy(copy=True)
    for i in list(range(min(half, size))) + list(range(max(size - half, half), size)):
        width = min(i, size - 1 - i, half)
        result[i] = np.median(values[i - width : i + width + 1])
    return result


def smooth_coverage(
    df: pd.DataFrame, window_size: int, order: Optional[Iterable] = None
) -> pd.Series:
    """
    smooth the coverage of each sample with a running median

    Returns:
        the smoothed coverage, sample by sample in group order, indexed by the row labels of df
    """
    return aggregate_by_group(
        df,
        COLUMNS.coverage,
        COLUMNS.sample_name,
        lambda coverage: running_median(coverage, window_size),
        order=order,
        elementwise=True,
    )


def shrink_data(df: pd.DataFrame, window_size: int) -> pd.DataFrame:
    """
    keep every window_size-th point of each sample along with its final point
    """
    last_x = df.groupby(COLUMNS.sample_name)[COLUMNS.x_values].transform('max')
    keep = (df[COLUMNS.x_values] % window_size == 0) | (df[COLUMNS.x_values] == last_x)
    return df[keep]


def compress_coverage(
    df: pd.DataFrame,
    window_size: int = AUTO_WINDOW_SIZE,
    compress_threshold: int = 10000,
    order: Optional[Iterable] = None,
    logger: logging.Logger = _logger,
) -> pd.DataFrame:
    """
    smooth and decimate the coverage table if any sample has more than compress_threshold points

    Args:
        df: coverage table with x_values assigned
        window_size: odd window size, or a value <= 0 to compute it from the largest sample
        compress_threshold: samples with more points than this trigger compression
        order: explicit sample order
        logger: where to report progress

    Returns:
        the compressed table, or df itself when no sample is over the threshold
    """
    counts = points_per_sample(df, order=order)
    if not (counts > compress_threshold).any():
        logger.info(f'no sample has more than {compress_threshold} points, skipping compression')
        return df

    if window_size <= AUTO_WINDOW_SIZE:
        if counts.nunique() > 1:
            logger.warning(
                f'samples have different numbers of points ({counts.min()}-{counts.max()}). '
                'The window size is computed from the largest sample and used for all samples'
            )
        window_size = auto_window_size(counts.max())
    logger.info(f'compressing coverage with window size {window_size}')

    df = df.copy()
    df[COLUMNS.coverage] = smooth_coverage(df, window_size, order=order)
    result = shrink_data(df, window_size)
    logger.info(f'compressed from {len(df)} to {len(result)} rows')
    return result
