import logging
from typing import Optional

import pandas as pd

from .compress import compress_coverage
from .constants import COLUMNS, DEFAULTS
from .coverage import assign_x_values, cap_coverage, read_split_coverages, sort_by_position
from .sample_data import load_sample_data, merge_sample_data
from .util import logger as _logger


def reduce_split_coverages(
    df: pd.DataFrame,
    sample_data: Optional[pd.DataFrame] = None,
    window_size: int = DEFAULTS['window_size'],
    compress_threshold: int = DEFAULTS['compress_threshold'],
    no_compression: bool = DEFAULTS['no_compression'],
    max_coverage: Optional[float] = DEFAULTS['max_coverage'],
    logger: logging.Logger = _logger,
) -> pd.DataFrame:
    """
    turn a parsed split coverage table into the table handed to the plot

    Args:
        df: the split coverage table
        sample_data: optional sample names and colors, in plotting order
        window_size: odd running median window size, or <= 0 to compute it
        compress_threshold: compress when any sample has more points than this
        no_compression: never compress
        max_coverage: cap coverage at this value, None for no cap
        logger: where to report progress

    Returns:
        the sorted, compressed, capped table. Includes the sample data columns if sample_data was given

    Raises:
        ValidationError: a sample in the sample data has no coverage
    """
    df = sort_by_position(df)
    df = assign_x_values(df)
    logger.info(
        f'{df[COLUMNS.sample_name].nunique()} samples, {df[COLUMNS.split_name].nunique()} splits, {len(df)} rows'
    )

    order = None if sample_data is None else list(sample_data[COLUMNS.sample_name])
    if no_compression:
        logger.info('compression is turned off')
    else:
        df = compress_coverage(
            df,
            window_size=window_size,
            compress_threshold=compress_threshold,
            order=order,
            logger=logger,
        )

    df = cap_coverage(df, max_coverage)

    if sample_data is not None:
        df = merge_sample_data(df, sample_data, logger=logger)
    return df


def load_split_coverages(
    input_file: str,
    sample_data_file: Optional[str] = None,
    logger: logging.Logger = _logger,
    **kwargs,
) -> pd.DataFrame:
    """
    read the input files and reduce the coverage table. Other keyword arguments are passed
    to reduce_split_coverages
    """
    logger.info(f'loading: {input_file}')
    df = read_split_coverages(input_file)
    sample_data = None
    if sample_data_file:
        sample_data = load_sample_data(sample_data_file, logger=logger)
    return reduce_split_coverages(df, sample_data=sample_data, logger=logger, **kwargs)
