"""
reading the per-sample data (colors and plotting order) and merging it into the coverage table
"""
import logging
from typing import Iterable, Tuple

import pandas as pd

from .color import fix_colors
from .constants import COLUMNS, SAMPLE_DATA_COLUMNS, SPLIT_COVERAGE_COLUMNS
from .error import FormatError, ValidationError
from .util import logger as _logger

RESERVED_COLUMNS = [
    col for col in SPLIT_COVERAGE_COLUMNS + [COLUMNS.x_values] if col != COLUMNS.sample_name
]
"""coverage table columns which the sample data may not also define"""


def read_sample_data(filename: str) -> pd.DataFrame:
    """
    read the tab-delimited sample data file. The row order of the file is the plotting order

    Raises:
        FormatError: the header does not start with the sample_name and sample_color columns
        ValidationError: a sample name is listed more than once
    """
    try:
        df = pd.read_csv(
            filename,
            sep='\t',
            dtype={COLUMNS.sample_name: str, COLUMNS.sample_color: str},
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        raise FormatError('sample data file is empty', filename)

    header = list(df.columns)
    if header[: len(SAMPLE_DATA_COLUMNS)] != SAMPLE_DATA_COLUMNS:
        raise FormatError(
            'sample data file must have the columns', SAMPLE_DATA_COLUMNS, 'found', header
        )
    reserved = [col for col in header if col in RESERVED_COLUMNS]
    if reserved:
        raise FormatError('sample data columns clash with the coverage table columns', reserved)
    duplicates = df[COLUMNS.sample_name][df[COLUMNS.sample_name].duplicated()]
    if not duplicates.empty:
        raise ValidationError('sample names must be unique in the sample data', sorted(set(duplicates)))
    return df


def load_sample_data(filename: str, logger: logging.Logger = _logger) -> pd.DataFrame:
    """
    read the sample data and replace any invalid colors
    """
    logger.info(f'loading: {filename}')
    df = read_sample_data(filename)
    colors = fix_colors(df)
    for sample_name, original, fixed in zip(df[COLUMNS.sample_name], df[COLUMNS.sample_color], colors):
        if original != fixed:
            logger.warning(f'invalid color {repr(original)} for sample {sample_name}, using {fixed}')
    df[COLUMNS.sample_color] = colors
    logger.info(f'loaded data for {len(df)} samples')
    return df


def check_sample_names(sample_data: pd.DataFrame, sample_names: Iterable[str]):
    """
    Raises:
        ValidationError: a sample in the sample data has no coverage
    """
    known = set(sample_names)
    missing = [name for name in sample_data[COLUMNS.sample_name] if name not in known]
    if missing:
        raise ValidationError(
            'samples in the sample data are missing from the coverage table', missing
        )


def subset_to_known_samples(
    df: pd.DataFrame, sample_data: pd.DataFrame
) -> Tuple[pd.DataFrame, bool]:
    """
    drop the coverage rows for samples not listed in the sample data

    Returns:
        the remaining rows and a flag which is True if any rows were dropped
    """
    keep = df[COLUMNS.sample_name].isin(sample_data[COLUMNS.sample_name])
    return df[keep], not keep.all()


def sort_by_sample_order(df: pd.DataFrame, sample_data: pd.DataFrame) -> pd.DataFrame:
    """
    sort the rows by the position of their sample in the sample data and then by x_values
    """
    rank = {name: i for i, name in enumerate(sample_data[COLUMNS.sample_name])}
    ranked = df.assign(_sample_rank=df[COLUMNS.sample_name].map(rank))
    ranked = ranked.sort_values(['_sample_rank', COLUMNS.x_values], kind='mergesort')
    return ranked.drop(columns=['_sample_rank']).reset_index(drop=True)


def join_sample_data(df: pd.DataFrame, sample_data: pd.DataFrame) -> pd.DataFrame:
    """
    add the sample data columns to every row of df. Columns df already has are not joined

    Note:
        a left join so the rows and row order of df are kept
    """
    columns = [COLUMNS.sample_name] + [col for col in sample_data.columns if col not in df]
    return df.merge(sample_data[columns], on=COLUMNS.sample_name, how='left', sort=False)


def merge_sample_data(
    df: pd.DataFrame, sample_data: pd.DataFrame, logger: logging.Logger = _logger
) -> pd.DataFrame:
    """
    restrict the coverage table to the samples in the sample data, put them in the
    sample data order and add the sample data columns

    Raises:
        ValidationError: a sample in the sample data has no coverage
    """
    check_sample_names(sample_data, df[COLUMNS.sample_name].unique())
    df, dropped = subset_to_known_samples(df, sample_data)
    if dropped:
        logger.info(
            f'the sample data lists {len(sample_data)} samples, coverage for other samples will not be plotted'
        )
    df = sort_by_sample_order(df, sample_data)
    return join_sample_data(df, sample_data)
