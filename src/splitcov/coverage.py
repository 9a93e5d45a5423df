from typing import Optional

import pandas as pd

from .constants import COLUMNS, SPLIT_COVERAGE_COLUMNS
from .error import FormatError

COVERAGE_NA_VALUES = ['', 'NA', 'N/A', 'nan', 'NaN', 'None', 'null']


def read_split_coverages(filename: str) -> pd.DataFrame:
    """
    read the tab-delimited split coverage table

    Raises:
        FormatError: the header is not exactly the expected columns in the expected order
    """
    try:
        header = list(pd.read_csv(filename, sep='\t', nrows=0).columns)
    except pd.errors.EmptyDataError:
        raise FormatError('split coverage file is empty', filename)
    if header != SPLIT_COVERAGE_COLUMNS:
        raise FormatError(
            'split coverage file must have the columns', SPLIT_COVERAGE_COLUMNS, 'found', header
        )
    return pd.read_csv(
        filename,
        sep='\t',
        dtype={
            COLUMNS.unique_entry_id: int,
            COLUMNS.nt_position: int,
            COLUMNS.split_name: str,
            COLUMNS.sample_name: str,
            COLUMNS.coverage: float,
        },
        # split and sample names such as NA or null are names, not missing values
        keep_default_na=False,
        na_values={COLUMNS.coverage: COVERAGE_NA_VALUES},
    )


def sort_by_position(df: pd.DataFrame) -> pd.DataFrame:
    return df.sort_values(
        [COLUMNS.sample_name, COLUMNS.split_name, COLUMNS.nt_position], kind='mergesort'
    ).reset_index(drop=True)


def assign_x_values(df: pd.DataFrame) -> pd.DataFrame:
    """
    add the x_values column. When there is more than one split, the splits of each sample
    are laid end to end so x_values counts up from 0 across all of them

    Note:
        expects df to be sorted by sample, split and position (see sort_by_position)
    """
    if df[COLUMNS.split_name].nunique() > 1:
        x_values = df.groupby(COLUMNS.sample_name, sort=False).cumcount()
    else:
        x_values = df[COLUMNS.nt_position]
    return df.assign(**{COLUMNS.x_values: x_values.astype(int)})


def cap_coverage(df: pd.DataFrame, max_coverage: Optional[float] = None) -> pd.DataFrame:
    """
    replace any coverage above max_coverage by max_coverage. Does nothing when max_coverage is None
    """
    if max_coverage is None:
        return df
    return df.assign(**{COLUMNS.coverage: df[COLUMNS.coverage].clip(upper=max_coverage)})
