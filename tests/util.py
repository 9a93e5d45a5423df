import os

import pandas as pd

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def get_data(*paths):
    return os.path.join(DATA_DIR, *paths)


def coverage_table(sample_names, split_names, coverage, nt_position=None):
    """
    build a split coverage table from per-row values
    """
    size = len(coverage)
    return pd.DataFrame(
        {
            'unique_entry_id': list(range(size)),
            'nt_position': list(nt_position if nt_position is not None else range(size)),
            'split_name': list(split_names),
            'sample_name': list(sample_names),
            'coverage': list(coverage),
        }
    )
