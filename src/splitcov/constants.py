"""
module responsible for constants used throughout the splitcov package
"""
from typing import List

from mavis_config.constants import MavisNamespace

PROGNAME: str = 'splitcov'
EXIT_OK: int = 0
EXIT_ERROR: int = 1

FALLBACK_COLOR: str = '#333333'
"""color used for samples without a valid color"""

AUTO_WINDOW_SIZE: int = 0
"""any window size at or below this value is computed from the data"""


class COLUMNS(MavisNamespace):
    """
    Column names for the input and output tables
    """

    unique_entry_id: str = 'unique_entry_id'
    nt_position: str = 'nt_position'
    split_name: str = 'split_name'
    sample_name: str = 'sample_name'
    coverage: str = 'coverage'
    x_values: str = 'x_values'
    sample_color: str = 'sample_color'


class CHART_TYPE(MavisNamespace):
    """
    holds controlled vocabulary for the supported chart types

    Attributes:
        AREA: coverage drawn as a filled area
        LINE: coverage drawn as a line
    """

    AREA: str = 'area'
    LINE: str = 'line'


SPLIT_COVERAGE_COLUMNS: List[str] = [
    COLUMNS.unique_entry_id,
    COLUMNS.nt_position,
    COLUMNS.split_name,
    COLUMNS.sample_name,
    COLUMNS.coverage,
]
"""required header of the coverage table, in order"""

SAMPLE_DATA_COLUMNS: List[str] = [COLUMNS.sample_name, COLUMNS.sample_color]
"""required leading columns of the sample data table, in order"""

DEFAULTS = {
    'chart_type': CHART_TYPE.AREA,
    'compress_threshold': 10000,
    'free_y_scale': False,
    'max_coverage': None,
    'no_compression': False,
    'panel_height': 1.5,
    'plot_width': 10.0,
    'samples_per_page': 10,
    'window_size': AUTO_WINDOW_SIZE,
}
