import re
from typing import List

import pandas as pd
from colour import COLOR_NAME_TO_RGB

from .constants import COLUMNS, FALLBACK_COLOR

HEX_COLOR_PATTERN = re.compile(r'^#[0-9a-fA-F]{6}$')


def is_hex_color(color: str) -> bool:
    """
    check if a string is a 6 digit hex color code

    Example:
        >>> is_hex_color('#123fFf')
        True
        >>> is_hex_color('#333')
        False
    """
    return bool(HEX_COLOR_PATTERN.match(str(color)))


def is_named_color(color: str) -> bool:
    return str(color).lower() in COLOR_NAME_TO_RGB


def is_valid_color(color) -> bool:
    if color is None or pd.isnull(color) or color == '':
        return False
    return is_hex_color(color) or is_named_color(color)


def fix_colors(sample_data: pd.DataFrame) -> List[str]:
    """
    get the sample colors, replacing any invalid color with the fallback color

    Args:
        sample_data: table with a sample_color column

    Returns:
        the corrected colors in the same order as the input rows
    """
    return [
        color if is_valid_color(color) else FALLBACK_COLOR
        for color in sample_data[COLUMNS.sample_color]
    ]
