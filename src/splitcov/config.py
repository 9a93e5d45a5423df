import argparse
import logging

from .constants import AUTO_WINDOW_SIZE
from .util import cast_boolean, filepath
from .util import logger as _logger


class CustomHelpFormatter(argparse.ArgumentDefaultsHelpFormatter):
    """
    subclass the default help formatter to stop default printing for required arguments
    """

    def _format_args(self, action, default_metavar):
        if action.metavar is None:
            action.metavar = get_metavar(action.type)
        return super(CustomHelpFormatter, self)._format_args(action, default_metavar)

    def _get_help_string(self, action):
        if action.required:
            return action.help
        return super(CustomHelpFormatter, self)._get_help_string(action)

    def add_arguments(self, actions):
        # sort the arguments alphanumerically so they print in the help that way
        actions = sorted(actions, key=lambda x: getattr(x, 'option_strings'))
        super(CustomHelpFormatter, self).add_arguments(actions)


def positive_int(value):
    """
    cast input to an integer of at least 1

    Raises:
        argparse.ArgumentTypeError: the input is not an integer or is less than 1
    """
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('Must be an integer')
    if num < 1:
        raise argparse.ArgumentTypeError('Must be an integer greater than 0')
    return num


def positive_float(value):
    try:
        num = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError('Must be a number')
    if num <= 0:
        raise argparse.ArgumentTypeError('Must be a number greater than 0')
    return num


def float_at_least_one(value):
    num = positive_float(value)
    if num < 1:
        raise argparse.ArgumentTypeError('Must be a number of at least 1')
    return num


def odd_window_size(window_size: int, logger: logging.Logger = _logger) -> int:
    """
    bump an even window size to the next odd number. Window sizes at or below the
    auto sentinel are returned as is

    Example:
        >>> odd_window_size(4)
        5
        >>> odd_window_size(0)
        0
    """
    if window_size > AUTO_WINDOW_SIZE and window_size % 2 == 0:
        logger.warning(f'window size must be odd, using {window_size + 1} instead of {window_size}')
        return window_size + 1
    return window_size


def get_metavar(arg_type):
    """
    For a given argument type, returns the string to be used for the metavar argument in add_argument

    Example:
        >>> get_metavar(bool)
        '{True,False}'
    """
    if arg_type in [bool, cast_boolean]:
        return '{True,False}'
    elif arg_type in [positive_float, float_at_least_one, float]:
        return 'FLOAT'
    elif arg_type in [positive_int, int]:
        return 'INT'
    elif arg_type == filepath:
        return 'FILEPATH'
    return None
