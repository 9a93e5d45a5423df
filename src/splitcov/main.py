#!python
import argparse
import logging
import os
import platform
import sys
import time
from typing import List, Optional

from . import __version__
from . import config as _config
from . import util as _util
from .constants import CHART_TYPE, DEFAULTS, EXIT_ERROR, EXIT_OK
from .error import FormatError, ValidationError
from .pipeline import load_split_coverages
from .plot import draw_coverage_plot


def create_parser(argv):
    parser = argparse.ArgumentParser(
        formatter_class=_config.CustomHelpFormatter,
        add_help=False,
        description='plot the coverage of each sample across its splits',
    )
    required = parser.add_argument_group('required arguments')
    optional = parser.add_argument_group('optional arguments')
    optional.add_argument('-h', '--help', action='help', help='show this help message and exit')
    optional.add_argument(
        '-v',
        '--version',
        action='version',
        version='%(prog)s version ' + __version__,
        help='Outputs the version number',
    )
    optional.add_argument('--log', help='redirect stdout to a log file', default=None)
    optional.add_argument(
        '--log_level',
        help='level of logging to output',
        choices=['INFO', 'DEBUG'],
        default='INFO',
    )

    required.add_argument(
        '-i',
        '--input',
        type=_util.filepath,
        required=True,
        help='tab-delimited split coverage table',
    )
    required.add_argument(
        '-o', '--output', required=True, help='path to the output pdf', metavar='FILEPATH'
    )
    optional.add_argument(
        '-s',
        '--sample_data',
        type=_util.filepath,
        default=None,
        help='tab-delimited sample_name/sample_color table. Only listed samples are plotted, in the listed order',
    )
    optional.add_argument(
        '--chart_type',
        choices=sorted(CHART_TYPE.values()),
        default=DEFAULTS['chart_type'],
        help='draw the coverage as a filled area or a line',
    )
    optional.add_argument(
        '--free_y_scale',
        type=_util.cast_boolean,
        default=DEFAULTS['free_y_scale'],
        help='scale the y-axis of each sample independently',
    )
    optional.add_argument(
        '--window_size',
        type=int,
        default=DEFAULTS['window_size'],
        help='running median window size used for compression. Must be odd. 0 or less to compute it from the data',
    )
    optional.add_argument(
        '--compress_threshold',
        type=_config.positive_int,
        default=DEFAULTS['compress_threshold'],
        help='compress the coverage if any sample has more than this many points',
    )
    optional.add_argument(
        '--no_compression',
        type=_util.cast_boolean,
        default=DEFAULTS['no_compression'],
        help='never compress the coverage',
    )
    optional.add_argument(
        '--max_coverage',
        type=_config.float_at_least_one,
        default=DEFAULTS['max_coverage'],
        help='coverage values above this are set to this value',
    )
    optional.add_argument(
        '--panel_height',
        type=_config.positive_float,
        default=DEFAULTS['panel_height'],
        help='height (inches) of the panel for each sample',
    )
    optional.add_argument(
        '--plot_width',
        type=_config.positive_float,
        default=DEFAULTS['plot_width'],
        help='width (inches) of the plot',
    )
    optional.add_argument(
        '--samples_per_page',
        type=_config.positive_int,
        default=DEFAULTS['samples_per_page'],
        help='maximum number of sample panels on each page',
    )
    optional.add_argument('--title', default=None, help='title to add to each page')

    return parser, parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """
    sets up the parser and checks the validity of command line args
    then reduces and plots the coverage table

    Args:
        argv: List of arguments, defaults to command line arguments
    """
    if argv is None:  # need to do at run time or patching will not behave as expected
        argv = sys.argv[1:]
    start_time = int(time.time())
    parser, args = create_parser(argv)

    log_conf = {
        'format': '{asctime} [{levelname}] {message}',
        'style': '{',
        'level': args.log_level,
    }

    original_logging_handlers = logging.root.handlers[:]
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    if args.log:  # redirect stdout AND stderr to a log file
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)
    logger = _util.logger

    logger.info(f'splitcov: {__version__}')
    logger.info(f'hostname: {platform.node()}')
    _util.log_arguments(args, log=logger)

    args.window_size = _config.odd_window_size(args.window_size, logger=logger)

    try:
        df = load_split_coverages(
            args.input,
            sample_data_file=args.sample_data,
            window_size=args.window_size,
            compress_threshold=args.compress_threshold,
            no_compression=args.no_compression,
            max_coverage=args.max_coverage,
            logger=logger,
        )
        if os.path.dirname(args.output):
            _util.mkdirp(os.path.dirname(args.output))
        logger.info(f'writing: {args.output}')
        pages = draw_coverage_plot(
            df,
            args.output,
            chart_type=args.chart_type,
            free_y_scale=args.free_y_scale,
            panel_height=args.panel_height,
            plot_width=args.plot_width,
            samples_per_page=args.samples_per_page,
            title=args.title,
        )
        logger.info(f'wrote {pages} page(s)')

        duration = int(time.time()) - start_time
        logger.info(f'run time (s): {duration}')
        return EXIT_OK
    except (FormatError, ValidationError) as err:
        logger.error(f'{err.__class__.__name__}: {err}')
        return EXIT_ERROR
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        for handler in original_logging_handlers:
            logging.root.addHandler(handler)


if __name__ == '__main__':
    sys.exit(main())
