import errno
import logging
import os

from mavis_config import bash_expands

logger = logging.getLogger('splitcov')


def filepath(path):
    try:
        file_list = bash_expands(path)
    except FileNotFoundError:
        raise TypeError('File does not exist', path)
    else:
        if not file_list:
            raise TypeError('File not found', path)
        elif len(file_list) > 1:
            raise TypeError('File pattern match multiple files and expected only one', path)
    return file_list[0]


def cast_boolean(input_value):
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes', '+']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no', '-']:
        return False
    raise TypeError('casting to boolean failed', input_value)


def log_arguments(args, log=logger):
    """
    output the arguments to the console

    Args:
        args (Namespace): the namespace to print arguments for
        log: the logger to write to
    """
    log.info('arguments')
    for arg, val in sorted(vars(args).items()):
        log.info(f' {arg} = {repr(val)}')


def mkdirp(dirname):
    """
    Make a directory or path of directories. Suppresses the error that is normally raised when the directory already exists
    """
    logger.info(f"creating output directory: '{dirname}'")
    try:
        os.makedirs(dirname)
    except OSError as exc:
        if exc.errno == errno.EEXIST and os.path.isdir(dirname):
            pass
        else:
            raise exc
    return dirname
