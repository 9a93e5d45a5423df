class FormatError(Exception):
    """
    raised when an input table does not have the expected header
    """

    pass


class ValidationError(Exception):
    """
    raised when the sample data does not agree with the coverage table

    for example if a sample listed in the sample data file has no coverage rows
    """

    pass
