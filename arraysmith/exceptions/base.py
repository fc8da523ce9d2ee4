class ArraySmithError(Exception):
    """Base class for every error raised by arraysmith."""

    pass
