"""Exceptions raised by cntr components and handled by the driver."""


class CntrError(Exception):
    """Base class for errors that end the program with status 1."""


class UsageError(CntrError):
    """Raised when the command line has the wrong number of arguments."""


class InputError(CntrError):
    """Raised when the input cannot be opened, sized or read."""


class DocumentError(CntrError):
    """Raised when the document cannot be built."""
