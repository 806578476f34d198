"""Exceptions raised by linefit.

Everything derives from ``LinefitError`` so the command line front end can
report any failure the same way. Only ``MalformedRecord`` is recovered
from (inside the loader); the rest end the run.
"""


class LinefitError(Exception):
    """Base class for all linefit failures."""


class SourceUnavailable(LinefitError):
    """The input file could not be opened."""


class MalformedRecord(LinefitError, ValueError):
    """A single input line is not a pair of comma-separated numbers."""


class ReadFailure(LinefitError):
    """The input could not be read to the end."""


class RenderFailure(LinefitError):
    """Building or writing the plot failed."""
