"""Exceptions raised by the tvmaze client itself.

Transport and HTTP failures are not wrapped: they surface as the
``requests`` exceptions raised by the underlying call.
"""


class TvmazeError(Exception):
    """Base class for errors raised by this library."""

    pass


class InvalidArgumentError(TvmazeError, ValueError):
    """An endpoint method received an argument it cannot send (missing ID, empty search, ...)."""

    pass
