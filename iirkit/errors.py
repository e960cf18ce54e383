"""Exception types raised by iirkit."""


class IirkitError(Exception):
    """Base class for all iirkit errors."""


class InvalidCoefficientsError(IirkitError, ValueError):
    """Transfer-function coefficients cannot define a filter.

    Raised when the leading denominator coefficient is (numerically) zero,
    or when either coefficient sequence is empty, not 1-D, or non-finite.
    The filter is left exactly as it was before the failed assignment.
    """


class UnsupportedModeError(IirkitError, ValueError):
    """The requested filtering mode is not one of :class:`FilteringMode`."""
