"""Exception types raised by the elastic length algebra."""


class ElasticLengthError(Exception):
    """Base class for all errors raised by this package."""


class DivideByZeroError(ElasticLengthError, ZeroDivisionError):
    """Raised when an elastic length is divided by zero."""


class OutOfDomainError(ElasticLengthError, ValueError):
    """Raised when a scaling factor lies outside the algebra's domain.

    The algebra is defined for elastic scaling factors ``s >= 0`` only.
    """


class NonConvexResultError(ElasticLengthError, ValueError):
    """Raised when an operation would turn a maximum into a minimum.

    Negating a maximum of several lines yields their minimum, which cannot be
    expressed as a set of segments.
    """
