"""Elastic length algebra for layouts whose gaps stretch with one scaling factor."""

from .algebra import add, divide, equivalent, max_y, scale, scale_elastic, simplify, subtract
from .errors import DivideByZeroError, ElasticLengthError, NonConvexResultError, OutOfDomainError
from .models import ResolverConfig, Segment, Y, constant_y, elastic_y
from .resolver import ElasticResolver, deresolve, resolve, resolve_many

__all__ = [
    "Segment",
    "Y",
    "constant_y",
    "elastic_y",
    "add",
    "subtract",
    "scale",
    "divide",
    "scale_elastic",
    "max_y",
    "simplify",
    "equivalent",
    "resolve",
    "resolve_many",
    "deresolve",
    "ElasticResolver",
    "ResolverConfig",
    "ElasticLengthError",
    "DivideByZeroError",
    "OutOfDomainError",
    "NonConvexResultError",
]
