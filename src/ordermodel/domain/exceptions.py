"""Domain-level exceptions.

Precondition violations raised by the Order aggregate are subclasses of
DomainException so callers can catch them uniformly. Validation failures
are *not* raised: ``Order.validate()`` returns them as data.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException, ValueError):
    """An operation received a value that violates its precondition."""
