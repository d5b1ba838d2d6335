"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input; the object being built never comes into existence."""


class DuplicateKeyError(DomainException):
    """A product with the same ID is already stored."""


class NotFoundError(DomainException):
    """A requested product does not exist."""


class InsufficientStockError(DomainException):
    """A stock adjustment would leave the stock negative."""


class LicenseError(DomainException):
    """The user holds no active license for a digital product."""


class CapabilityError(DomainException):
    """A capability was requested from a product variant that lacks it.

    This is a caller error, not a business-rule rejection: the caller is
    expected to check ``product.kind`` before invoking a capability.
    """
