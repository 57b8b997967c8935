"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException, ValueError):
    """An argument broke a rule of the warehouse (bad name, duplicate id...)."""


class ProductNotFoundError(ValidationError):
    """A price update targeted a product that is not in the warehouse.

    Lookups return ``None`` on a miss; only mutations treat a missing
    product as a caller error.
    """
