"""Domain-level exceptions.

All catalog rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidIdError(ValidationError):
    """An item id suffix is empty or not alphanumeric."""


class DuplicateIdError(ValidationError):
    """An item with the same id already exists."""


class UnknownCategoryError(ValidationError):
    """A category code is not one of CL, EL or EN."""


class InvalidNameError(ValidationError):
    """An item name is empty."""


class InvalidQuantityError(ValidationError):
    """A quantity is not a whole number in the allowed range."""


class InvalidPriceError(ValidationError):
    """A price is not a positive decimal."""


class NoChangeError(ValidationError):
    """An update would leave the value exactly as it is."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class NotFoundError(EntityNotFoundError):
    """No item with the requested id is in the catalog."""


class EmptyCatalogError(DomainException):
    """The catalog holds no items to act on."""
