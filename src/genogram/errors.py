"""Exceptions raised by the genogram layout."""


class GenogramError(ValueError):
    """Base class for genogram errors."""


class ConfigurationError(GenogramError):
    """Raised when the layout geometry is not usable."""


class EmptyInputError(GenogramError):
    """Raised when there is nobody to lay out."""
