"""Custom exceptions for field validators."""

class FieldValidatorError(Exception):
    """Base exception class for field validators."""
    pass

class ValidationError(FieldValidatorError):
    """Returned when a value fails a format, range or membership rule."""
    pass

class ConfigurationError(FieldValidatorError):
    """Returned when a validator was built with invalid parameters."""
    pass
