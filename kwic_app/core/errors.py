"""
Exceptions raised by the KWIC search system.
"""

class KwicError(Exception):
    """Base class for all KWIC search errors."""

class SchemaError(KwicError):
    """A required input column is missing."""

class InvalidArgumentError(KwicError, ValueError):
    """An argument is outside its accepted range."""
