"""
grand.core.exceptions

All custom exceptions for grand.

Design: Fail fast and loud. Nothing is caught or retried internally.
"""


class GrandError(Exception):
    """Base exception for all grand errors."""
    pass


class ConversionError(GrandError, TypeError):
    """Caller-supplied seed or bound could not be converted.
    
    Raised at the API boundary, before any instance state changes.
    The underlying conversion failure is kept as ``__cause__``.
    """
    pass


class EntropySourceError(GrandError, OSError):
    """Nondeterministic entropy source failed.
    
    Raised only while resolving a pending unpredictable seed.
    """
    pass


class ValidationError(GrandError):
    """Input validation failed.
    
    Raised when an object does not satisfy an interface contract.
    """
    pass


class ConfigError(GrandError):
    """Configuration invalid or missing.
    
    Raised when config files are malformed or fields are invalid.
    """
    pass
