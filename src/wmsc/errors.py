"""Custom exception hierarchy for wmsc."""

from typing import Optional


class WMSCError(Exception):
    """Base exception for the wmsc library."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class ValidationError(WMSCError):
    """Missing or invalid service options."""
    pass


class ConfigurationError(WMSCError):
    """Invalid builder configuration."""
    pass


class SerializationError(WMSCError):
    """Element tree that cannot be rendered as XML."""
    pass
