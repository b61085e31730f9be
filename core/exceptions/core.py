"""HBaseSearch Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the record mapping core.
Configuration problems are fatal and surface while a mapper is being built;
decoding problems are recoverable and stay isolated to a single value.
"""

from typing import Optional, Any, Dict


class HBaseSearchError(Exception):
    """Base exception for all HBaseSearch-specific errors.
    
    This is the root exception class that all other HBaseSearch exceptions
    inherit from. It carries an optional context dictionary and the
    underlying cause for debugging.
    """
    
    def __init__(
        self, 
        message: str, 
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize HBaseSearch error.
        
        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., field names, row keys)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause
    
    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message
    
    def add_context(self, key: str, value: Any) -> "HBaseSearchError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ValidationError(HBaseSearchError):
    """Raised when a domain model is constructed with invalid data."""
    
    def __init__(
        self, 
        field: str, 
        value: Any, 
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.
        
        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(HBaseSearchError):
    """Raised when a field configuration cannot be turned into a mapper.
    
    Typical causes are an unparsable column expression or an unknown
    type name. These errors are raised while a record mapper is being
    constructed, before any record is processed.
    """
    
    def __init__(
        self, 
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize configuration error.
        
        Args:
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"
        
        super().__init__(message, context, cause)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason


class ValueDecodingError(HBaseSearchError):
    """Raised when raw bytes cannot be decoded as the declared type.
    
    Callers on the record path catch this error, report it and skip the
    offending value; the rest of the record is still indexed.
    """
    
    def __init__(
        self, 
        type_name: Optional[str] = None,
        value: Optional[bytes] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize value decoding error.
        
        Args:
            type_name: Declared type the value was decoded as (e.g., "long")
            value: The raw bytes that failed to decode
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        prefix = f"Cannot decode value as '{type_name}'" if type_name else "Cannot decode value"
        message = f"{prefix}: {reason}" if reason else prefix
        
        super().__init__(message, context, cause)
        self.type_name = type_name
        self.value = value
        self.reason = reason
