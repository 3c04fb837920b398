"""Base exception class for all validation engine errors.

This module defines the BaseValidationError class that serves as the base
for all configuration-time exceptions raised by the engine. Rule violations
found while validating data are never raised; they are reported through
``BaseValidator.add_error`` instead.
"""


class BaseValidationError(Exception):
    """Base exception for all validation engine errors.
    
    Attributes:
        message: Error message describing what went wrong
        context: Optional dictionary with additional error context
    """
    
    def __init__(
        self,
        message: str,
        context: dict | None = None
    ) -> None:
        """Initialize base validation error.
        
        Args:
            message: Human-readable error message
            context: Optional dictionary with additional error context
                (e.g., validator class, offending name)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message
    
    def __repr__(self) -> str:
        """Return detailed representation of the error.
        
        Returns:
            Detailed error representation including context
        """
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{context_str})"
