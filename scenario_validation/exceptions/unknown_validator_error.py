"""Unknown validator error exception.

Raised by the validator factory when a name matches neither an inline
method on the data object, a registered alias, nor an importable
validator class.
"""

from scenario_validation.exceptions.base import BaseValidationError


class UnknownValidatorError(BaseValidationError):
    """Raised when a validator name cannot be resolved to a validator type."""
    
    pass
