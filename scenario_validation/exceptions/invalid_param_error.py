"""Invalid parameter error exception.

Raised when a parameter value given to the factory does not fit the type
declared for the validator field it targets.
"""

from scenario_validation.exceptions.base import BaseValidationError


class InvalidParamError(BaseValidationError):
    """Raised when a validator field receives a value of the wrong type."""
    
    pass
