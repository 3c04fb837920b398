"""Invalid handler error exception.

Raised at configuration time when a value that is not a usable error
handler is installed on a validator.
"""

from scenario_validation.exceptions.base import BaseValidationError


class InvalidHandlerError(BaseValidationError):
    """Raised when an error handler is not callable as
    ``handler(validator, attribute, message)``.
    """
    
    pass
