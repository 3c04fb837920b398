"""Invalid state error exception.

Raised when a validator is asked to store a state whose name is not part
of its state whitelist.
"""

from scenario_validation.exceptions.base import BaseValidationError


class InvalidStateError(BaseValidationError):
    """Raised when setting a state that is not in the valid states whitelist.
    
    The context carries the offending ``state`` name and the ``validator``
    class name.
    """
    
    pass
