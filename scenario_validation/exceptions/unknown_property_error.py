"""Unknown property error exception.

Raised when a parameter or attribute name is neither a declared validator
field nor a whitelisted state name.
"""

from scenario_validation.exceptions.base import BaseValidationError


class UnknownPropertyError(BaseValidationError, AttributeError):
    """Raised when reading or assigning an undefined validator property.
    
    This also derives from AttributeError so ``getattr(obj, name, default)``
    and ``hasattr`` keep their usual behaviour on validators.
    """
    
    pass
