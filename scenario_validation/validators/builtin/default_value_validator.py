"""Default value validator.

Not a check: assigns a default to the attribute and never reports errors.
"""

from typing import Any

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject


class DefaultValueValidator(BaseValidator):
    """Sets an attribute to a default value.
    
    Attributes:
        value: Value to assign
        set_on_empty: Only assign when the current value is None or ""
            (True), or always overwrite (False)
    """
    
    value: Any = None
    set_on_empty: bool = True
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        if self.set_on_empty:
            current = getattr(obj, attribute, None)
            if current is not None and current != "":
                return
        setattr(obj, attribute, self.value)
