"""Required validator: the attribute must not be blank."""

from typing import Any

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject
from scenario_validation.validators.builtin.comparison import values_equal


class RequiredValidator(BaseValidator):
    """Validates that an attribute is not empty.
    
    When ``required_value`` is set, the attribute must equal it instead.
    
    Attributes:
        required_value: Exact value the attribute must have, or None
        strict: Compare with required_value by type as well as value
    """
    
    required_value: Any = None
    strict: bool = False
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.required_value is not None:
            if not values_equal(value, self.required_value, self.strict):
                message = self.get_message("{attribute} must be {value}.")
                self.add_error(obj, attribute, message, {"{value}": self.required_value})
        elif self.is_empty(value, trim=True):
            message = self.get_message("{attribute} cannot be blank.")
            self.add_error(obj, attribute, message)
