"""Boolean validator."""

from typing import Any

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject
from scenario_validation.validators.builtin.comparison import values_equal


class BooleanValidator(BaseValidator):
    """Validates that an attribute is one of two boolean representations.
    
    With the defaults, ``"1"``, ``1``, ``True``, ``"0"``, ``0`` and
    ``False`` pass unless ``strict`` is set.
    
    Attributes:
        true_value: Value representing true
        false_value: Value representing false
        strict: Require the same type as true_value/false_value
        allow_empty: Skip empty values
    """
    
    true_value: Any = "1"
    false_value: Any = "0"
    strict: bool = False
    allow_empty: bool = True
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        if not (
            values_equal(value, self.true_value, self.strict)
            or values_equal(value, self.false_value, self.strict)
        ):
            message = self.get_message("{attribute} must be either {true} or {false}.")
            self.add_error(
                obj,
                attribute,
                message,
                {"{true}": self.true_value, "{false}": self.false_value},
            )
