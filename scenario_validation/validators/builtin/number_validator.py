"""Number validator."""

import re

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject

INTEGER_PATTERN = r"^\s*[+-]?\d+\s*$"
NUMBER_PATTERN = r"^\s*[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?\s*$"


class NumberValidator(BaseValidator):
    """Validates that an attribute is a number, optionally within bounds.
    
    Numeric strings such as ``" 42 "`` or ``"1.5e3"`` are accepted.
    
    Attributes:
        integer_only: Only accept integers
        allow_empty: Skip empty values
        max: Upper bound (inclusive), or None
        min: Lower bound (inclusive), or None
        too_big: Message used when the value exceeds ``max``
        too_small: Message used when the value is below ``min``
    """
    
    integer_only: bool = False
    allow_empty: bool = True
    max: int | float | None = None
    min: int | float | None = None
    too_big: str | None = None
    too_small: str | None = None
    integer_pattern: str = INTEGER_PATTERN
    number_pattern: str = NUMBER_PATTERN
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value, trim=True):
            return
        
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            self.add_error(obj, attribute, self.get_message("{attribute} must be a number."))
            return
        
        if self.integer_only:
            if not re.match(self.integer_pattern, str(value)):
                self.add_error(obj, attribute, self.get_message("{attribute} must be an integer."))
                return
        elif not re.match(self.number_pattern, str(value)):
            self.add_error(obj, attribute, self.get_message("{attribute} must be a number."))
            return
        
        number = float(value)
        if self.min is not None and number < self.min:
            message = self.too_small or "{attribute} is too small (minimum is {min})."
            self.add_error(obj, attribute, message, {"{min}": self.min})
        if self.max is not None and number > self.max:
            message = self.too_big or "{attribute} is too big (maximum is {max})."
            self.add_error(obj, attribute, message, {"{max}": self.max})
