"""Range validator: the attribute must be one of a list of values."""

from typing import Any

from scenario_validation.exceptions.invalid_param_error import InvalidParamError
from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject
from scenario_validation.validators.builtin.comparison import values_equal


class RangeValidator(BaseValidator):
    """Validates that an attribute is (or with ``not_``, is not) in a list.
    
    Attributes:
        range: Allowed values
        strict: Require the same type as well as value
        allow_empty: Skip empty values
        not_: Invert the check
    """
    
    range: list[Any] | None = None
    strict: bool = False
    allow_empty: bool = True
    not_: bool = False
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        if self.range is None:
            raise InvalidParamError(
                'The "range" property must be specified with a list of values.',
                context={"validator": type(self).__name__, "attribute": attribute},
            )
        
        found = any(values_equal(value, item, self.strict) for item in self.range)
        if not self.not_ and not found:
            self.add_error(obj, attribute, self.get_message("{attribute} is not in the list."))
        elif self.not_ and found:
            self.add_error(obj, attribute, self.get_message("{attribute} is in the list."))
