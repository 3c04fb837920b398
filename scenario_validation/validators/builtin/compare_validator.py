"""Compare validator: checks an attribute against another value.

The comparison target is either a constant (``compare_value``) or another
attribute of the same object (``compare_attribute``, defaulting to
``<attribute>_repeat`` as used for password confirmation fields).
"""

import operator as op
from typing import Any, Callable

from scenario_validation.exceptions.invalid_param_error import InvalidParamError
from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject
from scenario_validation.validators.builtin.comparison import values_equal

ORDERING: dict[str, tuple[Callable[[Any, Any], bool], str]] = {
    ">": (op.gt, '{attribute} must be greater than "{compareValue}".'),
    ">=": (op.ge, '{attribute} must be greater than or equal to "{compareValue}".'),
    "<": (op.lt, '{attribute} must be less than "{compareValue}".'),
    "<=": (op.le, '{attribute} must be less than or equal to "{compareValue}".'),
}


class CompareValidator(BaseValidator):
    """Compares an attribute with a constant or another attribute.
    
    Attributes:
        compare_attribute: Attribute to compare with
        compare_value: Constant to compare with; takes precedence over
            compare_attribute
        strict: For equality operators, also require the same type
        allow_empty: Skip empty values
        operator: One of ``=``, ``==``, ``!=``, ``>``, ``>=``, ``<``, ``<=``
    """
    
    compare_attribute: str | None = None
    compare_value: Any = None
    strict: bool = False
    allow_empty: bool = False
    operator: str = "="
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        
        if self.compare_value is not None:
            compare_to = compare_value = self.compare_value
        else:
            compare_attribute = self.compare_attribute or f"{attribute}_repeat"
            compare_value = getattr(obj, compare_attribute, None)
            compare_to = obj.get_attribute_label(compare_attribute)
        
        params = {"{compareAttribute}": compare_to, "{compareValue}": compare_value}
        
        if self.operator in ("=", "=="):
            if not values_equal(value, compare_value, self.strict):
                message = self.get_message("{attribute} must be repeated exactly.")
                self.add_error(obj, attribute, message, params)
        elif self.operator == "!=":
            if values_equal(value, compare_value, self.strict):
                message = self.get_message('{attribute} must not be equal to "{compareValue}".')
                self.add_error(obj, attribute, message, params)
        elif self.operator in ORDERING:
            compare, default_message = ORDERING[self.operator]
            try:
                passed = compare(value, compare_value)
            except TypeError:
                passed = False
            if not passed:
                self.add_error(obj, attribute, self.get_message(default_message), params)
        else:
            raise InvalidParamError(
                f'Invalid operator "{self.operator}".',
                context={"validator": type(self).__name__, "operator": self.operator},
            )
