"""Filter validator: transforms the attribute with a callable."""

from typing import Any, Callable

from scenario_validation.exceptions.invalid_param_error import InvalidParamError
from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject


class FilterValidator(BaseValidator):
    """Replaces the attribute value with ``filter(value)``.
    
    Typically used to normalize input before other validators run, e.g.
    ``("email", "filter", {"filter": str.strip})``.
    
    Attributes:
        filter: Callable receiving the current value and returning the new one
    """
    
    filter: Callable[[Any], Any] | None = None
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        if self.filter is None:
            raise InvalidParamError(
                'The "filter" property must be specified with a valid callable.',
                context={"validator": type(self).__name__, "attribute": attribute},
            )
        setattr(obj, attribute, self.filter(getattr(obj, attribute, None)))
