"""Inline validator backed by a method on the data object.

The factory builds one whenever the validator name matches a method of the
data object. The method is called as ``method(attribute, params)`` and
reports failures itself, typically through the object's ``add_error``.
"""

from typing import Any

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject


class InlineValidator(BaseValidator):
    """Validator delegating to a data object method.
    
    Attributes:
        method: Name of the validation method on the data object
        params: Extra parameters passed verbatim to the method
        client_validate: Optional name of a data object method returning
            client-side validation script for an attribute
    """
    
    method: str = ""
    params: dict[str, Any]
    client_validate: str | None = None
    
    def __init__(self) -> None:
        super().__init__()
        self.params = {}
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        getattr(obj, self.method)(attribute, self.params)
    
    def client_validate_attribute(self, obj: ValidatableObject, attribute: str) -> str | None:
        if self.client_validate is None:
            return None
        return getattr(obj, self.client_validate)(attribute, self.params)
