"""Regular expression validator."""

import re

from scenario_validation.exceptions.invalid_param_error import InvalidParamError
from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject


class RegularExpressionValidator(BaseValidator):
    """Validates that an attribute matches a regular expression.
    
    Values that are not strings or numbers always fail.
    
    Attributes:
        pattern: Regular expression searched in the value
        allow_empty: Skip empty values
        not_: Invert the check, so matching values fail
    """
    
    pattern: str | None = None
    allow_empty: bool = True
    not_: bool = False
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        if self.pattern is None:
            raise InvalidParamError(
                'The "pattern" property must be specified with a valid regular expression.',
                context={"validator": type(self).__name__, "attribute": attribute},
            )
        
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            failed = True
        else:
            matched = re.search(self.pattern, str(value)) is not None
            failed = matched == self.not_
        
        if failed:
            self.add_error(obj, attribute, self.get_message("{attribute} is invalid."))
