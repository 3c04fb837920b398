"""Email address validator."""

import re

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject

EMAIL_PATTERN = (
    r"^[a-zA-Z0-9!#$%&'*+\/=?^_`{|}~-]+(?:\.[a-zA-Z0-9!#$%&'*+\/=?^_`{|}~-]+)*"
    r"@(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?$"
)

FULL_PATTERN = r"^[^@]*<(?P<address>[^<>]+)>$"


class EmailValidator(BaseValidator):
    """Validates that an attribute is a syntactically valid email address.
    
    Attributes:
        pattern: Regular expression an address must match
        allow_name: Also accept ``"Name <user@example.com>"``
        allow_empty: Skip empty values
    """
    
    pattern: str = EMAIL_PATTERN
    allow_name: bool = False
    allow_empty: bool = True
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        if not self.validate_value(value):
            message = self.get_message("{attribute} is not a valid email address.")
            self.add_error(obj, attribute, message)
    
    def validate_value(self, value: object) -> bool:
        """Return whether value is a valid email address."""
        if not isinstance(value, str) or len(value) > 254:
            return False
        address = value
        if self.allow_name:
            named = re.match(FULL_PATTERN, value)
            if named:
                address = named.group("address").strip()
        return re.match(self.pattern, address) is not None
