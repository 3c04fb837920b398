"""Type validator: checks the data type of an attribute."""

import re
from datetime import datetime
from typing import Any

from scenario_validation.exceptions.invalid_param_error import InvalidParamError
from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject
from scenario_validation.validators.builtin.number_validator import INTEGER_PATTERN, NUMBER_PATTERN

SUPPORTED_TYPES = ("integer", "float", "string", "date", "time", "datetime", "array")


class TypeValidator(BaseValidator):
    """Validates that an attribute holds (or parses as) a given type.
    
    Strings are parsed for ``integer``, ``float`` and the temporal types,
    so ``"42"`` is an integer. ``string`` and ``array`` check the Python
    type (``str``; ``list`` or ``tuple``).
    
    Attributes:
        type: One of integer, float, string, date, time, datetime, array
        date_format: strptime format for ``date``
        time_format: strptime format for ``time``
        datetime_format: strptime format for ``datetime``
        allow_empty: Skip empty values
    """
    
    type: str = "string"
    date_format: str = "%Y-%m-%d"
    time_format: str = "%H:%M:%S"
    datetime_format: str = "%Y-%m-%d %H:%M:%S"
    allow_empty: bool = True
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        if not self.validate_value(value):
            message = self.get_message("{attribute} must be {type}.")
            self.add_error(obj, attribute, message, {"{type}": self.type})
    
    def validate_value(self, value: Any) -> bool:
        """Return whether value matches the configured type."""
        kind = self.type.lower()
        if kind not in SUPPORTED_TYPES:
            raise InvalidParamError(
                f'Unsupported type "{self.type}".',
                context={"validator": type(self).__name__, "supported": SUPPORTED_TYPES},
            )
        
        if kind == "string":
            return isinstance(value, str)
        if kind == "array":
            return isinstance(value, (list, tuple))
        if isinstance(value, bool):
            return False
        if kind == "integer":
            if isinstance(value, int):
                return True
            return isinstance(value, str) and re.match(INTEGER_PATTERN, value) is not None
        if kind == "float":
            if isinstance(value, (int, float)):
                return True
            return isinstance(value, str) and re.match(NUMBER_PATTERN, value) is not None
        
        formats = {
            "date": self.date_format,
            "time": self.time_format,
            "datetime": self.datetime_format,
        }
        if not isinstance(value, str):
            return False
        try:
            datetime.strptime(value, formats[kind])
        except ValueError:
            return False
        return True
