"""String length validator."""

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject


class StringValidator(BaseValidator):
    """Validates the length of a string attribute.
    
    Attributes:
        max: Maximum length, or None for no limit
        min: Minimum length, or None for no limit
        is_: Exact length, or None
        too_short: Message used when the value is shorter than ``min``
        too_long: Message used when the value is longer than ``max``
        allow_empty: Skip empty values
    """
    
    max: int | None = None
    min: int | None = None
    is_: int | None = None
    too_short: str | None = None
    too_long: str | None = None
    allow_empty: bool = True
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        
        if not isinstance(value, str):
            self.add_error(obj, attribute, self.get_message("{attribute} is invalid."))
            return
        
        length = len(value)
        if self.min is not None and length < self.min:
            message = self.too_short or "{attribute} is too short (minimum is {min} characters)."
            self.add_error(obj, attribute, message, {"{min}": self.min})
        if self.max is not None and length > self.max:
            message = self.too_long or "{attribute} is too long (maximum is {max} characters)."
            self.add_error(obj, attribute, message, {"{max}": self.max})
        if self.is_ is not None and length != self.is_:
            message = self.get_message(
                "{attribute} is of the wrong length (should be {length} characters)."
            )
            self.add_error(obj, attribute, message, {"{length}": self.is_})
