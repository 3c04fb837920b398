"""Date validator."""

from datetime import datetime

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject


class DateValidator(BaseValidator):
    """Validates that an attribute parses with one of the date formats.
    
    Attributes:
        format: strptime format, or a list of formats tried in order
        allow_empty: Skip empty values
        timestamp_attribute: Attribute receiving the parsed POSIX
            timestamp when the value is valid
    """
    
    format: str | list[str] = "%Y-%m-%d"
    allow_empty: bool = True
    timestamp_attribute: str | None = None
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        
        parsed = self.parse(value)
        if parsed is None:
            message = self.get_message("The format of {attribute} is invalid.")
            self.add_error(obj, attribute, message)
        elif self.timestamp_attribute is not None:
            setattr(obj, self.timestamp_attribute, parsed.timestamp())
    
    def parse(self, value: object) -> datetime | None:
        """Parse value with the first matching format, or return None."""
        if not isinstance(value, str):
            return None
        formats = [self.format] if isinstance(self.format, str) else list(self.format)
        for date_format in formats:
            try:
                return datetime.strptime(value, date_format)
            except ValueError:
                continue
        return None
