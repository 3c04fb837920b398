"""URL validator."""

import re

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject

URL_PATTERN = r"^{schemes}://(([A-Z0-9][A-Z0-9_-]*)(\.[A-Z0-9][A-Z0-9_-]*)+)(?::\d{{1,5}})?(?:$|[?\/#])"


class UrlValidator(BaseValidator):
    """Validates that an attribute is an absolute http(s) style URL.
    
    Attributes:
        valid_schemes: Accepted URL schemes
        default_scheme: Scheme prepended when the value has none; the
            prefixed value is written back to the attribute when valid
        allow_empty: Skip empty values
    """
    
    valid_schemes: tuple[str, ...] = ("http", "https")
    default_scheme: str | None = None
    allow_empty: bool = True
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        value = getattr(obj, attribute, None)
        if self.allow_empty and self.is_empty(value):
            return
        normalized = self.validate_value(value)
        if normalized is None:
            self.add_error(obj, attribute, self.get_message("{attribute} is not a valid URL."))
        elif normalized != value:
            setattr(obj, attribute, normalized)
    
    def validate_value(self, value: object) -> str | None:
        """Return the (possibly scheme-prefixed) URL, or None if invalid."""
        if not isinstance(value, str) or len(value) > 2000:
            return None
        if self.default_scheme is not None and "://" not in value:
            value = f"{self.default_scheme}://{value}"
        schemes = "(" + "|".join(re.escape(scheme) for scheme in self.valid_schemes) + ")"
        pattern = URL_PATTERN.format(schemes=schemes)
        if re.match(pattern, value, re.IGNORECASE):
            return value
        return None
