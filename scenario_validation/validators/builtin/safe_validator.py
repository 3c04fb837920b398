"""Markers for attributes that are (or are not) safe for bulk assignment.

Neither validator checks anything; the hosting model reads ``safe``.
"""

from scenario_validation.validators.base_validator import BaseValidator, ValidatableObject


class SafeValidator(BaseValidator):
    """Marks attributes as safe for bulk assignment."""
    
    safe: bool = True
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        pass


class UnsafeValidator(BaseValidator):
    """Marks attributes as unsafe for bulk assignment."""
    
    safe: bool = False
    
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        pass
