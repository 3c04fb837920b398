"""Custom exception classes for the validation engine.

This package contains the exception hierarchy:
- BaseValidationError: Base exception for all engine errors
- InvalidStateError: Raised when setting a state outside the whitelist
- InvalidHandlerError: Raised when an error handler is not usable
- UnknownValidatorError: Raised when a validator name cannot be resolved
- UnknownPropertyError: Raised for undefined validator properties
- InvalidParamError: Raised when a parameter value has the wrong type
"""

from scenario_validation.exceptions.base import BaseValidationError
from scenario_validation.exceptions.invalid_handler_error import InvalidHandlerError
from scenario_validation.exceptions.invalid_param_error import InvalidParamError
from scenario_validation.exceptions.invalid_state_error import InvalidStateError
from scenario_validation.exceptions.unknown_property_error import UnknownPropertyError
from scenario_validation.exceptions.unknown_validator_error import UnknownValidatorError

__all__ = [
    "BaseValidationError",
    "InvalidHandlerError",
    "InvalidParamError",
    "InvalidStateError",
    "UnknownPropertyError",
    "UnknownValidatorError",
]
