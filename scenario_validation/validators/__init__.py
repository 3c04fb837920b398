"""Attribute validators and the factory that builds them.

This package contains:
- BaseValidator: Abstract base class with dispatch, error routing and state store
- ScenarioFilter: on/except scenario applicability
- ValidatorFactory / create_validator: Builds validators from rule declarations
- ValidatorRegistry: Immutable alias table for built-in and custom validators
- InlineValidator: Validator delegating to a data object method
- CollectingErrorSink: Error handler recording failures
"""

from scenario_validation.validators.base_validator import (BaseValidator, StateAccessor,
                                                           ValidatableObject)
from scenario_validation.validators.error_sink import (CollectingErrorSink, ErrorHandler,
                                                       ReportedError, check_error_handler)
from scenario_validation.validators.factory import ValidatorFactory, create_validator
from scenario_validation.validators.inline_validator import InlineValidator
from scenario_validation.validators.registry import (BUILT_IN_VALIDATORS, ValidatorRegistry,
                                                     get_default_registry)
from scenario_validation.validators.scenario_filter import ScenarioFilter

__all__ = [
    "BUILT_IN_VALIDATORS",
    "BaseValidator",
    "CollectingErrorSink",
    "ErrorHandler",
    "InlineValidator",
    "ReportedError",
    "ScenarioFilter",
    "StateAccessor",
    "ValidatableObject",
    "ValidatorFactory",
    "ValidatorRegistry",
    "check_error_handler",
    "create_validator",
    "get_default_registry",
]
