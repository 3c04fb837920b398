"""Built-in validators reachable through the alias table.

Aliases ``unique``, ``exist``, ``captcha`` and ``file`` need persistence,
sessions or upload handling and have no bundled implementation.
"""

from scenario_validation.validators.builtin.boolean_validator import BooleanValidator
from scenario_validation.validators.builtin.compare_validator import CompareValidator
from scenario_validation.validators.builtin.date_validator import DateValidator
from scenario_validation.validators.builtin.default_value_validator import DefaultValueValidator
from scenario_validation.validators.builtin.email_validator import EmailValidator
from scenario_validation.validators.builtin.filter_validator import FilterValidator
from scenario_validation.validators.builtin.number_validator import NumberValidator
from scenario_validation.validators.builtin.range_validator import RangeValidator
from scenario_validation.validators.builtin.regular_expression_validator import RegularExpressionValidator
from scenario_validation.validators.builtin.required_validator import RequiredValidator
from scenario_validation.validators.builtin.safe_validator import SafeValidator, UnsafeValidator
from scenario_validation.validators.builtin.string_validator import StringValidator
from scenario_validation.validators.builtin.type_validator import TypeValidator
from scenario_validation.validators.builtin.url_validator import UrlValidator

__all__ = [
    "BooleanValidator",
    "CompareValidator",
    "DateValidator",
    "DefaultValueValidator",
    "EmailValidator",
    "FilterValidator",
    "NumberValidator",
    "RangeValidator",
    "RegularExpressionValidator",
    "RequiredValidator",
    "SafeValidator",
    "StringValidator",
    "TypeValidator",
    "UnsafeValidator",
    "UrlValidator",
]
