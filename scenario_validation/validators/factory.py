"""Validator factory resolving rule declarations into instances.

A rule declaration is a name plus the attributes it covers and a
parameter mapping, as typically declared in a model's rule list:

```python
("name, email", "required", {"on": "insert"})
("email", "email", {"allow_empty": False})
("password", "check_password_strength", {"min_score": 3})
```

Resolution order (first match wins):

1. The data object has a method with that name: an ``InlineValidator``
   calling it is built.
2. The name is an alias in the registry, a dotted class path, or a
   validator class: that class is instantiated and configured.

``on``/``except`` parameters are always applied last.

Usage:
    ```python
    from scenario_validation.validators import create_validator

    validator = create_validator("required", user, "name, email", {"on": "insert"})
    if validator.apply_to(user.scenario):
        validator.validate(user)
    ```
"""

import logging
from typing import Any, Iterable

from scenario_validation.config import get_config
from scenario_validation.utils.text_utils import split_names
from scenario_validation.validators.base_validator import BaseValidator
from scenario_validation.validators.error_sink import ErrorHandler
from scenario_validation.validators.inline_validator import InlineValidator
from scenario_validation.validators.registry import ValidatorRegistry, get_default_registry
from scenario_validation.validators.scenario_filter import ScenarioFilter

logger = logging.getLogger(__name__)


class ValidatorFactory:
    """Builds configured validators from name, attributes and parameters.

    Attributes:
        registry: Alias table used to resolve validator names
        strict: Whether unknown parameters raise UnknownPropertyError
    """

    def __init__(
        self,
        registry: ValidatorRegistry | None = None,
        strict: bool | None = None,
    ) -> None:
        """Initialize factory.

        Args:
            registry: Optional registry. If not provided, uses
                get_default_registry()
            strict: Optional strictness. If not provided, uses
                Config.strict_params
        """
        self.registry = registry if registry is not None else get_default_registry()
        self.strict = strict if strict is not None else get_config().strict_params

    def create(
        self,
        name: str | type,
        obj: Any,
        attributes: Iterable[str] | str,
        params: dict[str, Any] | None = None,
        valid_states: Iterable[str] | str | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> BaseValidator:
        """Create and configure a validator.

        Args:
            name: Method name on obj, registry alias, dotted class path, or
                validator class
            obj: Data object the validator is declared for
            attributes: Attribute names, as a sequence or a comma/whitespace
                separated string
            params: Parameters assigned to the validator. ``on`` and
                ``except`` (or ``except_``) define the scenario filter.
            valid_states: State names the validator may store
            error_handler: Optional sink receiving failures instead of obj

        Returns:
            Configured validator

        Raises:
            UnknownValidatorError: If name cannot be resolved
            InvalidHandlerError: If error_handler is not usable
            UnknownPropertyError: If a parameter matches no field or state
                (strict mode)
            InvalidParamError: If a parameter value has the wrong type
        """
        attribute_names = split_names(attributes)
        params = dict(params or {})
        scenarios = ScenarioFilter.from_values(
            on=params.pop("on", None),
            except_=_pop_except(params),
        )

        if isinstance(name, str) and callable(getattr(obj, name, None)):
            validator = self._create_inline(name, attribute_names, params)
        else:
            validator_class = self.registry.resolve(name)
            validator = validator_class()
            validator.set_valid_states(valid_states)
            validator.set_error_handler(error_handler)
            validator.configure({**params, "attributes": attribute_names}, strict=self.strict)

        validator.set_scenarios(on=scenarios.on, except_=scenarios.except_)

        logger.debug(
            f"Created {type(validator).__name__} for '{name}' "
            f"attributes={attribute_names} on={sorted(scenarios.on)} "
            f"except={sorted(scenarios.except_)}"
        )
        return validator

    @staticmethod
    def _create_inline(
        method: str,
        attributes: list[str],
        params: dict[str, Any],
    ) -> InlineValidator:
        validator = InlineValidator()
        validator.attributes = attributes
        validator.method = method
        if "client_validate" in params:
            validator.client_validate = params.pop("client_validate")
        validator.params = params
        if "skip_on_error" in params:
            validator.skip_on_error = bool(params["skip_on_error"])
        return validator


def _pop_except(params: dict[str, Any]) -> Any:
    # "except" is a keyword, so callers building params with dict(...) use "except_".
    value = params.pop("except", None)
    alternate = params.pop("except_", None)
    return value if value is not None else alternate


def create_validator(
    name: str | type,
    obj: Any,
    attributes: Iterable[str] | str,
    params: dict[str, Any] | None = None,
    valid_states: Iterable[str] | str | None = None,
    error_handler: ErrorHandler | None = None,
    registry: ValidatorRegistry | None = None,
    strict: bool | None = None,
) -> BaseValidator:
    """Create a validator with a one-off ValidatorFactory.

    See ValidatorFactory.create for arguments and errors.
    """
    factory = ValidatorFactory(registry=registry, strict=strict)
    return factory.create(name, obj, attributes, params, valid_states, error_handler)
