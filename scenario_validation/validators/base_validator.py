"""Base validator class for all attribute validators.

This module defines the abstract base class every attribute validator
derives from. A validator is configured once (attributes, parameters,
scenario filter, state whitelist, error handler) and then reused across
many ``validate`` calls against different data objects. It keeps no
per-object state: errors live on the data object or go to the error sink.

Rule violations are never raised. Concrete validators implement
``validate_attribute`` and call ``add_error`` for each failure they find.
Only configuration mistakes raise exceptions.

Besides its declared fields, a validator owns a small state store gated
by a whitelist of state names. Whitelisted names can also be read,
assigned and deleted as plain attributes:

```python
validator.set_valid_states(["last_value"])
validator.last_value = 42          # same as set_state("last_value", 42)
validator.get_state("last_value")  # 42
del validator.last_value           # same as unset_state("last_value")
```

Validators are not locked. When shared between threads, configure them
fully before first use and treat them as immutable afterwards.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, ClassVar, Iterable, Mapping, Protocol, get_origin, get_type_hints

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from scenario_validation.exceptions.invalid_param_error import InvalidParamError
from scenario_validation.exceptions.invalid_state_error import InvalidStateError
from scenario_validation.exceptions.unknown_property_error import UnknownPropertyError
from scenario_validation.utils.text_utils import split_names, substitute_placeholders
from scenario_validation.validators.error_sink import ErrorHandler, check_error_handler
from scenario_validation.validators.scenario_filter import ScenarioFilter

logger = logging.getLogger(__name__)


class ValidatableObject(Protocol):
    """Data object a validator checks.

    The object accumulates errors per attribute and resolves display
    labels. Attribute values are read with ``getattr``.
    """

    def has_errors(self, attribute: str) -> bool:
        ...

    def add_error(self, attribute: str, message: str) -> None:
        ...

    def get_attribute_label(self, attribute: str) -> str:
        ...


@lru_cache(maxsize=None)
def declared_fields(cls: type) -> dict[str, Any]:
    """Return public annotated fields of a validator class and its bases.

    ``ClassVar`` annotations and names starting with an underscore are not
    fields and cannot be set through ``configure``.
    """
    fields = {}
    for name, hint in get_type_hints(cls).items():
        if name.startswith("_") or get_origin(hint) is ClassVar:
            continue
        fields[name] = hint
    return fields


@lru_cache(maxsize=None)
def _type_adapter(hint: Any) -> TypeAdapter:
    return TypeAdapter(hint)


class StateAccessor:
    """Typed handle on one whitelisted state of a validator."""

    def __init__(self, validator: "BaseValidator", name: str) -> None:
        if name not in validator.get_valid_states():
            validator._raise_invalid_state(name)
        self.validator = validator
        self.name = name

    def get(self, default: Any = None) -> Any:
        return self.validator.get_state(self.name, default)

    def set(self, value: Any) -> None:
        self.validator.set_state(self.name, value)

    def has(self) -> bool:
        return self.validator.has_state(self.name)

    def unset(self) -> None:
        self.validator.unset_state(self.name)


class BaseValidator(ABC):
    """Base class for all attribute validators.

    Public annotated class attributes are the validator's fields. The
    factory assigns parameters to them through ``configure``; unknown
    names are rejected. Subclasses must declare every public instance
    attribute they assign, including ones set in ``__init__``.

    Attributes:
        attributes: Ordered attribute names this validator checks
        message: Optional message template. ``{attribute}`` is replaced by
            the attribute label; validators add their own placeholders.
        skip_on_error: Skip attributes that already carry an error
        safe: Whether the attributes are safe for bulk assignment. Not
            enforced here; the hosting model reads it.
        enable_client_validation: Whether client-side validation should be
            generated. Not enforced here.
        on: Scenarios this validator is limited to (empty = all)
        except_: Scenarios this validator never applies to
    """

    attributes: list[str]
    message: str | None = None
    skip_on_error: bool = False
    safe: bool = True
    enable_client_validation: bool = True

    def __init__(self) -> None:
        self._valid_states: frozenset[str] = frozenset()
        self._states: dict[str, Any] = {}
        self._error_handler: ErrorHandler | None = None
        self._scenario_filter = ScenarioFilter()
        self.attributes = []

    @abstractmethod
    def validate_attribute(self, obj: ValidatableObject, attribute: str) -> None:
        """Validate a single attribute of obj.

        Implementations call ``add_error`` for every violation found; they
        may report zero, one or several errors for the same attribute.

        Args:
            obj: Data object being validated
            attribute: Name of the attribute to validate
        """
        ...

    # ── Validation ──

    def validate(self, obj: ValidatableObject, attributes: Iterable[str] | str | None = None) -> None:
        """Validate obj against the configured attributes.

        Args:
            obj: Data object being validated
            attributes: Optional subset of attribute names. Names not
                configured on this validator are ignored and the
                configured order is kept.
        """
        if attributes is not None:
            wanted = set(split_names(attributes))
            names = [name for name in self.attributes if name in wanted]
        else:
            names = list(self.attributes)

        for attribute in names:
            if self.skip_on_error and obj.has_errors(attribute):
                continue
            self.validate_attribute(obj, attribute)

    def client_validate_attribute(self, obj: ValidatableObject, attribute: str) -> str | None:
        """Return client-side validation script for attribute.

        The base implementation generates nothing. Validators that can be
        checked in a browser override this to return an opaque script
        fragment.
        """
        return None

    def apply_to(self, scenario: str) -> bool:
        """Return whether this validator applies to scenario."""
        return self._scenario_filter.apply_to(scenario)

    # ── Scenarios ──

    @property
    def scenario_filter(self) -> ScenarioFilter:
        return self._scenario_filter

    @property
    def on(self) -> frozenset[str]:
        return self._scenario_filter.on

    @on.setter
    def on(self, value: Any) -> None:
        self.set_scenarios(on=value, except_=self._scenario_filter.except_)

    @property
    def except_(self) -> frozenset[str]:
        return self._scenario_filter.except_

    @except_.setter
    def except_(self, value: Any) -> None:
        self.set_scenarios(on=self._scenario_filter.on, except_=value)

    def set_scenarios(self, on: Any = None, except_: Any = None) -> None:
        """Replace both scenario sets. Strings are split on commas/whitespace."""
        self._scenario_filter = ScenarioFilter.from_values(on=on, except_=except_)

    # ── Error reporting ──

    def set_error_handler(self, handler: ErrorHandler | None) -> None:
        """Install or clear (``None``) the error sink.

        Raises:
            InvalidHandlerError: If handler is not callable as
                ``handler(validator, attribute, message)``
        """
        check_error_handler(handler)
        self._error_handler = handler

    def get_error_handler(self) -> ErrorHandler | None:
        return self._error_handler

    def get_message(self, default: str) -> str:
        """Return the configured message template, or default when unset."""
        return self.message if self.message is not None else default

    def add_error(
        self,
        obj: ValidatableObject,
        attribute: str,
        message: str,
        params: dict[str, Any] | None = None,
    ) -> None:
        """Report a violation for attribute.

        ``{attribute}`` is set to the object's label for the attribute, then
        every placeholder in params is substituted. The result goes to the
        error handler when one is installed, otherwise to ``obj.add_error``.

        Args:
            obj: Data object being validated
            attribute: Attribute that failed
            message: Message template
            params: Placeholder tokens (e.g. ``{"{min}": 3}``) to values
        """
        params = dict(params or {})
        params["{attribute}"] = obj.get_attribute_label(attribute)
        text = substitute_placeholders(message, params)

        handler = self._error_handler
        if handler is None:
            obj.add_error(attribute, text)
        else:
            handler(self, attribute, text)

    def is_empty(self, value: Any, trim: bool = False) -> bool:
        """Check whether value counts as empty.

        ``None``, an empty string and empty collections are empty. With
        ``trim``, a string consisting of whitespace only is empty too.
        Numeric zero and ``False`` are never empty.
        """
        if value is None:
            return True
        if isinstance(value, (str, bytes)):
            if not value:
                return True
            return trim and not value.strip()
        if isinstance(value, (list, tuple, dict, set, frozenset)):
            return len(value) == 0
        return False

    # ── State store ──

    def set_valid_states(self, names: Iterable[str] | str | None) -> None:
        """Replace the state whitelist.

        Stored states whose names are no longer whitelisted are dropped.
        """
        self._valid_states = frozenset(split_names(names))
        self._states = {
            name: value for name, value in self._states.items()
            if name in self._valid_states
        }
        logger.debug(
            f"{type(self).__name__} valid states set to {sorted(self._valid_states)}"
        )

    def get_valid_states(self) -> frozenset[str]:
        return self._valid_states

    def set_state(self, name: str, value: Any) -> None:
        """Store value under a whitelisted state name.

        Raises:
            InvalidStateError: If name is not in the whitelist
        """
        if name not in self._valid_states:
            self._raise_invalid_state(name)
        self._states[name] = value

    def get_state(self, name: str, default: Any = None) -> Any:
        """Return the stored state, or default if absent or ``None``."""
        value = self._states.get(name)
        return default if value is None else value

    def has_state(self, name: str) -> bool:
        """Return whether a non-``None`` value is stored under name."""
        return self._states.get(name) is not None

    def unset_state(self, name: str) -> None:
        self.set_state(name, None)

    def state_accessor(self, name: str) -> StateAccessor:
        """Return a handle bound to one whitelisted state name.

        Raises:
            InvalidStateError: If name is not in the whitelist
        """
        return StateAccessor(self, name)

    def _raise_invalid_state(self, name: str) -> None:
        class_name = type(self).__name__
        raise InvalidStateError(
            f"The state {name} is not defined. "
            f"Use {class_name}.set_valid_states() to define valid states.",
            context={"state": name, "validator": class_name},
        )

    # ── Configuration ──

    def configure(self, params: Mapping[str, Any], strict: bool = True) -> None:
        """Assign parameters to fields or whitelisted states.

        ``on``/``except``/``except_`` update the scenario filter and
        ``attributes`` accepts a delimited string. Every other key must be
        a declared field, whose type is checked, or a whitelisted state.

        Args:
            params: Parameter names to values
            strict: Raise on unknown names (True) or log and skip them

        Raises:
            UnknownPropertyError: If strict and a name matches no field or state
            InvalidParamError: If a value does not fit its field type
        """
        fields = declared_fields(type(self))
        for name, value in params.items():
            if name == "on":
                self.on = value
            elif name in ("except", "except_"):
                self.except_ = value
            elif name == "attributes":
                self.attributes = split_names(value)
            elif name in fields:
                setattr(self, name, self._check_field(name, fields[name], value))
            elif name in self._valid_states:
                self.set_state(name, value)
            elif strict:
                self._raise_unknown_property(name)
            else:
                logger.warning(
                    f"Ignoring unknown parameter '{name}' for {type(self).__name__}"
                )

    def _check_field(self, name: str, hint: Any, value: Any) -> Any:
        if hint is Any:
            return value
        try:
            return _type_adapter(hint).validate_python(value)
        except PydanticValidationError as e:
            raise InvalidParamError(
                f"Invalid value for {type(self).__name__}.{name}: {value!r}",
                context={
                    "validator": type(self).__name__,
                    "field": name,
                    "errors": e.errors(include_url=False),
                },
            ) from e

    def _raise_unknown_property(self, name: str) -> None:
        class_name = type(self).__name__
        raise UnknownPropertyError(
            f'Property "{class_name}.{name}" is not defined.',
            context={"property": name, "validator": class_name},
        )

    # ── Attribute fallback to the state store ──

    def _is_state_name(self, name: str) -> bool:
        return (
            not name.startswith("_")
            and name in self.__dict__.get("_valid_states", ())
            and name not in declared_fields(type(self))
            and not hasattr(type(self), name)
        )

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        if self._is_state_name(name):
            return self.get_state(name)
        self._raise_unknown_property(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or name in declared_fields(type(self)) or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        elif self._is_state_name(name):
            self.set_state(name, value)
        else:
            self._raise_unknown_property(name)

    def __delattr__(self, name: str) -> None:
        if self._is_state_name(name):
            self.unset_state(name)
        else:
            object.__delattr__(self, name)
