"""Alias table mapping short validator names to validator classes.

Targets are dotted class paths (``package.module:Class`` or
``package.module.Class``) imported on first use, or validator classes.
A ``None`` target marks a reserved alias without a bundled
implementation; hosts supply one with ``with_aliases``.

The table is immutable. Extending it returns a new registry, so there is no
shared mutable state between factories.
"""

import importlib
import inspect
import logging
from types import MappingProxyType
from typing import Mapping, Union

from scenario_validation.config import get_config
from scenario_validation.exceptions.unknown_validator_error import UnknownValidatorError
from scenario_validation.validators.base_validator import BaseValidator

logger = logging.getLogger(__name__)

AliasTarget = Union[str, type, None]

_BUILTIN = "scenario_validation.validators.builtin"

BUILT_IN_VALIDATORS: Mapping[str, AliasTarget] = MappingProxyType({
    "required": f"{_BUILTIN}.required_validator:RequiredValidator",
    "filter": f"{_BUILTIN}.filter_validator:FilterValidator",
    "match": f"{_BUILTIN}.regular_expression_validator:RegularExpressionValidator",
    "email": f"{_BUILTIN}.email_validator:EmailValidator",
    "url": f"{_BUILTIN}.url_validator:UrlValidator",
    "unique": None,
    "compare": f"{_BUILTIN}.compare_validator:CompareValidator",
    "length": f"{_BUILTIN}.string_validator:StringValidator",
    "in": f"{_BUILTIN}.range_validator:RangeValidator",
    "numerical": f"{_BUILTIN}.number_validator:NumberValidator",
    "captcha": None,
    "type": f"{_BUILTIN}.type_validator:TypeValidator",
    "file": None,
    "default": f"{_BUILTIN}.default_value_validator:DefaultValueValidator",
    "exist": None,
    "boolean": f"{_BUILTIN}.boolean_validator:BooleanValidator",
    "date": f"{_BUILTIN}.date_validator:DateValidator",
    "safe": f"{_BUILTIN}.safe_validator:SafeValidator",
    "unsafe": f"{_BUILTIN}.safe_validator:UnsafeValidator",
})


def import_string(path: str) -> object:
    """Import an object from ``package.module:Name`` or ``package.module.Name``.
    
    Raises:
        ImportError: If the module cannot be imported or lacks the name
    """
    if ":" in path:
        module_path, _, attr = path.partition(":")
    else:
        module_path, _, attr = path.rpartition(".")
    if not module_path or not attr or module_path.startswith("."):
        raise ImportError(f"'{path}' is not an absolute dotted path")
    
    try:
        module = importlib.import_module(module_path)
    except (TypeError, ValueError) as e:
        raise ImportError(f"'{module_path}' is not an importable module name") from e
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise ImportError(f"Module '{module_path}' has no attribute '{attr}'") from e


class ValidatorRegistry:
    """Immutable lookup from validator names to validator classes.
    
    Attributes:
        aliases: Read-only alias -> target mapping
    """
    
    def __init__(self, aliases: Mapping[str, AliasTarget] | None = None) -> None:
        if aliases is None:
            aliases = BUILT_IN_VALIDATORS
        self.aliases: Mapping[str, AliasTarget] = MappingProxyType(dict(aliases))
    
    def with_aliases(self, extra: Mapping[str, AliasTarget]) -> "ValidatorRegistry":
        """Return a new registry with extra entries added or overriding."""
        merged = dict(self.aliases)
        merged.update(extra)
        return ValidatorRegistry(merged)
    
    def is_alias(self, name: str) -> bool:
        return name in self.aliases
    
    def resolve(self, name: str | type) -> type[BaseValidator]:
        """Resolve a name, dotted path or class to a validator class.
        
        Args:
            name: Alias, dotted class path, or BaseValidator subclass
        
        Returns:
            The validator class
        
        Raises:
            UnknownValidatorError: If name cannot be resolved to a
                BaseValidator subclass
        """
        if isinstance(name, type):
            return self._check_class(name, name)
        
        if name in self.aliases:
            target = self.aliases[name]
            if target is None:
                raise UnknownValidatorError(
                    f"Validator alias '{name}' has no bundled implementation. "
                    f"Register one with ValidatorRegistry.with_aliases().",
                    context={"name": name},
                )
        else:
            target = name
        
        if isinstance(target, type):
            return self._check_class(name, target)
        
        try:
            resolved = import_string(target)
        except ImportError as e:
            logger.debug(f"Failed to import validator '{name}' from '{target}': {e}")
            raise UnknownValidatorError(
                f"Unable to resolve validator '{name}'.",
                context={"name": name, "target": target, "error": str(e)},
            ) from e
        
        if not isinstance(resolved, type):
            raise UnknownValidatorError(
                f"Validator '{name}' resolves to a non-class object.",
                context={"name": name, "target": target},
            )
        return self._check_class(name, resolved)
    
    @staticmethod
    def _check_class(name: str | type, cls: type) -> type[BaseValidator]:
        if not issubclass(cls, BaseValidator) or inspect.isabstract(cls):
            raise UnknownValidatorError(
                f"'{cls.__module__}.{cls.__qualname__}' is not a concrete validator class.",
                context={"name": getattr(name, "__name__", name)},
            )
        return cls


def get_default_registry() -> ValidatorRegistry:
    """Return the built-in registry extended with configured aliases."""
    extra = get_config().validator_aliases
    registry = ValidatorRegistry()
    if extra:
        registry = registry.with_aliases(extra)
    return registry
