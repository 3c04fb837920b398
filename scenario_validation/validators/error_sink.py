"""Error sinks that intercept validation failure reporting.

A validator normally forwards each failure message to the data object's
own ``add_error``. When an error handler is installed, the message goes to
the handler instead, called as ``handler(validator, attribute, message)``.
"""

import inspect
import logging
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, Field

from scenario_validation.exceptions.invalid_handler_error import InvalidHandlerError

if TYPE_CHECKING:
    from scenario_validation.validators.base_validator import BaseValidator

logger = logging.getLogger(__name__)


class ErrorHandler(Protocol):
    """Callable receiving a failure instead of the data object."""
    
    def __call__(self, validator: "BaseValidator", attribute: str, message: str) -> Any:
        ...


def check_error_handler(handler: Any) -> None:
    """Ensure handler can be installed as an error sink.
    
    ``None`` is always accepted (it clears the sink). Anything else must be
    callable with exactly three positional arguments. Callables whose
    signature cannot be introspected (some builtins) are accepted as long
    as they are callable.
    
    Args:
        handler: Candidate error handler
    
    Raises:
        InvalidHandlerError: If handler is not callable or cannot accept
            ``(validator, attribute, message)``
    """
    if handler is None:
        return
    
    if not callable(handler):
        raise InvalidHandlerError(
            "The error handler is invalid.",
            context={"handler": repr(handler), "reason": "not callable"},
        )
    
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        logger.debug(f"Cannot introspect error handler {handler!r}, accepting it")
        return
    
    try:
        signature.bind(None, "attribute", "message")
    except TypeError as e:
        raise InvalidHandlerError(
            "The error handler is invalid.",
            context={
                "handler": repr(handler),
                "reason": f"signature {signature} does not accept "
                          f"(validator, attribute, message): {e}",
            },
        ) from e


class ReportedError(BaseModel):
    """A single failure captured by CollectingErrorSink."""
    
    model_config = {"frozen": True}
    
    validator: str = Field(..., description="Class name of the reporting validator")
    attribute: str = Field(..., description="Attribute the failure belongs to")
    message: str = Field(..., description="Message with placeholders substituted")


class CollectingErrorSink:
    """Error handler that records failures instead of touching the object.
    
    Useful when a host wants to gather messages in one place, e.g. to
    validate a payload before a data object exists to hold the errors.
    """
    
    def __init__(self) -> None:
        self.errors: list[ReportedError] = []
    
    def __call__(self, validator: "BaseValidator", attribute: str, message: str) -> None:
        self.errors.append(
            ReportedError(
                validator=type(validator).__name__,
                attribute=attribute,
                message=message,
            )
        )
    
    def has_errors(self, attribute: str | None = None) -> bool:
        """Check for recorded failures, optionally for one attribute."""
        if attribute is None:
            return len(self.errors) > 0
        return any(error.attribute == attribute for error in self.errors)
    
    def messages_for(self, attribute: str) -> list[str]:
        """Return recorded messages for attribute in reporting order."""
        return [error.message for error in self.errors if error.attribute == attribute]
    
    def clear(self) -> None:
        self.errors.clear()
