"""Text helpers for name lists and message templates.

Validator configuration accepts attribute and scenario names either as a
sequence or as a single string separated by commas and/or whitespace
(``"name, email"`` or ``"insert update"``). Messages use ``{key}``
placeholders that are substituted literally.
"""

import re
from typing import Any, Iterable

NAME_SEPARATOR = re.compile(r"[\s,]+")


def split_names(value: str | Iterable[str] | None) -> list[str]:
    """Normalize a delimited string or a sequence into a list of names.
    
    Order is preserved and duplicates are kept. Empty pieces are dropped.
    
    Args:
        value: Comma/whitespace separated string, iterable of names, or None
    
    Returns:
        List of names (empty list for None or blank input)
    
    Example:
        ```python
        split_names("name, email  phone")  # ["name", "email", "phone"]
        split_names(["a", "b"])           # ["a", "b"]
        ```
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [part for part in NAME_SEPARATOR.split(value) if part]
    return [str(part) for part in value]


def substitute_placeholders(template: str, params: dict[str, Any]) -> str:
    """Replace each placeholder key in template with its value.
    
    Keys are used verbatim (callers pass ``"{attribute}"``, not
    ``"attribute"``). Substitution is a single pass with the longest key
    winning at each position, so a replacement value that itself looks
    like a placeholder is never substituted again. No format specs are
    interpreted and literal braces elsewhere are left alone.

    Args:
        template: Message template
        params: Mapping of placeholder token to replacement value

    Returns:
        Template with every token replaced by ``str(value)``
    """
    keys = [key for key in params if key]
    if not keys:
        return template
    pattern = re.compile(
        "|".join(re.escape(key) for key in sorted(keys, key=len, reverse=True))
    )
    return pattern.sub(lambda match: str(params[match.group(0)]), template)
