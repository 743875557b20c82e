"""
URI template expansion for request paths.

Supports the subset of RFC 6570 the services need: simple string expansion
(``{var}``) and reserved expansion (``{+var}``), one variable per expression.
"""

import re
from typing import Any, Mapping
from urllib.parse import quote

from .exceptions import UriTemplateError

_VARNAME = re.compile(r"^(?:[A-Za-z0-9_]|%[0-9A-Fa-f]{2})(?:[A-Za-z0-9_.]|%[0-9A-Fa-f]{2})*$")

# RFC 3986 gen-delims and sub-delims, left intact by reserved expansion
_RESERVED = ":/?#[]@!$&'()*+,;="

_UNSUPPORTED_OPERATORS = "#./;?&=,!@|"


def expand(template: str, values: Mapping[str, Any]) -> str:
    """
    Expand every expression in ``template`` using ``values``.

    Args:
        template: A URI template such as ``"{index}"`` or ``"/{+path}/_count"``.
        values: Variable values. Undefined variables expand to ``""``.

    Returns:
        The expanded string, with variable values percent-encoded.

    Raises:
        UriTemplateError: If the template is malformed.
    """
    parts: list[str] = []
    pos = 0
    length = len(template)

    while pos < length:
        start = template.find("{", pos)
        stray = template.find("}", pos)
        if start == -1:
            if stray != -1:
                raise UriTemplateError(
                    f"Malformed template {template!r}: unexpected '}}' at {stray}"
                )
            parts.append(template[pos:])
            break
        if stray != -1 and stray < start:
            raise UriTemplateError(
                f"Malformed template {template!r}: unexpected '}}' at {stray}"
            )

        end = template.find("}", start)
        if end == -1:
            raise UriTemplateError(
                f"Malformed template {template!r}: unclosed expression at {start}"
            )

        parts.append(template[pos:start])
        parts.append(_expand_expression(template, template[start + 1 : end], values))
        pos = end + 1

    return "".join(parts)


def _expand_expression(template: str, expression: str, values: Mapping[str, Any]) -> str:
    safe = ""
    name = expression
    if expression.startswith("+"):
        safe = _RESERVED
        name = expression[1:]
    elif expression and expression[0] in _UNSUPPORTED_OPERATORS:
        raise UriTemplateError(
            f"Unsupported operator {expression[0]!r} in template {template!r}"
        )

    if not _VARNAME.match(name):
        raise UriTemplateError(
            f"Invalid variable name {name!r} in template {template!r}"
        )

    value = values.get(name)
    if value is None:
        return ""
    return quote(str(value), safe=safe)
