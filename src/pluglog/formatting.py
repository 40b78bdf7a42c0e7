"""printf-style message formatting with strict argument checking.

Templates use the familiar ``%`` conversions (``%s``, ``%d``, ``%5.2f``...)
with positional arguments only. ``%%`` is a literal percent sign. Supplying
fewer arguments than conversions is a programming error at the call site
and raises FormatArgumentMismatchError; surplus arguments are ignored.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from pluglog.errors import FormatArgumentMismatchError, MessageFormatError

_SPEC_RE = re.compile(r"%[-+ #0]*\d*(?:\.\d+)?[hlL]?([A-Za-z%])?")

_CONVERSIONS = frozenset("diouxXeEfFgGcrsa")


def conversions(template: str) -> list[str]:
    """Conversion characters of ``template`` that consume an argument, in order.

    ``"%5d of %s (100%%)"`` gives ``["d", "s"]``.

    Raises:
        MessageFormatError: On an incomplete or unknown conversion.
    """
    found = []
    for match in _SPEC_RE.finditer(template):
        conversion = match.group(1)
        if conversion is None:
            raise MessageFormatError(
                f"Incomplete format specifier at index {match.start()}: {template!r}"
            )
        if conversion == "%":
            continue
        if conversion not in _CONVERSIONS:
            raise MessageFormatError(
                f"Unknown format conversion '{conversion}' at index {match.start()}: {template!r}"
            )
        found.append(conversion)
    return found


def count_placeholders(template: str) -> int:
    """Count the conversions in ``template`` that consume an argument."""
    return len(conversions(template))


def format_message(template: str, args: Sequence[Any] = ()) -> str:
    """Substitute ``args`` into ``template``.

    Args:
        template: Message with printf-style conversions.
        args: Ordered values, one per conversion.

    Returns:
        The formatted message.

    Raises:
        FormatArgumentMismatchError: If ``args`` has fewer entries than the
            template has conversions.
        MessageFormatError: If the template is malformed or a value does not
            fit its conversion (e.g. ``%d`` with a string).
    """
    expected = count_placeholders(template)
    if expected > len(args):
        raise FormatArgumentMismatchError(template, expected, len(args))
    try:
        return template % tuple(args[:expected])
    except (TypeError, ValueError) as e:
        raise MessageFormatError(f"Could not format {template!r}: {e}") from e
