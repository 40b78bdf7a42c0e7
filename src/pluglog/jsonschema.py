"""Plugin descriptor validation with the jsonschema library.

Problems come back as ``<path>: <message>`` strings, for example
``version: 2 is not of type 'string'``, so ``load_plugin_descriptor`` can
report all of them in a single PluginDescriptorError.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from pluglog.logging import get_logger

_logger = get_logger("jsonschema")


def validate(data: Any, schema: Mapping[str, Any]) -> list[str]:
    """Validate ``data`` against a Draft 2020-12 ``schema``.

    Returns:
        One message per problem, ordered by where it occurs in ``data``.
        Empty when ``data`` is valid.
    """
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: e.json_path)
    messages = [_format_error(e) for e in errors]
    for msg in messages:
        _logger.info("Descriptor problem: %s", msg)
    return messages


def _format_error(error: ValidationError) -> str:
    # "$.version" -> "version", "$[2]" -> "[2]"; the document itself stays "$"
    path = error.json_path.removeprefix("$.").removeprefix("$") or "$"
    return f"{path}: {error.message}"
