"""Named placeholder substitution for template bodies."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from sova.core.config import ParameterValue
from sova.core.errors import MissingParameterError

PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def _format(value: ParameterValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return "\n".join(str(v) for v in value)
    return str(value)


def placeholders(body: str) -> list[str]:
    """Placeholder names in *body*, in first-appearance order, without duplicates."""
    return list(dict.fromkeys(m.group(1) for m in PLACEHOLDER.finditer(body)))


def render(
    body: str,
    parameters: Mapping[str, ParameterValue],
    *,
    template: str | None = None,
) -> str:
    """
    Substitute ``{{Name}}`` placeholders in *body* with values from *parameters*.

    Substitution is a single pass: inserted values are never scanned again, so a
    value that itself looks like a placeholder is emitted literally.

    Args:
        body: Template text.
        parameters: Values keyed by placeholder name.
        template: Template reference used in error messages.

    Returns:
        The rendered text.

    Raises:
        MissingParameterError: If any placeholder has no value. All missing
            names are reported at once and nothing is rendered.
    """
    missing = [name for name in placeholders(body) if name not in parameters]
    if missing:
        raise MissingParameterError(missing, template)

    return PLACEHOLDER.sub(lambda m: _format(parameters[m.group(1)]), body)
