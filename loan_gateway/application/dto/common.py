"""Helpers shared by request DTOs."""

from typing import Any, Iterable, List

# Scalars a JSON body can carry for a text-or-number field
FieldValue = str | int | float | None


def format_value(value: Any) -> str:
    """Render a submitted value as text, dropping the ".0" of integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def missing_fields(fields: Iterable[tuple[str, Any]]) -> List[str]:
    """Names of fields whose value is falsy (absent, empty, zero)."""
    return [name for name, value in fields if not value]


def blank_fields(fields: Iterable[tuple[str, Any]]) -> List[str]:
    """Names of fields that are absent or an empty string."""
    return [name for name, value in fields if value is None or value == ""]
