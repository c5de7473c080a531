"""Options passed to individual MySQL Shell commands."""

from __future__ import annotations


def quoted(value: str) -> str:
    """Render an option value as a Python literal: booleans bare, strings quoted."""
    lowered = value.lower()
    if lowered == "true":
        return "True"
    if lowered == "false":
        return "False"
    return f"'{value}'"


class Options(dict):
    """String options for a shell command, rendered as a Python dictionary."""

    def __str__(self) -> str:
        body = ", ".join(f"'{key}': {quoted(value)}" for key, value in self.items())
        return f"{{{body}}}"