"""Exceptions raised while decoding or loading a GraphQL config."""

from __future__ import annotations

from typing import Any, Sequence


class GraphQLConfigError(RuntimeError):
    """Base class for every error raised by :mod:`graphql_config`."""

    pass


class MalformedDocumentError(GraphQLConfigError):
    """Raised when the top-level document is not an object."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"GraphQL config must be an object, got {type(value).__name__}"
        )


class TypeMismatchError(GraphQLConfigError):
    """Raised when a field value does not have the expected shape.

    Attributes:
        loc: Keys leading from the document root to the offending value,
            e.g. ``("projects", "app", "includes", 0)``.
        expected: Short description of the accepted shape.
        value: The rejected input value.
    """

    def __init__(self, loc: Sequence[str | int], expected: str, value: Any):
        self.loc = tuple(loc)
        self.expected = expected
        self.value = value
        super().__init__(
            f"{format_loc(self.loc)}: expected {expected}, "
            f"got {type(value).__name__}"
        )


class ConfigNotFoundError(GraphQLConfigError):
    """Raised when no config file exists at the given or discovered location."""

    pass


class ConfigParseError(GraphQLConfigError):
    """Raised when a config file is empty or not valid JSON/YAML."""

    pass


class UnsupportedConfigFormatError(GraphQLConfigError):
    """Raised when an explicit config file has an unknown extension."""

    pass


def format_loc(loc: Sequence[str | int]) -> str:
    """Render *loc* as ``projects.app.includes[0]``; ``<root>`` when empty."""
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out or "<root>"


__all__ = [
    "GraphQLConfigError",
    "MalformedDocumentError",
    "TypeMismatchError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "UnsupportedConfigFormatError",
    "format_loc",
]
