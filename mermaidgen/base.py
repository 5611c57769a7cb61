"""Shared building blocks for diagram generation: IDs, configuration, output."""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import Iterator, Optional, Union

INDENTATION = "    "

PropertyValue = Union[bool, int, float, str]


class IdGenerator:
    """Hands out sequential string identifiers starting at "0"."""

    def __init__(self) -> None:
        self._counter: Iterator[int] = itertools.count()

    def next_id(self) -> str:
        """Return the next unused identifier."""
        return str(next(self._counter))


def _format_value(value: PropertyValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigurationProperties:
    """An ordered set of named configuration values, optionally under a section header."""

    def __init__(self, section: Optional[str] = None) -> None:
        self.section = section
        self._properties: dict[str, PropertyValue] = {}

    def set(self, name: str, value: PropertyValue) -> "ConfigurationProperties":
        """Set a property and return self for chaining."""
        if not isinstance(value, (bool, int, float, str)):
            raise TypeError(
                f"unsupported value type for property {name!r}: {type(value).__name__}"
            )
        self._properties[name] = value
        return self

    def get(self, name: str) -> PropertyValue:
        """Return the value of a property; raises KeyError if it is not set."""
        return self._properties[name]

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __str__(self) -> str:
        if not self._properties:
            return ""
        if self.section is None:
            header = ""
            indent = INDENTATION
        else:
            header = f"{INDENTATION}{self.section}:\n"
            indent = INDENTATION * 2
        lines = "".join(
            f"{indent}{name}: {_format_value(value)}\n"
            for name, value in self._properties.items()
        )
        return header + lines


def render_to_file(path: Union[str, Path], content: str) -> None:
    """Write diagram text to the file at path."""
    Path(path).write_text(content, encoding="utf-8")