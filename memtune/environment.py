"""Editing of the environment a profiled program is started with."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentVariable:
    """One ``KEY=VALUE`` entry."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


def _parse_entry(entry: str) -> EnvironmentVariable:
    key, separator, value = entry.partition("=")
    if not separator:
        # An entry without '=' serves as both its name and its value.
        return EnvironmentVariable(entry, entry)
    return EnvironmentVariable(key, value)


def parse_environment(entries: Iterable[str]) -> list[EnvironmentVariable]:
    """Split ``KEY=VALUE`` strings at their first ``=``."""
    return [_parse_entry(entry) for entry in entries]


def format_environment(variables: Iterable[EnvironmentVariable]) -> list[str]:
    """Join variables back into ``KEY=VALUE`` strings."""
    return [str(variable) for variable in variables]


class EnvironmentEditor:
    """A table of variables with accept and reject of pending edits."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._committed = list(entries)
        self.variables: list[EnvironmentVariable] = parse_environment(self._committed)

    @property
    def committed(self) -> list[str]:
        """The environment as last accepted."""
        return list(self._committed)

    def entries(self) -> list[str]:
        """The table as ``KEY=VALUE`` strings, pending edits included."""
        return format_environment(self.variables)

    def add(self, key: str, value: str) -> None:
        """Append a variable to the table."""
        self.variables.append(EnvironmentVariable(_checked_key(key), value))

    def edit(self, row: int | None, key: str, value: str) -> None:
        """Replace the variable in ``row``; no row selected does nothing."""
        if row is None:
            return
        self._check_row(row)
        self.variables[row] = EnvironmentVariable(_checked_key(key), value)

    def delete(self, row: int | None) -> None:
        """Remove the variable in ``row``; no row selected does nothing."""
        if row is None:
            return
        self._check_row(row)
        del self.variables[row]

    def accept(self) -> list[str]:
        """Commit the table and return the new environment."""
        self._committed = self.entries()
        return list(self._committed)

    def reject(self) -> None:
        """Drop pending edits and restore the committed environment."""
        self.variables = parse_environment(self._committed)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self.variables):
            raise IndexError(f"no variable in row {row}")


def _checked_key(key: str) -> str:
    if not key:
        raise ValueError("variable name must not be empty")
    return key