"""Flag value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class EnumValue:
    """A flag value restricted to a fixed set of choices."""

    enum: Sequence[str]
    default: str
    _selected: str = field(default="", init=False, repr=False)

    def set(self, value: str) -> None:
        """Select ``value``; raise ValueError if it is not an allowed choice."""
        if value not in self.enum:
            raise ValueError(f"allowed values: [{', '.join(self.enum)}]")
        self._selected = value

    @property
    def value(self) -> str:
        """The selected choice, or the default when none was selected."""
        return self._selected or self.default

    def __str__(self) -> str:
        return self.value