"""Game state: the active node and the integer variables of a story."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Store:
    """Holds the active node and the story's named integer variables."""

    active_node: Any = None
    variables: dict[str, int] = field(default_factory=dict)

    def has_variable(self, name: str) -> bool:
        """Tell whether the variable has ever been set."""
        return name in self.variables

    def get_variable(self, name: str) -> int:
        """Return the variable's value, or 0 if it has never been set."""
        return self.variables.get(name, 0)

    def set_variable(self, name: str, value: int) -> None:
        """Set the variable to the given value."""
        self.variables[name] = value

    def inventory(self) -> dict[str, int]:
        """Return the positive variables whose names do not end in '_', by name."""
        return {
            name: value
            for name, value in sorted(self.variables.items())
            if value > 0 and name and not name.endswith("_")
        }