"""Actions that change story variables and conditions that test them."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable

from .store import Store

_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "assign": lambda _current, value: value,
    "add": operator.add,
    "sub": operator.sub,
}

_COMPARISONS: dict[str, Callable[[int, int], bool]] = {
    "equal": operator.eq,
    "not_equal": operator.ne,
    "greater": operator.gt,
    "lower": operator.lt,
    "greater_equal": operator.ge,
    "lower_equal": operator.le,
}


@dataclass
class Action:
    """Changes one variable of a store: assign, add or sub a value."""

    store: Store
    variable: str
    operation: str
    value: int

    def apply(self) -> None:
        """Apply the operation; raise ValueError for an unknown one."""
        try:
            combine = _OPERATIONS[self.operation]
        except KeyError:
            raise ValueError(f"Unknown operation: {self.operation}") from None
        current = self.store.get_variable(self.variable)
        self.store.set_variable(self.variable, combine(current, self.value))


@dataclass
class Condition:
    """Compares one variable of a store with a value."""

    store: Store
    variable: str
    comparison: str
    value: int

    def apply(self) -> bool:
        """Evaluate the comparison; raise ValueError for an unknown one."""
        try:
            compare = _COMPARISONS[self.comparison]
        except KeyError:
            raise ValueError(f"Unknown comparison: {self.comparison}") from None
        return compare(self.store.get_variable(self.variable), self.value)


def make_action(store: Store, variable: str, action: str, value: int) -> Action:
    """Build an action on the given store."""
    return Action(store, variable, action, value)


def make_condition(
    store: Store, variable: str, comparison: str, value: int
) -> Condition:
    """Build a condition on the given store."""
    return Condition(store, variable, comparison, value)