"""Story nodes: a named piece of text and the choices leading away from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from .vars import Action, Condition


@dataclass
class Choice:
    """A labelled edge from one node to a target node."""

    target: Optional["Node"]
    text: str
    conditions: list[Condition] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)


@dataclass
class Node:
    """A story node with its script text and outgoing choices."""

    name: str
    text: str
    choices: list[Choice] = field(default_factory=list)

    def get_choice(self, index: int, check_conditions: bool = True) -> Optional["Node"]:
        """Return the target of the choice at index, or None if there is none."""
        if not 0 <= index < len(self.choices):
            return None
        return self.choices[index].target

    def list_choices(self, check_conditions: bool = True) -> list[str]:
        """Return the texts of the choices, in order."""
        return [choice.text for choice in self.choices]

    def add_choice(
        self,
        other: Optional["Node"],
        text: str,
        conditions: Optional[list[Condition]] = None,
        actions: Optional[list[Action]] = None,
    ) -> None:
        """Append a choice leading to another node."""
        self.choices.append(
            Choice(other, text, list(conditions or []), list(actions or []))
        )


def make_node(name: str, script_path: Union[str, PathLike]) -> Node:
    """Build a node whose text is the script file's content, or empty if unreadable."""
    try:
        with Path(script_path).open(encoding="utf-8", newline="") as script:
            text = script.read()
    except OSError:
        text = ""
    return Node(name, text)