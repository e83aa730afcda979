"""Stories: a graph of nodes loaded from a YAML description."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Optional, TextIO, Union

import yaml

from .node import Node, make_node
from .store import Store


@dataclass
class Story:
    """A titled set of nodes, the node the player is at, and the game state."""

    title: str
    nodes: dict[str, Node]
    current: Optional[Node] = None
    store: Store = field(default_factory=Store)

    def to_dot(self) -> str:
        """Return the story graph in Graphviz dot syntax, nodes sorted by name."""
        lines = ["digraph story {"]
        for name in sorted(self.nodes):
            node = self.nodes[name]
            targets = [
                node.get_choice(index, False)
                for index in range(len(node.list_choices(False)))
            ]
            if len(targets) == 1:
                lines.append(f'    "{node.name}" -> "{targets[0].name}";')
            elif targets:
                joined = " ".join(f'"{target.name}"' for target in targets)
                lines.append(f'    "{node.name}" -> {{{joined}}};')
        lines.append("}")
        return "\n".join(lines) + "\n"

    def display(self, out: TextIO) -> TextIO:
        """Write the dot graph to out and return out."""
        out.write(self.to_dot())
        return out


def _text(value: object) -> str:
    if isinstance(value, (dict, list)):
        raise TypeError(f"expected a scalar, got {value!r}")
    return str(value)


def make_story(path: Union[str, PathLike]) -> Story:
    """Load a story from its YAML description file."""
    path = Path(path)
    with path.open(encoding="utf-8") as source:
        config = yaml.safe_load(source)

    title = config.get("title")
    title = "Untitled" if title is None else _text(title)

    scripts_path = Path(_text(config["scripts-path"]))
    if not scripts_path.is_absolute():
        scripts_path = path.parent / scripts_path

    entries = config.get("story") or []
    nodes: dict[str, Node] = {}
    start: Optional[Node] = None
    for entry in entries:
        name = _text(entry["name"])
        node = make_node(name, scripts_path / _text(entry["script"]))
        nodes[name] = node
        if start is None:
            start = node

    for entry in entries:
        current = nodes[_text(entry["name"])]
        for choice in entry.get("choices") or []:
            text = _text(choice["text"])
            target_name = _text(choice["target"])
            try:
                target = nodes[target_name]
            except KeyError:
                raise ValueError(f"unknown choice target: {target_name}") from None
            current.add_choice(target, text)

    return Story(title, nodes, start, Store(active_node=start))