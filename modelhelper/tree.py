"""A simple named tree that prints as an indented outline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TextIO


@dataclass
class Node:
    name: str = ""
    description: str = ""
    id: int = 0
    nodes: list[Node] = field(default_factory=list)

    def add(self, child: Node) -> None:
        self.nodes.append(child)

    def print(self, with_description: bool) -> None:
        print_tree(self, "", with_description)


def print_tree(
    root: Node,
    prefix: str = "",
    print_description: bool = False,
    file: TextIO | None = None,
) -> None:
    """Write ``root`` and its descendants, indenting two spaces per level."""
    if not prefix:
        if print_description and root.description:
            line = f"{root.name} {root.description}"
        else:
            line = root.name
    elif print_description:
        line = f"{prefix}{root.name} {root.description}"
    else:
        line = f"{prefix}{root.name}"
    print(line, file=file)
    for child in root.nodes:
        print_tree(child, prefix + "  ", print_description, file)


def print_built(builder: Any, with_description: bool) -> None:
    """Build a tree with ``builder.build()`` and print it."""
    builder.build().print(with_description)


def max_len(root: Node) -> int:
    """Length of the longest name anywhere in the tree."""
    return max([len(root.name), *(max_len(child) for child in root.nodes)])