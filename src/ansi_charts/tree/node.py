"""TreeNode - a strict hierarchy of named nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class TreeNode:
    """
    A named node owning an ordered list of children.

    Children are only created through add_child, so every node has exactly
    one parent and the structure cannot contain cycles.
    """
    name: str
    metadata: str | None = None
    expanded: bool = True
    children: list["TreeNode"] = field(default_factory=list, repr=False)

    def add_child(self, name: str, metadata: str | None = None) -> "TreeNode":
        """Create a child node, append it and return it."""
        child = TreeNode(name, metadata)
        self.children.append(child)
        return child

    def find_child(self, name: str) -> "TreeNode | None":
        """Direct child with the given name, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def remove_child(self, name: str) -> "TreeNode | None":
        """Detach and return the first direct child with this name (with its subtree)."""
        for i, child in enumerate(self.children):
            if child.name == name:
                return self.children.pop(i)
        return None

    def clear(self) -> None:
        """Release the whole subtree, children before their parents."""
        for node in reversed(list(self.walk())):
            node.children.clear()

    def collapse(self) -> None:
        self.expanded = False

    def expand(self) -> None:
        self.expanded = True

    def toggle_expansion(self) -> None:
        self.expanded = not self.expanded

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def depth(self) -> int:
        """Levels in this subtree: 1 for a leaf, else 1 + the deepest child."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest

    def count_nodes(self) -> int:
        """Number of nodes in this subtree, this node included."""
        return sum(1 for _ in self.walk())

    def walk(self) -> Iterator["TreeNode"]:
        """Iterate over the subtree depth-first, parents before children."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def create_tree(root_name: str, metadata: str | None = None) -> TreeNode:
    """Start a new tree."""
    return TreeNode(root_name, metadata)
