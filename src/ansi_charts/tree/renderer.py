"""Render a TreeNode hierarchy with branch connectors."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, replace
from typing import TextIO

from ansi_charts.core.constants import CSI, RESET
from ansi_charts.core.glyphs import TreeChars, TreeStyle, tree_chars
from ansi_charts.tree.node import TreeNode

BRANCH_COLOR = f"{CSI}1;34m"  # Bold blue
LEAF_COLOR = f"{CSI}0;37m"


@dataclass(frozen=True)
class TreeStatistics:
    total_nodes: int
    max_depth: int
    root_children: int


@dataclass(frozen=True)
class TreeRenderer:
    """
    Draws a tree one node per line.

    Renderers are immutable; each with_* method returns a new renderer.

    Example:
        >>> root = TreeNode("project")
        >>> src = root.add_child("src")
        >>> _ = src.add_child("main.py")
        >>> _ = root.add_child("README.md")
        >>> print(TreeRenderer(TreeStyle.UNICODE).render_to_string(root), end="")
        project
        ├─src
        │ └─main.py
        └─README.md
    """
    style: TreeStyle = TreeStyle.UNICODE
    show_metadata: bool = False
    show_icons: bool = False
    max_depth: int | None = None
    alphabetical_sort: bool = False
    color_enabled: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", TreeStyle(self.style))

    def with_metadata(self, enabled: bool = True) -> "TreeRenderer":
        return replace(self, show_metadata=enabled)

    def with_icons(self, enabled: bool = True) -> "TreeRenderer":
        return replace(self, show_icons=enabled)

    def with_max_depth(self, depth: int | None) -> "TreeRenderer":
        """Limit rendering to depth levels below the root (None for no limit)."""
        return replace(self, max_depth=depth)

    def with_alphabetical_sort(self, enabled: bool = True) -> "TreeRenderer":
        return replace(self, alphabetical_sort=enabled)

    def with_colors(self, enabled: bool = True) -> "TreeRenderer":
        return replace(self, color_enabled=enabled)

    def _label(self, node: TreeNode, chars: TreeChars) -> str:
        parts: list[str] = []
        if self.show_icons:
            if node.is_leaf:
                parts.append(chars.icon_leaf)
            elif node.expanded:
                parts.append(chars.icon_expanded)
            else:
                parts.append(chars.icon_collapsed)
        if self.color_enabled:
            color = LEAF_COLOR if node.is_leaf else BRANCH_COLOR
            parts.append(f"{color}{node.name}{RESET}")
        else:
            parts.append(node.name)
        if self.show_metadata and node.metadata is not None:
            parts.append(f" [{node.metadata}]")
        return ''.join(parts)

    def render(self, root: TreeNode, out: TextIO | None = None) -> None:
        """Write the tree rooted at root to out (stdout by default)."""
        out = out if out is not None else sys.stdout
        chars = tree_chars(self.style)
        out.write(self._label(root, chars) + "\n")

        stack = self._child_entries(root, "", 0)
        while stack:
            node, prefix, depth, is_last = stack.pop()
            branch = chars.last_branch if is_last else chars.branch
            out.write(f"{prefix}{branch}{self._label(node, chars)}\n")
            extension = chars.space if is_last else chars.continuation
            stack.extend(self._child_entries(node, prefix + extension, depth + 1))

    def _child_entries(
        self,
        node: TreeNode,
        prefix: str,
        depth: int,
    ) -> list[tuple[TreeNode, str, int, bool]]:
        """Pending lines for node's visible children, last child first so pops come in order."""
        if not (node.expanded and node.children):
            return []
        if self.max_depth is not None and depth >= self.max_depth:
            return []

        children = list(node.children)
        if self.alphabetical_sort:
            children.sort(key=lambda child: child.name)

        last = len(children) - 1
        return [(child, prefix, depth, i == last) for i, child in reversed(list(enumerate(children)))]

    def render_to_string(self, root: TreeNode) -> str:
        buffer = io.StringIO()
        self.render(root, buffer)
        return buffer.getvalue()

    def statistics(self, root: TreeNode) -> TreeStatistics:
        return TreeStatistics(
            total_nodes=root.count_nodes(),
            max_depth=root.depth(),
            root_children=len(root.children),
        )

    def write_statistics(self, root: TreeNode, out: TextIO | None = None) -> None:
        out = out if out is not None else sys.stdout
        stats = self.statistics(root)
        out.write("\nTree Statistics:\n")
        out.write(f"  Total nodes: {stats.total_nodes}\n")
        out.write(f"  Maximum depth: {stats.max_depth}\n")
        out.write(f"  Root children: {stats.root_children}\n")
