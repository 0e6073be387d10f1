"""Tree views of named hierarchies."""

from ansi_charts.tree.node import TreeNode, create_tree
from ansi_charts.tree.renderer import TreeRenderer, TreeStatistics

__all__ = ["TreeNode", "create_tree", "TreeRenderer", "TreeStatistics"]
