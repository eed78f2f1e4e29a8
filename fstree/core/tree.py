"""
In-memory tree of nodes and its text rendering.
"""

from dataclasses import dataclass, field
from typing import List, Optional

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


@dataclass
class TreeNode:
    label: str
    is_dir: bool = False
    meta: Optional[str] = None
    children: List["TreeNode"] = field(default_factory=list)

    def add_child(self, node: "TreeNode") -> "TreeNode":
        self.children.append(node)
        return node

    def add_node(self, label: str, meta: Optional[str] = None) -> "TreeNode":
        """Add a leaf (file) node and return it."""
        return self.add_child(TreeNode(label, is_dir=False, meta=meta))

    def add_branch(self, label: str, meta: Optional[str] = None) -> "TreeNode":
        """Add a directory node and return it so entries can be added below."""
        return self.add_child(TreeNode(label, is_dir=True, meta=meta))

    @property
    def text(self) -> str:
        if self.meta is not None:
            return f"[{self.meta}]  {self.label}"
        return self.label


def _render_children(node: TreeNode, prefix: str, lines: List[str]) -> None:
    for i, child in enumerate(node.children):
        is_last = i == len(node.children) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append(f"{prefix}{connector}{child.text}")
        _render_children(child, prefix + (SPACE if is_last else PIPE), lines)


def render_tree(root: TreeNode) -> str:
    """
    Render ``root`` and its descendants as a tree diagram.

    The root's own line carries no connector; every descendant is drawn with
    ``├──``/``└──`` and indented under its parent. The result ends with a
    newline.

    Args:
        root: Top node of the tree

    Returns:
        The diagram as a single string
    """
    lines = [root.text]
    _render_children(root, "", lines)
    return "\n".join(lines) + "\n"
