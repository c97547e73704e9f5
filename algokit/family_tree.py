"""A binary family tree with generation, children, grandchildren and sibling queries."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["TreeNode", "FamilyTree", "build_sample_tree", "main"]


@dataclass(eq=False)
class TreeNode:
    """One member of the tree."""

    data: str
    left: TreeNode | None = None
    right: TreeNode | None = None
    parent: TreeNode | None = field(default=None, init=False, repr=False)
    generation: int = field(default=0, init=False)

    @property
    def children(self) -> list[TreeNode]:
        return [c for c in (self.left, self.right) if c is not None]


class FamilyTree:
    """A binary tree whose nodes know their parent and generation (root is 1)."""

    def __init__(self, root: TreeNode | None) -> None:
        self.root = root
        if root is None:
            return
        root.parent = None
        root.generation = 1
        stack = [root]
        while stack:
            node = stack.pop()
            for child in node.children:
                child.parent = node
                child.generation = node.generation + 1
                stack.append(child)

    def _preorder(self) -> Iterator[TreeNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, key: str) -> TreeNode:
        """Return the first node in pre-order holding ``key``."""
        for node in self._preorder():
            if node.data == key:
                return node
        raise KeyError(key)

    def inorder(self) -> list[str]:
        """Return the data of every node in in-order."""
        result = []
        stack: list[TreeNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.data)
            current = current.right
        return result

    def leaves(self) -> list[str]:
        """Return the data of nodes without children, left to right."""
        return [node.data for node in self._preorder() if not node.children]

    def generation_members(self, generation: int) -> list[str]:
        """Return the data of every node in ``generation``, left to right."""
        return [node.data for node in self._preorder() if node.generation == generation]

    def report(self, key: str) -> str:
        """Describe the generation, children, grandchildren and sibling of ``key``."""
        try:
            node = self.find(key)
        except KeyError:
            return f"\nNode {key} is not present in Binary Tree.\n"
        parts = [
            f"\nGeneration of {node.data} : {node.generation}",
            f"\nMembers of Generation {node.generation} : ",
        ]
        parts.extend(f"{m} " for m in self.generation_members(node.generation))
        children = node.children
        leaf_note = f"{node.data} is a leaf node." if not children else ""
        parts.append(f"\nChildren of {node.data} : {leaf_note}")
        parts.extend(f"{c.data} " for c in children)
        parts.append(f"\nGrand Children of {node.data} : {leaf_note}")
        parts.extend(f"{g.data} " for c in children for g in c.children)
        parent = node.parent
        if parent is None:
            parts.append(f"\nNode {node.data} is the root node. So, no sibling.")
        else:
            sibling = next((c for c in (parent.right, parent.left) if c and c is not node), None)
            if sibling is None:
                parts.append(f"\nNode {node.data} has no sibling.")
            else:
                parts.append(f"\nSibling of {node.data} : {sibling.data}")
        return "".join(parts)


def build_sample_tree() -> FamilyTree:
    """Return the fixed fourteen-member tree the command queries."""
    return FamilyTree(
        TreeNode(
            "A",
            left=TreeNode(
                "B",
                left=TreeNode("D"),
                right=TreeNode(
                    "E",
                    left=TreeNode(
                        "G",
                        left=TreeNode("I", right=TreeNode("M")),
                        right=TreeNode("J"),
                    ),
                ),
            ),
            right=TreeNode(
                "C",
                right=TreeNode(
                    "F",
                    right=TreeNode(
                        "H",
                        left=TreeNode("K"),
                        right=TreeNode("L", right=TreeNode("N")),
                    ),
                ),
            ),
        )
    )


def _parse_queries(text: str) -> list[str]:
    match = re.match(r"\s*(-?\d+)", text)
    if match is None:
        raise ValueError("input does not start with a test-case count")
    count = max(int(match.group(1)), 0)
    names = [ch for ch in text[match.end():] if not ch.isspace()]
    return names[:count]


def _session(tree: FamilyTree, names: Sequence[str]) -> str:
    if not names:
        return ""
    parts = ["\nThe Inorder Traversal is : "]
    parts.extend(f"{d} " for d in tree.inorder())
    parts.append("\nLeaf nodes are : ")
    parts.extend(f"{d} " for d in tree.leaves())
    for number, name in enumerate(names, 1):
        parts.append(f"\n\nTestcase{number}\n")
        parts.append(tree.report(name))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Answer the node queries in an input file and write the report to an output file."""
    parser = argparse.ArgumentParser(
        prog="family-tree", description="Query members of the sample family tree."
    )
    parser.add_argument("input", help="file holding a count followed by node names")
    parser.add_argument("output", help="file to write the report to")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError:
        print("Error in opening file in read mode.", file=sys.stderr)
        return 1
    names = _parse_queries(text)
    Path(args.output).write_text(_session(build_sample_tree(), names))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())