#!/usr/bin/env python3
"""
Graphic editor demo: single shapes and groups of shapes handled uniformly.

A drawing is a Branch of shapes; groups are nested Branches. Drawing the
whole picture is one visitor run over the tree.

Usage:
    python examples/graphic_editor.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositree import Branch, Leaf, Visitor, traverse


class DrawVisitor(Visitor):
    """Produces the drawing commands for every node in pre-order."""

    def __init__(self):
        self.commands = []

    def visit_leaf(self, leaf):
        self.commands.append(f"Drawing a {leaf.payload}")

    def visit_branch(self, branch):
        self.commands.append("Drawing a composite graphic")


def build_drawing() -> Branch:
    drawing = Branch("drawing")
    drawing.add(Leaf("circle"))
    drawing.add(Leaf("rectangle"))
    drawing.add(Leaf("line"))
    return drawing


def main() -> int:
    drawing = build_drawing()

    painter = DrawVisitor()
    traverse(drawing, painter)
    for command in painter.commands:
        print(command)

    # Groups nest: move the line into its own group
    line = drawing.children[-1]
    drawing.remove(line)
    group = drawing.add(Branch("group"))
    group.add(line)

    painter = DrawVisitor()
    traverse(drawing, painter)
    print()
    for command in painter.commands:
        print(command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
