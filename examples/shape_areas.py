#!/usr/bin/env python3
"""
Shape area demo: adding an operation to a tree without touching its nodes.

Shapes are leaf payloads. Area calculation lives entirely in visitors, one
that reports each shape and one that folds the areas into a total.

Usage:
    python examples/shape_areas.py
"""

import math
import sys
from dataclasses import dataclass
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositree import Branch, Leaf, Visitor, traverse
from compositree.visitors import ReducingVisitor


@dataclass(frozen=True)
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Triangle:
    base: float
    height: float

    def area(self) -> float:
        return self.base * self.height / 2


class AreaReportVisitor(Visitor):
    """Formats one line per shape; groups produce no output."""

    def __init__(self):
        self.lines = []

    def visit_leaf(self, leaf):
        shape = leaf.payload
        self.lines.append(f"Area of {shape}: {shape.area():.2f}")

    def visit_branch(self, branch):
        pass


def build_shapes() -> Branch:
    shapes = Branch("shapes")
    shapes.add(Leaf(Circle(5)))
    shapes.add(Leaf(Rectangle(4, 6)))
    shapes.add(Leaf(Triangle(3, 7)))
    return shapes


def total_area(root) -> float:
    summer = ReducingVisitor(lambda total, area: total + area, 0.0,
                             key=lambda shape: shape.area())
    traverse(root, summer)
    return summer.result


def main() -> int:
    shapes = build_shapes()

    report = AreaReportVisitor()
    traverse(shapes, report)
    for line in report.lines:
        print(line)

    print(f"Total area: {total_area(shapes):.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
