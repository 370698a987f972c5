#!/usr/bin/env python3
"""
Run the examples shipped in examples/ to ensure they keep working.
"""

import math
import sys
from pathlib import Path

# Add parent and examples directories to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "examples"))

import pytest

import graphic_editor
import shape_areas


def test_graphic_editor_output(capsys):
    assert graphic_editor.main() == 0
    out = capsys.readouterr().out.strip().split("\n\n")

    assert out[0].splitlines() == [
        "Drawing a composite graphic",
        "Drawing a circle",
        "Drawing a rectangle",
        "Drawing a line",
    ]
    assert out[1].splitlines() == [
        "Drawing a composite graphic",
        "Drawing a circle",
        "Drawing a rectangle",
        "Drawing a composite graphic",
        "Drawing a line",
    ]


def test_shape_total_area():
    shapes = shape_areas.build_shapes()
    expected = math.pi * 25 + 24 + 10.5
    assert shape_areas.total_area(shapes) == pytest.approx(expected)


def test_shape_report(capsys):
    assert shape_areas.main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Area of Circle(radius=5): 78.54"
    assert lines[1] == "Area of Rectangle(width=4, height=6): 24.00"
    assert lines[2] == "Area of Triangle(base=3, height=7): 10.50"
    assert lines[3] == "Total area: 113.04"
