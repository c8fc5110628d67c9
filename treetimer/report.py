"""Fixed-width text report of a timer tree.

Layout::

    ----------------------------------------------------------------------------------------------------
    Entry                                             #calls       CPU time (s)       Wall time (s)
    ----------------------------------------------------------------------------------------------------
    hello                                             1            0.0001             0.0002
     World                                            1             0.0000             0.0000
    ----------------------------------------------------------------------------------------------------

Each nesting level adds ``indent`` spaces in front of the label and, unless
``indent_values`` is off, in front of both time values as well.
"""
from __future__ import annotations

from .node import TimerNode
from .tree import TimerTree

RULE_WIDTH = 100
LABEL_WIDTH = 49
CALLS_WIDTH = 12
TIME_WIDTH = 18

__all__ = ["render", "render_row", "rule", "header"]


def rule(char: str = "-") -> str:
    return char * RULE_WIDTH + "\n"


def _row(label: str, calls: str, cpu: str, wall: str) -> str:
    return (
        f"{label:<{LABEL_WIDTH}} {calls:<{CALLS_WIDTH}} "
        f"{cpu:<{TIME_WIDTH}} {wall:<{TIME_WIDTH}}\n"
    )


def header() -> str:
    return _row("Entry", "#calls", "CPU time (s)", "Wall time (s)")


def render_row(node: TimerNode, depth: int, indent: int = 1, indent_values: bool = True) -> str:
    pad = " " * (indent * depth)
    vpad = pad if indent_values else ""
    return _row(
        pad + node.label,
        str(node.call_count),
        f"{vpad}{node.cpu_time_total:.4f}",
        f"{vpad}{node.wall_time_total:.4f}",
    )


def render(
    tree: TimerTree,
    max_depth: int | None = None,
    indent: int = 1,
    indent_values: bool = True,
) -> str:
    parts = [rule(), header(), rule()]
    for depth, node in tree.walk(max_depth):
        parts.append(render_row(node, depth, indent, indent_values))
    parts.append(rule())
    return "".join(parts)
