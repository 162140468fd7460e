"""Plain-text outline of a task tree."""

from __future__ import annotations

from .model import Task, duration_of, walk


def format_duration(value: float, precision: int = 2) -> str:
    return f"{value:.{precision}f}"


def render_outline(task: Task, *, indent: str = "  ", precision: int = 2) -> str:
    """Render one line per task, indented by depth.

    Example:
        Make Cake (9.50)
          Make Batter (6.50)
            Add Dry Ingredients (2.00)
    """

    lines = [
        f"{indent * depth}{node.name} ({format_duration(duration_of(node), precision)})"
        for depth, node in walk(task)
    ]
    return "\n".join(lines)
