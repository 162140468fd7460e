"""Composite task tree.

- `model`: leaf and composite tasks, recursive duration aggregation
- `recipes`: the built-in "Make Cake" tree
- `render`: plain-text outline
- `store`: JSON persistence
"""

from composite_tasks.tree.model import (
    CompositeTask,
    CyclicTaskError,
    LeafTask,
    Task,
    contains,
    duration_of,
    walk,
)
from composite_tasks.tree.recipes import make_batter, make_cake

__all__ = [
    "CompositeTask",
    "CyclicTaskError",
    "LeafTask",
    "Task",
    "contains",
    "duration_of",
    "make_batter",
    "make_cake",
    "walk",
]
