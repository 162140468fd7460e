"""Composite Tasks.

A task tree where leaf tasks carry a fixed duration and composite tasks report
the sum of their children, plus a small CLI to inspect and export trees.
"""

__version__ = "0.1.0"

from composite_tasks.tree import CompositeTask, CyclicTaskError, LeafTask, Task

__all__ = ["__version__", "CompositeTask", "CyclicTaskError", "LeafTask", "Task"]
