"""Task tree: leaf tasks with a fixed duration and composites that sum their children.

A composite's duration is recomputed on every query, so adding or removing a
child is reflected immediately.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class CyclicTaskError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class LeafTask:
    """A unit of work with a fixed intrinsic duration."""

    name: str
    time_required: float = 0.0

    def duration(self) -> float:
        return self.time_required


class CompositeTask:
    """A task whose duration is the sum of its children's durations.

    Children are kept in insertion order. Membership is by identity: two equal
    leaves added separately are two distinct children.
    """

    __slots__ = ("_name", "_children")

    def __init__(self, name: str, children: Iterable[Task] = ()) -> None:
        self._name = name
        self._children: list[Task] = []
        for child in children:
            self.add_child(child)

    @property
    def name(self) -> str:
        return self._name

    @property
    def children(self) -> tuple[Task, ...]:
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._children))

    def __repr__(self) -> str:
        return f"CompositeTask(name={self.name!r}, children={len(self._children)})"

    def add_child(self, task: Task) -> None:
        """Append `task` to the children.

        Raises:
            CyclicTaskError: If `task` is this composite or already contains it.
        """

        if contains(task, self):
            raise CyclicTaskError(
                f"Adding {task.name!r} to {self.name!r} would make the tree cyclic"
            )
        self._children.append(task)

    def remove_child(self, task: Task) -> None:
        """Remove the first child that is `task`; no-op when it is not a child."""

        for idx, child in enumerate(self._children):
            if child is task:
                del self._children[idx]
                return

    def find_child(self, name: str) -> Task | None:
        for child in self._children:
            if child.name == name:
                return child
        return None

    def duration(self) -> float:
        """Sum child durations in insertion order, each nested composite as a subtotal.

        An explicit stack keeps deep trees clear of the interpreter recursion limit.
        """

        pending: list[Iterator[Task]] = [iter(self.children)]
        totals: list[float] = [0.0]
        while True:
            child = next(pending[-1], None)
            if child is None:
                pending.pop()
                subtotal = totals.pop()
                if not totals:
                    return subtotal
                totals[-1] += subtotal
            elif isinstance(child, CompositeTask):
                pending.append(iter(child.children))
                totals.append(0.0)
            else:
                totals[-1] += duration_of(child)


Task = LeafTask | CompositeTask


def duration_of(task: Task) -> float:
    if isinstance(task, LeafTask):
        return task.time_required
    if isinstance(task, CompositeTask):
        return task.duration()
    raise TypeError(f"Not a task: {task!r}")


def walk(task: Task, depth: int = 0) -> Iterator[tuple[int, Task]]:
    """Yield `(depth, task)` for `task` and its descendants, depth-first pre-order."""

    stack: list[tuple[int, Task]] = [(depth, task)]
    while stack:
        current_depth, current = stack.pop()
        yield current_depth, current
        if isinstance(current, CompositeTask):
            stack.extend((current_depth + 1, child) for child in reversed(current.children))


def contains(root: Task, target: Task) -> bool:
    """Return True if `target` is `root` or appears anywhere below it."""

    return any(node is target for _, node in walk(root))
