"""JSON persistence for task trees.

Document shape (a node is a composite when `children` is present):

    {
      "name": "Make Cake",
      "children": [
        {"name": "Fill Pan", "duration": 1.0}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from .model import CompositeTask, LeafTask, Task

logger = logging.getLogger(__name__)


class TaskNode(BaseModel):
    name: str = Field(min_length=1)
    duration: float | None = Field(default=None, ge=0.0)
    children: list[TaskNode] | None = None

    @model_validator(mode="after")
    def _composites_have_no_own_duration(self) -> TaskNode:
        if self.children is not None and self.duration not in (None, 0.0):
            raise ValueError(
                f"Composite task {self.name!r} cannot declare its own duration; "
                "it is derived from its children"
            )
        return self


TaskNode.model_rebuild()


def task_to_node(task: Task) -> TaskNode:
    if isinstance(task, CompositeTask):
        return TaskNode(name=task.name, children=[task_to_node(c) for c in task.children])
    return TaskNode(name=task.name, duration=task.time_required)


def node_to_task(node: TaskNode) -> Task:
    if node.children is None:
        return LeafTask(node.name, node.duration or 0.0)
    return CompositeTask(node.name, [node_to_task(c) for c in node.children])


class TaskTreeStore:
    """Load and save a single task tree as a JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Task:
        """Read the tree from disk.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnicodeDecodeError: If the file is not UTF-8 text.
            json.JSONDecodeError: If the file is not JSON.
            pydantic.ValidationError: If the document does not describe a task tree.
        """

        raw = json.loads(self._path.read_text(encoding="utf-8"))
        task = node_to_task(TaskNode.model_validate(raw))
        logger.debug("Task tree loaded", extra={"path": str(self._path), "root": task.name})
        return task

    def save(self, task: Task) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = task_to_node(task).model_dump(mode="json", exclude_none=True)
        self._path.write_text(
            json.dumps(payload, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        logger.info("Task tree saved", extra={"path": str(self._path), "root": task.name})

