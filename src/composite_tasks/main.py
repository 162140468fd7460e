"""CLI entrypoint for composite-tasks.

Commands operate on the built-in "Make Cake" tree unless `--file` points at a
saved tree.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from composite_tasks import __version__
from composite_tasks.config import CompositeTasksSettings
from composite_tasks.logging import configure_logging
from composite_tasks.tree.model import CompositeTask, Task, duration_of
from composite_tasks.tree.recipes import make_cake
from composite_tasks.tree.render import format_duration, render_outline
from composite_tasks.tree.store import TaskTreeStore

logger = logging.getLogger(__name__)


def _add_tree_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Saved task tree (JSON); defaults to the built-in 'Make Cake' recipe",
    )
    parser.add_argument(
        "--without",
        action="append",
        default=[],
        metavar="NAME",
        help="Remove the first top-level child with this name (repeatable)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="composite-tasks",
        description="Inspect composite task trees and their total durations",
    )
    parser.add_argument("--version", action="version", version=f"composite-tasks {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print the tree as an indented outline")
    _add_tree_arguments(show)

    duration = subparsers.add_parser("duration", help="Print the total duration of the tree")
    _add_tree_arguments(duration)

    export = subparsers.add_parser("export", help="Write the 'Make Cake' recipe as JSON")
    export.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Destination file (defaults to TASK_TREE_PATH)",
    )

    return parser


def _load_tree(path: Path | None) -> Task:
    if path is None:
        return make_cake()
    return TaskTreeStore(path).load()


def _drop_children(task: Task, names: list[str]) -> None:
    if not isinstance(task, CompositeTask):
        return
    for name in names:
        child = task.find_child(name)
        if child is None:
            logger.debug("No child to remove", extra={"parent": task.name, "child": name})
            continue
        task.remove_child(child)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = CompositeTasksSettings()
    except ValidationError as e:
        # Logging isn't configured yet.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    # stdout carries command output.
    configure_logging(settings.log_level, stream=sys.stderr)

    try:
        if args.command == "export":
            out = args.out or settings.task_tree_path
            TaskTreeStore(out).save(make_cake())
            print(f"Exported task tree to {out}")
            return 0

        task = _load_tree(args.file)
        _drop_children(task, args.without)

        if args.command == "show":
            print(render_outline(task, precision=settings.duration_precision))
            return 0

        # duration
        print(format_duration(duration_of(task), settings.duration_precision))
        return 0

    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.exception("Command failed", extra={"command": args.command})
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
