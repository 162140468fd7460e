#!/usr/bin/env python3
"""Programmatic task tree example.

This demonstrates using the library directly:

* build the "Make Cake" tree and print its outline
* remove a step and watch the total change
* optionally persist the tree as JSON
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from composite_tasks.config import CompositeTasksSettings
from composite_tasks.logging import configure_logging
from composite_tasks.tree import LeafTask, make_cake
from composite_tasks.tree.render import render_outline
from composite_tasks.tree.store import TaskTreeStore


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build and inspect a task tree.")
    parser.add_argument("--save", type=Path, default=None, help="Write the final tree here")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = CompositeTasksSettings()
    configure_logging(settings.log_level)

    cake = make_cake()
    print(render_outline(cake))

    frost = cake.find_child("Frost")
    if frost is not None:
        cake.remove_child(frost)
    print(f"Without frosting: {cake.duration():.2f}")

    cake.add_child(LeafTask("Dust With Sugar", 0.5))
    print(f"With icing sugar instead: {cake.duration():.2f}")

    if args.save is not None:
        TaskTreeStore(args.save).save(cake)
        print(f"Persisted to: {args.save}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
