"""Built-in task trees.

Child order is part of the contract: "Make Cake" always lists "Make Batter",
"Fill Pan", "Frost" in that order.
"""

from __future__ import annotations

from .model import CompositeTask, LeafTask

MAKE_CAKE = "Make Cake"
MAKE_BATTER = "Make Batter"


def add_dry_ingredients() -> LeafTask:
    return LeafTask("Add Dry Ingredients", 2.0)


def add_liquids() -> LeafTask:
    return LeafTask("Add Liquids", 1.5)


def mix() -> LeafTask:
    return LeafTask("Mix", 3.0)


def fill_pan() -> LeafTask:
    return LeafTask("Fill Pan", 1.0)


def frost() -> LeafTask:
    return LeafTask("Frost", 2.0)


def make_batter() -> CompositeTask:
    return CompositeTask(MAKE_BATTER, [add_dry_ingredients(), add_liquids(), mix()])


def make_cake() -> CompositeTask:
    """Build a fresh "Make Cake" tree; nothing is shared between calls."""

    return CompositeTask(MAKE_CAKE, [make_batter(), fill_pan(), frost()])
