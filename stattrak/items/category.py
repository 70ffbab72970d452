#!filepath: stattrak/items/category.py
from __future__ import annotations

from enum import Enum
from typing import Callable


def _suffix(*suffixes: str) -> Callable[[str], bool]:
    return lambda material: material.endswith(suffixes)


def _any_of(*preds: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda material: any(p(material) for p in preds)


def _named(*names: str) -> Callable[[str], bool]:
    return lambda material: material in names


class ItemCategory(Enum):
    """
    Trackable item categories, matched on the material name.

    An axe is both WEAPON and TOOL.
    """

    WEAPON = "weapon"
    TOOL = "tool"
    ARMOR = "armor"

    def matches(self, material: str | None) -> bool:
        if not material:
            return False
        return _MATCHERS[self](material.upper())


_MATCHERS: dict[ItemCategory, Callable[[str], bool]] = {
    ItemCategory.WEAPON: _any_of(_suffix("_SWORD", "_AXE"), _named("BOW", "CROSSBOW")),
    ItemCategory.TOOL: _suffix("_PICKAXE", "_AXE", "_SHOVEL", "_HOE"),
    ItemCategory.ARMOR: _suffix("_HELMET", "_CHESTPLATE", "_LEGGINGS", "_BOOTS"),
}
