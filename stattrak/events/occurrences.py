#!filepath: stattrak/events/occurrences.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from stattrak.items.item import ItemStack, Player
from stattrak.ledger.stat_ledger import Number


@dataclass(frozen=True)
class EntityDeath:
    """An entity died. ``entity_id`` is stable across redeliveries."""
    entity_id: Hashable
    killer: Optional[Player] = None


@dataclass(frozen=True)
class BlockBreak:
    player: Player
    # e.g. (world, x, y, z); None disables dedup for this occurrence
    occurrence_id: Optional[Hashable] = None


@dataclass(frozen=True)
class EntityDamage:
    entity_id: Hashable
    final_damage: float
    # set only when the damaged entity is a player
    player: Optional[Player] = None
    occurrence_id: Optional[Hashable] = None


@dataclass(frozen=True)
class StatChange:
    stat: str
    item: ItemStack
    before: Number
    after: Number
