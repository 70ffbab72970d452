#!filepath: stattrak/events/router.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Hashable

from stattrak.allocation.damage_allocator import DamageAllocator
from stattrak.config.ledger_config import LedgerConfig
from stattrak.dedup.window import DeduplicationWindow
from stattrak.events.occurrences import BlockBreak, EntityDamage, EntityDeath, StatChange
from stattrak.items.category import ItemCategory
from stattrak.items.item import ItemStack, read_stat, write_stats
from stattrak.ledger.stat_ledger import StatLedger
from stattrak.observability.metrics import MetricRecorder
from stattrak.utils.errors import UnknownOccurrenceError
from stattrak.utils.logger import logs


@dataclass(frozen=True)
class StatNames:
    kills: str = "StatTrak™ Kills"
    blocks_mined: str = "StatTrak™ Blocks Mined"
    damage_taken: str = "StatTrak™ Damage Taken"

    @classmethod
    def from_config(cls, cfg: LedgerConfig) -> "StatNames":
        return cls(kills=cfg.kills, blocks_mined=cfg.blocks_mined, damage_taken=cfg.damage_taken)


class EventRouter:
    """
    occurrence → dedup → classify → ledger update

    Returns the StatChange list of what was written; an empty list means
    the occurrence was a duplicate or touched no trackable item.

    Items are mutated in place through set_lore(). Serialising updates to
    one item is the owner's job, the router takes no per-item lock.
    """

    def __init__(
            self,
            ledger: StatLedger,
            window: DeduplicationWindow,
            stats: StatNames | None = None,
            metrics: MetricRecorder | None = None,
    ):
        self.ledger = ledger
        self.window = window
        self.stats = stats or StatNames()
        self.metrics = metrics or MetricRecorder()

        self._handlers: dict[type, Callable[..., list[StatChange]]] = {
            EntityDeath: self.on_entity_death,
            BlockBreak: self.on_block_break,
            EntityDamage: self.on_entity_damage,
        }

    # --------------------------------------------------
    # dispatch
    # --------------------------------------------------
    def handle(self, occurrence) -> list[StatChange]:
        handler = self._handlers.get(type(occurrence))
        if handler is None:
            raise UnknownOccurrenceError(f"no handler for {type(occurrence).__name__}")
        return handler(occurrence)

    # --------------------------------------------------
    # handlers
    # --------------------------------------------------
    def on_entity_death(self, event: EntityDeath) -> list[StatChange]:
        self.metrics.incr("occurrence.received")
        if not self._claim(event.entity_id):
            return []

        killer = event.killer
        if killer is None:
            return []

        weapon = killer.main_hand
        if weapon is None or not ItemCategory.WEAPON.matches(weapon.material):
            return []

        return self._increment(weapon, self.stats.kills)

    def on_block_break(self, event: BlockBreak) -> list[StatChange]:
        self.metrics.incr("occurrence.received")
        if event.occurrence_id is not None and not self._claim(event.occurrence_id):
            return []

        tool = event.player.main_hand
        if tool is None or not ItemCategory.TOOL.matches(tool.material):
            return []

        return self._increment(tool, self.stats.blocks_mined)

    def on_entity_damage(self, event: EntityDamage) -> list[StatChange]:
        self.metrics.incr("occurrence.received")
        if event.occurrence_id is not None and not self._claim(event.occurrence_id):
            return []

        player = event.player
        if player is None or not player.armor:
            return []

        if not math.isfinite(event.final_damage):
            logs.warning(f"[EventRouter] non-finite damage {event.final_damage!r} on {event.entity_id!r}, skipped")
            return []

        name = self.stats.damage_taken

        # one read pass; the allocator keeps these pairs together
        batch = [
            (piece, float(read_stat(piece, self.ledger, name)))
            for piece in player.armor
            if piece is not None and ItemCategory.ARMOR.matches(piece.material)
        ]
        if not batch:
            return []

        changes: list[StatChange] = []
        for (piece, after), (_, before) in zip(
                DamageAllocator.allocate(event.final_damage, batch), batch
        ):
            if self._write(piece, name, after):
                changes.append(StatChange(stat=name, item=piece, before=before, after=after))
        return changes

    # --------------------------------------------------
    # internal
    # --------------------------------------------------
    def _claim(self, occurrence_id: Hashable) -> bool:
        if self.window.claim(occurrence_id):
            return True
        self.metrics.incr("occurrence.duplicate")
        return False

    def _increment(self, item: ItemStack, name: str) -> list[StatChange]:
        before = int(read_stat(item, self.ledger, name))
        after = before + 1
        if not self._write(item, name, after):
            return []
        return [StatChange(stat=name, item=item, before=before, after=after)]

    def _write(self, item: ItemStack, name: str, value) -> bool:
        if not write_stats(item, self.ledger, {name: value}):
            self.metrics.incr("item.skipped")
            logs.debug(f"[EventRouter] {item.material} holds no meta, {name} not written")
            return False
        self.metrics.incr("stat.updated")
        return True
