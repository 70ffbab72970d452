#!filepath: stattrak/items/item.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, Mapping, Optional, Protocol, Union

from stattrak.ledger.stat_ledger import Number, StatLedger, StatUpdate


class LoreHolder(Protocol):
    """
    Anything that carries lore lines.

    get_lore() → None means the object cannot hold lore at all
    (no item meta); an empty list means it can but has none yet.
    """

    material: str

    def get_lore(self) -> Optional[list[str]]:
        ...

    def set_lore(self, lines: list[str]) -> None:
        ...


@dataclass
class ItemStack:
    material: str
    lore: Optional[list[str]] = None
    has_meta: bool = True

    def get_lore(self) -> Optional[list[str]]:
        if not self.has_meta:
            return None
        return list(self.lore) if self.lore is not None else []

    def set_lore(self, lines: list[str]) -> None:
        if not self.has_meta:
            return
        self.lore = list(lines)


@dataclass
class Player:
    player_id: Hashable
    main_hand: Optional[ItemStack] = None
    # helmet, chestplate, leggings, boots; empty slots are None
    armor: list[Optional[ItemStack]] = field(default_factory=lambda: [None, None, None, None])


def read_stat(holder: Optional[LoreHolder], ledger: StatLedger, name: str) -> Number:
    if holder is None:
        return 0
    return ledger.decode(holder.get_lore(), name)


def write_stats(
        holder: Optional[LoreHolder],
        ledger: StatLedger,
        updates: Union[Mapping[str, Number], Iterable[StatUpdate]],
) -> bool:
    """
    Read-modify-write of the holder's lore. False when it holds no meta.
    """
    if holder is None:
        return False
    lore = holder.get_lore()
    if lore is None:
        return False
    holder.set_lore(ledger.encode(lore, updates))
    return True
