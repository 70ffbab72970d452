#!filepath: stattrak/ledger/stat_ledger.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Sequence, Union

from stattrak.utils.logger import logs

Number = Union[int, float]

# trailing ": <digits>[.<digits>]" at end of line
STAT_PATTERN = re.compile(r": ([0-9]+(?:\.[0-9]+)?)$")

_ONE_DECIMAL = Decimal("0.1")


@dataclass(frozen=True)
class StatRecord:
    name: str
    value: Number


@dataclass(frozen=True)
class StatUpdate:
    name: str
    value: Number


class StatLedger:
    """
    StatLedger: statistics stored as lore lines.

    Line layout::

        "<marker> <name>: <value>"      e.g. "§d StatTrak™ Kills: 4"

    Contract:
      - a statistic belongs to the FIRST line containing its name (substring)
      - whole values are written as bare integers, others with one decimal
      - malformed lines never raise: they read as 0 and log a warning
      - encode() returns a new list, the caller's lines are left untouched
    """

    def __init__(self, marker: str = "§d"):
        self.marker = marker

    # --------------------------------------------------
    # value codec
    # --------------------------------------------------
    @staticmethod
    def parse_value(text: str) -> Number | None:
        """
        "5" → 5, "5.0" → 5.0, anything else → None.
        """
        try:
            return float(text) if "." in text else int(text)
        except ValueError:
            return None

    @staticmethod
    def format_value(value: Number) -> str:
        if isinstance(value, bool):
            value = int(value)

        if isinstance(value, int):
            return str(value)

        if not math.isfinite(value):
            logs.warning(f"[StatLedger] refusing to write non-finite value {value!r}, using 0")
            return "0"

        # exact comparison: 4.999999 stays fractional
        if value == math.floor(value):
            return str(int(value))

        # half-up on the shortest decimal repr ("2.25" → "2.3")
        return str(Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))

    def format_line(self, name: str, value: Number) -> str:
        return f"{self.marker} {name}: {self.format_value(value)}"

    # --------------------------------------------------
    # lookup
    # --------------------------------------------------
    @staticmethod
    def find_line(lines: Sequence[str] | None, name: str) -> int:
        """Index of the first line containing ``name``, or -1."""
        for i, line in enumerate(lines or ()):
            if name in line:
                return i
        return -1

    def decode(self, lines: Sequence[str] | None, name: str) -> Number:
        idx = self.find_line(lines, name)
        if idx == -1:
            return 0

        line = lines[idx]
        m = STAT_PATTERN.search(line)
        value = self.parse_value(m.group(1)) if m else None

        if value is None:
            logs.warning(f"[StatLedger] Failed to parse number from lore: {line}")
            return 0

        return value

    # --------------------------------------------------
    # update-or-append
    # --------------------------------------------------
    def encode(
            self,
            lines: Sequence[str] | None,
            updates: Mapping[str, Number] | Iterable[StatUpdate],
    ) -> list[str]:
        original = list(lines or ())
        pending = self._as_mapping(updates)

        # pass 1: resolve positions against the original lines only
        positions = {name: self.find_line(original, name) for name in pending}

        # pass 2: mutate the copy
        out = list(original)
        appended: list[str] = []
        for name in sorted(pending):
            line = self.format_line(name, pending[name])
            idx = positions[name]
            if idx != -1:
                out[idx] = line
            else:
                appended.append(line)

        out.extend(appended)
        return out

    def records(self, lines: Sequence[str] | None) -> list[StatRecord]:
        """
        All marker lines that hold a readable value, in lore order.
        """
        prefix = f"{self.marker} "
        out: list[StatRecord] = []
        for line in lines or ():
            if not line.startswith(prefix):
                continue
            m = STAT_PATTERN.search(line)
            if not m:
                continue
            value = self.parse_value(m.group(1))
            if value is None:
                continue
            name = line[len(prefix):m.start()]
            out.append(StatRecord(name=name, value=value))
        return out

    # --------------------------------------------------
    # internal
    # --------------------------------------------------
    @staticmethod
    def _as_mapping(updates) -> dict[str, Number]:
        if isinstance(updates, Mapping):
            return dict(updates)
        return {u.name: u.value for u in updates}
