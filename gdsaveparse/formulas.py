"""Crafting formulas (blueprint) file layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set

from .decoder import Decoder
from .errors import ensure_eq

_ALWAYS_KNOWN = (
    "records/items/crafting/blueprints/relic/craft_relic_b001.dbr",
    "records/items/crafting/blueprints/relic/craft_relic_b002.dbr",
    "records/items/crafting/blueprints/relic/craft_relic_b003.dbr",
)


@dataclass
class FormulaSet:
    formulas: Set[str] = field(default_factory=set)

    @classmethod
    def read_from(cls, decoder: Decoder) -> "FormulaSet":
        """Read the known formulas; the three base relic blueprints are always included."""
        formulas: Set[str] = set()
        ensure_eq(decoder.read_string(), "begin_block", "block start")
        decoder.read_int()
        ensure_eq(decoder.read_string(), "formulasVersion", "formulasVersion string")
        version = decoder.read_int()
        ensure_eq(decoder.read_string(), "numEntries", "numEntries string")
        num_entries = decoder.read_int()
        if version >= 3:
            ensure_eq(decoder.read_string(), "expansionStatus", "expansionStatus string")
            decoder.read_byte()
        for _ in range(num_entries):
            ensure_eq(decoder.read_string(), "itemName", "itemName string")
            formulas.add(decoder.read_string())
            ensure_eq(decoder.read_string(), "formulaRead", "formulaRead string")
            decoder.read_int()
        ensure_eq(decoder.read_string(), "end_block", "block end")
        formulas.update(_ALWAYS_KNOWN)
        return cls(formulas=formulas)