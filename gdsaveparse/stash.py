"""Shared stash (transfer) file layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .common import StashTab
from .decoder import Decoder
from .errors import ensure_eq


@dataclass
class StashFile:
    tabs: List[StashTab]
    mod: str

    @classmethod
    def read_from(cls, decoder: Decoder) -> "StashFile":
        """Read a stash file; the decoder's key must already be read."""
        ensure_eq(decoder.read_int(), 2, "start bytes")
        decoder.start_block_with_version(18, 5)
        ensure_eq(decoder.next_int(), 0, "bytes 1")
        mod = decoder.read_string()
        ensure_eq(decoder.read_byte(), 3, "bytes 2")
        tabs = decoder.read_list(StashTab.read_from)
        decoder.end_block()
        return cls(tabs=tabs, mod=mod)