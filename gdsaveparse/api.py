"""Entry points: read a save file of a given kind and render it as JSON."""

from __future__ import annotations

import dataclasses
import json
import math
import struct
from typing import Any, Callable, Dict

from .character import CharacterFile
from .decoder import Decoder, Source
from .errors import ParseError
from .formulas import FormulaSet
from .stash import StashFile


def read_character(source: Source) -> CharacterFile:
    """Read an encrypted character save file."""
    decoder = Decoder(source, encrypted=True)
    decoder.read_key()
    return CharacterFile.read_from(decoder)


def read_formulas(source: Source) -> FormulaSet:
    """Read a plain formulas file."""
    return FormulaSet.read_from(Decoder(source, encrypted=False))


def read_stash(source: Source) -> StashFile:
    """Read an encrypted shared stash file."""
    decoder = Decoder(source, encrypted=True)
    decoder.read_key()
    return StashFile.read_from(decoder)


_READERS: Dict[str, Callable[[Source], Any]] = {
    "character": read_character,
    "formulas": read_formulas,
    "stash": read_stash,
}


def _single_precision(value: float) -> Any:
    """Shortest decimal that round-trips as a 32-bit float; None for non-finite."""
    if not math.isfinite(value):
        return None
    packed = struct.pack("<f", value)
    for digits in range(1, 10):
        candidate = float(f"{value:.{digits}g}")
        if struct.pack("<f", candidate) == packed:
            return candidate
    return value


def _plain(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _plain(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, (list, tuple)):
        return [_plain(item) for item in obj]
    if isinstance(obj, (set, frozenset)):
        return [_plain(item) for item in sorted(obj)]
    if isinstance(obj, float):
        return _single_precision(obj)
    return obj


def to_json(obj: Any) -> str:
    """Render a parsed record as compact JSON, fields in declaration order."""
    return json.dumps(_plain(obj), separators=(",", ":"), ensure_ascii=False)


def map_to_json(entity_type: str, source: Source) -> str:
    """Parse ``source`` as ``character``, ``formulas`` or ``stash`` and return JSON."""
    reader = _READERS.get(entity_type)
    if reader is None:
        raise ParseError("Wrong entity_type")
    return to_json(reader(source))