"""Low-level decoder: XOR-keyed integer stream, length-prefixed strings and blocks."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterable, List, TypeVar, Union

from .errors import ParseError, ensure_contains, ensure_eq

T = TypeVar("T")

_MASK = 0xFFFFFFFF
_SEED_XOR = 0x55555555
_TABLE_MULTIPLIER = 39916801
_TABLE_SIZE = 256
_UNEXPECTED_EOF = "failed to fill whole buffer"

Source = Union[bytes, bytearray, memoryview, BinaryIO]


@dataclass
class Block:
    """An open block: its declared length and the stream position where it ends."""

    length: int = 0
    end: int = 0


def _rotate_right(value: int) -> int:
    return ((value >> 1) | (value << 31)) & _MASK


class Decoder:
    """Reads primitive values from a save-file stream.

    With ``encrypted`` set, values are XOR-decoded with a rolling key that is
    seeded by :meth:`read_key`, the stream position is tracked and blocks are
    checked against their declared length.  Without it, values are read as-is,
    and block bookkeeping is skipped.
    """

    def __init__(self, source: Source, encrypted: bool = True) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._source = source
        self._encrypted = encrypted
        self._key = 0
        self._table = [0] * _TABLE_SIZE
        self._position = 0
        self._blocks: List[Block] = []

    @property
    def encrypted(self) -> bool:
        return self._encrypted

    @property
    def key(self) -> int:
        """The current decoding key."""
        return self._key

    @property
    def position(self) -> int:
        """Number of bytes consumed (always 0 for unencrypted streams)."""
        return self._position

    def _read_exact(self, size: int) -> bytes:
        chunks = []
        remaining = size
        while remaining:
            chunk = self._source.read(remaining)
            if not chunk:
                raise EOFError(_UNEXPECTED_EOF)
            chunks.append(chunk)
            remaining -= len(chunk)
        if self._encrypted:
            self._position += size
        return b"".join(chunks)

    def _update_key(self, raw: bytes) -> None:
        if not self._encrypted:
            return
        for byte in raw:
            self._key ^= self._table[byte]

    def read_key(self) -> None:
        """Read the stream's seed and build the key table from it."""
        raw = self._read_exact(4)
        if not self._encrypted:
            return
        key = struct.unpack("<I", raw)[0] ^ _SEED_XOR
        self._key = key
        for index in range(_TABLE_SIZE):
            key = (_rotate_right(key) * _TABLE_MULTIPLIER) & _MASK
            self._table[index] = key

    def next_int(self) -> int:
        """Read a 32-bit value without advancing the key."""
        raw = self._read_exact(4)
        return struct.unpack("<I", raw)[0] ^ self._key

    def read_int(self) -> int:
        """Read an unsigned 32-bit value."""
        raw = self._read_exact(4)
        result = struct.unpack("<I", raw)[0] ^ self._key
        self._update_key(raw)
        return result

    def read_short(self) -> int:
        """Read an unsigned 16-bit value."""
        raw = self._read_exact(2)
        result = struct.unpack("<H", raw)[0] ^ (self._key & 0xFFFF)
        self._update_key(raw)
        return result

    def read_byte(self) -> int:
        """Read an unsigned 8-bit value."""
        raw = self._read_exact(1)
        result = raw[0] ^ (self._key & 0xFF)
        self._update_key(raw)
        return result

    def read_float(self) -> float:
        """Read a 32-bit IEEE float."""
        return struct.unpack("<f", struct.pack("<I", self.read_int()))[0]

    def read_string(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        length = self.read_int()
        data = bytes(self.read_byte() for _ in range(length))
        return data.decode("utf-8")

    def read_wstring(self) -> str:
        """Read a length-prefixed UTF-16LE string (length in code units)."""
        length = self.read_int()
        data = bytes(self.read_byte() for _ in range(length * 2))
        return data.decode("utf-16-le")

    def read_list(self, read_item: Callable[["Decoder"], T]) -> List[T]:
        """Read a count followed by that many items, each read by ``read_item``."""
        count = self.read_int()
        return [read_item(self) for _ in range(count)]

    def _push_block(self, block: Block) -> None:
        if self._encrypted:
            self._blocks.append(block)

    def _pop_block(self) -> Block:
        if not self._encrypted:
            return Block()
        if not self._blocks:
            raise ParseError("Pop from empty stack")
        return self._blocks.pop()

    def _read_block_start(self) -> tuple[int, Block]:
        block_type = self.read_int()
        length = self.next_int()
        return block_type, Block(length=length, end=self._position + length)

    def start_block(self, block_type: int) -> None:
        """Open a block and check its type."""
        found, block = self._read_block_start()
        ensure_eq(found, block_type, "block start")
        self._push_block(block)

    def start_block_with_version(self, block_type: int, version: int) -> None:
        """Open a block and check its type and version."""
        found, block = self._read_block_start()
        ensure_eq(found, block_type, "block start with version")
        ensure_eq(self.read_int(), version, "version")
        self._push_block(block)

    def start_block_with_versions(self, block_type: int, versions: Iterable[int]) -> int:
        """Open a block, check its type and that its version is allowed; return the version."""
        found, block = self._read_block_start()
        ensure_eq(found, block_type, "block start with version")
        version = ensure_contains(self.read_int(), versions, "version")
        self._push_block(block)
        return version

    def end_block(self) -> None:
        """Close the innermost block, checking its length and terminator."""
        block = self._pop_block()
        ensure_eq(self._position, block.end, "block end position")
        ensure_eq(self.next_int(), 0, "block end")