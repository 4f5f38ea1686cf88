"""Records shared by character and stash files: ids, items, tabs and sacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .decoder import Decoder

_UID_LENGTH = 16


@dataclass
class UID:
    id: Tuple[int, ...]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "UID":
        return cls(id=tuple(decoder.read_byte() for _ in range(_UID_LENGTH)))


@dataclass
class Item:
    base_name: str
    prefix_name: str
    suffix_name: str
    modifier_name: str
    transmute_name: str
    component_name: str
    relic_bonus: str
    augment_name: str
    stack_count: int
    seed: int
    component_seed: int
    unknown: int
    augment_seed: int
    var1: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "Item":
        base_name = decoder.read_string()
        prefix_name = decoder.read_string()
        suffix_name = decoder.read_string()
        modifier_name = decoder.read_string()
        transmute_name = decoder.read_string()
        seed = decoder.read_int()
        component_name = decoder.read_string()
        relic_bonus = decoder.read_string()
        component_seed = decoder.read_int()
        augment_name = decoder.read_string()
        unknown = decoder.read_int()
        augment_seed = decoder.read_int()
        var1 = decoder.read_int()
        stack_count = decoder.read_int()
        return cls(
            base_name=base_name,
            prefix_name=prefix_name,
            suffix_name=suffix_name,
            modifier_name=modifier_name,
            transmute_name=transmute_name,
            component_name=component_name,
            relic_bonus=relic_bonus,
            augment_name=augment_name,
            stack_count=stack_count,
            seed=seed,
            component_seed=component_seed,
            unknown=unknown,
            augment_seed=augment_seed,
            var1=var1,
        )


@dataclass
class StashItem:
    item: Item
    x: float
    y: float

    @classmethod
    def read_from(cls, decoder: Decoder) -> "StashItem":
        item = Item.read_from(decoder)
        x = decoder.read_float()
        y = decoder.read_float()
        return cls(item=item, x=x, y=y)


@dataclass
class StashTab:
    items: List[StashItem]
    width: int
    height: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "StashTab":
        decoder.start_block(0)
        width = decoder.read_int()
        height = decoder.read_int()
        items = decoder.read_list(StashItem.read_from)
        decoder.end_block()
        return cls(items=items, width=width, height=height)


@dataclass
class InventoryItem:
    item: Item
    x: int
    y: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "InventoryItem":
        item = Item.read_from(decoder)
        x = decoder.read_int()
        y = decoder.read_int()
        return cls(item=item, x=x, y=y)


@dataclass
class InventorySack:
    items: List[InventoryItem]
    temp_bool: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "InventorySack":
        decoder.start_block(0)
        temp_bool = decoder.read_byte()
        items = decoder.read_list(InventoryItem.read_from)
        decoder.end_block()
        return cls(items=items, temp_bool=temp_bool)


@dataclass
class InventoryEquipment:
    item: Optional[Item]
    attached: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "InventoryEquipment":
        item = Item.read_from(decoder)
        attached = decoder.read_byte()
        return cls(item=item, attached=attached)

    @classmethod
    def empty(cls) -> "InventoryEquipment":
        return cls(item=None, attached=0)