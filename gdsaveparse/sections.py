"""Sections of a character file: bio, info, skills, factions, lists and inventory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .common import UID, InventoryEquipment, InventorySack, StashTab
from .decoder import Decoder

_LOOT_MODE_SIZE = 39
_EQUIPMENT_SLOTS = 12
_WEAPON_SLOTS = 2
_DIFFICULTIES = 3
_SHRINE_GROUPS = 6


def _read_uid_lists(decoder: Decoder, count: int) -> List[List[UID]]:
    return [decoder.read_list(UID.read_from) for _ in range(count)]


@dataclass
class CharacterBio:
    level: int
    experience: int
    attribute_points_unspent: int
    skill_points_unspent: int
    devotion_points_unspent: int
    total_devotion_unlocked: int
    physique: float
    cunning: float
    spirit: float
    health: float
    energy: float

    @classmethod
    def read_from(cls, decoder: Decoder) -> "CharacterBio":
        decoder.start_block_with_version(2, 8)
        level = decoder.read_int()
        experience = decoder.read_int()
        attribute_points_unspent = decoder.read_int()
        skill_points_unspent = decoder.read_int()
        devotion_points_unspent = decoder.read_int()
        total_devotion_unlocked = decoder.read_int()
        physique = decoder.read_float()
        cunning = decoder.read_float()
        spirit = decoder.read_float()
        health = decoder.read_float()
        energy = decoder.read_float()
        decoder.end_block()
        return cls(
            level=level,
            experience=experience,
            attribute_points_unspent=attribute_points_unspent,
            skill_points_unspent=skill_points_unspent,
            devotion_points_unspent=devotion_points_unspent,
            total_devotion_unlocked=total_devotion_unlocked,
            physique=physique,
            cunning=cunning,
            spirit=spirit,
            health=health,
            energy=energy,
        )


@dataclass
class CharacterInfo:
    texture: str
    money: int
    # Loot filter flags (0 or 1): quality, item type, damage, player and
    # "always show double rare" groups, in the game's own order.
    loot_mode: List[int]
    current_tribute: int
    unknown: int
    is_in_main_quest: int
    has_been_in_game: int
    difficulty: int
    greatest_difficulty: int
    greatest_survival_difficulty: int
    compass_state: int
    skill_window_show_help: int
    weapon_swap_active: int
    weapon_swap_enabled: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "CharacterInfo":
        decoder.start_block_with_version(1, 5)
        is_in_main_quest = decoder.read_byte()
        has_been_in_game = decoder.read_byte()
        difficulty = decoder.read_byte()
        greatest_difficulty = decoder.read_byte()
        money = decoder.read_int()
        greatest_survival_difficulty = decoder.read_byte()
        current_tribute = decoder.read_int()
        compass_state = decoder.read_byte()
        skill_window_show_help = decoder.read_byte()
        weapon_swap_active = decoder.read_byte()
        weapon_swap_enabled = decoder.read_byte()
        texture = decoder.read_string()
        unknown = decoder.read_int()
        loot_mode = [decoder.read_byte() for _ in range(_LOOT_MODE_SIZE)]
        decoder.end_block()
        return cls(
            texture=texture,
            money=money,
            loot_mode=loot_mode,
            current_tribute=current_tribute,
            unknown=unknown,
            is_in_main_quest=is_in_main_quest,
            has_been_in_game=has_been_in_game,
            difficulty=difficulty,
            greatest_difficulty=greatest_difficulty,
            greatest_survival_difficulty=greatest_survival_difficulty,
            compass_state=compass_state,
            skill_window_show_help=skill_window_show_help,
            weapon_swap_active=weapon_swap_active,
            weapon_swap_enabled=weapon_swap_enabled,
        )


@dataclass
class Skill:
    name: str
    auto_cast_skill: str
    auto_cast_controller: str
    level: int
    devotion_level: int
    experience: int
    active: int
    enabled: int
    unknown1: int
    unknown2: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "Skill":
        name = decoder.read_string()
        level = decoder.read_int()
        enabled = decoder.read_byte()
        devotion_level = decoder.read_int()
        experience = decoder.read_int()
        active = decoder.read_int()
        unknown1 = decoder.read_byte()
        unknown2 = decoder.read_byte()
        auto_cast_skill = decoder.read_string()
        auto_cast_controller = decoder.read_string()
        return cls(
            name=name,
            auto_cast_skill=auto_cast_skill,
            auto_cast_controller=auto_cast_controller,
            level=level,
            devotion_level=devotion_level,
            experience=experience,
            active=active,
            enabled=enabled,
            unknown1=unknown1,
            unknown2=unknown2,
        )


@dataclass
class ItemSkill:
    name: str
    auto_cast_skill: str
    auto_cast_controller: str
    item_name: str
    item_slot: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "ItemSkill":
        name = decoder.read_string()
        auto_cast_skill = decoder.read_string()
        auto_cast_controller = decoder.read_string()
        item_slot = decoder.read_int()
        item_name = decoder.read_string()
        return cls(
            name=name,
            auto_cast_skill=auto_cast_skill,
            auto_cast_controller=auto_cast_controller,
            item_name=item_name,
            item_slot=item_slot,
        )


@dataclass
class CharacterSkills:
    skills: List[Skill]
    item_skills: List[ItemSkill]
    masteries_allowed: int
    skill_reclamation_points_used: int
    devotion_reclamation_points_used: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "CharacterSkills":
        decoder.start_block_with_version(8, 5)
        skills = decoder.read_list(Skill.read_from)
        masteries_allowed = decoder.read_int()
        skill_reclamation_points_used = decoder.read_int()
        devotion_reclamation_points_used = decoder.read_int()
        item_skills = decoder.read_list(ItemSkill.read_from)
        decoder.end_block()
        return cls(
            skills=skills,
            item_skills=item_skills,
            masteries_allowed=masteries_allowed,
            skill_reclamation_points_used=skill_reclamation_points_used,
            devotion_reclamation_points_used=devotion_reclamation_points_used,
        )


@dataclass
class FactionData:
    value: float
    positive_boost: float
    negative_boost: float
    modified: int
    unlocked: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "FactionData":
        modified = decoder.read_byte()
        unlocked = decoder.read_byte()
        value = decoder.read_float()
        positive_boost = decoder.read_float()
        negative_boost = decoder.read_float()
        return cls(
            value=value,
            positive_boost=positive_boost,
            negative_boost=negative_boost,
            modified=modified,
            unlocked=unlocked,
        )


@dataclass
class FactionPack:
    factions: List[FactionData]
    faction: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "FactionPack":
        decoder.start_block_with_version(13, 5)
        faction = decoder.read_int()
        factions = decoder.read_list(FactionData.read_from)
        decoder.end_block()
        return cls(factions=factions, faction=faction)


@dataclass
class Header:
    name: str
    tag: str
    level: int
    sex: int
    hardcore: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "Header":
        name = decoder.read_wstring()
        sex = decoder.read_byte()
        tag = decoder.read_string()
        level = decoder.read_int()
        hardcore = decoder.read_byte()
        return cls(name=name, tag=tag, level=level, sex=sex, hardcore=hardcore)


@dataclass
class LoreNotes:
    names: List[str]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "LoreNotes":
        decoder.start_block_with_version(12, 1)
        names = decoder.read_list(Decoder.read_string)
        decoder.end_block()
        return cls(names=names)


@dataclass
class MarkerList:
    uids: List[List[UID]]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "MarkerList":
        decoder.start_block_with_version(7, 1)
        uids = _read_uid_lists(decoder, _DIFFICULTIES)
        decoder.end_block()
        return cls(uids=uids)


@dataclass
class RespawnList:
    uids: List[List[UID]]
    spawn: List[UID]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "RespawnList":
        decoder.start_block_with_version(5, 1)
        uids = _read_uid_lists(decoder, _DIFFICULTIES)
        spawn = [UID.read_from(decoder) for _ in range(_DIFFICULTIES)]
        decoder.end_block()
        return cls(uids=uids, spawn=spawn)


@dataclass
class ShrineList:
    uids: List[List[UID]]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "ShrineList":
        decoder.start_block_with_version(17, 2)
        uids = _read_uid_lists(decoder, _SHRINE_GROUPS)
        decoder.end_block()
        return cls(uids=uids)


@dataclass
class TeleportList:
    uids: List[List[UID]]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "TeleportList":
        decoder.start_block_with_version(6, 1)
        uids = _read_uid_lists(decoder, _DIFFICULTIES)
        decoder.end_block()
        return cls(uids=uids)


@dataclass
class TriggerTokens:
    tokens: List[List[str]]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "TriggerTokens":
        decoder.start_block_with_version(10, 2)
        tokens = [decoder.read_list(Decoder.read_string) for _ in range(_DIFFICULTIES)]
        decoder.end_block()
        return cls(tokens=tokens)


@dataclass
class TutorialPages:
    pages: List[int]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "TutorialPages":
        decoder.start_block_with_version(15, 1)
        pages = decoder.read_list(Decoder.read_int)
        decoder.end_block()
        return cls(pages=pages)


@dataclass
class CharacterStash:
    tabs: List[StashTab]
    stash_tabs_purchased: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "CharacterStash":
        decoder.start_block_with_version(4, 6)
        stash_tabs_purchased = decoder.read_int()
        tabs = [StashTab.read_from(decoder) for _ in range(stash_tabs_purchased)]
        decoder.end_block()
        return cls(tabs=tabs, stash_tabs_purchased=stash_tabs_purchased)


@dataclass
class Inventory:
    num_bags: int
    sacks: List[InventorySack]
    equipment: List[InventoryEquipment]
    weapon1: List[InventoryEquipment]
    weapon2: List[InventoryEquipment]
    focused: int
    selected: int
    flag: int
    use_alternate: int
    alternate1: int
    alternate2: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "Inventory":
        decoder.start_block_with_version(3, 4)
        flag = decoder.read_byte()
        if flag:
            num_bags = decoder.read_int()
            focused = decoder.read_int()
            selected = decoder.read_int()
            sacks = [InventorySack.read_from(decoder) for _ in range(num_bags)]
            use_alternate = decoder.read_byte()
            equipment = [InventoryEquipment.read_from(decoder) for _ in range(_EQUIPMENT_SLOTS)]
            alternate1 = decoder.read_byte()
            weapon1 = [InventoryEquipment.read_from(decoder) for _ in range(_WEAPON_SLOTS)]
            alternate2 = decoder.read_byte()
            weapon2 = [InventoryEquipment.read_from(decoder) for _ in range(_WEAPON_SLOTS)]
            result = cls(
                num_bags=num_bags,
                sacks=sacks,
                equipment=equipment,
                weapon1=weapon1,
                weapon2=weapon2,
                focused=focused,
                selected=selected,
                flag=flag,
                use_alternate=use_alternate,
                alternate1=alternate1,
                alternate2=alternate2,
            )
        else:
            result = cls(
                num_bags=0,
                sacks=[],
                equipment=[InventoryEquipment.empty() for _ in range(_EQUIPMENT_SLOTS)],
                weapon1=[InventoryEquipment.empty() for _ in range(_WEAPON_SLOTS)],
                weapon2=[InventoryEquipment.empty() for _ in range(_WEAPON_SLOTS)],
                focused=0,
                selected=0,
                flag=flag,
                use_alternate=0,
                alternate1=0,
                alternate2=0,
            )
        decoder.end_block()
        return result