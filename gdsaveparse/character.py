"""Character save file: hot slots, play statistics, UI settings and the whole file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .common import UID
from .decoder import Decoder
from .errors import ensure_eq
from .sections import (
    CharacterBio,
    CharacterInfo,
    CharacterSkills,
    CharacterStash,
    FactionPack,
    Header,
    Inventory,
    LoreNotes,
    MarkerList,
    RespawnList,
    ShrineList,
    TeleportList,
    TriggerTokens,
    TutorialPages,
)

_CHARACTER_MAGIC = 0x58434447
_HOT_SLOTS = 46
_UI_STRING_PAIRS = 5
_UI_VERSIONS = (5, 6)
_DIFFICULTIES = 3

_SLOT_SKILL = 0
_SLOT_ITEM = 4


@dataclass
class HotSlot:
    """One action-bar slot.

    ``slot_type`` is 0 for a skill, 2 for a health potion, 3 for an energy
    potion, 4 for an item and 4294967295 for an empty slot.
    """

    skill: str
    item: str
    bitmap_up: str
    bitmap_down: str
    label: str
    slot_type: int
    equip_location: int
    is_item_skill: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "HotSlot":
        slot_type = decoder.read_int()
        if slot_type == _SLOT_SKILL:
            skill = decoder.read_string()
            is_item_skill = decoder.read_byte()
            item = decoder.read_string()
            equip_location = decoder.read_int()
            return cls(
                skill=skill,
                item=item,
                bitmap_up="",
                bitmap_down="",
                label="",
                slot_type=slot_type,
                equip_location=equip_location,
                is_item_skill=is_item_skill,
            )
        if slot_type == _SLOT_ITEM:
            item = decoder.read_string()
            bitmap_up = decoder.read_string()
            bitmap_down = decoder.read_string()
            label = decoder.read_wstring()
            return cls(
                skill="",
                item=item,
                bitmap_up=bitmap_up,
                bitmap_down=bitmap_down,
                label=label,
                slot_type=slot_type,
                equip_location=0,
                is_item_skill=0,
            )
        return cls(
            skill="",
            item="",
            bitmap_up="",
            bitmap_down="",
            label="",
            slot_type=slot_type,
            equip_location=0,
            is_item_skill=0,
        )


@dataclass
class UnknownData:
    str: str
    num: int


@dataclass
class PlayStats:
    greatest_monster_killed_name: List[str]
    last_monster_hit: List[str]
    last_monster_hit_by: List[str]
    greatest_monster_killed_level: List[int]
    greatest_monster_killed_life_and_mana: List[int]
    boss_kills: List[int]
    play_time: int
    deaths: int
    kills: int
    experience_from_kills: int
    health_potions_used: int
    mana_potions_used: int
    max_level: int
    hits_received: int
    hits_inflicted: int
    critical_hits_inflicted: int
    critical_hits_received: int
    champion_kills: int
    hero_kills: int
    items_crafted: int
    relics_crafted: int
    transcendent_relics_crafted: int
    mythical_relics_crafted: int
    shrines_restored: int
    one_shot_chests_opened: int
    lore_notes_collected: int
    greatest_damage_inflicted: float
    last_hit: float
    last_hit_by: float
    greatest_damage_received: float
    survival_wave_tier: int
    greatest_survival_score: int
    cooldown_remaining: int
    cooldown_total: int
    v_length: int
    v: List[UnknownData]
    shattered_realm_souls: int
    shattered_realm_essence: int
    difficulty_skip: int
    unknown1: int
    unknown2: int

    @classmethod
    def read_from(cls, decoder: Decoder) -> "PlayStats":
        decoder.start_block_with_version(16, 11)
        play_time = decoder.read_int()
        deaths = decoder.read_int()
        kills = decoder.read_int()
        experience_from_kills = decoder.read_int()
        health_potions_used = decoder.read_int()
        mana_potions_used = decoder.read_int()
        max_level = decoder.read_int()
        hits_received = decoder.read_int()
        hits_inflicted = decoder.read_int()
        critical_hits_inflicted = decoder.read_int()
        critical_hits_received = decoder.read_int()
        greatest_damage_inflicted = decoder.read_float()

        killed_names: List[str] = []
        killed_levels: List[int] = []
        killed_life_and_mana: List[int] = []
        last_hit_names: List[str] = []
        last_hit_by_names: List[str] = []
        for _ in range(_DIFFICULTIES):
            killed_names.append(decoder.read_string())
            killed_levels.append(decoder.read_int())
            killed_life_and_mana.append(decoder.read_int())
            last_hit_names.append(decoder.read_string())
            last_hit_by_names.append(decoder.read_string())

        champion_kills = decoder.read_int()
        last_hit = decoder.read_float()
        last_hit_by = decoder.read_float()
        greatest_damage_received = decoder.read_float()
        hero_kills = decoder.read_int()
        items_crafted = decoder.read_int()
        relics_crafted = decoder.read_int()
        transcendent_relics_crafted = decoder.read_int()
        mythical_relics_crafted = decoder.read_int()
        shrines_restored = decoder.read_int()
        one_shot_chests_opened = decoder.read_int()
        lore_notes_collected = decoder.read_int()

        boss_kills = [decoder.read_int() for _ in range(_DIFFICULTIES)]

        survival_wave_tier = decoder.read_int()
        greatest_survival_score = decoder.read_int()
        cooldown_remaining = decoder.read_int()
        cooldown_total = decoder.read_int()

        v_length = decoder.read_int()
        v = []
        for _ in range(v_length):
            text = decoder.read_string()
            num = decoder.read_int()
            v.append(UnknownData(str=text, num=num))

        shattered_realm_souls = decoder.read_int()
        shattered_realm_essence = decoder.read_int()
        difficulty_skip = decoder.read_byte()
        unknown1 = decoder.read_int()
        unknown2 = decoder.read_int()
        decoder.end_block()

        return cls(
            greatest_monster_killed_name=killed_names,
            last_monster_hit=last_hit_names,
            last_monster_hit_by=last_hit_by_names,
            greatest_monster_killed_level=killed_levels,
            greatest_monster_killed_life_and_mana=killed_life_and_mana,
            boss_kills=boss_kills,
            play_time=play_time,
            deaths=deaths,
            kills=kills,
            experience_from_kills=experience_from_kills,
            health_potions_used=health_potions_used,
            mana_potions_used=mana_potions_used,
            max_level=max_level,
            hits_received=hits_received,
            hits_inflicted=hits_inflicted,
            critical_hits_inflicted=critical_hits_inflicted,
            critical_hits_received=critical_hits_received,
            champion_kills=champion_kills,
            hero_kills=hero_kills,
            items_crafted=items_crafted,
            relics_crafted=relics_crafted,
            transcendent_relics_crafted=transcendent_relics_crafted,
            mythical_relics_crafted=mythical_relics_crafted,
            shrines_restored=shrines_restored,
            one_shot_chests_opened=one_shot_chests_opened,
            lore_notes_collected=lore_notes_collected,
            greatest_damage_inflicted=greatest_damage_inflicted,
            last_hit=last_hit,
            last_hit_by=last_hit_by,
            greatest_damage_received=greatest_damage_received,
            survival_wave_tier=survival_wave_tier,
            greatest_survival_score=greatest_survival_score,
            cooldown_remaining=cooldown_remaining,
            cooldown_total=cooldown_total,
            v_length=v_length,
            v=v,
            shattered_realm_souls=shattered_realm_souls,
            shattered_realm_essence=shattered_realm_essence,
            difficulty_skip=difficulty_skip,
            unknown1=unknown1,
            unknown2=unknown2,
        )


@dataclass
class UISettings:
    hot_slots: List[HotSlot]
    unknown4: List[str]
    unknown5: List[str]
    unknown2: int
    camera_distance: float
    unknown6: List[int]
    unknown1: int
    unknown3: int
    unknown7: Optional[int]

    @classmethod
    def read_from(cls, decoder: Decoder) -> "UISettings":
        version = decoder.start_block_with_versions(14, _UI_VERSIONS)
        unknown1 = decoder.read_byte()
        unknown2 = decoder.read_int()
        unknown3 = decoder.read_byte()
        unknown4: List[str] = []
        unknown5: List[str] = []
        unknown6: List[int] = []
        for _ in range(_UI_STRING_PAIRS):
            unknown4.append(decoder.read_string())
            unknown5.append(decoder.read_string())
            unknown6.append(decoder.read_byte())
        hot_slots = [HotSlot.read_from(decoder) for _ in range(_HOT_SLOTS)]
        unknown7 = decoder.read_int() if version == 6 else None
        camera_distance = decoder.read_float()
        decoder.end_block()
        return cls(
            hot_slots=hot_slots,
            unknown4=unknown4,
            unknown5=unknown5,
            unknown2=unknown2,
            camera_distance=camera_distance,
            unknown6=unknown6,
            unknown1=unknown1,
            unknown3=unknown3,
            unknown7=unknown7,
        )


@dataclass
class CharacterFile:
    hdr: Header
    id: UID
    info: CharacterInfo
    bio: CharacterBio
    inv: Inventory
    stash: CharacterStash
    respawns: RespawnList
    teleports: TeleportList
    markers: MarkerList
    shrines: ShrineList
    skills: CharacterSkills
    notes: LoreNotes
    factions: FactionPack
    ui: UISettings
    tutorials: TutorialPages
    stats: PlayStats
    tokens: TriggerTokens

    @classmethod
    def read_from(cls, decoder: Decoder) -> "CharacterFile":
        """Read a character file; the decoder's key must already be read."""
        ensure_eq(decoder.read_int(), _CHARACTER_MAGIC, "start bytes 0")
        ensure_eq(decoder.read_int(), 2, "start bytes 1")
        hdr = Header.read_from(decoder)
        ensure_eq(decoder.read_byte(), 3, "start bytes 2")
        ensure_eq(decoder.next_int(), 0, "start bytes 3")
        ensure_eq(decoder.read_int(), 8, "version")
        return cls(
            hdr=hdr,
            id=UID.read_from(decoder),
            info=CharacterInfo.read_from(decoder),
            bio=CharacterBio.read_from(decoder),
            inv=Inventory.read_from(decoder),
            stash=CharacterStash.read_from(decoder),
            respawns=RespawnList.read_from(decoder),
            teleports=TeleportList.read_from(decoder),
            markers=MarkerList.read_from(decoder),
            shrines=ShrineList.read_from(decoder),
            skills=CharacterSkills.read_from(decoder),
            notes=LoreNotes.read_from(decoder),
            factions=FactionPack.read_from(decoder),
            ui=UISettings.read_from(decoder),
            tutorials=TutorialPages.read_from(decoder),
            stats=PlayStats.read_from(decoder),
            tokens=TriggerTokens.read_from(decoder),
        )