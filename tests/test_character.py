import io
import struct

import pytest

from gdsaveparse.character import CharacterFile, HotSlot, PlayStats, UISettings, UnknownData
from gdsaveparse.decoder import Decoder
from gdsaveparse.errors import ParseError

EMPTY_SLOT = 0xFFFFFFFF
MAGIC = 0x58434447


class _Raw:
    def __init__(self):
        self.data = bytearray()

    def u32(self, *values):
        for value in values:
            self.data += struct.pack("<I", value)
        return self

    def u8(self, *values):
        self.data += bytes(values)
        return self

    def f32(self, *values):
        for value in values:
            self.data += struct.pack("<f", value)
        return self

    def text(self, value):
        encoded = value.encode("utf-8")
        self.u32(len(encoded))
        self.data += encoded
        return self

    def wide(self, value):
        encoded = value.encode("utf-16-le")
        self.u32(len(encoded) // 2)
        self.data += encoded
        return self

    def block(self, block_type, version):
        return self.u32(block_type, 0, version)

    def end(self):
        return self.u32(0)

    def uid(self, fill):
        return self.u8(*([fill] * 16))


def _decoder(raw):
    return Decoder(bytes(raw.data), encrypted=False)


def _ui(raw, version=5, extra=0, camera=1.5):
    raw.block(14, version).u8(1).u32(2).u8(3)
    for index in range(5):
        raw.text(f"a{index}").text(f"b{index}").u8(index)
    for _ in range(46):
        raw.u32(EMPTY_SLOT)
    if version == 6:
        raw.u32(extra)
    return raw.f32(camera).end()


def _play_stats(raw, play_time=100):
    raw.block(16, 11).u32(play_time, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11).f32(2.5)
    for index in range(3):
        raw.text(f"monster{index}").u32(index + 20, index + 30)
        raw.text(f"hit{index}").text(f"hitby{index}")
    raw.u32(12).f32(0.5, 0.25, 4.0)
    raw.u32(13, 14, 15, 16, 17, 18, 19, 20)
    raw.u32(1, 2, 3)
    raw.u32(40, 41, 42, 43)
    raw.u32(1).text("extra").u32(99)
    raw.u32(50, 51).u8(1).u32(60, 61)
    return raw.end()


def _character(magic=MAGIC, name="Hero"):
    raw = _Raw().u32(magic, 2)
    raw.wide(name).u8(1).text("tag").u32(42).u8(0)
    raw.u8(3).u32(0).u32(8)
    raw.uid(7)
    raw.block(1, 5).u8(1, 1, 2, 2).u32(1000).u8(0).u32(5).u8(1, 0, 0, 1)
    raw.text("tex.tex").u32(0).u8(*([1] * 39)).end()
    raw.block(2, 8).u32(42, 123456, 1, 2, 3, 4).f32(10.0, 20.0, 30.0, 500.0, 250.0).end()
    raw.block(3, 4).u8(0).end()
    raw.block(4, 6).u32(0).end()
    raw.block(5, 1).u32(0, 0, 0).uid(1).uid(2).uid(3).end()
    raw.block(6, 1).u32(0, 0, 0).end()
    raw.block(7, 1).u32(0, 0, 0).end()
    raw.block(17, 2).u32(0, 0, 0, 0, 0, 0).end()
    raw.block(8, 5).u32(0, 2, 0, 0, 0).end()
    raw.block(12, 1).u32(0).end()
    raw.block(13, 5).u32(4, 0).end()
    _ui(raw)
    raw.block(15, 1).u32(2, 11, 12).end()
    _play_stats(raw)
    raw.block(10, 2).u32(0, 0).u32(1).text("token").end()
    return raw


def test_hot_slot_skill():
    raw = _Raw().u32(0).text("skill/a.dbr").u8(1).text("item/b.dbr").u32(7)
    slot = HotSlot.read_from(_decoder(raw))
    assert slot == HotSlot(
        skill="skill/a.dbr",
        item="item/b.dbr",
        bitmap_up="",
        bitmap_down="",
        label="",
        slot_type=0,
        equip_location=7,
        is_item_skill=1,
    )


def test_hot_slot_item():
    raw = _Raw().u32(4).text("item/c.dbr").text("up.tex").text("down.tex").wide("Label")
    slot = HotSlot.read_from(_decoder(raw))
    assert slot.item == "item/c.dbr"
    assert slot.bitmap_up == "up.tex"
    assert slot.bitmap_down == "down.tex"
    assert slot.label == "Label"
    assert slot.skill == ""
    assert slot.equip_location == 0


@pytest.mark.parametrize("slot_type", [2, 3, EMPTY_SLOT])
def test_hot_slot_other_types_read_only_type(slot_type):
    raw = _Raw().u32(slot_type).u8(9)
    decoder = _decoder(raw)
    slot = HotSlot.read_from(decoder)
    assert slot.slot_type == slot_type
    assert slot.item == "" and slot.label == ""
    assert decoder.read_byte() == 9


def test_play_stats_fields():
    stats = PlayStats.read_from(_decoder(_play_stats(_Raw(), play_time=321)))
    assert stats.play_time == 321
    assert stats.critical_hits_received == 11
    assert stats.greatest_damage_inflicted == 2.5
    assert stats.greatest_monster_killed_name == ["monster0", "monster1", "monster2"]
    assert stats.greatest_monster_killed_level == [20, 21, 22]
    assert stats.greatest_monster_killed_life_and_mana == [30, 31, 32]
    assert stats.last_monster_hit_by == ["hitby0", "hitby1", "hitby2"]
    assert stats.last_hit == 0.5 and stats.last_hit_by == 0.25
    assert stats.lore_notes_collected == 20
    assert stats.boss_kills == [1, 2, 3]
    assert stats.cooldown_total == 43
    assert stats.v_length == 1
    assert stats.v == [UnknownData(str="extra", num=99)]
    assert stats.difficulty_skip == 1
    assert (stats.unknown1, stats.unknown2) == (60, 61)


def test_play_stats_wrong_version():
    raw = _Raw().block(16, 10)
    with pytest.raises(ParseError, match="version"):
        PlayStats.read_from(_decoder(raw))


def test_ui_settings_version_5():
    ui = UISettings.read_from(_decoder(_ui(_Raw(), version=5, camera=3.5)))
    assert ui.unknown7 is None
    assert ui.camera_distance == 3.5
    assert len(ui.hot_slots) == 46
    assert all(slot.slot_type == EMPTY_SLOT for slot in ui.hot_slots)
    assert ui.unknown4 == ["a0", "a1", "a2", "a3", "a4"]
    assert ui.unknown5 == ["b0", "b1", "b2", "b3", "b4"]
    assert ui.unknown6 == [0, 1, 2, 3, 4]
    assert (ui.unknown1, ui.unknown2, ui.unknown3) == (1, 2, 3)


def test_ui_settings_version_6_reads_extra_int():
    ui = UISettings.read_from(_decoder(_ui(_Raw(), version=6, extra=77)))
    assert ui.unknown7 == 77
    assert ui.camera_distance == 1.5


def test_ui_settings_unknown_version():
    raw = _Raw().block(14, 7)
    with pytest.raises(ParseError) as excinfo:
        UISettings.read_from(_decoder(raw))
    assert str(excinfo.value) == "Error: version: expected [5, 6], found 7"


def test_character_file_reads_everything():
    raw = _character(name="Wanderer")
    stream = io.BytesIO(bytes(raw.data))
    character = CharacterFile.read_from(Decoder(stream, encrypted=False))
    assert stream.read() == b""
    assert character.hdr.name == "Wanderer"
    assert character.hdr.tag == "tag"
    assert character.hdr.level == 42
    assert character.id.id == tuple([7] * 16)
    assert character.info.money == 1000
    assert character.info.texture == "tex.tex"
    assert character.info.loot_mode == [1] * 39
    assert character.bio.experience == 123456
    assert character.bio.health == 500.0
    assert character.inv.flag == 0
    assert len(character.inv.equipment) == 12
    assert character.stash.tabs == []
    assert [uid.id[0] for uid in character.respawns.spawn] == [1, 2, 3]
    assert character.shrines.uids == [[] for _ in range(6)]
    assert character.skills.masteries_allowed == 2
    assert character.factions.faction == 4
    assert character.tutorials.pages == [11, 12]
    assert character.stats.play_time == 100
    assert character.tokens.tokens == [[], [], ["token"]]


def test_character_file_bad_magic():
    raw = _character(magic=1)
    with pytest.raises(ParseError, match="start bytes 0"):
        CharacterFile.read_from(_decoder(raw))


def test_character_file_truncated():
    data = bytes(_character().data)[:-10]
    with pytest.raises(EOFError):
        CharacterFile.read_from(Decoder(data, encrypted=False))