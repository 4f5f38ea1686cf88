import io
import json
import struct
import sys

import pytest

from gdsaveparse.cli import main

BASE_RELIC = "records/items/crafting/blueprints/relic/craft_relic_b002.dbr"


def _plain_text(value):
    encoded = value.encode("utf-8")
    return struct.pack("<I", len(encoded)) + encoded


def _formulas(*names):
    data = _plain_text("begin_block") + struct.pack("<I", 0)
    data += _plain_text("formulasVersion") + struct.pack("<I", 2)
    data += _plain_text("numEntries") + struct.pack("<I", len(names))
    for name in names:
        data += _plain_text("itemName") + _plain_text(name)
        data += _plain_text("formulaRead") + struct.pack("<I", 0)
    return data + _plain_text("end_block")


def _stdin(monkeypatch, data):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_reads_file(tmp_path, capsys):
    path = tmp_path / "formulas.gst"
    path.write_bytes(_formulas("records/x.dbr"))
    assert main(["-e", "formulas", "-f", str(path)]) == 0
    result = json.loads(capsys.readouterr().out)
    assert "records/x.dbr" in result["formulas"]
    assert BASE_RELIC in result["formulas"]


def test_reads_stdin(monkeypatch, capsys):
    _stdin(monkeypatch, _formulas("records/y.dbr"))
    assert main(["--entity-type", "formulas"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert "records/y.dbr" in result["formulas"]


def test_truncated_input_prints_error(monkeypatch, capsys):
    _stdin(monkeypatch, _formulas()[:-4])
    main(["-e", "formulas"])
    assert capsys.readouterr().out.strip() == "failed to fill whole buffer"


def test_default_entity_type_is_character(monkeypatch, capsys):
    _stdin(monkeypatch, struct.pack("<I", 0) + b"\x00" * 12)
    main([])
    assert capsys.readouterr().out.startswith("Error: start bytes 0")


def test_rejects_unknown_entity_type(monkeypatch):
    _stdin(monkeypatch, b"")
    with pytest.raises(SystemExit) as excinfo:
        main(["-e", "bogus"])
    assert excinfo.value.code == 2


def test_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["-f", str(tmp_path / "absent.gdc")])
    assert "Cannot open file" in str(excinfo.value.code)