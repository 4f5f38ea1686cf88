# gdsaveparse

Read Grim Dawn save files and turn them into JSON. The package handles three kinds of file:

- `character`: a character save (`player.gdc`), which is encrypted
- `stash`: the shared transfer stash, which is encrypted
- `formulas`: the known crafting blueprints (`formulas.gst`), stored as plain values

It uses only the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
gdsaveparse --entity-type character --filepath player.gdc
gdsaveparse -e stash -f transfer.gst
gdsaveparse -e formulas < formulas.gst
gdsaveparse --version
```

- `--entity-type` / `-e` takes `character`, `formulas` or `stash`. The default is `character`.
- `--filepath` / `-f` names the file to read. If you leave it out, the file is read from standard input.

The JSON goes to standard output. If the data cannot be parsed because of a layout mismatch, a truncated file or a string that is not valid text, the error message is printed in place of the JSON and the exit status is still 0. If the file cannot be opened, the command exits with a `Cannot open file: ...` message.

## HTTP server

```
gdsaveparse-server
gdsaveparse-server --host 0.0.0.0 --port 8080
```

By default the server listens on `127.0.0.1:3000`. Send the raw file in a `POST` request to `/character`, `/stash` or `/formulas`, and the reply body is the JSON document with status 200. The following requests get status 404 with the error message as the body:

- an unknown path, which gives `Error: Wrong entity_type`
- a file that cannot be parsed
- any method other than `POST`, which gives `Error: no method`

The server runs until it is interrupted.

## Library

```python
from gdsaveparse.api import map_to_json, read_character, to_json

with open("player.gdc", "rb") as fh:
    character = read_character(fh)
print(character.hdr.name, character.bio.level)
print(to_json(character))

with open("formulas.gst", "rb") as fh:
    print(map_to_json("formulas", fh))
```

The entry points in `gdsaveparse.api` are the following:

- `read_character(source)` returns a `CharacterFile`.
- `read_stash(source)` returns a `StashFile`.
- `read_formulas(source)` returns a `FormulaSet`.
- `map_to_json(entity_type, source)` picks a reader by name and returns JSON.
- `to_json(obj)` renders any parsed record as compact JSON.

A `source` can be `bytes`, `bytearray`, `memoryview` or a binary file object.

The records are dataclasses:

- `gdsaveparse.character` holds `CharacterFile`, `UISettings`, `HotSlot`, `PlayStats` and `UnknownData`.
- `gdsaveparse.sections` holds the character sections such as `Header`, `CharacterInfo`, `CharacterBio`, `Inventory`, `CharacterSkills` and `FactionPack`.
- `gdsaveparse.common` holds `Item`, `StashTab`, `UID` and the other shared records.
- `gdsaveparse.stash` holds `StashFile`.
- `gdsaveparse.formulas` holds `FormulaSet`.

The lower-level `gdsaveparse.decoder.Decoder` reads the primitive values: integers, floats, strings, lists and blocks.

`to_json` behaves as follows:

- It keeps fields in declaration order.
- It writes floats as the shortest decimal that round-trips as a 32-bit float, and writes non-finite floats as `null`.
- It writes sets, such as the formula names, as sorted lists.

Every formula set always includes the three base relic blueprints.

## Errors

The functions raise these exceptions:

- A layout mismatch raises `gdsaveparse.errors.ParseError`. A bad magic number, block type, version or block length is such a mismatch, and so is an unknown entity type. Its message starts with `Error: `.
- Data that ends too early raises `EOFError`.
- A string that is not valid UTF-8 or UTF-16 raises `UnicodeDecodeError`.

## Limitations

The package only reads save files. It cannot edit them or write them back.