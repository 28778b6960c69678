# espconfig

A small library that keeps typed settings in one JSON file. Each setting is an
item with an id and a default value. The item can hold a boolean, an integer, a
float, a string or an IPv4 address. A `ConfigManager` collects the items. It
writes their values under a `"cfg"` object in a JSON document and reads them
back from it.

## Installation

```
pip install .
```

## Usage

```python
from espconfig.items import (
    ConfigItemBool,
    ConfigItemInt,
    ConfigItemFloat,
    ConfigItemString,
    ConfigItemIP,
)
from espconfig.manager import ConfigManager

manager = ConfigManager("esp_cfg.json")

enabled = ConfigItemBool("bool", True)
count = ConfigItemInt("int", -1256)
ratio = ConfigItemFloat("float", -15.486)
name = ConfigItemString("string", "Text string")
address = ConfigItemIP("ip_address", "192.168.208.109")

for item in (enabled, count, ratio, name, address):
    manager.add_item(item)

manager.save()       # writes {"cfg":{"bool":true,"int":-1256,...}}
count.value = 42     # change a value in memory
manager.load()       # reads the stored values back into the items
manager.clear()      # removes the file, so only the defaults remain
```

If no path is given, `ConfigManager()` uses `esp_cfg.json` in the current
directory.

### Items (`espconfig.items`)

Every item has an `item_id` and a `value` property. Each item converts what it
is given to its own type:

- `ConfigItemBool` stores `bool(value)`.
- `ConfigItemInt` wraps the value into the signed 32-bit range.
- `ConfigItemFloat` rounds the value to single precision.
- `ConfigItemString` stores `str(value)`, and `None` becomes `""`.
- `ConfigItemIP` stores an `ipaddress.IPv4Address`. It accepts an address, a
  dotted string, an integer, a sequence of four octets or four bytes. Any other
  input raises `ValueError` or `TypeError`.

`item.dump_json()` returns a one-entry dictionary `{item_id: value}`. An IP
address is written there as a list of four octets. `item.load_json(obj)` takes
the item's value from the mapping `obj`, as follows:

- A boolean reads as false when its entry is missing or is not a boolean or a
  number.
- An integer or a float reads as 0 when its entry is missing or is not a number.
- A string keeps its value unless the entry is a string.
- An IP address keeps its value unless the entry is a list. Up to four octets
  are read from that list.

### Manager (`espconfig.manager`)

- `add_item(item)` appends an item. Items are written and read in the order in
  which they were added.
- `count_items()` returns the number of items. `len(manager)` does the same, and
  iterating over the manager yields the items.
- `to_json()` returns the document as a dictionary: `{"cfg": {...}}`.
- `load_from_json(doc)` applies the values from a document you already hold. If
  the document has no `"cfg"` key, every item is left unchanged.
- `save()` writes the document to `manager.path` as compact JSON.
- `load()` reads the file and applies it. Nothing changes if the manager has no
  items, the file does not exist, or the file is not valid JSON.
- `clear()` deletes the file. Deleting a file that does not exist is not an
  error.

## Demo

```
espconfig-demo
espconfig-demo --path /tmp/settings.json
```

The demo registers one item of each type and saves the defaults. It then
changes the values and saves them, and changes them once more. It prints the
values and the stored file at each step. At the end it clears the stored
configuration. `--path` chooses the file, and the default is `esp_cfg.json`.

## Limits

The package stores the configuration in an ordinary file on the local file
system. It has no storage backend of its own. It does not watch the file for
changes and does not merge changes made by several processes at once.

## Tests

```
pip install .[test]
pytest
```