"""Walk through defining, saving, changing and clearing a configuration."""

from __future__ import annotations

import argparse
from pathlib import Path

from espconfig.items import (
    ConfigItemBool,
    ConfigItemFloat,
    ConfigItemInt,
    ConfigItemIP,
    ConfigItemString,
)
from espconfig.manager import DEFAULT_PATH, ConfigManager

_RULE = "------------------------------------"


def _print_file(path: Path) -> None:
    try:
        contents = path.read_text(encoding="utf-8")
    except OSError:
        print("Failed to open file for reading")
        return
    print("File Contents:")
    print(contents)


def _print_values(items: dict[str, object]) -> None:
    for name, item in items.items():
        value = item.value
        if isinstance(value, bool):
            shown = str(int(value))
        elif isinstance(value, float):
            shown = f"{value:.2f}"
        else:
            shown = str(value)
        print(f"Value {name}: {shown}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--path", type=Path, default=DEFAULT_PATH, help="configuration file to use"
    )
    args = parser.parse_args(argv)

    print()
    print("Booting...")

    items = {
        "ci_bool": ConfigItemBool("bool", True),
        "ci_int": ConfigItemInt("int", -1256),
        "ci_float": ConfigItemFloat("float", -15.486),
        "ci_string": ConfigItemString("string", "Text string"),
        "ci_ip": ConfigItemIP("ip_address", "192.168.208.109"),
    }
    manager = ConfigManager(args.path)
    for item in items.values():
        manager.add_item(item)

    manager.save()
    print("Default values:")
    _print_values(items)
    _print_file(args.path)

    print(_RULE)
    print("Setting new values:")
    for key, value in (
        ("ci_bool", False),
        ("ci_int", 9564),
        ("ci_float", 3.1415),
        ("ci_string", "New Text string"),
        ("ci_ip", "127.0.0.1"),
    ):
        items[key].value = value
    _print_values(items)

    print("Save new values:")
    manager.save()
    _print_file(args.path)

    print(_RULE)
    print("Setting new values again:")
    for key, value in (
        ("ci_bool", False),
        ("ci_int", 56335),
        ("ci_float", 9.56415),
        ("ci_string", "New Text string again!"),
        ("ci_ip", "123.45.67.89"),
    ):
        items[key].value = value
    _print_values(items)

    print(_RULE)
    print("Clear settings:")
    print("Reboot to set settings back to default")
    print(_RULE)
    manager.clear()
    _print_file(args.path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())