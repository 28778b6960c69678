"""A collection of configuration items persisted as one JSON file."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from espconfig.items import ConfigItem

DEFAULT_PATH = Path("esp_cfg.json")
SECTION = "cfg"


class ConfigManager:
    """Keeps an ordered set of items and saves them under a ``cfg`` object."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._items: list[ConfigItem] = []

    def add_item(self, item: ConfigItem) -> None:
        """Append an item; items are saved and loaded in the order added."""
        self._items.append(item)

    def count_items(self) -> int:
        """Return how many items are managed."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ConfigItem]:
        return iter(self._items)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON document holding every item under ``cfg``."""
        section: dict[str, Any] = {}
        for item in self._items:
            section.update(item.dump_json())
        return {SECTION: section}

    def load_from_json(self, doc: dict[str, Any]) -> None:
        """Set every item from the ``cfg`` object of ``doc``, if it has one."""
        if SECTION not in doc:
            return
        section = doc[SECTION]
        if not isinstance(section, dict):
            section = {}
        for item in self._items:
            item.load_json(section)

    def load(self) -> None:
        """Load values from the file; a missing or unreadable document changes nothing."""
        if not self._items or not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as handle:
            try:
                doc = json.load(handle)
            except json.JSONDecodeError:
                return
        if isinstance(doc, dict):
            self.load_from_json(doc)

    def save(self) -> None:
        """Write all items to the file as compact JSON."""
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(self.to_json(), handle, separators=(",", ":"))

    def clear(self) -> None:
        """Remove the file so that defaults apply on the next start."""
        self.path.unlink(missing_ok=True)