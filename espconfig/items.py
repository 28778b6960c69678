"""Typed configuration items that read and write themselves as JSON values."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from ipaddress import IPv4Address
from typing import Any

_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    span = 1 << _INT_BITS
    half = 1 << (_INT_BITS - 1)
    return ((int(value) + half) % span) - half


def _to_float32(value: float) -> float:
    """Round a number to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", float(value)))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _json_as_int(raw: Any) -> int:
    """Read a JSON value as an integer; anything that is not a number reads as 0."""
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and math.isfinite(raw):
        return int(raw)
    return 0


class ConfigItem:
    """A named configuration value stored under its id in a JSON object."""

    def __init__(self, item_id: str, default: Any) -> None:
        self.item_id = item_id
        self.value = default

    @property
    def value(self) -> Any:
        """The current value of the item."""
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._value = self._coerce(new_value)

    def _coerce(self, value: Any) -> Any:
        return value

    def _decode(self, raw: Any) -> Any:
        return raw

    def _encode(self) -> Any:
        return self._value

    def load_json(self, obj: dict[str, Any]) -> None:
        """Take this item's value from the JSON object ``obj``."""
        self.value = self._decode(obj.get(self.item_id))

    def dump_json(self) -> dict[str, Any]:
        """Return this item as a one-entry JSON object fragment."""
        return {self.item_id: self._encode()}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.item_id!r}, {self._value!r})"


class ConfigItemBool(ConfigItem):
    """A boolean item; a missing or non-boolean JSON value reads as false."""

    def _coerce(self, value: Any) -> bool:
        return bool(value)

    def _decode(self, raw: Any) -> bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, (int, float)):
            return raw != 0
        return False


class ConfigItemInt(ConfigItem):
    """A signed 32-bit integer item; a missing JSON value reads as 0."""

    def _coerce(self, value: Any) -> int:
        return _wrap_int(value)

    def _decode(self, raw: Any) -> int:
        return _json_as_int(raw)


class ConfigItemFloat(ConfigItem):
    """A single-precision float item; a missing JSON value reads as 0.0."""

    def _coerce(self, value: Any) -> float:
        return _to_float32(value)

    def _decode(self, raw: Any) -> float:
        if isinstance(raw, (bool, int, float)):
            return float(raw)
        return 0.0


class ConfigItemString(ConfigItem):
    """A text item; it keeps its value when the JSON value is not a string."""

    def _coerce(self, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def load_json(self, obj: dict[str, Any]) -> None:
        raw = obj.get(self.item_id)
        if isinstance(raw, str):
            self.value = raw


class ConfigItemIP(ConfigItem):
    """An IPv4 address item stored in JSON as an array of four octets."""

    def _coerce(self, value: Any) -> IPv4Address:
        if isinstance(value, (IPv4Address, str, int)) and not isinstance(value, bool):
            return IPv4Address(value)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != 4:
                raise ValueError(f"an IPv4 address needs 4 octets, got {len(value)}")
            return IPv4Address(bytes(int(octet) for octet in value))
        if isinstance(value, (bytes, bytearray)):
            return IPv4Address(bytes(value))
        raise TypeError(f"cannot make an IPv4 address from {value!r}")

    def load_json(self, obj: dict[str, Any]) -> None:
        raw = obj.get(self.item_id)
        if not isinstance(raw, list):
            return
        octets = bytearray(self._value.packed)
        for index, octet in enumerate(raw[:4]):
            octets[index] = _json_as_int(octet) & 0xFF
        self._value = IPv4Address(bytes(octets))

    def _encode(self) -> list[int]:
        return list(self._value.packed)