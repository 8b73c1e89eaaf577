"""Typed configuration values loaded from an XML document."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from enum import IntEnum
from typing import Any, Callable, Dict, Optional, Tuple, Union

from catalyst.strings import split

logger = logging.getLogger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_INT_RE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ValueType(IntEnum):
    """The kinds of value a configuration entry may hold."""

    INVALID = -1
    INT = 0
    FLOAT = 1
    BOOL = 2
    STRING = 3
    VECTOR2 = 4
    VECTOR3 = 5
    VECTOR4 = 6
    COLOR = 7


_TYPE_NAMES = {
    "int": ValueType.INT,
    "float": ValueType.FLOAT,
    "bool": ValueType.BOOL,
    "string": ValueType.STRING,
    "vector2": ValueType.VECTOR2,
    "vector3": ValueType.VECTOR3,
    "vector4": ValueType.VECTOR4,
    "color": ValueType.COLOR,
}


def parse_type(name: str) -> ValueType:
    """The value type named by ``name``, or ``ValueType.INVALID``."""
    return _TYPE_NAMES.get(name, ValueType.INVALID)


class InvalidValueError(LookupError):
    """Raised when a required configuration value is missing."""

    def __init__(self, key: str) -> None:
        self.key = key
        self.message = "Key not found: " + key
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


def _attr_int(text: Optional[str]) -> int:
    """Leading integer of ``text`` (decimal or 0x hex), clamped to 32 bits; 0 if none."""
    match = _INT_RE.match(text or "")
    if not match:
        return 0
    sign, digits = match.groups()
    number = int(digits, 16) if digits[:2].lower() == "0x" else int(digits)
    if sign == "-":
        number = -number
    return max(_INT32_MIN, min(_INT32_MAX, number))


def _attr_float(text: Optional[str]) -> float:
    """Leading float of ``text``; 0.0 if none."""
    match = _FLOAT_RE.match(text or "")
    return float(match.group(1)) if match else 0.0


def _attr_bool(text: Optional[str]) -> bool:
    """True when ``text`` starts with 1, t, T, y or Y."""
    return bool(text) and text[0] in "1tTyY"


def _component(text: str) -> float:
    """Parse one vector component; the leading number must be present."""
    match = _FLOAT_RE.match(text)
    if not match:
        raise ValueError(f"invalid vector component: {text!r}")
    return float(match.group(1))


def _vector(text: str, size: int, where: str) -> Tuple[float, ...]:
    components = split(text, ",", _component)
    if len(components) < size:
        raise ValueError(f"{where}: expected {size} components, got {len(components)}")
    return tuple(components[:size])


_SCALARS: Dict[ValueType, Callable[[Optional[str]], Any]] = {
    ValueType.INT: _attr_int,
    ValueType.FLOAT: _attr_float,
    ValueType.BOOL: _attr_bool,
    ValueType.STRING: lambda text: text or "",
}

_VECTOR_SIZES = {
    ValueType.VECTOR2: 2,
    ValueType.VECTOR3: 3,
    ValueType.VECTOR4: 4,
    ValueType.COLOR: 4,
}


class Config:
    """Configuration values grouped by category, read from XML text.

    The document has the shape
    ``<Config><Categories><Category title=".."><Value name=".." type=".." value=".."/>``.
    """

    def __init__(self, source: Union[str, bytes] = "") -> None:
        self.source = source
        self._data: Dict[str, Dict[str, Any]] = {}

    def load(self) -> None:
        """Read every value in the source into the configuration.

        A source that is not well-formed XML loads nothing. Values with an
        unknown type are skipped with a warning.
        """
        try:
            root = ET.fromstring(self.source)
        except ET.ParseError:
            return
        if root.tag != "Config":
            return
        categories = root.find("Categories")
        if categories is None:
            return

        for category in categories.findall("Category"):
            title = category.get("title", "")
            for node in category.findall("Value"):
                name = node.get("name", "")
                type_name = node.get("type", "")
                raw = node.get("value")
                kind = parse_type(type_name)

                if kind in _SCALARS:
                    value = _SCALARS[kind](raw)
                elif kind in _VECTOR_SIZES:
                    value = _vector(raw or "", _VECTOR_SIZES[kind], f"{title}.{name}")
                else:
                    logger.warning(
                        "Type %s was invalid! Make sure you mark the type as one of the "
                        "following: int, float, bool, string, vector, color",
                        type_name,
                    )
                    continue
                self._data.setdefault(title, {})[name] = value

    def clear(self) -> None:
        """Forget every loaded value."""
        self._data.clear()

    def get(self, group: str, key: str, default: Any = None) -> Any:
        """The value ``key`` in ``group``, or ``default`` when absent."""
        return self._data.get(group, {}).get(key, default)

    def require(self, group: str, key: str) -> Any:
        """The value ``key`` in ``group``; raises InvalidValueError when absent."""
        if not self.has(group, key):
            raise InvalidValueError(f"{group}.{key}")
        return self._data[group][key]

    def has(self, group: str, key: str) -> bool:
        """Whether ``group`` holds a value named ``key``."""
        return key in self._data.get(group, {})