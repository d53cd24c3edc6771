"""Loading levels from the line-oriented JSON level files."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Optional

from parkrush.exceptions import InvalidLevelError
from parkrush.game_object import GameObject, Rect
from parkrush.level import Level, PlayerSpawn

ObjectData = dict[str, str]
ObjectFactory = Callable[[str, Mapping[str, str]], Optional[GameObject]]

_SPACE = " \t\n\r"
_FLT_MAX = 3.4028234663852886e38
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def load_from_file(filename: str, level_index: int,
                   object_factory: Optional[ObjectFactory] = None) -> Level:
    """Read, parse and build the level stored in ``filename``."""
    if not filename:
        raise InvalidLevelError(filename, "Empty filename provided")
    content = read_json_file(filename)
    return create_level_from_json(parse_simple_json(content), level_index, object_factory)


def read_json_file(filename: str) -> str:
    """Return the whole text of a level file."""
    try:
        with open(filename, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        raise InvalidLevelError(filename, "Failed to open JSON file") from exc
    if not content:
        raise InvalidLevelError(filename, "JSON file is empty")
    return content


def parse_simple_json(content: str) -> list[ObjectData]:
    """Collect the key/value pairs of every object written one field per line.

    An object starts on a line holding only ``{`` and ends on a line holding
    only ``}``; objects with no fields are dropped.
    """
    if not content:
        raise InvalidLevelError("JsonParsing", "Empty JSON content provided")

    objects: list[ObjectData] = []
    current: ObjectData = {}
    inside = False
    for raw in content.split("\n"):
        line = raw.lstrip(_SPACE).rstrip(_SPACE + ",")
        if line == "{":
            inside = True
            current = {}
        elif line == "}":
            if inside and current:
                objects.append(current)
                current = {}
            inside = False
        elif inside and ":" in line:
            raw_key, _, raw_value = line.partition(":")
            key = extract_quoted_string(raw_key)
            value = extract_value(raw_value)
            if key and value:
                current[key] = value
    return objects


def create_level_from_json(json_data: list[Mapping[str, str]], level_index: int,
                           object_factory: Optional[ObjectFactory] = None) -> Level:
    """Build a level; objects other than spawns and borders come from ``object_factory``."""
    if not json_data:
        raise InvalidLevelError("JsonLevel", "No objects found in JSON data")

    spawn = PlayerSpawn((0.0, 0.0), 90.0)
    for data in json_data:
        if data.get("type") == "player_spawn":
            spawn = create_player_spawn(data)

    level = Level(f"Level {level_index}", f"level_{level_index - 1}", spawn)

    for data in json_data:
        kind = data.get("type")
        if kind is None or kind == "player_spawn":
            continue
        if kind == "border":
            level.add_boundary(create_boundary(data))
            continue
        if object_factory is not None:
            level.add_object(object_factory(kind, data))
    return level


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def extract_quoted_string(text: str) -> str:
    """Trim whitespace and surrounding double quotes."""
    return _unquote(text.strip(_SPACE))


def extract_value(text: str) -> str:
    """Trim whitespace, trailing commas and surrounding double quotes."""
    return _unquote(text.lstrip(_SPACE).rstrip(_SPACE + ","))


def get_float(data: Mapping[str, str], key: str, default: float) -> float:
    """Parse the leading number of ``data[key]``, or return ``default`` if absent."""
    if key not in data:
        return default
    value = data[key]
    match = _FLOAT_PREFIX.match(value)
    if match is not None:
        number_text = match.group(1)
        number = float(number_text)
        if abs(number) <= _FLT_MAX or "inf" in number_text.lower() or number != number:
            return number
    raise InvalidLevelError("FloatConversion", f"Failed to convert {key} to float: {value}")


def create_player_spawn(data: Mapping[str, str]) -> PlayerSpawn:
    """Player start position and heading from a ``player_spawn`` entry."""
    position = (get_float(data, "x", 670.0), get_float(data, "y", 210.0))
    return PlayerSpawn(position, get_float(data, "angle", 90.0))


def create_boundary(data: Mapping[str, str]) -> Rect:
    """Road boundary rectangle from a ``border`` entry."""
    return Rect(
        get_float(data, "x", 0.0),
        get_float(data, "y", 0.0),
        get_float(data, "width", 1.0),
        get_float(data, "height", 1.0),
    )