# -*- encoding: utf-8 -*-
# @File   : lines.py
# @Time   : 2024/11/02 22:31:05
# @Author : pydayz contributors

r"""Line level codec: classify a line, decode it into an entry,
and encode an entry back into a line.

DayZ configs are NOT INIs. They are Bohemia's `class {...};` config
syntax, flattened line by line. We don't parse the tree at all,
just guess each line by some fixed patterns:

    version=1;                      -> NumberInt
    \tplayerName="Survivor";        -> SpecialText
    fov=0.75;                       -> NumberDouble
    vsync=1;                        -> Boolean
    keyForward[]={17,200};          -> KeyBinding
    class DifficultyPresets         -> Misc
    {                               -> Misc

The order of the rules matters, as a key binding line also contains `=`
and `;`, etc.
"""

import logging
import re
from dataclasses import replace
from math import isfinite
from warnings import warn

from .consts import (
    BOOLEAN_KEYS,
    DOUBLE_KEYS,
    INT32_MAX,
    INT32_MIN,
    SPECIAL_PREFIXES,
    CfgLineWarning,
    LineType
)
from .model import (
    BindingEntry,
    BoolEntry,
    ConfigEntry,
    DoubleEntry,
    IntEntry,
    MiscEntry,
    TextEntry
)

_INT = re.compile(r'[+-]?\d+', re.ASCII)
# `,` is accepted as a decimal point, too. whatever the host locale is.
_DOUBLE = re.compile(
    r'[+-]?(?:\d+(?:[.,]\d*)?|[.,]\d+)(?:[eE][+-]?\d+)?', re.ASCII)


class InvalidCfgLine(ValueError):
    """A line matched some pattern, but its key or value is broken."""
    pass


def classify(line: str) -> LineType:
    """Guess the `LineType` of a raw line. Never fails, see `Misc`."""
    line = line.lstrip('\t').lower()
    if line.startswith(SPECIAL_PREFIXES):
        return LineType.SpecialText
    if all(i in line for i in '[]{};'):
        return LineType.KeyBinding
    if all(i in line for i in '";='):
        return LineType.Text
    if all(i in line for i in '.;='):
        return LineType.NumberDouble
    if ';' in line and '=' in line:
        key = line.split('=', 1)[0]
        if key in BOOLEAN_KEYS:
            return LineType.Boolean
        if key in DOUBLE_KEYS:
            return LineType.NumberDouble
        return LineType.NumberInt
    return LineType.Misc


def _split(body: str) -> tuple[str, str]:
    key, sep, value = body.rstrip(';').partition('=')
    if not sep:
        raise InvalidCfgLine('no "=" found.')
    if not key:
        raise InvalidCfgLine('empty key.')
    return key, value


def decode_line(line: str, kind: LineType) -> ConfigEntry:
    """Build an entry of the given `kind` from a raw line (no line break).

    Raises `InvalidCfgLine` instead of falling back to `Misc`,
    use `parse_line()` for the forgiving one.
    """
    if kind is LineType.Misc:
        return MiscEntry(raw=line)

    body = line.lstrip('\t')
    indent = len(line) - len(body)
    key, value = _split(body)
    match kind:
        case LineType.Text | LineType.SpecialText:
            return TextEntry(
                key=key, value=value.strip('"'), kind=kind,
                indent=indent, raw=line)
        case LineType.KeyBinding:
            return BindingEntry(key=key, value=value, indent=indent, raw=line)
        case LineType.NumberDouble:
            if not _DOUBLE.fullmatch(value):
                raise InvalidCfgLine(f'"{value}" is not a decimal number.')
            number = float(value.replace(',', '.'))
            if not isfinite(number):
                raise InvalidCfgLine(f'"{value}" overflows a double.')
            return DoubleEntry(key=key, value=number, indent=indent, raw=line)
        case LineType.NumberInt:
            if not _INT.fullmatch(value):
                raise InvalidCfgLine(f'"{value}" is not an integer.')
            number = int(value, 10)
            if not INT32_MIN <= number <= INT32_MAX:
                raise InvalidCfgLine(f'{number} is out of 32-bit range.')
            return IntEntry(key=key, value=number, indent=indent, raw=line)
        case LineType.Boolean:
            # only a literal `1` is True. `0`, `2`, `yes` are all False.
            return BoolEntry(
                key=key, value=value == '1', indent=indent, raw=line)
    raise InvalidCfgLine(f'unknown line type {kind!r}.')


def parse_line(line: str) -> ConfigEntry:
    """Classify and decode a raw line.

    Lines failed to decode are demoted to `MiscEntry` with a
    `CfgLineWarning`, so that nothing gets lost when writing back.
    """
    kind = classify(line)
    try:
        return decode_line(line, kind)
    except InvalidCfgLine as e:
        warn(f'Kept "{line}" as is, since it is not a valid '
             f'{kind.name} line: {e}', CfgLineWarning, stacklevel=2)
        logging.debug('demoted %r (%s) to Misc: %s', line, kind.name, e)
        return MiscEntry(raw=line)


def format_double(value: float) -> str:
    """Shortest round-trip repr, always with a `.` in it.

    A `.` keeps the value a `NumberDouble` when read back, even if its key
    is not one of the well-known double keys.
    """
    text = repr(float(value))
    if '.' not in text and 'e' in text:
        mantissa, exponent = text.split('e')
        text = f'{mantissa}.0e{exponent}'
    return text


def _is_pristine(entry: ConfigEntry) -> bool:
    if entry.raw is None:
        return False
    try:
        return decode_line(entry.raw, classify(entry.raw)) == entry
    except InvalidCfgLine:
        return False


def format_entry(entry: ConfigEntry) -> str:
    """Encode an entry into one line, without the line break.

    Entries not altered since being read are written back
    exactly as their source lines.
    """
    if isinstance(entry, MiscEntry):
        return entry.raw
    if _is_pristine(entry):
        return entry.raw

    match entry:
        case TextEntry():
            token = f'"{entry.value}"'
        case BoolEntry():
            token = '1' if entry.value else '0'
        case DoubleEntry():
            token = format_double(entry.value)
        case IntEntry() | BindingEntry():
            token = str(entry.value)
    return '\t' * entry.indent + f'{entry.key}={token};'


def _check_type(entry: ConfigEntry, value: object) -> str | float | int | bool:
    match entry:
        case MiscEntry():
            raise TypeError('Misc lines are not modifiable.')
        case BoolEntry():
            if not isinstance(value, bool):
                raise TypeError(f'"{entry.key}" expects bool, got {value!r}.')
            return value
        case IntEntry():
            # bool is an int subclass, but never what the caller means here.
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f'"{entry.key}" expects int, got {value!r}.')
            if not INT32_MIN <= value <= INT32_MAX:
                raise ValueError(f'{value} is out of 32-bit range.')
            return value
        case DoubleEntry():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f'"{entry.key}" expects float, got {value!r}.')
            if not isfinite(value):
                raise ValueError(f'{value} cannot be written to a cfg file.')
            return float(value)
        case TextEntry() | BindingEntry():
            if not isinstance(value, str):
                raise TypeError(f'"{entry.key}" expects str, got {value!r}.')
            if '\n' in value or '\r' in value:
                raise ValueError('Line breaks are not allowed in values.')
            if isinstance(entry, TextEntry) and '"' in value:
                raise ValueError('Quotes are not allowed in text values.')
            return value
    raise TypeError(f'Not a config entry: {entry!r}')


def coerce_value(entry: ConfigEntry, value: object) -> str | float | int | bool:
    """Check `value` against the kind of `entry`,
    and return it in the form the entry stores.

    The line it would be written as must read back as the same entry,
    e.g. a text value can't look like a key binding.

    Raises `TypeError` on a wrong type (or a `MiscEntry`),
    `ValueError` on a value that cannot be written back safely.
    """
    value = _check_type(entry, value)
    candidate = replace(entry, value=value, raw=None)
    line = format_entry(candidate)
    try:
        same = decode_line(line, classify(line)) == candidate
    except InvalidCfgLine:
        same = False
    if not same:
        raise ValueError(
            f'{value!r} would be read back differently from "{line}".')
    return value
