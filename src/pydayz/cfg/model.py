# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 21:52:37
# @Author : pydayz contributors

"""
Typed entries of `.DayZProfile` and `DayZ.cfg`, one per line.

Each kind of line gets its own dataclass and payload type.
Nothing here touches files; see `cfg.parser` for that.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from .consts import LineType


@dataclass(kw_only=True)
class _Setting:
    key: str
    indent: int = 0
    # the exact source line, kept to write untouched lines back as they were.
    raw: str | None = field(default=None, repr=False, compare=False)


@dataclass(kw_only=True)
class TextEntry(_Setting):
    """`key="value";`, quotes excluded from `value`.

    `playerName` and `lastMPServerName` are `SpecialText`,
    which is stored and written just like `Text`.
    """
    value: str
    kind: LineType = LineType.Text

    def __post_init__(self) -> None:
        if self.kind not in (LineType.Text, LineType.SpecialText):
            raise ValueError(f'TextEntry cannot be of kind {self.kind!r}.')


@dataclass(kw_only=True)
class BindingEntry(_Setting):
    """`keyAction[]={0x11,0x12};`, value kept verbatim."""
    value: str
    kind: ClassVar[LineType] = LineType.KeyBinding


@dataclass(kw_only=True)
class DoubleEntry(_Setting):
    value: float
    kind: ClassVar[LineType] = LineType.NumberDouble


@dataclass(kw_only=True)
class IntEntry(_Setting):
    value: int
    kind: ClassVar[LineType] = LineType.NumberInt


@dataclass(kw_only=True)
class BoolEntry(_Setting):
    value: bool
    kind: ClassVar[LineType] = LineType.Boolean


@dataclass(kw_only=True)
class MiscEntry:
    """Anything we don't understand: class headers, braces, blank lines...

    Has no key, and is always written back as is.
    """
    raw: str
    kind: ClassVar[LineType] = LineType.Misc
    key: ClassVar[None] = None

    @property
    def indent(self) -> int:
        """Leading tabs of `raw`. Read only, `raw` is written as is anyway."""
        return len(self.raw) - len(self.raw.lstrip('\t'))


ConfigEntry = (
    TextEntry | BindingEntry | DoubleEntry | IntEntry | BoolEntry | MiscEntry
)

