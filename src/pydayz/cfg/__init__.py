# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 23:41:50
# @Author : pydayz contributors

from .consts import LineType, CfgLineWarning
from .model import (
    TextEntry,
    BindingEntry,
    DoubleEntry,
    IntEntry,
    BoolEntry,
    MiscEntry,
    ConfigEntry
)
from .lines import (
    InvalidCfgLine,
    classify,
    coerce_value,
    decode_line,
    parse_line,
    format_entry
)
from .document import CfgDocument
from .parser import CfgParser, DayZConfigParser, find_dayz_cfg
