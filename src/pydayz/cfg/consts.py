# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:40:12
# @Author : pydayz contributors

from enum import Enum


class LineType(str, Enum):
    Text = 'text'
    SpecialText = 'special_text'
    KeyBinding = 'key_binding'
    NumberDouble = 'number_double'
    NumberInt = 'number_int'
    Boolean = 'boolean'
    Misc = 'misc'


# lines starting with these are always quoted text,
# even if there's no `"` around the value.
SPECIAL_PREFIXES = ('playername', 'lastmpservername')

BOOLEAN_KEYS = frozenset({
    'windowed', 'ssaoenabled', 'vsync', 'perspective',
    'trackir', 'freetrack', 'triplehead', 'showtitles',
    'useimperialsystem', 'vehiclefreelook', 'showradio',
    'battleyelicense',
})

# doubles which may be written without a decimal point, e.g. `gamma=1;`.
DOUBLE_KEYS = frozenset({
    'headbob', 'gamma', 'bloom', 'fov', 'mousesmoothing',
})

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


class CfgLineWarning(UserWarning):
    """A line looked like a setting but could not be decoded,
    and was kept as an untouched `MiscEntry`."""
    pass
