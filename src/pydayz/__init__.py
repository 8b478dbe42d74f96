# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:30:27
# @Author : pydayz contributors

import logging

from .cfg import (
    CfgDocument, ConfigEntry, LineType,
    CfgParser, DayZConfigParser, find_dayz_cfg,
    parse_line, format_entry,
    InvalidCfgLine, CfgLineWarning
)

__all__ = [
    'CfgDocument', 'ConfigEntry', 'LineType',
    'CfgParser', 'DayZConfigParser', 'find_dayz_cfg',
    'parse_line', 'format_entry',
    'InvalidCfgLine', 'CfgLineWarning'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
