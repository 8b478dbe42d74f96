# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 23:08:19
# @Author : pydayz contributors

"""Read and write DayZ configuration files.

A DayZ profile always comes in pair with a `DayZ.cfg`,
in the same folder, like:

    - Documents/DayZ
        - Survivor.DayZProfile
        - DayZ.cfg

Lines are written back in their original order, and untouched lines stay
byte-identical, so that a user's settings never get silently corrupted.

Note: files are truncated and rewritten in place. There's no temp file,
so ask for `backup=True` if a crash during saving worries you.
"""

import logging
from codecs import BOM_UTF8
from io import StringIO, TextIOBase
from os import linesep, listdir
from os.path import dirname, exists, isfile, join, splitext
from shutil import copy2

from chardet import detect as guess_codec

from ..abstract import FileHandler
from .document import CfgDocument
from .lines import format_entry, parse_line
from .model import ConfigEntry


def find_dayz_cfg(profile_path: str) -> str:
    """Find `DayZ.cfg` next to the given profile.

    Both the stem and the extension are compared case-insensitively,
    and the first match by name wins.
    """
    root = dirname(profile_path) or '.'
    for i in sorted(listdir(root)):
        stem, ext = splitext(i)
        if (ext.lower() == '.cfg' and stem.lower() == 'dayz'
                and isfile(join(root, i))):
            return join(root, i)
    raise FileNotFoundError(f'No DayZ.cfg found next to "{profile_path}".')


class CfgParser(FileHandler[list[ConfigEntry]]):
    """One DayZ configuration file, as a list of entries.

    The encoding and newline style found by `read()` are reused
    by `write()`.
    """

    def __init__(
        self, filename: str, encoding: str | None = None, *,
        backup_suffix: str = '.bak'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._newline: str | None = None
        self._backup_suffix = backup_suffix

    @property
    def encoding(self) -> str | None:
        return self._codec

    @property
    def newline(self) -> str | None:
        """`\\n`, `\\r\\n`, or `None` if not read yet (or single line)."""
        return self._newline

    @staticmethod
    def readstream(buf: TextIOBase) -> list[ConfigEntry]:
        """读取解码好的字符串流，每行一个词条。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        ret: list[ConfigEntry] = []
        while i := buf.readline():
            ret.append(parse_line(i.removesuffix('\n').removesuffix('\r')))
        return ret

    @staticmethod
    def _sniff_newline(text: str) -> str | None:
        # mixed styles? CRLF wins, as the game itself is on Windows.
        for i in ('\r\n', '\n', '\r'):
            if i in text:
                return i
        return None

    def _decode(self, raw: bytes) -> str:
        codec = self._codec
        if codec is None:
            codec = 'utf-8-sig' if raw.startswith(BOM_UTF8) else 'utf-8'
        try:
            buf = raw.decode(codec)
        except UnicodeDecodeError:
            # player names may have been saved in some ANSI codepage.
            guess = guess_codec(raw)
            candidates = ['cp1252']
            if guess['encoding'] and guess['confidence'] >= 0.8:
                candidates.insert(0, guess['encoding'])
            for i in candidates:
                try:
                    buf = raw.decode(i)
                except (UnicodeDecodeError, LookupError):
                    continue
                codec = i
                break
            else:
                codec = 'latin-1'
                buf = raw.decode(codec)
            logging.info('%s is not %s, decoded as %s instead.',
                         self._fn, self._codec or 'UTF-8', codec)
        self._codec = codec
        return buf

    def read(self) -> list[ConfigEntry]:
        """读取`CfgParser`实例指定的文件。

        `OSError` is NOT caught, a missing profile should fail loudly.
        """
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        text = self._decode(raw)
        self._newline = self._sniff_newline(text)
        ret = self.readstream(StringIO(text, newline=None))
        logging.info('loaded %d lines from %s', len(ret), self._fn)
        return ret

    def backup(self) -> str | None:
        """Copy the current file to `<filename><backup_suffix>`.

        Returns the backup path, or `None` if there's nothing to back up.
        """
        if not exists(self._fn):
            return None
        dst = self._fn + self._backup_suffix
        copy2(self._fn, dst)
        logging.info('backed up %s to %s', self._fn, dst)
        return dst

    def write(
        self, instance: list[ConfigEntry], *, backup: bool = False
    ) -> None:
        """保存到`CfgParser`实例指定的文件，覆盖原有内容。

        Each entry becomes one line, in order, each followed by a line break.
        The whole file is encoded before the old one is touched, so a value
        the codec can't hold raises `UnicodeEncodeError` with the file intact.
        """
        newline = self._newline or linesep
        data = ''.join(format_entry(i) + newline for i in instance).encode(
            self._codec or 'utf-8')
        if backup:
            self.backup()
        with open(self._fn, 'wb') as fp:
            fp.write(data)
        logging.info('saved %d lines to %s', len(instance), self._fn)

    def __str__(self) -> str:
        return super().__str__() + f" ({self._codec or 'utf-8'})"


class DayZConfigParser(FileHandler[CfgDocument]):
    """`.DayZProfile` and `DayZ.cfg`, read and written together.

    If `cfg_path` is not given, it's searched in the folder of the profile.
    """

    def __init__(
        self, profile_path: str, cfg_path: str | None = None,
        encoding: str | None = None, *,
        backup_suffix: str = '.bak'
    ) -> None:
        super().__init__(profile_path)
        if cfg_path is None:
            cfg_path = find_dayz_cfg(profile_path)
        self.profile = CfgParser(
            profile_path, encoding, backup_suffix=backup_suffix)
        self.config = CfgParser(
            cfg_path, encoding, backup_suffix=backup_suffix)

    def read(self) -> CfgDocument:
        return CfgDocument(self.profile.read(), self.config.read())

    def update_profile(
        self, instance: CfgDocument, *, backup: bool = False
    ) -> None:
        self.profile.write(instance.profile, backup=backup)

    def update_config(
        self, instance: CfgDocument, *, backup: bool = False
    ) -> None:
        self.config.write(instance.config, backup=backup)

    def write(self, instance: CfgDocument, *, backup: bool = False) -> None:
        """保存两个文件。`backup=True` 时先各自复制一份`.bak`。"""
        self.update_profile(instance, backup=backup)
        self.update_config(instance, backup=backup)

    def __str__(self) -> str:
        return f'{self.profile} + {self.config}'
