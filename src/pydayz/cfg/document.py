# -*- encoding: utf-8 -*-
# @File   : document.py
# @Time   : 2024/11/02 21:52:37
# @Author : pydayz contributors

from collections.abc import Iterable, Iterator, Mapping

from .lines import coerce_value
from .model import ConfigEntry, MiscEntry


class CfgDocument(Mapping[str, ConfigEntry]):
    """Both DayZ configuration files, as two lists of entries.

    Keys are case insensitive. `DayZ.cfg` (`self.config`) is searched
    before the profile, and the first match in file order wins,
    as duplicated keys are not rejected.

    Entries are never added, removed or reordered here. To change a value,
    either assign `doc[key] = value` (type checked), or alter
    `doc.lookup(key).value` directly (not checked).
    """

    def __init__(
        self,
        profile: Iterable[ConfigEntry] = (),
        config: Iterable[ConfigEntry] = ()
    ) -> None:
        self.profile: list[ConfigEntry] = list(profile)
        self.config: list[ConfigEntry] = list(config)

    def __chain(self) -> Iterator[ConfigEntry]:
        yield from self.config
        yield from self.profile

    def lookup(self, key: str) -> ConfigEntry | None:
        key = key.lower()
        for i in self.__chain():
            if i.key is not None and i.key.lower() == key:
                return i
        return None

    def __getitem__(self, key: str) -> ConfigEntry:
        if (entry := self.lookup(key)) is None:
            raise KeyError(key)
        return entry

    def __setitem__(self, key: str, value: object) -> None:
        entry = self[key]
        entry.value = coerce_value(entry, value)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __iter__(self) -> Iterator[str]:
        keys: dict[str, None] = {}
        for i in self.__chain():
            if i.key is not None:
                keys.setdefault(i.key.lower(), None)
        return iter(keys)

    def __len__(self) -> int:
        return len(list(iter(self)))

    def __repr__(self) -> str:
        return '<CfgDocument { .profile = %d, .config = %d }>' % (
            len(self.profile), len(self.config))

    def misc_entries(self) -> list[MiscEntry]:
        """Lines kept verbatim, including those that failed to decode."""
        return [i for i in self.__chain() if isinstance(i, MiscEntry)]
