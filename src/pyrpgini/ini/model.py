# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically one INI section: a header name with its key-value pairs.

Keys are case sensitive and nothing gets trimmed,
so `Value=1` and `value = 1` are two different keys.
"""

from collections.abc import Iterable, MutableMapping
from re import compile as regex
from typing import Iterator

_DECIMAL = regex(r'[+-]?[0-9]+')


def parse_int(literal: str | None) -> int:
    """Strict base-10 integer. `None` or empty string means 0.

    Unlike `int()`, surrounding whitespace and `_` separators are
    not accepted: `" 5"` raises `ValueError`.
    """
    if not literal:
        return 0
    if _DECIMAL.fullmatch(literal) is None:
        raise ValueError(f'invalid literal for base-10 int: {literal!r}')
    return int(literal)


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    Keeps the pairs of one `[name]` header in insertion order.
    Setting an existing key again overrides the value (last one wins).
    """

    def __init__(
        self, section_name: str, /,
        pairs: Iterable[tuple[str, str]] | None = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        if pairs is not None:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        return self._name == other._name and self._data == other._data

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    def getint(self, key: str) -> int:
        """Missing or empty value falls back to 0,
        but a malformed one raises `ValueError`."""
        return parse_int(self.get(key))

    def getlist(self, key: str) -> tuple[str, ...]:
        """Comma separated values, taken verbatim (no strip)."""
        if not (val := self.get(key)):
            return ()
        return tuple(val.split(','))

    def sorted_by_index(self) -> list[tuple[int, str]]:
        """For registry-like sections, i.e.

            ```ini
            [Members]
            0=Gimli
            1=Legolas
            ```

        Returns `(index, value)` pairs sorted by the numeric index.
        Keys which are not base-10 integers raise `ValueError`.
        """
        ret: list[tuple[int, str]] = []
        for k, v in self._data.items():
            if _DECIMAL.fullmatch(k) is None:
                raise ValueError(f'[{self._name}] index is not base-10: {k!r}')
            ret.append((int(k), v))
        ret.sort(key=lambda x: x[0])
        return ret
