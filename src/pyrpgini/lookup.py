# -*- encoding: utf-8 -*-
# @File   : lookup.py
# @Time   : 2024/10/12 21:40:03
# @Author : Kariko Lin

"""Name tables for resolving `Inventory=` and `[Members]` references.

A table is only meaningful within the loading pass that built it.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol, TypeVar
from warnings import warn


class Named(Protocol):
    @property
    def name(self) -> str | None: ...


T = TypeVar('T')
_N = TypeVar('_N', bound=Named)


def build_lookup(objects: Iterable[_N]) -> dict[str, _N]:
    ret: dict[str, _N] = {}
    for i in objects:
        if i is None or i.name is None:
            continue
        if i.name in ret:
            warn(f'"{i.name}" is declared more than once, the last one wins.')
        ret[i.name] = i
    return ret


def resolve_names(
    tokens: Iterable[str], lookup: Mapping[str, T]
) -> list[T]:
    """Map names to objects in order. Unknown names are skipped."""
    ret: list[T] = []
    for i in tokens:
        if (obj := lookup.get(i)) is None:
            logging.debug(f'"{i}" not found, skipped.')
            continue
        ret.append(obj)
    return ret
