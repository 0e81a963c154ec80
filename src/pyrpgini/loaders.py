# -*- encoding: utf-8 -*-
# @File   : loaders.py
# @Time   : 2024/10/12 23:02:18
# @Author : Kariko Lin

"""Load order matters: items, then characters, then parties.

Each loader builds its own name table from what the caller passes in,
so referring to objects from another loading pass is not supported.
"""

import logging
from collections.abc import Iterable
from multiprocessing.pool import ThreadPool
from os import listdir
from os.path import exists, isfile, join
from warnings import warn

from .builders import CharacterBuilder, ItemBuilder, PartyBuilder
from .consts import PARTY_FILE_EXT, PARTY_NAME_KEY, PartySection
from .ini import IniParser, IniReadError, IniSection
from .lookup import build_lookup
from .models import GameItem, Party, PlayerCharacter


def load_items(
    filename: str, encoding: str | None = None
) -> list[GameItem]:
    ret = IniParser(filename, encoding).load(ItemBuilder())
    logging.info(f'Loaded {len(ret)} items from {filename}.')
    return ret


def load_characters(
    filename: str, items: Iterable[GameItem],
    encoding: str | None = None
) -> list[PlayerCharacter]:
    builder = CharacterBuilder(build_lookup(items))
    ret = IniParser(filename, encoding).load(builder)
    logging.info(f'Loaded {len(ret)} characters from {filename}.')
    return ret


def _party_files(directory: str) -> list[str]:
    try:
        names = listdir(directory)
    except OSError as e:
        raise IniReadError(f'Failed to list {directory}: {e}') from e
    return [
        join(directory, i) for i in sorted(names)
        if i.lower().endswith(PARTY_FILE_EXT)
        and isfile(join(directory, i))
    ]


def load_parties(
    directory: str, characters: Iterable[PlayerCharacter],
    encoding: str | None = None, *,
    workers: int | None = None
) -> list[Party]:
    """Every `*.ini` file in `directory` makes one party.

    Files are taken in file name order. With `workers` set,
    they are read by a thread pool, and the order is kept still.
    """
    builder = PartyBuilder(build_lookup(characters))
    files = _party_files(directory)

    def load_one(fn: str) -> Party:
        return IniParser(fn, encoding).load(builder)[0]

    if workers is None or len(files) < 2:
        ret = [load_one(i) for i in files]
    else:
        with ThreadPool(workers) as pool:
            ret = pool.map(load_one, files)
    logging.info(f'Loaded {len(ret)} parties from {directory}.')
    return ret


def store_party(
    party: Party, directory: str, encoding: str | None = None
) -> str:
    """Save as `<directory>/<party name>.ini`, which `load_parties`
    could read back. Returns the file written."""
    if party.name is None:
        raise ValueError('Unable to store a party without name.')
    filename = join(directory, party.name + PARTY_FILE_EXT)
    if exists(filename):
        warn(f'{filename} already exists and would get overwritten.')

    header = IniSection(PartySection.PARTY.value)
    header[PARTY_NAME_KEY] = party.name
    members = IniSection(PartySection.MEMBERS.value, (
        (str(idx), i.name) for idx, i in enumerate(party.members)))
    IniParser(filename, encoding).write((header, members))
    logging.info(f'Stored party "{party.name}" to {filename}.')
    return filename
