# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2023/11/14 20:01:52
# @Author : Chloride

import logging

from .ini import IniParser, IniReadError, IniSection
from .models import GameItem, Party, PlayerCharacter
from .builders import CharacterBuilder, ItemBuilder, PartyBuilder
from .lookup import build_lookup, resolve_names
from .loaders import load_characters, load_items, load_parties, store_party

__all__ = [
    'IniParser', 'IniReadError', 'IniSection',
    'GameItem', 'PlayerCharacter', 'Party',
    'ItemBuilder', 'CharacterBuilder', 'PartyBuilder',
    'build_lookup', 'resolve_names',
    'load_items', 'load_characters', 'load_parties', 'store_party'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
