# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56
# @Author : Kariko Lin

from enum import Enum


class ItemKey(str, Enum):
    VALUE = 'Value'
    WEIGHT = 'Weight'
    ATTACK_BONUS = 'AttackBonus'
    AGILITY_BONUS = 'AgilityBonus'
    DEFENSE_BONUS = 'DefenseBonus'


class CharacterKey(str, Enum):
    STRENGTH = 'Strength'
    DEXTERITY = 'Dexterity'
    FORTITUDE = 'Fortitude'
    INVENTORY = 'Inventory'  # comma separated item names


class PartySection(str, Enum):
    PARTY = 'Party'
    MEMBERS = 'Members'  # like `[BuildingTypes]`, INDEX=NAME pairs.


PARTY_NAME_KEY = 'Name'
# older party files kept the roster as `Members=A,B,C` within [Party].
PARTY_LEGACY_MEMBERS_KEY = 'Members'

PARTY_FILE_EXT = '.ini'  # compared case-insensitively
