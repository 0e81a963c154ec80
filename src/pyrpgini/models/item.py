# -*- encoding: utf-8 -*-
# @File   : item.py
# @Time   : 2024/09/08 15:52:32
# @Author : Kariko Lin

from dataclasses import dataclass


@dataclass(frozen=True)
class GameItem:
    name: str  # taken from the section header, as is.
    value: int = 0   # in gold pieces
    weight: int = 0  # in kilograms
    attack_bonus: int = 0
    agility_bonus: int = 0
    defense_bonus: int = 0
