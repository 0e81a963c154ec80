# -*- encoding: utf-8 -*-
# @File   : character.py
# @Time   : 2024/09/08 15:52:32
# @Author : Kariko Lin

from collections.abc import Iterable

from .item import GameItem


class PlayerCharacter:
    """A character with base stats and items carried.

    Items are shared with the item list they were loaded from,
    never copied. The character itself is read only.
    """
    __slots__ = ('_name', '_strength', '_dexterity', '_fortitude',
                 '_inventory')

    def __init__(
        self, name: str,
        strength: int = 0, dexterity: int = 0, fortitude: int = 0,
        inventory: Iterable[GameItem] = ()
    ) -> None:
        self._name = name
        self._strength = strength
        self._dexterity = dexterity
        self._fortitude = fortitude
        self._inventory = tuple(inventory)

    @property
    def name(self) -> str:
        return self._name

    @property
    def strength(self) -> int:
        return self._strength

    @property
    def dexterity(self) -> int:
        return self._dexterity

    @property
    def fortitude(self) -> int:
        return self._fortitude

    @property
    def inventory(self) -> list[GameItem]:
        """A fresh copy each time, duplicates kept."""
        return list(self._inventory)

    @property
    def total_strength(self) -> int:
        return self._strength + sum(i.attack_bonus for i in self._inventory)

    @property
    def total_dexterity(self) -> int:
        return self._dexterity + sum(i.agility_bonus for i in self._inventory)

    @property
    def total_fortitude(self) -> int:
        return self._fortitude + sum(i.defense_bonus for i in self._inventory)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .str = %d, .dex = %d, .fort = %d, .items = %d }' % (
            self._name, self._strength, self._dexterity, self._fortitude,
            len(self._inventory))
