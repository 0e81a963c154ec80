# -*- encoding: utf-8 -*-
# @File   : party.py
# @Time   : 2024/09/08 15:52:32
# @Author : Kariko Lin

from .character import PlayerCharacter


class Party:
    """A named roster of characters.

    Unlike items and characters, a party is mutable.
    Members are unique (by identity) and keep the order they joined.
    """

    def __init__(self, name: str | None = None) -> None:
        # `None` when the party file never declared a name.
        self.name = name
        self._members: list[PlayerCharacter] = []

    @property
    def members(self) -> list[PlayerCharacter]:
        return self._members.copy()

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, character: object) -> bool:
        return any(i is character for i in self._members)

    def add_member(self, character: PlayerCharacter | None) -> None:
        if character is None or character in self:
            return
        self._members.append(character)

    def remove_member(self, character: PlayerCharacter) -> None:
        for idx, i in enumerate(self._members):
            if i is character:
                del self._members[idx]
                return

    @property
    def combined_attack_rating(self) -> int:
        return sum(i.total_strength for i in self._members)

    def __str__(self) -> str:
        return f"[{self.name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self._members))
