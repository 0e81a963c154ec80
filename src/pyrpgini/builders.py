# -*- encoding: utf-8 -*-
# @File   : builders.py
# @Time   : 2024/10/12 22:15:47
# @Author : Kariko Lin

"""Section builders, one per kind of INI this package reads.

- `ItemBuilder`: every section is an item.
- `CharacterBuilder`: every section is a character, with items resolved.
- `PartyBuilder`: a whole file is ONE party, spread over
  `[Party]` and `[Members]` sections.

Missing or empty numbers fall back to 0, malformed ones raise `ValueError`
(which `IniParser.load()` turns into `IniReadError`).
"""

from collections.abc import Iterable, Mapping

from .abstract import SectionBuilder
from .consts import (
    PARTY_LEGACY_MEMBERS_KEY,
    PARTY_NAME_KEY,
    CharacterKey,
    ItemKey,
    PartySection
)
from .ini.model import IniSection
from .lookup import resolve_names
from .models import GameItem, Party, PlayerCharacter


class ItemBuilder(SectionBuilder[GameItem]):
    def build(self, section: IniSection) -> GameItem:
        return GameItem(
            name=section.name,
            value=section.getint(ItemKey.VALUE),
            weight=section.getint(ItemKey.WEIGHT),
            attack_bonus=section.getint(ItemKey.ATTACK_BONUS),
            agility_bonus=section.getint(ItemKey.AGILITY_BONUS),
            defense_bonus=section.getint(ItemKey.DEFENSE_BONUS))


class CharacterBuilder(SectionBuilder[PlayerCharacter]):
    def __init__(self, items: Mapping[str, GameItem]) -> None:
        self._items = items

    def build(self, section: IniSection) -> PlayerCharacter:
        # unknown item names are dropped rather than kept as `None`.
        return PlayerCharacter(
            section.name,
            strength=section.getint(CharacterKey.STRENGTH),
            dexterity=section.getint(CharacterKey.DEXTERITY),
            fortitude=section.getint(CharacterKey.FORTITUDE),
            inventory=resolve_names(
                section.getlist(CharacterKey.INVENTORY), self._items))


class PartyBuilder(SectionBuilder[Party]):
    def __init__(self, characters: Mapping[str, PlayerCharacter]) -> None:
        self._characters = characters

    def _apply(self, party: Party, section: IniSection) -> None:
        match section.name:
            case PartySection.PARTY:
                if PARTY_NAME_KEY in section:
                    party.name = section[PARTY_NAME_KEY]
                names = list(section.getlist(PARTY_LEGACY_MEMBERS_KEY))
            case PartySection.MEMBERS:
                names = [v for _, v in section.sorted_by_index()]
            case _:
                return
        for i in resolve_names(names, self._characters):
            party.add_member(i)

    def build(self, section: IniSection) -> Party:
        return self.build_all((section,))[0]

    def build_all(self, sections: Iterable[IniSection]) -> list[Party]:
        """Always exactly one party, even for an empty file
        (which makes a nameless party without members)."""
        party = Party()
        for i in sections:
            self._apply(party, i)
        return [party]
