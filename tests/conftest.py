from pathlib import Path

import pytest

from pyrpgini import GameItem, PlayerCharacter, load_characters, load_items

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def items() -> list[GameItem]:
    return load_items(str(DATA_DIR / "items.ini"))


@pytest.fixture
def characters(items) -> list[PlayerCharacter]:
    return load_characters(str(DATA_DIR / "characters.ini"), items)


@pytest.fixture
def by_name(characters) -> dict[str, PlayerCharacter]:
    return {c.name: c for c in characters}


def find(objects, name):
    for obj in objects:
        if obj.name == name:
            return obj
    return None
