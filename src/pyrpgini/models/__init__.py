# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/09/08 15:52:25
# @Author : Kariko Lin

from .item import GameItem
from .character import PlayerCharacter
from .party import Party
