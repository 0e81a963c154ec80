# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from .ini.model import IniSection

T = TypeVar('T')


class SectionBuilder(Generic[T], metaclass=ABCMeta):
    """Turns scanned INI sections into typed elements."""

    @abstractmethod
    def build(self, section: IniSection) -> T:
        raise NotImplementedError

    def build_all(self, sections: Iterable[IniSection]) -> list[T]:
        """One element per section, in the order they were encountered."""
        return [self.build(i) for i in sections]


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
