# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Note: the standard lib `configparser` is NOT used here,
since it trims keys and values, folds key casing,
and refuses duplicated sections.

The format this module reads is much simpler:

    ```ini
    [Heavy Sword]
    Value=250
    Weight=15

    [Elven Cloak]
    AgilityBonus=3
    ```

1. A header is a line starting with `[` and ending with `]`, exactly.
2. A pair is a line with at least one `=`, split at the first one.
3. Anything else (blank lines, comments) is just skipped.
"""

import logging
from collections.abc import Iterable, Iterator
from io import StringIO, TextIOBase
from os import makedirs
from os.path import dirname

import chardet

from ..abstract import FileHandler, SectionBuilder, T
from .model import IniSection


class IniReadError(Exception):
    """To record errors when reading or building from .INI files."""
    pass


class IniParser(FileHandler[list[IniSection]]):
    def __init__(self, filename: str, encoding: str | None = None):
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(buf: TextIOBase) -> Iterator[IniSection]:
        """读取解码好的字符串流。

        Yields one `IniSection` per header, in the order of the stream.
        The last section gets committed at EOF even if it has no pairs.

        如没有特殊需求，直接调用`self.read()`便是。
        """
        this_sect: IniSection | None = None
        while i := buf.readline():
            line = i.removesuffix('\n').removesuffix('\r')
            if line.startswith('[') and line.endswith(']'):
                if this_sect is not None:
                    yield this_sect
                this_sect = IniSection(line[1:-1])
            elif '=' in line and this_sect is not None:
                key, val = line.split('=', 1)
                this_sect[key] = val
        if this_sect is not None:
            yield this_sect

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read(self) -> list[IniSection]:
        """读取`IniParser`实例指定的文件。

        Raises `IniReadError` if the file is missing, unreadable
        or undecodable. No partial result would be returned.
        """
        try:
            try:
                # when encoding is None, `open()` would fallback to
                # system default. and when encoding got wrong,
                # just `UnicodeDecodeError` and fallback to `chardet`.
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return list(self.readstream(fp))
            except UnicodeDecodeError:
                logging.debug(
                    f'{self._fn} is not {self._codec or "default"} encoded,'
                    ' guessing with chardet.')
                return list(self.readstream(self._decode_file(self._fn)))
        except (OSError, ValueError) as e:
            raise IniReadError(f'Failed to read {self._fn}: {e}') from e

    def load(self, builder: SectionBuilder[T]) -> list[T]:
        """Read the file, then let `builder` make elements out of sections.

        Malformed values (e.g. `Weight=heavy`) are not defaulted,
        they end up as `IniReadError` as well.
        """
        sections = self.read()
        try:
            return builder.build_all(sections)
        except ValueError as e:
            raise IniReadError(f'Malformed value in {self._fn}: {e}') from e

    @staticmethod
    def _output_section(section: IniSection, delimiter: str = '=') -> str:
        ret = str(section)
        for k, v in section.items():
            ret += f'\n{k}{delimiter}{v}'
        return ret

    def write(
        self, instance: Iterable[IniSection], *,
        blank_lines: int = 1,
        delimiter: str = '='
    ) -> None:
        """保存到*一个* INI 文件。Parent folders are created if absent."""
        if folder := dirname(self._fn):
            makedirs(folder, exist_ok=True)
        with open(self._fn, 'w', encoding=self._codec) as fp:
            for i in instance:
                fp.write(self._output_section(i, delimiter))
                fp.write('\n' * (blank_lines + 1))

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
