#!/usr/bin/env python3
"""
Option tables, and the lookups the scanner does against them.

A table is any ordered sequence of Options. Lookups are linear and the
first match by table order wins, so a table with duplicate names is still
usable. `OptionTable.validate` rejects duplicates when that matters.

Tables can be declared in toml:

[[options]]
long  = "delay"
short = "d"
kind  = "required"

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, overload

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
import tomlguard
from pydantic import ValidationError

# ##-- end 3rd party imports

# ##-- 1st party imports
from optscan._errors.config import TableError
from optscan._interface import TABLE_KEY
from optscan._structs.option import Option

# ##-- end 1st party imports

if TYPE_CHECKING:
    from tomlguard import TomlGuard

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def find_long(table:Iterable[Option], name:str) -> None|Option:
    """ The first option with this long name. Short only options never match """
    for option in table:
        if option.long and option.long == name:
            return option

    return None

def find_short(table:Iterable[Option], char:str) -> None|Option:
    """ The first option with this short name. Long only options never match """
    for option in table:
        if option.short and option.short == char:
            return option

    return None

class OptionTable(Sequence[Option]):
    """ An immutable, ordered, option table """

    def __init__(self, options:Iterable[Option]=()):
        self._options : tuple[Option, ...] = tuple(options)

    @classmethod
    def build(cls, data:OptionTable|TomlGuard|Mapping|Iterable[Option|Mapping]) -> OptionTable:
        """ Build from options, or from dicts of option fields,
          or from a mapping holding them under 'options'
        """
        match data:
            case OptionTable():
                return data
            case tomlguard.TomlGuard():
                entries = data.on_fail([]).options()
            case Mapping() if TABLE_KEY in data:
                entries = data[TABLE_KEY]
            case Mapping():
                entries = []
            case str():
                raise TableError("An option table can't be built from a bare string: %s", data)
            case _:
                entries = data

        try:
            options = [Option.build(x) for x in entries]
        except (ValidationError, TypeError) as err:
            raise TableError("Failed to build an option table entry: %s", err) from err

        logging.debug("Built option table of %s entries", len(options))
        return cls(options)

    @classmethod
    def read(cls, text:str) -> OptionTable:
        """ Build a table from toml text """
        return cls.build(tomlguard.read(text))

    @classmethod
    def load(cls, path:str|pl.Path) -> OptionTable:
        """ Build a table from a toml file """
        path = pl.Path(path)
        logging.info("Loading option table: %s", path)
        if not path.exists():
            raise TableError("Option table file does not exist: %s", path)

        return cls.build(tomlguard.load(path))

    @overload
    def __getitem__(self, i:int) -> Option: ...

    @overload
    def __getitem__(self, i:slice) -> OptionTable: ...

    def __getitem__(self, i):
        match i:
            case slice():
                return OptionTable(self._options[i])
            case _:
                return self._options[i]

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __repr__(self):
        return f"<OptionTable: {[str(x) for x in self._options]}>"

    def __eq__(self, other) -> bool:
        match other:
            case OptionTable():
                return self._options == other._options
            case _:
                return NotImplemented

    def __hash__(self):
        return hash(self._options)

    def find_long(self, name:str) -> None|Option:
        return find_long(self._options, name)

    def find_short(self, char:str) -> None|Option:
        return find_short(self._options, char)

    def longs(self) -> list[str]:
        return [x.long for x in self._options if x.long]

    def shorts(self) -> list[str]:
        return [x.short for x in self._options if x.short]

    def validate(self) -> OptionTable:
        """ Check no long or short name is declared twice.
          returns self, for chaining.
        """
        dup_longs  = list(mitz.unique_everseen(mitz.duplicates_everseen(self.longs())))
        dup_shorts = list(mitz.unique_everseen(mitz.duplicates_everseen(self.shorts())))
        if bool(dup_longs) or bool(dup_shorts):
            raise TableError("Option table has duplicate names. Long: %s, Short: %s", dup_longs, dup_shorts)

        return self
