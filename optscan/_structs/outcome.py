#!/usr/bin/env python3
"""
The three things a single scanning step can produce:
a Result, the Stop signal, or an OptionError.

OptionErrors are returned, not raised.
`OptionError.to_exception` bridges them to the exception hierarchy.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass, field
from typing import Final, final

# ##-- end stdlib imports

# ##-- 1st party imports
from optscan._errors.parse import ScanFailure
from optscan._interface import OptionKind_e, ScanError_e
from optscan._structs.option import Option

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True, slots=True)
class Result:
    """ A successfully matched option, with its argument.
      For OptionKind_e.OPTIONAL an empty optarg is either
      absent or explicitly empty, those can't be told apart.
    """
    option : Option
    optarg : str = ""

    @property
    def long(self) -> str:
        return self.option.long

    @property
    def short(self) -> str:
        return self.option.short

    @property
    def kind(self) -> OptionKind_e:
        return self.option.kind

@final
class Stop:
    """ No more options. Analogous to StopIteration, but returned """
    __slots__ = ()

    def __repr__(self):
        return "<Stop>"

    def __bool__(self):
        return False

DONE : Final[Stop] = Stop()

@dataclass(frozen=True, slots=True)
class OptionError:
    """ A failed step.
      `option` may be partial: just a short name, or just a long name,
      when the table had no match.
      `name` is the option as the user wrote it, without its prefix.
    """
    option : Option
    kind   : ScanError_e
    name   : str = field(default="")

    @classmethod
    def invalid_short(cls, char:str) -> OptionError:
        return cls(Option.model_construct(short=char), ScanError_e.INVALID, char)

    @classmethod
    def invalid_long(cls, name:str) -> OptionError:
        return cls(Option.model_construct(long=name), ScanError_e.INVALID, name)

    @property
    def message(self) -> str:
        return self.kind.value % (self.name,)

    def to_exception(self) -> ScanFailure:
        return ScanFailure(self)

    def __str__(self):
        return self.message
