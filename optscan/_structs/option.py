#!/usr/bin/env python3
"""

See EOF for license/metadata/notes as applicable
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections.abc import Mapping
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, field_validator, model_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from optscan._interface import ASSIGN, LONG_PREFIX, PREFIX, OptionKind_e

# ##-- end 1st party imports

if TYPE_CHECKING:
    from tomlguard import TomlGuard

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Option(BaseModel, frozen=True):
    """ A declared command line option.
      `long`  : the name used as --long, "" for a short only option.
      `short` : a single character used as -s, "" for a long only option.
      `kind`  : whether it takes an argument.

      Any unicode character can be a short name.
      Identities carried by error values are built with `Option.model_construct`,
      so they may hold only one of the names.
    """

    long    : str          = ""
    short   : str          = ""
    kind    : OptionKind_e = OptionKind_e.NONE

    @classmethod
    def build(cls, data:TomlGuard|dict|Option) -> Option:
        match data:
            case Option():
                return data
            case Mapping():
                return cls.model_validate(dict(data))
            case _ if hasattr(data, "items"):
                return cls.model_validate(dict(data.items()))
            case _:
                raise TypeError("Can't build an Option from", data)

    @field_validator("short", mode="before")
    def validate_short(cls, val):
        match val:
            case None | 0:
                return ""
            case int():
                return chr(val)
            case str() if len(val) <= 1:
                return val
            case str():
                raise ValueError("A short option must be a single character", val)
            case _:
                return val

    @field_validator("long")
    def validate_long(cls, val):
        if ASSIGN in val:
            raise ValueError("A long option can't contain the assignment character", val)
        return val

    @field_validator("kind", mode="before")
    def validate_kind(cls, val):
        match val:
            case OptionKind_e():
                return val
            case str():
                try:
                    return OptionKind_e.lookup(val)
                except KeyError as err:
                    raise ValueError("Unknown option kind", val) from err
            case _:
                return val

    @model_validator(mode="after")
    def validate_names(self):
        if not (bool(self.long) or bool(self.short)):
            raise ValueError("An Option needs a long name, a short name, or both")
        return self

    @property
    def takes_arg(self) -> bool:
        return self.kind is not OptionKind_e.NONE

    @property
    def short_str(self) -> str:
        if not self.short:
            return ""
        return f"{PREFIX}{self.short}"

    @property
    def long_str(self) -> str:
        if not self.long:
            return ""
        return f"{LONG_PREFIX}{self.long}"

    def __str__(self):
        return "/".join(x for x in [self.short_str, self.long_str] if bool(x))

"""
Options are compared by value, so two separately declared options
with the same names and kind are equal.
"""
