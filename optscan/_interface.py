#!/usr/bin/env python3
"""
Enums, constants and the scanner interface shared across optscan.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
# ##-- end stdlib imports

# ##-- types
# isort: off
import abc
import collections.abc
from typing import TYPE_CHECKING, cast, assert_type, assert_never
from typing import Generic, NewType
# Protocols:
from typing import Protocol, runtime_checkable
# Typing Decorators:
from typing import no_type_check, final

if TYPE_CHECKING:
    from typing import Final
    from typing import ClassVar, Any, LiteralString
    from typing import Never, Self, Literal
    from collections.abc import Iterable, Iterator, Callable, Generator
    from collections.abc import Sequence, Mapping, MutableMapping, Hashable

    from optscan._structs.option import Option
    from optscan._structs.outcome import Result, Stop, OptionError

    from typing import TypeAlias
    OptionSource: TypeAlias = Sequence[Option]
    Outcome: TypeAlias      = Result | Stop | OptionError

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
PREFIX         : Final[str] = "-"
LONG_PREFIX    : Final[str] = "--"
SEPARATOR      : Final[str] = "--"
ASSIGN         : Final[str] = "="
FIRST_INDEX    : Final[int] = 1
TABLE_KEY      : Final[str] = "options"

# Body:

class OptionKind_e(enum.Enum):
    """
      Whether an option takes an argument.
    """
    NONE      = enum.auto() # a flag, no argument permitted
    REQUIRED  = enum.auto() # attached, or the following token
    OPTIONAL  = enum.auto() # attached only, otherwise empty

    @classmethod
    def lookup(cls, val:str) -> OptionKind_e:
        return cls[val.strip().upper()]

class ScanError_e(enum.Enum):
    """
      The ways a single scanning step can fail.
      Values are getopt style message templates.
    """
    INVALID   = "invalid option, %r"
    MISSING   = "option requires an argument, %r"
    TOO_MANY  = "option takes no arguments, %r"

##--|

class Scanner_i:
    """
      The stepping interface of an option scanner.
      Each call to `next` produces one Result, the Stop signal, or an OptionError.
    """

    @abc.abstractmethod
    def next(self, table:OptionSource, args:Sequence[str]) -> Outcome:
        pass

    @abc.abstractmethod
    def remaining(self, args:Sequence[str]) -> list[str]:
        pass

@runtime_checkable
class Scanner_p(Protocol):

    @property
    def index(self) -> int: ...

    @property
    def subindex(self) -> int: ...

    def next(self, table:OptionSource, args:Sequence[str]) -> Outcome: ...

    def remaining(self, args:Sequence[str]) -> list[str]: ...
