#!/usr/bin/env python3
"""
A getopt_long style option scanner.

Given an option table and the full argv (argv[0] is skipped),
each call to Scanner.next produces the next option, the Stop signal,
or an OptionError. Arguments are never permuted: scanning stops at the
first non-option argument, or after consuming "--".

# prog -ab --color=red -d 10 -- rest
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, assert_never

if TYPE_CHECKING:
    from collections.abc import Sequence
    from optscan._interface import OptionSource, Outcome

##--|

# isort: on
# ##-- end types

# ##-- 1st party imports
from optscan._interface import (ASSIGN, FIRST_INDEX, LONG_PREFIX, PREFIX,
                                SEPARATOR, OptionKind_e, ScanError_e,
                                Scanner_i)
from optscan._structs.outcome import DONE, OptionError, Result
from optscan.table import find_long, find_short
from optscan.utils.check_protocol import check_protocol

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@check_protocol
class Scanner(Scanner_i):
    """
    The option parsing cursor.

    `index`    : the position in args. 0 until the first step.
    `subindex` : the character position inside a short option cluster,
                 0 when not inside one.

    The table and args must not change between steps.
    After an OptionError the scan is over, only `remaining` is meaningful.
    """

    def __init__(self):
        self._index    : int = 0
        self._subindex : int = 0

    def __repr__(self):
        return f"<Scanner: {self._index}:{self._subindex}>"

    @property
    def index(self) -> int:
        return self._index

    @property
    def subindex(self) -> int:
        return self._subindex

    def next(self, table:OptionSource, args:Sequence[str]) -> Outcome:
        """ Produce the next option in args.
          returns DONE when no options are left.
          On an OptionError the token at fault is not consumed,
          so it is still in `remaining`.
        """
        if self._index == 0:
            self._index = FIRST_INDEX

        if self._index >= len(args):
            return DONE

        if self._subindex > 0:
            return self._short(table, args)

        arg = args[self._index]
        logging.debug("Scanning: [%s] %r", self._index, arg)
        if len(arg) < 2 or not arg.startswith(PREFIX):
            return DONE

        if arg == SEPARATOR:
            self._index += 1
            return DONE

        if arg.startswith(LONG_PREFIX):
            return self._long(table, args)

        self._subindex = 1
        match self._short(table, args):
            case OptionError() as err:
                # leave the cursor as it was before entering the cluster
                self._subindex = 0
                return err
            case result:
                return result

    def remaining(self, args:Sequence[str]) -> list[str]:
        """ The arguments not yet consumed, excluding a consumed '--' """
        return list(args[max(self._index, FIRST_INDEX):])

    def _next_cluster_token(self) -> None:
        self._subindex  = 0
        self._index    += 1

    def _short(self, table:OptionSource, args:Sequence[str]) -> Outcome:
        """ Decode the character at subindex of the current token """
        token  = args[self._index]
        char   = token[self._subindex]
        option = find_short(table, char)
        if option is None:
            logging.debug("Unknown short option: %r", char)
            return OptionError.invalid_short(char)

        match option.kind:
            case OptionKind_e.NONE:
                self._subindex += 1
                if self._subindex == len(token):
                    self._next_cluster_token()
                return Result(option)
            case OptionKind_e.REQUIRED:
                optarg = token[self._subindex+1:]
                if bool(optarg):
                    self._next_cluster_token()
                    return Result(option, optarg)
                if self._index + 1 == len(args):
                    logging.debug("Short option missing its argument: %r", char)
                    return OptionError(option, ScanError_e.MISSING, char)

                optarg = args[self._index + 1]
                self._next_cluster_token()
                self._index += 1
                return Result(option, optarg)
            case OptionKind_e.OPTIONAL:
                optarg = token[self._subindex+1:]
                self._next_cluster_token()
                return Result(option, optarg)
            case x:
                assert_never(x)

    def _long(self, table:OptionSource, args:Sequence[str]) -> Outcome:
        """ Decode a --name or --name=value token """
        name, assign, optarg = args[self._index][len(LONG_PREFIX):].partition(ASSIGN)
        attached             = bool(assign)
        option               = find_long(table, name)
        if option is None:
            logging.debug("Unknown long option: %r", name)
            return OptionError.invalid_long(name)

        self._index += 1
        match option.kind:
            case OptionKind_e.NONE if attached:
                logging.debug("Long option given an argument: %r", name)
                return OptionError(option, ScanError_e.TOO_MANY, name)
            case OptionKind_e.NONE:
                return Result(option)
            case OptionKind_e.REQUIRED if attached:
                return Result(option, optarg)
            case OptionKind_e.REQUIRED if self._index == len(args):
                logging.debug("Long option missing its argument: %r", name)
                return OptionError(option, ScanError_e.MISSING, name)
            case OptionKind_e.REQUIRED:
                optarg = args[self._index]
                self._index += 1
                return Result(option, optarg)
            case OptionKind_e.OPTIONAL:
                return Result(option, optarg)
            case x:
                assert_never(x)
