#!/usr/bin/env python3
"""
Whole argument list drivers around the Scanner.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from optscan._structs.outcome import OptionError, Result, Stop
from optscan.scanner import Scanner

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Generator, Sequence
    from optscan._interface import OptionSource

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def scan_all(table:OptionSource, args:Sequence[str], *, scanner:None|Scanner=None) -> tuple[list[Result], list[str], None|OptionError]:
    """
      Step a scanner until it stops or errors.
      returns (results, remaining args, the error or None)
    """
    scanner = scanner or Scanner()
    results = []
    while True:
        match scanner.next(table, args):
            case Result() as result:
                results.append(result)
            case Stop():
                return results, scanner.remaining(args), None
            case OptionError() as err:
                logging.debug("Scan stopped by: %s", err)
                return results, scanner.remaining(args), err

def iter_options(table:OptionSource, args:Sequence[str], *, scanner:None|Scanner=None) -> Generator[Result, None, None]:
    """
      Yield each Result in turn.
      Raises ScanFailure on the first error.
      Pass in a scanner to inspect `remaining` afterwards.
    """
    scanner = scanner or Scanner()
    while True:
        match scanner.next(table, args):
            case Result() as result:
                yield result
            case Stop():
                return
            case OptionError() as err:
                raise err.to_exception()
