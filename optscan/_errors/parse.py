#!/usr/bin/env python3
"""
Errors raised when the scanner is driven through a raising surface
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import UserError

if TYPE_CHECKING:
    from optscan._structs.outcome import OptionError

class ParseError(UserError):
    """ In the course of scanning CLI input, a failure occurred. """
    general_msg = "optscan CLI Parsing Failure:"
    pass

class ScanFailure(ParseError):
    """ A scanning step produced an OptionError.
      The error value is kept as `.error`
    """
    general_msg = "optscan Option Failure:"

    def __init__(self, error:OptionError):
        super().__init__(error.kind.value, error.name)
        self.error = error
