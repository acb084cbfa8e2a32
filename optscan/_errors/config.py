#!/usr/bin/env python3
"""
Errors about option table declarations
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import UserError

class ConfigError(UserError):
    """ An option table was provided, but its format was incorrect """
    general_msg = "optscan Config Error:"
    pass

class TableError(ConfigError):
    """ An option table declares an entry that can't be built,
    or declares the same long or short name twice
    """
    general_msg = "Invalid Option Table:"
    pass
