#!/usr/bin/env python3
"""
optscan : getopt_long style command line option scanning.

Short options (-a, clustered as -abc), long options (--name, --name=value),
with no, required, or optional arguments. Stops at the first non-option,
or after '--'. Arguments are not permuted.

"""
# Imports:
from __future__ import annotations

import logging as logmod
from importlib.metadata import version, PackageNotFoundError

from ._interface import OptionKind_e, ScanError_e, Scanner_p
from .structs import DONE, Option, OptionError, Result, Stop
from .table import OptionTable, find_long, find_short
from .scanner import Scanner
from .driver import iter_options, scan_all

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

try:
    __version__ = version("optscan")
except PackageNotFoundError:
    __version__ = "0.0.0"
