#!/usr/bin/env python3
"""
These are the optscan specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from optscan._errors.base import OptScanError, BackendError, UserError
from optscan._errors.config import ConfigError, TableError
from optscan._errors.parse import ParseError, ScanFailure

# ##-- end 1st party imports
