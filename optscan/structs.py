#!/usr/bin/env python3
"""
Public Access point for optscan Structures
"""
from __future__ import annotations

from optscan._structs.option import Option
from optscan._structs.outcome import DONE, OptionError, Result, Stop
