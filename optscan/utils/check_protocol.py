#!/usr/bin/env python3
"""

"""

##-- builtin imports
from __future__ import annotations

import logging as logmod
from typing import TypeVar

##-- end builtin imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

T = TypeVar("T", bound=type)

def unimplemented(cls:type) -> list[str]:
    """ The names of any methods still marked abstract on a class """
    return sorted(x for x in dir(cls) if getattr(getattr(cls, x, None), "__isabstractmethod__", False))

def check_protocol(cls:T) -> T:
    """ Decorator. Check the class implements all its interface methods """
    match unimplemented(cls):
        case []:
            return cls
        case [*missing]:
            raise NotImplementedError(f"Class has Abstract Methods: {cls.__module__} : {cls.__name__} : {missing}")
