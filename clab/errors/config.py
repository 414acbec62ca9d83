#!/usr/bin/env python3
"""
Errors raised while declaring flags, before any input is seen
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import ClabError

class ConfigurationError(ClabError):
    """ A flag declaration, or the registry holding it, is logically inconsistent.
    This is a caller bug, not bad input.
    """
    general_msg = "clab Configuration Failure:"
    pass
