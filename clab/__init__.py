#!/usr/bin/env python3
"""
clab : Command Line Arguments Builder.

Declare flags, tagged options and positionals as data, register them,
then evaluate an argument list against them:

    registry = FlagRegistry()
    registry.flag("help", tags={"h": "-"}, abort=True)
    registry.flag("out",  tags={"o": "-"}, consume=1, over=True)
    result   = evaluate(registry, sys.argv[1:])
"""
# Imports:
from __future__ import annotations

import logging as logmod
from typing import Sequence

from ._interface import __version__
from .errors import ClabError, ConfigurationError, ParseError
from .structs import Evaluation, FlagRecord, FlagSpec, TagSpec
from .registry import FlagRegistry
from .parsers.engine import ClabParser

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def evaluate(registry:FlagRegistry, args:Sequence[str]) -> Evaluation:
    """ Evaluate args, excluding the program name, against the registry """
    return ClabParser(registry).parse(args)
