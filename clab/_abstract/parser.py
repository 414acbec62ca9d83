#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import abc
import logging as logmod
from abc import abstractmethod
from typing import TYPE_CHECKING, Sequence

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from clab._structs.evaluation import Evaluation

class ArgParser_i(abc.ABC):
    """
    A Single standard process point for turning the list of passed in args
    into an Evaluation of the declared flags.
    """

    @abstractmethod
    def parse(self, args:Sequence[str]) -> Evaluation:
        pass

    @abstractmethod
    def parse_argv(self, argv:Sequence[str]) -> Evaluation:
        pass
