#!/usr/bin/env python3
"""
The result of evaluating a token sequence against a FlagRegistry
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import NamedTuple

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class FlagRecord(NamedTuple):
    """ A snapshot of what was captured for one flag """
    values : tuple[str, ...]
    state  : bool

class Evaluation:
    """ States and captured values for each flag id.

    Built up by the parser during a single evaluation.
    Query with state, values, last_value, captured, aborted and aborted_by.
    Unknown ids read as false / empty / None.
    """

    def __init__(self):
        self._states     : dict[str, bool]      = {}
        self._params     : dict[str, list[str]] = {}
        self._aborted_by : None|str             = None

    ##-- building

    def set_state(self, flag:str, val:bool) -> None:
        self._states[flag] = val

    def add_value(self, flag:str, val:str) -> None:
        self._params.setdefault(flag, []).append(val)

    def clear_values(self, flag:str) -> None:
        self._params[flag] = []

    def set_aborted_by(self, flag:str) -> None:
        self._aborted_by = flag

    ##-- end building

    ##-- querying

    def state(self, flag:str) -> bool:
        return self._states.get(flag, False)

    def values(self, flag:str) -> list[str]:
        return list(self._params.get(flag, []))

    def last_value(self, flag:str) -> None|str:
        match self._params.get(flag, None):
            case [*_, last]:
                return last
            case _:
                return None

    def captured(self, flag:str) -> bool:
        """ whether any value is held for the flag """
        return bool(self._params.get(flag, None))

    def aborted(self) -> bool:
        return self._aborted_by is not None

    def aborted_by(self) -> None|str:
        return self._aborted_by

    def record(self, flag:str) -> None|FlagRecord:
        if flag not in self:
            return None

        return FlagRecord(tuple(self._params.get(flag, [])), self.state(flag))

    ##-- end querying

    def to_guard(self) -> TomlGuard:
        data = {
            "states" : dict(self._states),
            "params" : {x : list(y) for x,y in self._params.items()},
            }
        if self.aborted():
            data['aborted_by'] = self._aborted_by

        return TomlGuard(data)

    def __contains__(self, flag:str) -> bool:
        return flag in self._states or flag in self._params

    def __repr__(self):
        if self.aborted():
            return f"<Evaluation: aborted by {self._aborted_by}>"
        return f"<Evaluation: {len(self._states)} flags>"
