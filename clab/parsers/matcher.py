#!/usr/bin/env python3
"""
Resolves a raw token to the flag declaration it names.

Matching is by exact equality of the token with a composed `prefix+tag`,
so at most one composed tag can truly equal a token. Candidates are still
scanned longest-first, ties in registration order, so that the winner is
deterministic when two declarations share a composed tag.
"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import TYPE_CHECKING, NamedTuple, Sequence

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from clab._structs.flag_spec import FlagSpec

class TagMatch(NamedTuple):
    """ A resolved token. `index` refers into the registry's declarations """
    index  : int
    spec   : FlagSpec
    tag    : str
    toggle : bool

class _Candidate(NamedTuple):
    composed : str
    index    : int
    tag      : str
    toggle   : bool

class TagMatcher:
    """ Built once from the ordered declarations of a finalized registry """

    def __init__(self, specs:Sequence[FlagSpec]):
        self._specs      = tuple(specs)
        candidates       = [_Candidate(composed, i, tag, toggle)
                            for i, spec in enumerate(self._specs)
                            for composed, tag, toggle in spec.candidates]
        # stable, so equal lengths stay in registration order
        self._candidates = sorted(candidates, key=lambda x: len(x.composed), reverse=True)

    def match(self, token:str) -> None|TagMatch:
        for cand in self._candidates:
            if token == cand.composed:
                return TagMatch(cand.index, self._specs[cand.index], cand.tag, cand.toggle)

        return None

    def is_tag(self, token:str) -> bool:
        return self.match(token) is not None

    def collisions(self) -> dict[str, list[str]]:
        """ composed tags that more than one declaration responds to, mapped to their ids """
        owners : dict[str, list[str]] = {}
        for cand in self._candidates:
            owners.setdefault(cand.composed, []).append(self._specs[cand.index].id)

        return {x : ids for x, ids in owners.items() if 1 < len(ids)}

    def __len__(self):
        return len(self._candidates)
