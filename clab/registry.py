#!/usr/bin/env python3
"""
The ordered collection of flag declarations a program accepts.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import tomllib
from collections.abc import Mapping
from typing import Any, Iterator

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from clab._interface import FLAGS_KEY, TOOL_PREFIX
from clab._structs.flag_spec import FlagSpec, to_plain
from clab.errors import ConfigurationError
from clab.parsers.matcher import TagMatcher

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class FlagRegistry:
    """ Declarations in registration order.
    Order only matters for assigning positionals: first declared, first eligible.

    Register everything, then finalize. Once finalized the registry is read only,
    and can be shared between evaluations.
    Ids are not checked for uniqueness. If they collide, results collapse to one entry.
    """

    def __init__(self, specs:None|list[FlagSpec|dict]=None):
        self._specs   : list[FlagSpec]  = []
        self._matcher : None|TagMatcher = None
        for spec in specs or []:
            self.register(spec)

    @classmethod
    def build(cls, data:TomlGuard|dict) -> FlagRegistry:
        """ Build from a table holding a `flags` array of tables """
        match data:
            case TomlGuard():
                flags = data.on_fail([], list).flags()
            case Mapping():
                flags = data.get(FLAGS_KEY, [])
            case x:
                raise TypeError("Can't build a registry from", type(x))

        registry = cls()
        for flag in flags:
            registry.register(FlagSpec.build(flag))

        return registry.finalize()

    @classmethod
    def load(cls, path:pl.Path|str) -> FlagRegistry:
        """ Load a registry from a toml file.
        Reads the TOOL_PREFIX table if present, so pyproject.toml can hold the declarations
        """
        path = pl.Path(path)
        logging.debug("Loading flags from: %s", path)
        data = TomlGuard(tomllib.loads(path.read_text()))
        match cls._tool_table(data):
            case None:
                return cls.build(data)
            case table:
                logging.debug("Using the %s table", TOOL_PREFIX)
                return cls.build(to_plain(table))

    @staticmethod
    def _tool_table(data:Mapping) -> None|Mapping:
        table = data
        for key in TOOL_PREFIX.split("."):
            match table:
                case Mapping() if key in table:
                    table = table[key]
                case _:
                    return None

        return table

    @property
    def finalized(self) -> bool:
        return self._matcher is not None

    @property
    def matcher(self) -> TagMatcher:
        if self._matcher is None:
            raise ConfigurationError("The registry has not been finalized")
        return self._matcher

    def register(self, spec:FlagSpec|dict) -> None:
        if self.finalized:
            raise ConfigurationError("Can't register a flag into a finalized registry: %s", spec)

        match spec:
            case FlagSpec():
                pass
            case Mapping():
                spec = FlagSpec.build(spec)
            case x:
                raise TypeError("Unrecognized flag declaration", x)

        logging.debug("Registering: %r", spec)
        self._specs.append(spec)

    def flag(self, id:str, **kwargs:Any) -> FlagSpec:
        """ Build and register a declaration from keywords """
        spec = FlagSpec(id=id, **kwargs)
        self.register(spec)
        return spec

    def finalize(self) -> FlagRegistry:
        """ Verify the declarations and build the matcher. Safe to call repeatedly """
        if self.finalized:
            return self

        for spec in self._specs:
            self._verify(spec)

        for dup in mitz.duplicates_everseen(x.id for x in self._specs):
            logging.warning("Flag id registered more than once, results will collapse: %s", dup)

        matcher = TagMatcher(self._specs)
        for composed, ids in matcher.collisions().items():
            logging.warning("Tag %s is claimed by multiple flags, %s will win: %s", composed, ids[0], ids)

        self._matcher = matcher
        return self

    def _verify(self, spec:FlagSpec) -> None:
        """ Re-check the cross field rules, which model_construct skips """
        if spec.positional and spec.multiple and 0 < spec.consume:
            raise ConfigurationError("Positional '%s' cannot be 'multiple' and consume a fixed number of args", spec.id)
        if spec.multiple and spec.over:
            raise ConfigurationError("Flag '%s' cannot be 'multiple' and 'over' at the same time", spec.id)
        if spec.abort and spec.positional:
            logging.warning("Abort flag has no tags, and can never trigger: %s", spec.id)

    def get(self, id:str) -> None|FlagSpec:
        """ The first declaration registered with the id """
        return mitz.first_true(self._specs, default=None, pred=lambda x: x.id == id)

    def index_of(self, id:str) -> int:
        for i, spec in enumerate(self._specs):
            if spec.id == id:
                return i

        raise KeyError(id)

    def __getitem__(self, index:int) -> FlagSpec:
        return self._specs[index]

    def __iter__(self) -> Iterator[FlagSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, id:str) -> bool:
        return any(x.id == id for x in self._specs)

    def __repr__(self):
        return f"<FlagRegistry: {len(self._specs)} flags, finalized={self.finalized}>"
