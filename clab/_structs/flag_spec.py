#!/usr/bin/env python3
"""
Declarations of the flags and positionals a program accepts.

A FlagSpec is built once, registered into a FlagRegistry, and never
mutated afterwards. Evaluation only ever reads them.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
from collections.abc import Mapping
from typing import Any, Callable, TypeAlias

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, Field, field_validator, model_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from clab._interface import DEFAULT_PREFIX, LONG_PREFIX
from clab.errors import ConfigurationError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

Action : TypeAlias = Callable[[None|str], Any]

def to_plain(data:Any) -> Any:
    """ Unwrap TomlGuards and other mappings into plain dicts and lists,
    so pydantic sees the types it expects
    """
    match data:
        case str():
            return data
        case Mapping():
            return {k : to_plain(v) for k,v in data.items()}
        case list() | tuple():
            return [to_plain(x) for x in data]
        case _:
            return data

def _bare_tag(tag:str) -> TagSpec:
    """ single character tags get the short prefix, longer ones the long prefix """
    if len(tag) == 1:
        return TagSpec(prefix=DEFAULT_PREFIX)
    return TagSpec(prefix=LONG_PREFIX)

def _coerce_tag(val:Any) -> Any:
    match val:
        case TagSpec():
            return val
        case str():
            return TagSpec(prefix=val)
        case bool():
            return TagSpec(toggle=val)
        case [str() as prefix, bool() as toggle]:
            return TagSpec(prefix=prefix, toggle=toggle)
        case Mapping():
            return dict(val)
        case _:
            return val

class TagSpec(BaseModel, frozen=True):
    """ How a single tag is written, and the toggle recorded when it matches """

    prefix : str  = DEFAULT_PREFIX
    toggle : bool = True

class FlagSpec(BaseModel, frozen=True, populate_by_name=True, arbitrary_types_allowed=True):
    """ Describes a command line flag or positional to use in the parser.

      `tags`    : tag -> TagSpec. No tags makes this a positional,
                  filled by elimination when no tag matches a token.
      `consume` : how many following tokens a match pulls as values.
      `allowed` : if non-empty, every captured value must be in it.
      `over`    : re-matching replaces captured values instead of appending.
      `abort`   : its presence anywhere in the input ends evaluation.

    The long forms `consumed_args`, `allowed_values` and `overwritable` are accepted as aliases.
    """

    id             : str                  = Field(min_length=1)
    tags           : dict[str, TagSpec]   = {}
    consume        : int                  = Field(default=0, alias="consumed_args")
    allowed        : frozenset[str]       = Field(default=frozenset(), alias="allowed_values")
    default_toggle : bool                 = False
    default_values : tuple[str, ...]      = ()
    action         : None|Action          = None
    required       : bool                 = False
    multiple       : bool                 = False
    abort          : bool                 = False
    over           : bool                 = Field(default=False, alias="overwritable")

    @classmethod
    def build(cls, data:TomlGuard|dict) -> FlagSpec:
        return cls.model_validate(to_plain(data))

    @field_validator("tags", mode="before")
    def validate_tags(cls, val):
        match val:
            case None:
                return {}
            case str():
                return {val : _bare_tag(val)}
            case Mapping():
                return {k : _coerce_tag(v) for k,v in val.items()}
            case [*xs]:
                return {x : _bare_tag(x) for x in xs}
            case _:
                return val

    @field_validator("consume")
    def validate_consume(cls, val):
        if val < 0:
            raise ConfigurationError("A flag can't consume a negative number of args: %s", val)
        return val

    @field_validator("default_values", mode="before")
    def validate_default_values(cls, val):
        match val:
            case None:
                return ()
            case str():
                return (val,)
            case _:
                return val

    @model_validator(mode="after")
    def check_consistency(self) -> FlagSpec:
        if self.multiple and self.over:
            raise ConfigurationError("Flag '%s' cannot be 'multiple' and 'over' at the same time", self.id)
        if self.positional and self.multiple and 0 < self.consume:
            raise ConfigurationError("Positional '%s' cannot be 'multiple' and consume a fixed number of args", self.id)
        return self

    @property
    def positional(self) -> bool:
        return not bool(self.tags)

    @property
    def repeatable(self) -> bool:
        """ whether a tagged flag may be matched more than once """
        return self.multiple or self.over

    @property
    def greedy(self) -> bool:
        """ a multiple positional absorbs values until the next tag """
        return self.positional and self.multiple

    @property
    def arity(self) -> int:
        """ How many tokens a single match takes as values.
        A plain positional always takes the token it was matched on.
        """
        if self.positional:
            return max(self.consume, 1)
        return self.consume

    @ftz.cached_property
    def candidates(self) -> list[tuple[str, str, bool]]:
        """ (composed tag, tag, toggle) for every tag """
        return [(f"{info.prefix}{tag}", tag, info.toggle) for tag, info in self.tags.items()]

    def allows(self, val:str) -> bool:
        return not bool(self.allowed) or val in self.allowed

    def __repr__(self):
        if self.positional:
            return f"<FlagSpec: {self.id}>"

        composed = "|".join(x[0] for x in self.candidates)
        return f"<FlagSpec: {self.id} ({composed})>"
