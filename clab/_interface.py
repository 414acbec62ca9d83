#!/usr/bin/env python3
"""
Constants shared across clab, loaded from clab/__data/constants.toml
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import tomllib
from importlib.metadata import PackageNotFoundError, version
from importlib.resources import files
from typing import Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

try:
    __version__ = version("clab")
except PackageNotFoundError:
    __version__ = "0.0.0"

data_path      = files("clab.__data")
constants_file = data_path.joinpath("constants.toml")

constants      : Final[TomlGuard] = TomlGuard(tomllib.loads(constants_file.read_text()))

DEFAULT_PREFIX    : Final[str]  = constants.on_fail("-", str).prefixes.default()
LONG_PREFIX       : Final[str]  = constants.on_fail("--", str).prefixes.long()
SKIP_PROGRAM_NAME : Final[bool] = constants.on_fail(True, bool).parsing.skip_program_name()

TOOL_PREFIX       : Final[str]  = "tool.clab"
FLAGS_KEY         : Final[str]  = "flags"
