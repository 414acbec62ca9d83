#!/usr/bin/env python3
"""
These are the clab specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import ClabError
from .config import ConfigurationError
from .parse import (InvalidValue, MissingArgument, MissingValue, ParseError,
                    RedundantArgument, TokenMismatch, UnexpectedArgument)

# ##-- end 1st party imports
