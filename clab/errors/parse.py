#!/usr/bin/env python3
"""
Errors raised while evaluating a token sequence against a registry.
None of them are recovered from internally, and no partial result
is returned alongside them.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ParseError",
"MissingArgument",
"MissingValue",
"InvalidValue",
"UnexpectedArgument",
"RedundantArgument",
"TokenMismatch",

)
# ##-- end Generated Exports

from ._base import ClabError

class ParseError(ClabError):
    """ In the course of evaluating CLI input, a failure occurred. """
    general_msg = "clab CLI Parsing Failure:"
    pass

class MissingArgument(ParseError):
    """ A required flag or positional never appeared """
    pass

class MissingValue(ParseError):
    """ A flag or positional needed more values than remained in the input """
    pass

class InvalidValue(ParseError):
    """ A captured value is not in the flag's allowed set """
    pass

class UnexpectedArgument(ParseError):
    """ A token matched no tag, and no positional could accept it """
    pass

class RedundantArgument(ParseError):
    """ A non-multiple flag was provided more than once """
    pass

class TokenMismatch(ParseError):
    """ A value slot was filled by a token that is itself a declared tag """
    pass
