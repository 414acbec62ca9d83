#!/usr/bin/env python3
"""
The evaluation engine: walks a token sequence against a FlagRegistry.

    SCANNING_ABORT -> WALKING -> VALIDATING -> DONE
    SCANNING_ABORT -> ABORTED -> DONE

Only per-call state is held while parsing, so one parser, and its registry,
can be used for many evaluations.
"""
##-- imports
from __future__ import annotations

import enum
import logging as logmod
from typing import TYPE_CHECKING, Sequence

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import more_itertools as mitz

import clab.errors
from clab._abstract import ArgParser_i
from clab._interface import SKIP_PROGRAM_NAME
from clab._structs.evaluation import Evaluation
from clab.parsers.matcher import TagMatch

if TYPE_CHECKING:
    from clab._structs.flag_spec import FlagSpec
    from clab.registry import FlagRegistry

class ClabParser(ArgParser_i):
    """
    Evaluate a list of tokens against registered flag declarations.

    # abort flags anywhere   -> the abort is recorded, nothing else is parsed
    # tagged tokens          -> the matching flag, plus its consumed values
    # anything else          -> the first eligible positional
    """

    class _ParseState(enum.Enum):
        SCANNING_ABORT = enum.auto()
        WALKING        = enum.auto()
        VALIDATING     = enum.auto()
        ABORTED        = enum.auto()
        DONE           = enum.auto()

    def __init__(self, registry:FlagRegistry):
        self.PS       = ClabParser._ParseState
        self.registry = registry.finalize()

    def parse_argv(self, argv:Sequence[str]) -> Evaluation:
        """ Parse a full process argument vector, dropping the program name """
        if SKIP_PROGRAM_NAME:
            return self.parse(argv[1:])

        return self.parse(argv)

    def parse(self, args:Sequence[str]) -> Evaluation:
        """
          Parses a list of arguments, which does not include the program name,
          against the registered flags.
        """
        logging.debug("Parsing args: %s", args)
        args     = list(args)
        result   = self._seed()
        provided = set()
        focus    = self.PS.SCANNING_ABORT

        while focus is not self.PS.DONE:
            logging.debug("Parse State: %s", focus.name)
            match focus:
                case self.PS.SCANNING_ABORT:
                    focus = self._scan_for_abort(args, result)
                case self.PS.WALKING:
                    self._walk(args, result, provided)
                    focus = self.PS.VALIDATING
                case self.PS.VALIDATING:
                    self._check_required(provided)
                    focus = self.PS.DONE
                case self.PS.ABORTED:
                    logging.debug("Aborted by: %s", result.aborted_by())
                    focus = self.PS.DONE

        return result

    def _seed(self) -> Evaluation:
        result = Evaluation()
        for spec in self.registry:
            result.set_state(spec.id, spec.default_toggle)
            result.clear_values(spec.id)
            for val in spec.default_values:
                result.add_value(spec.id, val)

        return result

    def _scan_for_abort(self, args:list[str], result:Evaluation) -> _ParseState:
        for arg in args:
            match self.registry.matcher.match(arg):
                case TagMatch(spec=spec, toggle=toggle) if spec.abort:
                    logging.debug("Abort flag found: %s", arg)
                    result.set_aborted_by(spec.id)
                    result.set_state(spec.id, toggle)
                    self._notify(spec, None)
                    return self.PS.ABORTED
                case _:
                    pass

        return self.PS.WALKING

    def _walk(self, args:list[str], result:Evaluation, provided:set[str]) -> None:
        tokens = mitz.peekable(args)
        while bool(tokens):
            match self.registry.matcher.match(tokens.peek()):
                case None:
                    self._consume_positional(tokens, result, provided)
                case TagMatch() as found:
                    next(tokens)
                    self._consume_tagged(found, tokens, result, provided)

    def _consume_tagged(self, found:TagMatch, tokens:mitz.peekable, result:Evaluation, provided:set[str]) -> None:
        spec = found.spec
        logging.debug("Handling: %s, Spec: %r", found.tag, spec)
        if spec.id in provided and not spec.repeatable:
            raise clab.errors.RedundantArgument("Flag '%s' is not multiple, but was provided again", spec.id)

        if spec.over or (spec.id not in provided and 0 < spec.consume):
            result.clear_values(spec.id)

        provided.add(spec.id)
        result.set_state(spec.id, found.toggle)
        for i in range(spec.arity):
            self._take_value(spec, tokens, result, needed=spec.arity - i)

    def _consume_positional(self, tokens:mitz.peekable, result:Evaluation, provided:set[str]) -> None:
        spec = self._next_positional(provided)
        if spec is None:
            raise clab.errors.UnexpectedArgument("No flag or positional accepts the argument: %s", tokens.peek())

        logging.debug("Handling: %s, Positional: %r", tokens.peek(), spec)
        if spec.over or spec.id not in provided:
            result.clear_values(spec.id)

        provided.add(spec.id)
        result.set_state(spec.id, True)
        if not spec.greedy:
            for i in range(spec.arity):
                self._take_value(spec, tokens, result, needed=spec.arity - i)
            return

        while bool(tokens) and not self.registry.matcher.is_tag(tokens.peek()):
            self._accept(spec, next(tokens), result)

    def _next_positional(self, provided:set[str]) -> None|FlagSpec:
        """ the first positional, in registration order, that can take another value """
        return mitz.first_true(self.registry,
                               default=None,
                               pred=lambda x: x.positional and (x.multiple or x.id not in provided))

    def _take_value(self, spec:FlagSpec, tokens:mitz.peekable, result:Evaluation, *, needed:int) -> None:
        if not bool(tokens):
            raise clab.errors.MissingValue("'%s' needs %s more value(s), but the input ended", spec.id, needed)

        val = next(tokens)
        if self.registry.matcher.is_tag(val):
            raise clab.errors.TokenMismatch("'%s' expected a value, but found the tag: %s", spec.id, val)

        self._accept(spec, val, result)

    def _accept(self, spec:FlagSpec, val:str, result:Evaluation) -> None:
        if not spec.allows(val):
            raise clab.errors.InvalidValue("'%s' is not an allowed value for '%s'. Allowed: %s", val, spec.id, sorted(spec.allowed))

        logging.debug("Setting: %s = %s", spec.id, val)
        result.add_value(spec.id, val)
        self._notify(spec, val)

    def _notify(self, spec:FlagSpec, val:None|str) -> None:
        if spec.action is not None:
            spec.action(val)

    def _check_required(self, provided:set[str]) -> None:
        for spec in self.registry:
            if spec.required and spec.id not in provided:
                raise clab.errors.MissingArgument("Required flag '%s' is missing", spec.id)
