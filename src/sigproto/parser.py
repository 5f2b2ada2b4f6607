"""Parser for Haskell-style function signatures.

Consumes the token list once, left to right, driving a small state
machine. One token of lookahead decides whether an identifier is a type
or a parameter name; one (or two, across ``(``) tokens of lookbehind
decides how a type-less name is reported when inference is impossible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import NoReturn

from sigproto import errors
from sigproto.errors import Diagnostic, Severity, SignatureError
from sigproto.lexer import tokenize
from sigproto.signature import FunctionSignature, Parameter
from sigproto.tokens import (
    CLOSE_OUTPUT_BLOCK,
    FORBIDDEN_CHARS,
    FORBIDDEN_PLURAL_CHARS,
    FUNC_CONSTRUCTOR,
    OPEN_OUTPUT_BLOCK,
    SIGNATURE_OPERATOR,
    TokenKind,
    classify,
)


class State(Enum):
    FUNC_NAME = auto()
    OPERATOR_TOKEN = auto()
    INSTANCE_CONTEXT = auto()
    ARG_TYPE = auto()
    ARG_NAME = auto()
    FUNC_CONSTRUCTOR = auto()
    CLOSE_OUTPUT_BLOCK = auto()


@dataclass
class _Field:
    """A pending type with the names collected for it so far."""

    type_name: str
    names: list[str] = field(default_factory=list)


class Parser:
    """Parses a token list into a FunctionSignature.

    Scratch state is rebuilt at the start of every parse() call, so a
    Parser can be parsed again and returns an equal signature.
    """

    def __init__(self, tokens: list[str]) -> None:
        self.tokens = tokens
        self._reset()

    def _reset(self) -> None:
        self.pos = 0
        self.state = State.FUNC_NAME
        self.signature = FunctionSignature(name="")
        self.fields: list[_Field] = []
        self.in_output_block = False
        self.previous_type: str | None = None

    # ── Token access ─────────────────────────────────────────────

    def _peek(self, offset: int) -> str:
        """Token at pos + offset, or "" past either end."""
        idx = self.pos + offset
        if 0 <= idx < len(self.tokens):
            return self.tokens[idx]
        return ""

    def _at_end(self) -> bool:
        """True when the next token is missing or zero-length."""
        return classify(self._peek(1)) == TokenKind.EMPTY

    def _error(self, code: str, message: str, *notes: str) -> NoReturn:
        diag = Diagnostic(
            severity=Severity.ERROR,
            code=code,
            message=message,
            position=self.pos,
            notes=list(notes),
        )
        raise SignatureError(diag, self.tokens)

    # ── Entry point ──────────────────────────────────────────────

    def parse(self) -> FunctionSignature:
        """Run the state machine over every token and return the signature."""
        self._reset()
        for self.pos, tok in enumerate(self.tokens):
            self._check_forbidden(tok)

            match classify(tok):
                case TokenKind.SIGNATURE_OPERATOR:
                    self.state = State.OPERATOR_TOKEN
                case TokenKind.INSTANCE_CONTEXT:
                    self.state = State.INSTANCE_CONTEXT
                case TokenKind.FUNC_CONSTRUCTOR:
                    self.state = State.FUNC_CONSTRUCTOR
                case TokenKind.OPEN_OUTPUT_BLOCK:
                    self.in_output_block = True
                    continue
                case TokenKind.CLOSE_OUTPUT_BLOCK:
                    self.state = State.CLOSE_OUTPUT_BLOCK
                case TokenKind.EMPTY:
                    continue
                case TokenKind.IDENTIFIER:
                    pass

            match self.state:
                case State.FUNC_NAME:
                    self.signature.name = tok
                    self.state = State.OPERATOR_TOKEN
                case State.OPERATOR_TOKEN:
                    self._parse_operator(tok)
                case State.INSTANCE_CONTEXT:
                    self._parse_instance_context()
                case State.ARG_TYPE:
                    self._parse_arg_type(tok)
                case State.ARG_NAME:
                    self._parse_arg_name(tok)
                case State.FUNC_CONSTRUCTOR:
                    self._parse_func_constructor()
                case State.CLOSE_OUTPUT_BLOCK:
                    self._parse_close_output_block()

        self._finish()
        return self.signature

    # ── Validation ───────────────────────────────────────────────

    def _check_forbidden(self, tok: str) -> None:
        bad = [ch for ch in FORBIDDEN_CHARS if ch in tok]
        if len(tok) > 1:
            bad += [ch for ch in FORBIDDEN_PLURAL_CHARS if ch in tok]
        if bad:
            self._error(
                errors.FORBIDDEN_CHARACTER,
                f"argument name [{tok}] contains invalid character [{bad[0]}]",
                "separate arguments with '->' and keep '(' and ')' to the output block",
            )

    def _check_duplicate(self, name: str, taken: list[str]) -> None:
        if name in taken:
            self._error(errors.DUPLICATE_NAME, f"duplicate argument name [{name}]")

    def _pending_names(self) -> list[str]:
        return [name for f in self.fields for name in f.names]

    # ── States ───────────────────────────────────────────────────

    def _parse_operator(self, tok: str) -> None:
        if tok != SIGNATURE_OPERATOR:
            self._error(
                errors.EXPECTED_OPERATOR,
                f"expected '{SIGNATURE_OPERATOR}' but found {tok}",
            )
        # e.g. "TestFunc ::"
        if self._at_end():
            self._error(
                errors.OPERATOR_WITHOUT_PARAMS,
                "provided operator token but no parameters",
            )
        self.signature.inputs = []
        self.state = State.ARG_TYPE

    def _parse_instance_context(self) -> None:
        if self.in_output_block or self.signature.inputs:
            self._error(
                errors.MISPLACED_CONTEXT,
                "instance context must come before the first argument",
            )
        if not self.fields:
            self._error(
                errors.MISPLACED_CONTEXT,
                "instance context operator with no constraint",
            )
        if self._at_end():
            self._error(
                errors.MISPLACED_CONTEXT,
                "instance context followed by no parameters",
            )
        for f in self.fields:
            self.signature.instance_context.append(f.type_name)
            self.signature.instance_context.extend(f.names)
        # Constraint class names are not argument types.
        self.fields = []
        self.previous_type = None
        self.state = State.ARG_TYPE

    def _parse_arg_type(self, tok: str) -> None:
        next_tok = self._peek(1)
        if not (self._at_end() or next_tok in (FUNC_CONSTRUCTOR, CLOSE_OUTPUT_BLOCK)):
            self.fields.append(_Field(type_name=tok))
            self.previous_type = tok
            self.state = State.ARG_NAME
            return

        # A name with no type of its own: infer it from the previous type.
        previous_tok = self._peek(-1)
        if previous_tok == OPEN_OUTPUT_BLOCK:
            previous_tok = self._peek(-2)

        # e.g. "f -> Int": the type has no name to go with it
        if previous_tok == FUNC_CONSTRUCTOR and self.previous_type is None:
            self._error(
                errors.TYPE_WITHOUT_NAME,
                f"typed argument with no name at position {self.pos}",
            )
        # e.g. "TestFunc :: a"
        if self.previous_type is None:
            self._error(
                errors.MISSING_TYPE,
                f"missing type for argument at position {self.pos}",
                "only arguments after a typed argument may omit their type",
            )

        if self.in_output_block:
            taken = [p.name for p in self.signature.outputs] + self._pending_names()
        else:
            taken = [p.name for p in self.signature.inputs]
        self._check_duplicate(tok, taken)

        self.fields.append(_Field(type_name=self.previous_type, names=[tok]))

    def _parse_arg_name(self, tok: str) -> None:
        self._check_duplicate(tok, self._pending_names())
        self.fields[-1].names.append(tok)

    def _parse_func_constructor(self) -> None:
        # e.g. "TestFunc :: Int a -> z ->"
        if self._at_end():
            self._error(
                errors.TRAILING_ARROW,
                f"trailing '{FUNC_CONSTRUCTOR}' at position {self.pos}",
            )
        # Inside an output block the fields are committed on ')'.
        if not self.in_output_block:
            self._commit(self.signature.inputs)
        self.state = State.ARG_TYPE

    def _parse_close_output_block(self) -> None:
        if not self.in_output_block:
            self._error(
                errors.UNOPENED_BLOCK,
                "found closing multiple output block with no open block",
            )
        self._commit(self.signature.outputs)
        # e.g. "TestFunc :: Int a -> (a -> b) -> c"
        trailing = self.tokens[self.pos + 1 :]
        if any(classify(t) != TokenKind.EMPTY for t in trailing):
            self._error(
                errors.CONTENT_AFTER_BLOCK,
                "invalid content after closing output block",
            )

    # ── Buffer flushing ──────────────────────────────────────────

    def _commit(self, target: list[Parameter]) -> None:
        """Move every pending field into target, one Parameter per name."""
        for f in self.fields:
            if not f.names:
                self._error(
                    errors.TYPE_WITHOUT_NAME,
                    f"typed argument [{f.type_name}] has no name",
                )
            for name in f.names:
                self._check_duplicate(name, [p.name for p in target])
                target.append(Parameter(name=name, type_name=f.type_name))
        self.fields = []

    def _finish(self) -> None:
        """Commit whatever is left as the single, unwrapped output.

        Errors raised here point at the last token.
        """
        if not self.fields:
            return
        if len(self.fields) == 1 and (len(self.fields[0].names) == 1 or self.in_output_block):
            self._commit(self.signature.outputs)
            return
        if self.in_output_block:
            self._error(
                errors.UNWRAPPED_OUTPUTS,
                "invalid output block. the multiple output block is never closed",
                f"add a closing '{CLOSE_OUTPUT_BLOCK}'",
            )
        self._error(
            errors.UNWRAPPED_OUTPUTS,
            "invalid output block. you likely have multiple outputs not wrapped "
            "in a multi-output block",
            "add open and close parens around the outputs",
        )


def parse(source: str) -> FunctionSignature:
    """Tokenize and parse signature text."""
    return Parser(tokenize(source)).parse()
