"""Haskell-style function signature parser."""

from sigproto.errors import SignatureError
from sigproto.lexer import tokenize
from sigproto.parser import Parser, parse
from sigproto.signature import FunctionSignature, Parameter

__version__ = "0.1.0"

__all__ = [
    "FunctionSignature",
    "Parameter",
    "Parser",
    "SignatureError",
    "parse",
    "tokenize",
]
