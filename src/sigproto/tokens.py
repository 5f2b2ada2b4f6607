"""Token kinds and operator literals for the signature lexer."""

from __future__ import annotations

from enum import Enum, auto


class TokenKind(Enum):
    # Operators
    SIGNATURE_OPERATOR = auto()
    INSTANCE_CONTEXT = auto()
    FUNC_CONSTRUCTOR = auto()

    # Punctuation
    OPEN_OUTPUT_BLOCK = auto()
    CLOSE_OUTPUT_BLOCK = auto()

    # Identifiers (names and type names alike)
    IDENTIFIER = auto()

    # Zero-length chunk produced by consecutive spaces
    EMPTY = auto()


SIGNATURE_OPERATOR = "::"
INSTANCE_CONTEXT = "=>"
FUNC_CONSTRUCTOR = "->"
OPEN_OUTPUT_BLOCK = "("
CLOSE_OUTPUT_BLOCK = ")"

SYMBOLS: dict[str, TokenKind] = {
    SIGNATURE_OPERATOR: TokenKind.SIGNATURE_OPERATOR,
    INSTANCE_CONTEXT: TokenKind.INSTANCE_CONTEXT,
    FUNC_CONSTRUCTOR: TokenKind.FUNC_CONSTRUCTOR,
    OPEN_OUTPUT_BLOCK: TokenKind.OPEN_OUTPUT_BLOCK,
    CLOSE_OUTPUT_BLOCK: TokenKind.CLOSE_OUTPUT_BLOCK,
}

# Rejected anywhere inside a token.
FORBIDDEN_CHARS: tuple[str, ...] = (",",)

# Fine as a token of their own, rejected inside a longer token.
FORBIDDEN_PLURAL_CHARS: tuple[str, ...] = (OPEN_OUTPUT_BLOCK, CLOSE_OUTPUT_BLOCK)


def classify(token: str) -> TokenKind:
    """Return the kind of a raw token string."""
    if token.strip() == "":
        return TokenKind.EMPTY
    return SYMBOLS.get(token, TokenKind.IDENTIFIER)
