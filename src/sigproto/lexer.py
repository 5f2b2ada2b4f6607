"""Tokenizer for Haskell-style function signatures.

Splits on single spaces and peels the output block symbols off chunks
they are fused to, e.g. ``(String`` and ``c)``.
"""

from __future__ import annotations

from sigproto.tokens import CLOSE_OUTPUT_BLOCK, OPEN_OUTPUT_BLOCK


def tokenize(source: str) -> list[str]:
    """Split signature text into tokens.

    Zero-length tokens from consecutive spaces are kept; the parser
    treats them as an end-of-input sentinel.
    """
    if source.strip() == "":
        return []

    tokens: list[str] = []
    for chunk in source.split(" "):
        if len(chunk) > 1:
            if chunk[0] == OPEN_OUTPUT_BLOCK:
                tokens.append(OPEN_OUTPUT_BLOCK)
                tokens.append(chunk[1:])
                continue
            if chunk[-1] == CLOSE_OUTPUT_BLOCK:
                tokens.append(chunk[:-1])
                tokens.append(CLOSE_OUTPUT_BLOCK)
                continue
        tokens.append(chunk)
    return tokens
