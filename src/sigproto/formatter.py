"""Pretty-printer for function signatures.

Produces the canonical text form of a FunctionSignature. With type
elision enabled, a parameter whose type repeats the previous explicit
type is written as a bare name, which the parser infers back.
"""

from __future__ import annotations

from sigproto.signature import FunctionSignature, Parameter
from sigproto.tokens import (
    CLOSE_OUTPUT_BLOCK,
    FUNC_CONSTRUCTOR,
    INSTANCE_CONTEXT,
    OPEN_OUTPUT_BLOCK,
    SIGNATURE_OPERATOR,
)


class SignatureFormatter:
    """Formats a FunctionSignature back into signature text."""

    def __init__(self, *, elide_types: bool = True) -> None:
        self.elide_types = elide_types
        self._previous_type: str | None = None

    def format(self, sig: FunctionSignature) -> str:
        self._previous_type = None
        if not sig.inputs and not sig.outputs and not sig.instance_context:
            return sig.name

        parts: list[str] = [sig.name, SIGNATURE_OPERATOR]
        if sig.instance_context:
            parts.extend(sig.instance_context)
            parts.append(INSTANCE_CONTEXT)

        args = [self._format_param(p) for p in sig.inputs]
        args.append(self._format_outputs(sig))
        parts.append(f" {FUNC_CONSTRUCTOR} ".join(args))
        return " ".join(parts)

    def _format_outputs(self, sig: FunctionSignature) -> str:
        if len(sig.outputs) == 1:
            out = sig.outputs[0]
            # A bare name equal to an input name reads as a duplicate.
            clashes = any(p.name == out.name for p in sig.inputs)
            return self._format_param(out, elide=not clashes)
        if not sig.outputs:
            # The last '->' or '=>' needs something after it.
            return f"{OPEN_OUTPUT_BLOCK}{CLOSE_OUTPUT_BLOCK}"
        outs = f" {FUNC_CONSTRUCTOR} ".join(self._format_param(p) for p in sig.outputs)
        return f"{OPEN_OUTPUT_BLOCK} {outs} {CLOSE_OUTPUT_BLOCK}"

    def _format_param(self, param: Parameter, *, elide: bool = True) -> str:
        if self.elide_types and elide and param.type_name == self._previous_type:
            return param.name
        self._previous_type = param.type_name
        return f"{param.type_name} {param.name}"
