"""Generate a Go function stub from a FunctionSignature."""

from __future__ import annotations

from sigproto.config import SigprotoConfig
from sigproto.formatter import SignatureFormatter
from sigproto.go_types import map_type
from sigproto.signature import FunctionSignature, Parameter

GO_KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer",
    "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return", "select", "struct",
    "switch", "type", "var",
})

# Used when the signature text has no function name, e.g. ":: Int a".
UNNAMED_FUNC = "Unnamed"


class GoEmitter:
    """Emits Go source for one signature.

    The stub body panics; it is meant to be filled in by hand.
    """

    def __init__(self, config: SigprotoConfig | None = None) -> None:
        self.config = config or SigprotoConfig()

    def emit(self, sig: FunctionSignature) -> str:
        lines: list[str] = []
        if self.config.emit.package:
            lines.append(f"package {self.config.emit.package}")
            lines.append("")

        formatter = SignatureFormatter(elide_types=self.config.format.elide_types)
        lines.append(f"// {formatter.format(sig)}")
        if sig.instance_context:
            lines.append(f"// constraints: {' '.join(sig.instance_context)}")

        # Parameters and results share one scope in Go.
        reserved = {p.name for p in sig.parameters()}
        used: set[str] = set()
        inputs = self._go_params(sig.inputs, "_", reserved, used)
        outputs = self._go_params(sig.outputs, "Out", reserved, used)

        func_name = mangle_name(sig.name or UNNAMED_FUNC, set(), "_")
        header = f"func {func_name}({self._param_list(inputs)})"
        if outputs:
            header += f" ({self._param_list(outputs)})"
        lines.append(header + " {")
        lines.append('\tpanic("not implemented")')
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _go_params(
        self,
        params: list[Parameter],
        suffix: str,
        reserved: set[str],
        used: set[str],
    ) -> list[Parameter]:
        """Rename parameters that clash with a keyword or an earlier name.

        Every name handed out is added to used.
        """
        renamed = []
        for p in params:
            name = p.name
            if name in used or name in GO_KEYWORDS:
                name = mangle_name(name, reserved | used, suffix)
            used.add(name)
            renamed.append(Parameter(name, p.type_name))
        return renamed

    def _param_list(self, params: list[Parameter]) -> str:
        return ", ".join(
            f"{p.name} {map_type(p.type_name, self.config.emit.types)}"
            for p in params
        )


def mangle_name(name: str, taken: set[str], suffix: str) -> str:
    """Append suffix until name is neither taken nor a Go keyword."""
    mangled = name
    while mangled in taken or mangled in GO_KEYWORDS:
        mangled += suffix
    return mangled

