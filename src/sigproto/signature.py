"""Structured function signature produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Parameter:
    name: str
    type_name: str


@dataclass
class FunctionSignature:
    name: str
    instance_context: list[str] = field(default_factory=list)
    inputs: list[Parameter] = field(default_factory=list)
    outputs: list[Parameter] = field(default_factory=list)

    def parameters(self) -> list[Parameter]:
        """Inputs followed by outputs, in textual order."""
        return [*self.inputs, *self.outputs]
