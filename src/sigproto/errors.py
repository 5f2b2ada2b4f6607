"""Rust-style colored diagnostic rendering for signature errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
    Severity.WARNING: "\033[1;33m",  # bold yellow
    Severity.NOTE: "\033[1;36m",     # bold cyan
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"

# ── Error codes ──────────────────────────────────────────────────

EXPECTED_OPERATOR = "E201"
OPERATOR_WITHOUT_PARAMS = "E202"
MISPLACED_CONTEXT = "E203"
TYPE_WITHOUT_NAME = "E204"
MISSING_TYPE = "E205"
TRAILING_ARROW = "E206"
FORBIDDEN_CHARACTER = "E210"
UNOPENED_BLOCK = "E211"
CONTENT_AFTER_BLOCK = "E212"
UNWRAPPED_OUTPUTS = "E213"
DUPLICATE_NAME = "E220"


@dataclass
class Diagnostic:
    """A single diagnostic message pointing at a token index."""

    severity: Severity
    code: str
    message: str
    position: int | None = None
    notes: list[str] = field(default_factory=list)


class DiagnosticRenderer:
    """Renders diagnostics in Rust-style format with colors."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def _paint(self, text: str, code: str) -> str:
        return f"{self._c(code)}{text}{self._c(_RESET)}"

    def render(self, diag: Diagnostic, tokens: list[str] | None = None) -> str:
        lines: list[str] = []
        sev = diag.severity
        color = _COLORS[sev]

        # error[E220]: duplicate argument name [a]
        label = f"{sev.value}[{diag.code}]"
        title = f": {diag.message}"
        lines.append(self._paint(label, color) + self._paint(title, _BOLD))

        if diag.position is not None:
            lines.append(f"  {self._paint('-->', _BLUE)} token {diag.position}")
            if tokens and 0 <= diag.position < len(tokens):
                gutter = "  " + self._paint("   |", _BLUE)
                # Tokens are rejoined with single spaces, so the offset is exact.
                offset = sum(len(t) + 1 for t in tokens[:diag.position])
                carets = "^" * max(1, len(tokens[diag.position]))
                lines.append(gutter)
                lines.append(f"{gutter} {' '.join(tokens)}")
                lines.append(f"{gutter} {' ' * offset}{self._paint(carets, color)}")

        lines.extend(
            f"  {self._paint('=', _BLUE)} note: {note}" for note in diag.notes
        )

        return "\n".join(lines)


class SignatureError(Exception):
    """A signature failed to parse. Carries the first violated rule."""

    def __init__(self, diagnostic: Diagnostic, tokens: list[str] | None = None) -> None:
        self.diagnostic = diagnostic
        self.tokens = tokens or []
        super().__init__(f"{diagnostic.code}: {diagnostic.message}")

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def position(self) -> int | None:
        return self.diagnostic.position
