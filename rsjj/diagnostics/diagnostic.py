"""Diagnostics core types."""

from dataclasses import dataclass

from rsjj.diagnostics.codes import DiagnosticSpec, Severity
from rsjj.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the scanner.

    `line` is the source line the problem was detected on. `location` is
    either empty or a short context fragment such as `" at '@'"` that is
    spliced into the rendered message.
    """

    code: str
    message: str
    line: int
    range: TextRange
    location: str = ""
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        *,
        line: int,
        range: TextRange,
        location: str = "",
    ) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message,
            line=line,
            range=range,
            location=location,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
