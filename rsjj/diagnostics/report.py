"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from rsjj.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as `[line N] Error<location>: <message>`."""
    label = "Error" if diagnostic.severity == "error" else "Warning"
    return f"[line {diagnostic.line}] {label}{diagnostic.location}: {diagnostic.message}"
