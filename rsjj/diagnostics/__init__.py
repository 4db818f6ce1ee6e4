"""Diagnostics."""

from rsjj.diagnostics.codes import (
    SCANNER_UNEXPECTED_CHARACTER,
    SCANNER_UNTERMINATED_STRING,
    DiagnosticSpec,
    Severity,
)
from rsjj.diagnostics.diagnostic import Diagnostic
from rsjj.diagnostics.report import format_diagnostic, has_errors
from rsjj.diagnostics.sink import DiagnosticCollector, DiagnosticSink, StreamReporter

__all__ = [
    "SCANNER_UNEXPECTED_CHARACTER",
    "SCANNER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSink",
    "DiagnosticSpec",
    "Severity",
    "StreamReporter",
    "format_diagnostic",
    "has_errors",
]
