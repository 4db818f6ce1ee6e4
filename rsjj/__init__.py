"""rsjj: lexical scanner for a small scripting language."""

from rsjj.diagnostics import Diagnostic, DiagnosticCollector, StreamReporter
from rsjj.pipeline import ScanResult, scan_file, scan_text
from rsjj.scanner import Scanner, ScannerOptions, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "ScanResult",
    "Scanner",
    "ScannerOptions",
    "StreamReporter",
    "Token",
    "TokenKind",
    "scan_file",
    "scan_text",
]
