"""Entrypoints that run one scan lifecycle over text or a file."""

from __future__ import annotations

from pathlib import Path

from rsjj.diagnostics import DiagnosticSink
from rsjj.pipeline.result import ScanResult
from rsjj.scanner import Scanner, ScannerOptions


def scan_text(
    text: str,
    *,
    options: ScannerOptions | None = None,
    reporter: DiagnosticSink | None = None,
    source_path: str = "<memory>",
    had_bom: bool = False,
) -> ScanResult:
    """Scan one in-memory chunk with a fresh Scanner."""
    scanner = Scanner(text, options=options, reporter=reporter)
    tokens = scanner.scan_tokens()
    return ScanResult(
        source_text=text,
        tokens=tuple(tokens),
        diagnostics=tuple(scanner.diagnostics),
        source_path=source_path,
        had_bom=had_bom,
    )


def scan_file(
    path: str | Path,
    *,
    options: ScannerOptions | None = None,
    reporter: DiagnosticSink | None = None,
) -> ScanResult:
    """Scan one UTF-8 file from disk; a leading BOM is dropped before scanning."""
    file_path = Path(path)
    decoded = file_path.read_bytes().decode("utf-8")
    had_bom = decoded.startswith("\ufeff")
    text = decoded[1:] if had_bom else decoded
    return scan_text(
        text,
        options=options,
        reporter=reporter,
        source_path=str(file_path).replace("\\", "/"),
        had_bom=had_bom,
    )
