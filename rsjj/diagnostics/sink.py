"""Diagnostic sinks that receive reports while a scan runs."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from rsjj.diagnostics.diagnostic import Diagnostic
from rsjj.diagnostics.report import format_diagnostic, has_errors


class DiagnosticSink(Protocol):
    def report(self, diagnostic: Diagnostic) -> None: ...


class DiagnosticCollector:
    """Keeps every reported diagnostic in arrival order.

    Not synchronized; callers sharing one collector across threads must lock.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def error_count(self) -> int:
        return sum(1 for d in self._diagnostics if d.severity == "error")

    @property
    def has_errors(self) -> bool:
        return has_errors(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()


class StreamReporter:
    """Prints each diagnostic on its own line, stderr unless told otherwise."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.error_count = 0

    def report(self, diagnostic: Diagnostic) -> None:
        if diagnostic.severity == "error":
            self.error_count += 1
        stream = self._stream if self._stream is not None else sys.stderr
        print(format_diagnostic(diagnostic), file=stream)
