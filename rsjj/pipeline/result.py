"""Scan result carrier."""

from __future__ import annotations

from dataclasses import dataclass

from rsjj.diagnostics import Diagnostic, has_errors
from rsjj.scanner import Token, TokenKind


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens and diagnostics produced by one scan of one input chunk."""

    source_text: str
    tokens: tuple[Token, ...]
    diagnostics: tuple[Diagnostic, ...]
    source_path: str = "<memory>"
    had_bom: bool = False

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def significant_tokens(self) -> tuple[Token, ...]:
        return tuple(token for token in self.tokens if token.kind != TokenKind.EOF)
