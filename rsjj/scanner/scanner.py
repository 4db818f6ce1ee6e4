"""Scanner."""

from __future__ import annotations

import sys
from typing import TextIO

from rsjj.diagnostics import (
    SCANNER_UNEXPECTED_CHARACTER,
    SCANNER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSink,
    DiagnosticSpec,
    has_errors,
)
from rsjj.scanner.chars import is_alpha, is_alpha_numeric, is_digit
from rsjj.scanner.options import ScannerOptions
from rsjj.scanner.tokens import (
    EQUAL_SUFFIX_TOKENS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenKind,
)
from rsjj.text import TextRange, TextSize, slice_text_range


class Scanner:
    """Single-pass scanner over a complete source buffer.

    Malformed input never raises: problems become diagnostics, kept on the
    scanner and forwarded to `reporter`, and scanning carries on.
    """

    def __init__(
        self,
        source: str,
        *,
        options: ScannerOptions | None = None,
        reporter: DiagnosticSink | None = None,
    ) -> None:
        if not isinstance(source, str):
            raise TypeError(f"Scanner source must be str, got {type(source).__name__}")
        self._source = source
        self._options = options if options is not None else ScannerOptions()
        self._reporter = reporter
        self._tokens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []
        self._start = 0
        self._current = 0
        self._line = self._options.first_line
        self._start_line = self._line
        self._finished = False

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def options(self) -> ScannerOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during scanning."""
        return self._diagnostics

    @property
    def had_error(self) -> bool:
        return has_errors(self._diagnostics)

    @property
    def start(self) -> int:
        return self._start

    @property
    def current(self) -> int:
        return self._current

    @property
    def line(self) -> int:
        return self._line

    @property
    def is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def scan_tokens(self) -> list[Token]:
        """Scan the whole buffer; the result always ends with one EOF token."""
        if self._finished:
            return list(self._tokens)

        while not self.is_at_end:
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        eof_range = TextRange.empty(TextSize.from_int(self._current))
        self._tokens.append(Token(TokenKind.EOF, "", self._line, eof_range))
        self._finished = True
        return list(self._tokens)

    def _scan_token(self) -> None:
        ch = self._advance()

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._add_token(kind)
            return

        pair = EQUAL_SUFFIX_TOKENS.get(ch)
        if pair is not None:
            single, double = pair
            self._add_token(double if self._match("=") else single)
            return

        if ch == "/":
            if self._match("/"):
                self._skip_line_comment()
            else:
                self._add_token(TokenKind.SLASH)
            return

        if ch == "\n":
            self._line += 1
            return

        if ch == " " or ch == "\r" or ch == "\t":
            return

        if ch == '"':
            self._scan_string()
            return

        if is_digit(ch):
            self._scan_number()
            return

        if is_alpha(ch):
            self._scan_identifier()
            return

        self._error(SCANNER_UNEXPECTED_CHARACTER, location=f" at {ch!r}")

    def _skip_line_comment(self) -> None:
        # Leave the newline for the main loop so it bumps the line counter.
        while self._peek() != "\n" and not self.is_at_end:
            self._advance()

    def _scan_string(self) -> None:
        while self._peek() != '"' and not self.is_at_end:
            if self._peek() == "\n":
                if not self._options.allow_multiline_strings:
                    break
                self._line += 1
            self._advance()

        if not self._match('"'):
            self._error(SCANNER_UNTERMINATED_STRING)

        self._add_token(TokenKind.STRING)

    def _scan_number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A trailing "." without a digit after it belongs to the next token.
        if self._peek() == "." and is_digit(self._peek(1)):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenKind.NUMBER)

    def _scan_identifier(self) -> None:
        while is_alpha_numeric(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _add_token(self, kind: TokenKind) -> None:
        self._tokens.append(
            Token(
                kind=kind,
                lexeme=self._source[self._start : self._current],
                line=self._start_line,
                range=self._current_range(),
            )
        )

    def _error(self, spec: DiagnosticSpec, *, location: str = "") -> None:
        diagnostic = Diagnostic.from_spec(
            spec,
            line=self._line,
            range=self._current_range(),
            location=location,
        )
        self._diagnostics.append(diagnostic)
        if self._reporter is not None:
            self._reporter.report(diagnostic)

    def _current_range(self) -> TextRange:
        return TextRange.new(TextSize.from_int(self._start), TextSize.from_int(self._current))

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self.is_at_end or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self, ahead: int = 0) -> str:
        index = self._current + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]


def scan_tokens(
    source: str,
    *,
    options: ScannerOptions | None = None,
    reporter: DiagnosticSink | None = None,
) -> list[Token]:
    """Scan `source` with a throwaway Scanner."""
    return Scanner(source, options=options, reporter=reporter).scan_tokens()


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(
    tokens: list[Token],
    diagnostics: list[Diagnostic] | None = None,
    *,
    file: TextIO | None = None,
) -> None:
    """Print token list with kind, range, line, and text for debugging."""
    out = file if file is not None else sys.stdout
    for i, tok in enumerate(tokens):
        print(
            f"{i:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} line={tok.line} text={tok.lexeme!r}",
            file=out,
        )

    if diagnostics is not None:
        print("\nDiagnostics:", file=out)
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} line={d.line} message={d.message}", file=out)
