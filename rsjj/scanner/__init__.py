"""Scanner."""

from rsjj.scanner.chars import is_alpha, is_alpha_numeric, is_digit
from rsjj.scanner.options import ScannerOptions
from rsjj.scanner.scanner import Scanner, dump_tokens, scan_tokens, token_text
from rsjj.scanner.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "Scanner",
    "ScannerOptions",
    "Token",
    "TokenKind",
    "dump_tokens",
    "is_alpha",
    "is_alpha_numeric",
    "is_digit",
    "scan_tokens",
    "token_text",
]
