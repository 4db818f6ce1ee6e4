import pytest

from rsjj.scanner import KEYWORDS, Token, TokenKind, scan_tokens
from rsjj.text import TextRange


def first_token(text: str) -> Token:
    return scan_tokens(text)[0]


def test_number_literal_is_float() -> None:
    assert first_token("42").literal == 42.0
    assert first_token("3.25").literal == 3.25


def test_string_literal_drops_quotes() -> None:
    token = first_token('"hello world"')

    assert token.lexeme == '"hello world"'
    assert token.literal == "hello world"


def test_unterminated_string_literal_keeps_text_after_quote() -> None:
    assert first_token('"abc').literal == "abc"
    assert first_token('"').literal == ""


def test_empty_string_literal() -> None:
    assert first_token('""').literal == ""


def test_non_literal_tokens_have_no_literal() -> None:
    assert first_token("name").literal is None
    assert first_token("+").literal is None
    assert scan_tokens("")[0].literal is None


def test_str_renders_kind_and_lexeme() -> None:
    token = Token(TokenKind.LET, "let", 1, TextRange(0, 3))

    assert str(token) == "LET let"


def test_tokens_are_immutable() -> None:
    token = first_token("x")

    with pytest.raises(AttributeError):
        token.lexeme = "y"  # type: ignore[misc]


def test_keyword_table_covers_every_reserved_word() -> None:
    assert len(KEYWORDS) == 16
    assert all(kind.is_keyword for kind in KEYWORDS.values())
    assert KEYWORDS["let"] is TokenKind.LET


def test_keyword_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        KEYWORDS["var"] = TokenKind.LET  # type: ignore[index]


def test_kind_categories() -> None:
    assert TokenKind.IDENTIFIER.is_literal
    assert TokenKind.STRING.is_literal
    assert TokenKind.NUMBER.is_literal
    assert not TokenKind.TRUE.is_literal
    assert TokenKind.TRUE.is_keyword
    assert not TokenKind.IDENTIFIER.is_keyword
    assert not TokenKind.EOF.is_keyword
