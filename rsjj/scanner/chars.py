"""Single-character classification predicates."""


def is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    return len(ch) == 1 and ch.isalpha()


def is_alpha_numeric(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)
