from collections.abc import Iterable

from tokenscan.token import Token, TokenKind


def remove_comments(tokens: Iterable[Token]) -> list[Token]:
    return [tok for tok in tokens if tok.kind is not TokenKind.COMMENT]


def remove_whitespace(tokens: Iterable[Token]) -> list[Token]:
    return [tok for tok in tokens if tok.kind is not TokenKind.WHITESPACE]


def significant_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Drop both comments and whitespace, leaving what a parser consumes."""
    return remove_whitespace(remove_comments(tokens))


def reconstruct(tokens: Iterable[Token]) -> str:
    """Join token text back into source.

    For a full `scan` result this equals the input unless characters were
    dropped, so comparing lengths tells a caller whether anything was lost.
    """
    return "".join(tok.text for tok in tokens)
