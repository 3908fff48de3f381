from enum import Enum

from msgspec import Struct


class TokenKind(Enum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    COMMENT = "comment"


class Token(Struct, array_like=True, gc=False, frozen=True):
    """Represents one scanned token.

    Attributes:
        kind (TokenKind): Classification of the token.
        text (str): Exact source substring that produced the token. String literals
            keep both quote characters and any escapes verbatim, comments keep the
            leading `//`. Whitespace runs may contain newlines.
        line (int): Line of the token's first character, 1-based.
        column (int): Column of the token's first character on its line, 1-based.
            Counted in characters, not bytes.
    """

    kind: TokenKind
    text: str
    line: int
    column: int
