import logging
import string

from tokenscan.error import Error, ErrorKind
from tokenscan.token import Token, TokenKind

logger = logging.getLogger(__name__)

KEYWORDS = frozenset(
    {"if", "else", "while", "for", "return", "function", "const", "let", "var"}
)
TWO_CHAR_OPERATORS = frozenset({"==", "!=", "<=", ">=", "&&", "||"})
ONE_CHAR_OPERATORS = frozenset("+-*/=<>")
PUNCTUATION = frozenset("(){}[];,.")

# Same set as the ECMAScript `\s` class. Differs from str.isspace(): the BOM is
# included, U+001C-U+001F and U+0085 are not.
WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)

COMMENT_MARKER = "//"
QUOTES = frozenset("\"'")
ESCAPE = "\\"

_DIGITS = frozenset(string.digits)
_NUMBER_CHARS = _DIGITS | {"."}
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | _DIGITS


def _run_end(source: str, pos: int, chars: frozenset[str]) -> int:
    """Return the offset just past the maximal run of `chars` starting at `pos`."""
    length = len(source)
    while pos < length and source[pos] in chars:
        pos += 1
    return pos


def _string_end(source: str, pos: int) -> tuple[int, bool]:
    """Find the end of the string literal whose opening delimiter is at `pos`.

    Returns the offset just past the closing delimiter and True, or the length
    of the source and False when the literal is never closed. A backslash
    always swallows the character after it, including the delimiter.
    """
    quote = source[pos]
    length = len(source)
    pos += 1
    while pos < length and source[pos] != quote:
        if source[pos] == ESCAPE:
            pos += 1
        pos += 1
    if pos < length:
        return pos + 1, True
    return length, False


def _last_index(tokens: list[Token]) -> int | None:
    return len(tokens) - 1 if tokens else None


def _scan(source: str, errors: list[Error] | None) -> list[Token]:
    tokens: list[Token] = []
    length = len(source)
    pos = 0
    line = 1
    column = 1

    while pos < length:
        char = source[pos]
        terminated = True

        # Order matters: "//" must win over "/", and two-char operators over
        # their one-char prefixes.
        if char in WHITESPACE:
            end = _run_end(source, pos + 1, WHITESPACE)
            kind = TokenKind.WHITESPACE
        elif source.startswith(COMMENT_MARKER, pos):
            end = source.find("\n", pos)
            if end == -1:
                end = length
            kind = TokenKind.COMMENT
        elif char in QUOTES:
            end, terminated = _string_end(source, pos)
            kind = TokenKind.STRING
        elif char in _DIGITS:
            end = _run_end(source, pos + 1, _NUMBER_CHARS)
            kind = TokenKind.NUMBER
        elif char in _IDENT_START:
            end = _run_end(source, pos + 1, _IDENT_CHARS)
            kind = (
                TokenKind.KEYWORD if source[pos:end] in KEYWORDS else TokenKind.IDENTIFIER
            )
        elif source[pos : pos + 2] in TWO_CHAR_OPERATORS:
            end = pos + 2
            kind = TokenKind.OPERATOR
        elif char in ONE_CHAR_OPERATORS:
            end = pos + 1
            kind = TokenKind.OPERATOR
        elif char in PUNCTUATION:
            end = pos + 1
            kind = TokenKind.PUNCTUATION
        else:
            if errors is not None:
                logger.debug(f"Dropping unrecognized character {char!r} at {line}:{column}")
                errors.append(
                    Error(
                        error_kind=ErrorKind.UNRECOGNIZED_CHARACTER,
                        at_char_offset=pos,
                        on_line=line,
                        at_column=column,
                        last_token_index=_last_index(tokens),
                    )
                )
            pos += 1
            column += 1
            continue

        text = source[pos:end]
        tokens.append(Token(kind=kind, text=text, line=line, column=column))

        if not terminated and errors is not None:
            logger.debug(f"Unterminated string literal starting at {line}:{column}")
            errors.append(
                Error(
                    error_kind=ErrorKind.UNTERMINATED_STRING,
                    at_char_offset=pos,
                    on_line=line,
                    at_column=column,
                    last_token_index=_last_index(tokens),
                )
            )

        # Position of the next character. A token spanning line feeds restarts
        # the column count after its last one.
        newlines = text.count("\n")
        if newlines:
            line += newlines
            column = len(text) - text.rfind("\n")
        else:
            column += len(text)
        pos = end

    return tokens


def scan(source: str) -> list[Token]:
    """Scan `source` into an ordered list of tokens.

    Never fails and reports nothing. Unrecognized characters are dropped and
    an unclosed string literal runs to the end of input; use
    `scan_with_errors` to see where either happened.
    """
    return _scan(source, None)


def scan_with_errors(source: str) -> tuple[list[Token], list[Error]]:
    """Scan `source` into tokens, collecting diagnostics on the side.

    The token list is exactly what `scan` returns. The errors describe the
    characters that were dropped and any string literal left open at the end
    of input; they never stop the scan. Each one is also logged at DEBUG.
    """
    errors: list[Error] = []
    tokens = _scan(source, errors)
    logger.debug(f"Scanned {len(source)} chars into {len(tokens)} tokens, {len(errors)} errors")
    return tokens, errors
