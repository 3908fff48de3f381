from enum import IntEnum

from msgspec import Struct


class ErrorKind(IntEnum):
    UNRECOGNIZED_CHARACTER = 1
    UNTERMINATED_STRING = 2


class Error(Struct, array_like=True, gc=False, frozen=True):
    error_kind: ErrorKind
    at_char_offset: int
    on_line: int
    at_column: int
    last_token_index: int | None
