import msgspec
import pytest

from tokenscan import (
    Error,
    ErrorKind,
    Token,
    TokenKind,
    decode_errors,
    decode_tokens,
    encode_errors,
    encode_tokens,
    scan_with_errors,
)


def test_tokens_survive_msgpack():
    tokens, _ = scan_with_errors("if (a <= 'b\\'c') { // done\n}")
    assert decode_tokens(encode_tokens(tokens)) == tokens


def test_errors_survive_msgpack():
    _, errors = scan_with_errors("@ x = 'open")
    assert len(errors) == 2
    assert decode_errors(encode_errors(errors)) == errors


def test_token_wire_shape():
    data = encode_tokens([Token(TokenKind.KEYWORD, "if", 1, 1)])
    assert msgspec.msgpack.decode(data) == [["keyword", "if", 1, 1]]


def test_error_wire_shape():
    data = encode_errors([Error(ErrorKind.UNRECOGNIZED_CHARACTER, 2, 1, 3, None)])
    assert msgspec.msgpack.decode(data) == [[1, 2, 1, 3, None]]


def test_decode_rejects_unknown_kind():
    data = msgspec.msgpack.encode([["bogus", "x", 1, 1]])
    with pytest.raises(msgspec.ValidationError):
        decode_tokens(data)


def test_decode_rejects_garbage():
    with pytest.raises(msgspec.DecodeError):
        decode_tokens(b"\xc1")
