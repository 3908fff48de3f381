from collections.abc import Sequence

from msgspec.msgpack import Decoder, Encoder

from tokenscan.error import Error
from tokenscan.token import Token

ENCODER = Encoder()
TOK_LIST_DECODER = Decoder(list[Token])
ERR_LIST_DECODER = Decoder(list[Error])


def encode_tokens(tokens: Sequence[Token]) -> bytes:
    return ENCODER.encode(tokens)


def decode_tokens(data: bytes) -> list[Token]:
    return TOK_LIST_DECODER.decode(data)


def encode_errors(errors: Sequence[Error]) -> bytes:
    return ENCODER.encode(errors)


def decode_errors(data: bytes) -> list[Error]:
    return ERR_LIST_DECODER.decode(data)
