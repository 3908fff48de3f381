from tokenscan.codec import decode_errors, decode_tokens, encode_errors, encode_tokens
from tokenscan.error import Error, ErrorKind
from tokenscan.filters import reconstruct, remove_comments, remove_whitespace, significant_tokens
from tokenscan.lexer import scan, scan_with_errors
from tokenscan.token import Token, TokenKind

__all__ = [
    "Error",
    "ErrorKind",
    "Token",
    "TokenKind",
    "decode_errors",
    "decode_tokens",
    "encode_errors",
    "encode_tokens",
    "reconstruct",
    "remove_comments",
    "remove_whitespace",
    "scan",
    "scan_with_errors",
    "significant_tokens",
]
