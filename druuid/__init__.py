from druuid.generator import (
    EPOCH_SECONDS,
    MAX_DRUUID,
    Generator,
    decode_timestamp,
    epoch_offset,
    gen,
    gen_from_values,
)
from druuid.base36 import decode, encode
from druuid.core.errors import BaseDruuidError, ParseError

__all__ = [
    "EPOCH_SECONDS",
    "MAX_DRUUID",
    "Generator",
    "decode_timestamp",
    "epoch_offset",
    "gen",
    "gen_from_values",
    "encode",
    "decode",
    "BaseDruuidError",
    "ParseError",
]
