"""
Bencode package for decoding BitTorrent data.
"""
from .cursor import ByteCursor
from .decoder import BencodeDecoder, decode, iter_decode
from .errors import (
    BencodeDecodeError,
    MalformedInteger,
    MalformedLength,
    NestingTooDeep,
    NonStringDictionaryKey,
    StreamExhausted,
    UnexpectedEndOfStream,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

__all__ = [
    'decode', 'iter_decode', 'BencodeDecoder', 'ByteCursor',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'BencodeDecodeError', 'StreamExhausted', 'UnexpectedEndOfStream',
    'MalformedInteger', 'MalformedLength', 'NonStringDictionaryKey', 'NestingTooDeep',
]
