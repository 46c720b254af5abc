"""
The MIT License

Copyright (c) 2015 Fred Stober

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

from collections.abc import Mapping
from itertools import chain

from .errors import UNSUPPORTED_VALUE, EncodingError
from .model import INT64_MAX, INT64_MIN


class BencodeSerializable(object):
    """
    Base class for objects with a bencode representation of their own.

    bencode_serialize() must return a value the encoder supports (bytes,
    str, int, list, mapping or another serializable object); that value is
    encoded in place of the object.
    """

    def bencode_serialize(self):
        raise NotImplementedError()


def _bencode_key(key):
    if isinstance(key, bytes):
        return key
    if isinstance(key, str):
        return key.encode()
    if isinstance(key, int):
        return b"%d" % key
    raise EncodingError(UNSUPPORTED_VALUE, key)


# Unwrap chains of serializable objects, rejecting cycles
def _serialize(x):
    seen = {}
    while isinstance(x, BencodeSerializable):
        if id(x) in seen:
            raise EncodingError(UNSUPPORTED_VALUE, x)
        seen[id(x)] = x
        x = x.bencode_serialize()
    return x


def _bencode_int(result, x, source):
    if x < INT64_MIN or x > INT64_MAX:
        raise EncodingError(UNSUPPORTED_VALUE, source)
    result.append(b"i%de" % x)


# Append scalars to result, return an iterator over the items of containers
def _bencode_value(result, x):
    if isinstance(x, BencodeSerializable):
        x = _serialize(x)
    if isinstance(x, bytes):
        result.extend((b"%d:" % len(x), x))
    elif isinstance(x, (bytearray, memoryview)):
        x_bytes = bytes(x)
        result.extend((b"%d:" % len(x_bytes), x_bytes))
    elif isinstance(x, str):
        str_bytes = x.encode()
        result.extend((b"%d:" % len(str_bytes), str_bytes))
    elif isinstance(x, bool):
        result.append(b"i1e" if x else b"i0e")
    elif isinstance(x, int):
        _bencode_int(result, x, x)
    elif isinstance(x, float):
        if not x.is_integer():  # also rejects nan and inf
            raise EncodingError(UNSUPPORTED_VALUE, x)
        _bencode_int(result, int(x), x)
    elif isinstance(x, (list, tuple)):
        result.append(b"l")
        return iter(x)
    elif isinstance(x, Mapping):
        items = sorted(
            ((_bencode_key(k), v) for k, v in x.items()), key=lambda item: item[0]
        )
        for idx in range(1, len(items)):
            if items[idx - 1][0] == items[idx][0]:
                raise EncodingError("Duplicate dictionary key", x)
        result.append(b"d")
        return chain.from_iterable(items)
    else:
        raise EncodingError(UNSUPPORTED_VALUE, x)
    return None


def encode(x) -> bytes:
    """
    Encode x into canonical bencode.

    Dictionary keys are sorted by byte value, booleans and integral floats
    are written as integers. Values without a bencode representation raise
    an EncodingError carrying the offending value.
    """
    result = []
    pending = [iter((x,))]
    while pending:
        for value in pending[-1]:
            items = _bencode_value(result, value)
            if items is not None:
                pending.append(items)
                break
        else:
            pending.pop()
            if pending:
                result.append(b"e")
    return b"".join(result)
