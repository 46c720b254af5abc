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

from .decoder import Decoder, LenientDecoder, decode, decode_lenient
from .encoder import BencodeSerializable, encode
from .errors import (
    DUPLICATE_ENTRY,
    ILLEGAL_CHARACTER,
    INTEGER_OVERFLOW,
    OUT_OF_ORDER_ENTRY,
    PREMATURE_END_OF_DATA,
    STRING_LENGTH_OVERFLOW,
    SUPERFLUOUS_CONTENT,
    UNSUPPORTED_VALUE,
    BEncodingError,
    ComplianceError,
    DecodingError,
    EncodingError,
)
from .model import INT64_MAX, INT64_MIN, Value

__version__ = "1.0.0"

__all__ = [
    "decode",
    "decode_lenient",
    "encode",
    "Decoder",
    "LenientDecoder",
    "BencodeSerializable",
    "BEncodingError",
    "DecodingError",
    "ComplianceError",
    "EncodingError",
    "PREMATURE_END_OF_DATA",
    "ILLEGAL_CHARACTER",
    "SUPERFLUOUS_CONTENT",
    "DUPLICATE_ENTRY",
    "OUT_OF_ORDER_ENTRY",
    "INTEGER_OVERFLOW",
    "STRING_LENGTH_OVERFLOW",
    "UNSUPPORTED_VALUE",
    "INT64_MIN",
    "INT64_MAX",
    "Value",
]
