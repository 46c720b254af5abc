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

from typing import Optional

# Decoding failure kinds
PREMATURE_END_OF_DATA = "Premature end of data"
ILLEGAL_CHARACTER = "Illegal character"
SUPERFLUOUS_CONTENT = "Superfluous content"
DUPLICATE_ENTRY = "Duplicate dictionary entry"
OUT_OF_ORDER_ENTRY = "Out of order dictionary entry"
INTEGER_OVERFLOW = "Integer overflow"
STRING_LENGTH_OVERFLOW = "String length overflow"

# Encoding failure kinds
UNSUPPORTED_VALUE = "Unsupported value"


def describe(kind: str, offset: int, subject: Optional[str] = None) -> str:
    if subject is None:
        return "%s at offset %d" % (kind, offset)
    return "%s '%s' at offset %d" % (kind, subject, offset)


class BEncodingError(Exception):
    pass


class DecodingError(BEncodingError):
    """
    Raised when a bencoded buffer cannot be decoded.

    kind is one of the decoding failure kinds above, offset the position of
    the offending byte in the input and subject the dictionary key involved,
    if any.
    """

    def __init__(self, kind: str, offset: int, subject: Optional[str] = None):
        self.kind = kind
        self.offset = offset
        self.subject = subject
        super().__init__(describe(kind, offset, subject))


class ComplianceError(DecodingError):
    """Well-formed but non-canonical input (leading zeros, key order, trailing data)"""


class EncodingError(BEncodingError):
    def __init__(self, message: str, value):
        self.value = value
        super().__init__(message)
