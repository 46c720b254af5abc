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

import logging
import re

from .errors import (
    DUPLICATE_ENTRY,
    ILLEGAL_CHARACTER,
    INTEGER_OVERFLOW,
    OUT_OF_ORDER_ENTRY,
    PREMATURE_END_OF_DATA,
    STRING_LENGTH_OVERFLOW,
    SUPERFLUOUS_CONTENT,
    ComplianceError,
    DecodingError,
    describe,
)
from .model import (
    INT64_MAX,
    INT64_MIN,
    marker_colon,
    marker_dict,
    marker_digit_max,
    marker_digit_min,
    marker_end,
    marker_illegal_start,
    marker_int,
    marker_list,
    marker_minus,
)

_digits = re.compile(rb"[0-9]+")
_zeros = re.compile(rb"0*")

# Digit runs with more significant digits than INT64_MAX are out of range
# without having to be parsed
_max_significant_digits = len(str(INT64_MAX))
_out_of_range = 2**64

# Most frequent keys of torrent metainfo files, in their bencoded form
_fast_keys = ((b"4:path", b"path"), (b"6:length", b"length"))


class _DictFrame(object):
    __slots__ = ("values", "last_key", "unsorted")

    def __init__(self):
        self.values = {}
        self.last_key = None
        self.unsorted = False


class Decoder(object):
    """
    Strict bencode decoder.

    Only canonical input is accepted: integers and lengths without leading
    zeros, no negative zero, dictionary keys in strictly increasing byte
    order and nothing after the top-level value. Any violation raises a
    DecodingError (ComplianceError for the canonicalisation issues) carrying
    the offset of the offending byte.

    Containers are built on an explicit stack of frames, so the nesting depth
    is not limited by the interpreter recursion limit. Other buffers
    (bytearray, memoryview, mmap) are read through a memoryview, so byte
    strings are the only part of the input ever copied.
    """

    def __init__(self, data):
        if not isinstance(data, bytes):
            data = memoryview(data).cast("B")
        self._log = logging.getLogger(self.__class__.__name__)
        self._data = data
        self._length = len(data)
        self._offset = 0
        try:
            self._max = self._check_size()
        except DecodingError:
            self._release()
            raise

    @classmethod
    def decode(cls, data):
        decoder = cls(data)
        try:
            value = decoder._decode_anything()
            decoder._check_cursor_position()
        finally:
            decoder._release()
        return value

    def _release(self):
        # Lets the caller close or resize the buffer it handed in
        if isinstance(self._data, memoryview):
            self._data.release()

    # Private members #################################################

    def _check_size(self):
        if not self._length:
            raise DecodingError(PREMATURE_END_OF_DATA, 0)
        boundary = self._compute_safe_boundary()
        if boundary < 1:
            if self._data[0] in marker_illegal_start:
                raise DecodingError(ILLEGAL_CHARACTER, 0)
            raise self._premature_end()
        return boundary

    # Rightmost offset at which a value may start. Trailing digits could be
    # an unterminated integer or length, optionally preceded by "i" or "i-"
    def _compute_safe_boundary(self):
        data = self._data
        boundary = self._length - 1
        while boundary >= 0 and marker_digit_min <= data[boundary] <= marker_digit_max:
            boundary -= 1
        if boundary >= 0 and data[boundary] == marker_int:
            boundary -= 1
        elif (
            boundary >= 1
            and data[boundary] == marker_minus
            and data[boundary - 1] == marker_int
        ):
            boundary -= 2
        return boundary

    def _premature_end(self):
        return DecodingError(PREMATURE_END_OF_DATA, max(self._length - 1, 0))

    def _compliance_error(self, kind, offset, subject=None):
        raise ComplianceError(kind, offset, subject)

    def _check_cursor_position(self):
        if self._offset != self._length:
            if self._offset > self._length:
                raise self._premature_end()
            self._compliance_error(SUPERFLUOUS_CONTENT, self._offset)

    def _decode_anything(self):
        data = self._data
        stack = []
        while True:
            c = data[self._offset]
            if c == marker_dict:
                self._offset += 1
                stack.append(_DictFrame())
                value = None
            elif c == marker_list:
                self._offset += 1
                stack.append([])
                value = None
            elif c == marker_int:
                value = self._decode_integer()
            elif marker_digit_min <= c <= marker_digit_max:
                value = self._decode_string()
            else:
                raise DecodingError(ILLEGAL_CHARACTER, self._offset)

            # Attach the value to its container and close every container
            # that ends here, until the next value has to be decoded
            while True:
                if value is not None:
                    if not stack:
                        return value
                    frame = stack[-1]
                    if frame.__class__ is list:
                        frame.append(value)
                    else:
                        frame.values[frame.last_key] = value
                frame = stack[-1]
                if self._offset > self._max:
                    raise self._premature_end()
                if data[self._offset] != marker_end:
                    if frame.__class__ is _DictFrame:
                        self._decode_entry_key(frame)
                        if self._offset > self._max:
                            raise self._premature_end()
                    break
                self._offset += 1
                value = stack.pop()
                if value.__class__ is _DictFrame:
                    value = self._close_dictionary(value)

    def _decode_entry_key(self, frame):
        offset = self._offset
        key = self._decode_key()
        last_key = frame.last_key
        if last_key is not None and key <= last_key:
            frame.unsorted = True
            if key == last_key:
                kind = DUPLICATE_ENTRY
            else:
                kind = OUT_OF_ORDER_ENTRY
            self._compliance_error(
                kind, offset, key.decode("utf-8", "backslashreplace")
            )
        frame.last_key = key

    def _decode_key(self):
        offset = self._offset
        for bencoded, key in _fast_keys:
            end = offset + len(bencoded)
            if self._data[offset:end] == bencoded:
                self._offset = end
                return key
        return self._decode_string()

    def _close_dictionary(self, frame):
        if frame.unsorted:
            return dict(sorted(frame.values.items()))
        return frame.values

    def _decode_digits(self, terminator):
        data = self._data
        start = self._offset
        match = _digits.match(data, start)
        if match is None:
            raise DecodingError(ILLEGAL_CHARACTER, start)
        end = match.end()
        first = start
        if data[start] == marker_digit_min and end - start > 1:
            self._compliance_error(ILLEGAL_CHARACTER, start + 1)
            # Skip the redundant zeros but keep the last digit
            first = _zeros.match(data, start, end - 1).end()
        if data[end] != terminator:
            raise DecodingError(ILLEGAL_CHARACTER, end)
        self._offset = end + 1
        if end - first > _max_significant_digits:
            return _out_of_range
        return int(bytes(data[first:end]))

    def _decode_integer(self):
        data = self._data
        self._offset += 1
        start = self._offset
        negative = data[start] == marker_minus
        if negative:
            self._offset += 1
            if data[self._offset] == marker_digit_min:
                self._compliance_error(ILLEGAL_CHARACTER, self._offset)
        value = self._decode_digits(marker_end)
        if negative:
            value = -value
        if value < INT64_MIN or value > INT64_MAX:
            raise DecodingError(INTEGER_OVERFLOW, start)
        return value

    def _decode_string(self):
        length = self._decode_digits(marker_colon)
        offset = self._offset
        end = offset + length
        if end > INT64_MAX:
            raise DecodingError(STRING_LENGTH_OVERFLOW, offset - 1)
        if end > self._length:
            raise self._premature_end()
        self._offset = end
        return bytes(self._data[offset:end])


class LenientDecoder(Decoder):
    """
    Decoder for the non-canonical files found in the wild.

    Compliance violations are logged and ignored: leading zeros are skipped,
    trailing content is dropped and dictionaries with misordered or repeated
    keys are re-sorted once complete, the last occurrence of a key winning.
    Structural errors still raise a DecodingError.
    """

    def _compliance_error(self, kind, offset, subject=None):
        if self._log.isEnabledFor(logging.DEBUG):
            self._log.debug("Ignoring %s" % describe(kind, offset, subject))


def decode(data):
    return Decoder.decode(data)


def decode_lenient(data):
    return LenientDecoder.decode(data)
