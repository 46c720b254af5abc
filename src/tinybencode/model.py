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

from typing import Dict, List, Union

# Decoded values: Integer, ByteString, List, Dictionary
Value = Union[int, bytes, List["Value"], Dict[bytes, "Value"]]

# Bencode integers are signed 64-bit
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Wire markers ######################################################

marker_int = ord("i")
marker_list = ord("l")
marker_dict = ord("d")
marker_end = ord("e")
marker_minus = ord("-")
marker_colon = ord(":")
marker_digit_min = ord("0")
marker_digit_max = ord("9")

# Bytes that can never start a value
marker_illegal_start = frozenset(b"-e")
