#!/usr/bin/env python3
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
import sys
from argparse import ArgumentParser

from tinybencode import BEncodingError, decode, decode_lenient, encode

log = logging.getLogger("tinybencode")


def format_bytes(value, preview=20):
    try:
        text = value.decode("utf-8")
    except UnicodeDecodeError:
        text = None
    if text is not None and text.isprintable():
        return repr(text)
    ellipsis = "..." if len(value) > preview else ""
    return "<%d bytes: %s%s>" % (len(value), value[:preview].hex(), ellipsis)


def dump_lines(value, prefix="", level=0):
    pad = "  " * level
    if isinstance(value, dict):
        yield pad + prefix + "{"
        for key, item in value.items():
            yield from dump_lines(item, "%s: " % format_bytes(key), level + 1)
        yield pad + "}"
    elif isinstance(value, list):
        yield pad + prefix + "["
        for item in value:
            yield from dump_lines(item, "", level + 1)
        yield pad + "]"
    elif isinstance(value, bytes):
        yield pad + prefix + format_bytes(value)
    else:
        yield pad + prefix + str(value)


def main(command_line=None):
    parser = ArgumentParser(
        prog="tinybencode", description="Check, dump and canonicalize bencoded files"
    )
    parser.add_argument("path", help="bencoded file, eg. a .torrent")
    parser.add_argument(
        "--lenient", action="store_true", help="accept non-canonical input"
    )
    parser.add_argument("--dump", action="store_true", help="print the decoded value")
    parser.add_argument(
        "--output", metavar="FILE", help="write the canonical encoding to FILE"
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(command_line)

    logging.basicConfig()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        with open(args.path, "rb") as handle:
            data = handle.read()
    except OSError as error:
        print("%s: %s" % (args.path, error), file=sys.stderr)
        return 1

    try:
        if args.lenient:
            value = decode_lenient(data)
        else:
            value = decode(data)
    except BEncodingError as error:
        print("%s: %s" % (args.path, error), file=sys.stderr)
        return 2

    if args.dump:
        for line in dump_lines(value):
            print(line)

    if args.output:
        canonical = encode(value)
        try:
            with open(args.output, "wb") as handle:
                handle.write(canonical)
        except OSError as error:
            print("%s: %s" % (args.output, error), file=sys.stderr)
            return 1
        if canonical != data:
            log.info("%s: canonical encoding differs from the input" % args.path)

    print("%s: ok" % args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
