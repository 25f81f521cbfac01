"""Small helpers for parsing text typed at a prompt."""

import re
import sys

WHITESPACE = " \n\r\t\f\v"

_HEX = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")


def ltrim(s):
    """Strip leading whitespace."""
    return s.lstrip(WHITESPACE)


def rtrim(s):
    """Strip trailing whitespace."""
    return s.rstrip(WHITESPACE)


def trim(s):
    """Strip whitespace from both ends."""
    return rtrim(ltrim(s))


def read_words(stream=None):
    """Read one line from ``stream`` (standard input by default) and split it into words."""
    source = sys.stdin if stream is None else stream
    return source.readline().split()


def parse_hex(text):
    """Parse the leading hexadecimal number of ``text`` as a 16-bit value."""
    match = _HEX.match(text)
    if match is None:
        raise ValueError(f"not a hexadecimal number: {text!r}")
    value = int(match.group(1), 16)
    if value > 0xFFFF:
        raise ValueError(f"hexadecimal number out of 16-bit range: {text!r}")
    return value