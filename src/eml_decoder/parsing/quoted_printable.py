"""
Quoted-printable decoder (RFC 2045).

Handles ``=XX`` hex escapes and ``=`` soft line breaks. Invalid escapes are kept
verbatim so that no input byte is lost.
"""

from typing import Union

from .charset import to_raw

_EQUALS = ord("=")
_CR = ord("\r")
_LF = ord("\n")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def decode_quoted_printable(data: Union[str, bytes]) -> bytes:
    """
    Decode a quoted-printable sequence into raw bytes.

    Args:
        data: Escaped text (byte-transparent str) or bytes

    Returns:
        Decoded bytes
    """
    raw = to_raw(data)
    length = len(raw)
    output = bytearray()
    i = 0

    while i < length:
        byte = raw[i]
        if byte != _EQUALS:
            output.append(byte)
            i += 1
            continue

        # Trailing "=" with nothing after it
        if i + 1 >= length:
            output.append(_EQUALS)
            i += 1
            continue

        # Soft line breaks
        if raw[i + 1] == _LF:
            i += 2
            continue
        if raw[i + 1] == _CR and i + 2 < length and raw[i + 2] == _LF:
            i += 3
            continue

        # Only one character left, too short for an escape
        if i + 2 >= length:
            output += raw[i : i + 2]
            i += 2
            continue

        if raw[i + 1] in _HEX_DIGITS and raw[i + 2] in _HEX_DIGITS:
            output.append(int(raw[i + 1 : i + 3], 16))
        else:
            output += raw[i : i + 3]
        i += 3

    return bytes(output)
