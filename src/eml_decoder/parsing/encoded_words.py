"""
RFC 2047 encoded-word decoder.

Replaces every ``=?charset?encoding?payload?=`` token in a header value with its
decoded text. Text outside encoded words is passed through unchanged, and broken
tokens are copied verbatim rather than rejected.
"""

from typing import Optional

import structlog

from .charset import convert_or_passthrough, decode_base64, to_raw
from .quoted_printable import decode_quoted_printable

logger = structlog.get_logger(__name__)

ENCODED_WORD_START = "=?"
ENCODED_WORD_END = "?="


def decode_word_payload(payload: str, encoding: str) -> bytes:
    """
    Decode the payload of one encoded word.

    Args:
        payload: Text between the encoding and the ``?=`` terminator
        encoding: Encoding letter(s) as declared

    Returns:
        Decoded bytes; the raw payload for unknown encodings or bad base64
    """
    letter = encoding[:1].upper()
    if letter == "B":
        decoded: Optional[bytes] = decode_base64(payload)
        if decoded is None:
            logger.debug("encoded_word_bad_base64", payload=payload)
            return to_raw(payload)
        return decoded
    if letter == "Q":
        # RFC 2047: underscore stands for a space
        return decode_quoted_printable(payload.replace("_", " "))
    return to_raw(payload)


def decode_encoded_words(value: str) -> str:
    """
    Decode all RFC 2047 encoded words in a header value.

    Adjacent encoded words are concatenated with nothing in between.

    Args:
        value: Raw header value

    Returns:
        Header value with encoded words replaced by their text
    """
    if ENCODED_WORD_START not in value:
        return value

    chunks = []
    position = 0
    length = len(value)

    while position < length:
        start = value.find(ENCODED_WORD_START, position)
        if start == -1:
            chunks.append(value[position:])
            break
        chunks.append(value[position:start])

        charset_end = value.find("?", start + 2)
        if charset_end == -1:
            chunks.append(value[start : start + 2])
            position = start + 2
            continue

        encoding_end = value.find("?", charset_end + 1)
        if encoding_end == -1:
            chunks.append(value[start : charset_end + 1])
            position = charset_end + 1
            continue

        payload_end = value.find(ENCODED_WORD_END, encoding_end + 1)
        if payload_end == -1:
            chunks.append(value[start : encoding_end + 1])
            position = encoding_end + 1
            continue

        charset = value[start + 2 : charset_end]
        encoding = value[charset_end + 1 : encoding_end]
        payload = value[encoding_end + 1 : payload_end]

        chunks.append(convert_or_passthrough(decode_word_payload(payload, encoding), charset))
        position = payload_end + 2

    return "".join(chunks)
