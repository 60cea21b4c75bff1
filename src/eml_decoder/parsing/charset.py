"""
Base64 and charset adapter.

Wraps Python's codecs and base64 module behind a uniform "decode payload bytes under
a declared charset" interface. Every failure is reported as ``None`` so that callers
can fall back to the undecoded bytes instead of failing the whole message.

Raw message text is byte-transparent: bytes that are not valid UTF-8 are carried
through ``str`` values as surrogate escapes, so ``to_raw(from_raw(data)) == data``.
"""

import base64
import binascii
import codecs
import re
from typing import Optional, Union

import charset_normalizer
import structlog

logger = structlog.get_logger(__name__)

# Each byte maps to the code point of the same value, so this never fails
PASSTHROUGH_CHARSET = "latin-1"

_SURROGATES = re.compile("[\ud800-\udfff]")


def from_raw(data: bytes) -> str:
    """Turn raw message bytes into byte-transparent text."""
    return data.decode("utf-8", errors="surrogateescape")


def to_raw(text: Union[str, bytes]) -> bytes:
    """
    Recover the raw bytes behind byte-transparent text.

    Args:
        text: Text produced by from_raw() (or any str), or bytes

    Returns:
        Original bytes; text that cannot round-trip is UTF-8 encoded with replacement
    """
    if isinstance(text, bytes):
        return text
    try:
        return text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", errors="replace")


def message_bytes(text: str) -> bytes:
    """
    Get the octets behind a message given as ``str``.

    Text whose code points all fit in one byte is taken one byte per code point,
    so 8-bit bodies keep the octets their declared charset describes. Any other
    text is taken as UTF-8.
    """
    try:
        return text.encode(PASSTHROUGH_CHARSET)
    except UnicodeEncodeError:
        return to_raw(text)


def normalize_charset_name(charset: str) -> str:
    """
    Clean a declared charset name for codec lookup.

    Strips whitespace, surrounding quotes and an RFC 2231 language suffix
    (``utf-8*en`` -> ``utf-8``).
    """
    name = charset.strip().strip("\"'").strip()
    return name.split("*", 1)[0]


def convert_charset(data: bytes, charset: str) -> Optional[str]:
    """
    Convert bytes from the declared charset to text.

    Args:
        data: Bytes encoded in ``charset``
        charset: Declared charset name

    Returns:
        Decoded text, or None when the charset is unknown or the bytes are invalid
    """
    name = normalize_charset_name(charset)
    if not name:
        return None
    try:
        codecs.lookup(name)
    except LookupError:
        logger.debug("charset_unknown", charset=charset)
        return None
    try:
        return data.decode(name)
    except UnicodeDecodeError as e:
        logger.debug("charset_conversion_failed", charset=name, error=str(e))
        return None


def passthrough(data: bytes) -> str:
    """Render bytes as-is, one code point per byte."""
    return data.decode(PASSTHROUGH_CHARSET)


def convert_or_passthrough(data: bytes, charset: str) -> str:
    """Convert bytes from ``charset``, falling back to the unconverted bytes."""
    text = convert_charset(data, charset)
    if text is None:
        return passthrough(data)
    return text


def decode_base64(text: Union[str, bytes]) -> Optional[bytes]:
    """
    Strictly decode base64, ignoring whitespace and line breaks.

    Args:
        text: Base64 text

    Returns:
        Decoded bytes, or None on an invalid alphabet or padding
    """
    compact = b"".join(to_raw(text).split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError):
        logger.debug("base64_decode_failed", length=len(compact))
        return None


def detect_charset(data: bytes) -> Optional[str]:
    """
    Guess the charset of undeclared bytes using charset-normalizer.

    Args:
        data: Raw payload bytes

    Returns:
        Detected encoding name (e.g. 'utf_8', 'cp1252'), or None if undetectable
    """
    if not data:
        return None
    detected = charset_normalizer.from_bytes(data).best()
    if detected:
        return detected.encoding
    return None


def _render_surrogate(match: "re.Match[str]") -> str:
    code = ord(match.group())
    if 0xDC80 <= code <= 0xDCFF:
        return chr(code - 0xDC00)
    return "\ufffd"


def clean_text(text: str) -> str:
    """
    Make byte-transparent text safe to expose.

    Raw bytes carried as surrogate escapes are rendered one code point per byte;
    any other lone surrogate becomes U+FFFD. All other characters, including text
    already decoded from encoded words, are left unchanged.
    """
    return _SURROGATES.sub(_render_surrogate, text)
