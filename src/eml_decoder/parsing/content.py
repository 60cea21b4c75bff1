"""
Content decoder for leaf parts.

Applies the declared Content-Transfer-Encoding (base64, quoted-printable or
identity) and converts the result from the declared charset to text.
"""

from typing import Dict, List, Optional, Tuple

import structlog

from ..config import DecoderSettings, settings
from .charset import (
    clean_text,
    convert_or_passthrough,
    decode_base64,
    detect_charset,
    normalize_charset_name,
    to_raw,
)
from .headers import get_header, header_param
from .quoted_printable import decode_quoted_printable

logger = structlog.get_logger(__name__)


def declared_charset(headers: Dict[str, str]) -> Optional[str]:
    """
    Get the ``charset`` parameter of the Content-Type header.

    Returns:
        Charset name without quotes, or None if not declared
    """
    charset = header_param(get_header(headers, "Content-Type"), "charset")
    if charset is None:
        return None
    return normalize_charset_name(charset) or None


def transfer_encoding(headers: Dict[str, str], default: str = "7bit") -> str:
    """Get the lower-cased Content-Transfer-Encoding, or ``default`` if absent."""
    value = get_header(headers, "Content-Transfer-Encoding").strip().lower()
    return value or default.lower()


def _undeclared_charset(data: bytes, config: DecoderSettings) -> str:
    if config.detect_undeclared_charset:
        detected = detect_charset(data)
        if detected:
            logger.debug("charset_detected", charset=detected)
            return detected
    return config.default_charset


def decode_content(
    headers: Dict[str, str],
    lines: List[str],
    config: Optional[DecoderSettings] = None,
) -> Tuple[str, str]:
    """
    Decode the raw content lines of a leaf part.

    The lines are joined with ``\\n``; the line break before a boundary belongs
    to the boundary and is not part of the content.

    Args:
        headers: Decoded headers of the part
        lines: Raw content lines
        config: Decoder settings (module settings if omitted)

    Returns:
        Tuple of (decoded content, charset applied)
    """
    config = config or settings
    raw_text = "\n".join(lines)
    encoding = transfer_encoding(headers, config.default_transfer_encoding)
    charset = declared_charset(headers)

    if encoding == "base64":
        data = decode_base64(raw_text)
        if data is None:
            logger.debug("content_base64_invalid", lines=len(lines))
            return clean_text(raw_text), charset or config.default_charset
    elif encoding == "quoted-printable":
        data = decode_quoted_printable(raw_text)
    else:
        # 7bit, 8bit, binary and unknown encodings
        data = to_raw(raw_text)

    if charset is None:
        charset = _undeclared_charset(data, config)

    return convert_or_passthrough(data, charset), charset
