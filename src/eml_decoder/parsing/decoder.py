"""
Email decoder entry point.

Decodes a raw RFC 5322 / MIME message into a tree of EmailPart objects. Decoding
never fails on malformed content: broken tokens, unknown charsets and missing
boundaries are recovered with best-effort text.
"""

from typing import Optional, Union

import structlog

from ..config import DecoderSettings, settings
from ..models.email_part import EmailPart
from .charset import from_raw, message_bytes
from .headers import parse_header_block, split_lines
from .multipart import build_part

logger = structlog.get_logger(__name__)


def decode(message: Union[str, bytes], config: Optional[DecoderSettings] = None) -> EmailPart:
    """
    Decode a raw message into its part tree.

    Args:
        message: Full raw message (headers and body). Bytes are taken as-is;
            str code points up to U+00FF are taken as single octets, other
            text as UTF-8
        config: Decoder settings (module settings if omitted)

    Returns:
        Root EmailPart of the decoded message

    Raises:
        TypeError: If message is neither str nor bytes
    """
    if isinstance(message, (bytes, bytearray)):
        text = from_raw(bytes(message))
    elif isinstance(message, str):
        text = from_raw(message_bytes(message))
    else:
        raise TypeError(f"message must be str or bytes, not {type(message).__name__}")

    config = config or settings
    lines = split_lines(text)
    headers, body_start = parse_header_block(lines)
    root = build_part(headers, lines[body_start:], config)

    logger.debug(
        "message_decoded",
        headers_count=len(headers),
        parts_count=sum(1 for _ in root.walk()) - 1,
    )
    return root


def decode_file(eml_path: str, config: Optional[DecoderSettings] = None) -> EmailPart:
    """
    Read and decode a .eml file.

    Args:
        eml_path: Path to .eml file
        config: Decoder settings (module settings if omitted)

    Returns:
        Root EmailPart of the decoded message

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    with open(eml_path, "rb") as f:
        eml_bytes = f.read()
    return decode(eml_bytes, config)
