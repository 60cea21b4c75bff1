"""
Multipart body splitter.

Partitions a multipart body into sibling parts at ``--boundary`` delimiter lines,
parses each part's headers and builds a leaf or a nested container for it.
"""

from typing import Dict, List, Optional, Tuple

import structlog

from ..config import DecoderSettings, settings
from ..models.email_part import EmailPart
from .content import decode_content
from .headers import get_header, header_param, parse_part_headers

logger = structlog.get_logger(__name__)


def multipart_boundary(headers: Dict[str, str]) -> Optional[str]:
    """
    Get the boundary of a multipart part.

    Returns:
        Boundary token, or None when the part is not multipart or has no boundary
    """
    content_type = get_header(headers, "Content-Type")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if not media_type.startswith("multipart/"):
        return None
    boundary = header_param(content_type, "boundary")
    if boundary is None:
        logger.warning("multipart_boundary_missing", content_type=content_type)
    return boundary


def build_part(
    headers: Dict[str, str],
    body_lines: List[str],
    config: Optional[DecoderSettings] = None,
    depth: int = 0,
) -> EmailPart:
    """
    Build a part from its decoded headers and raw body lines.

    Multipart bodies are split recursively into a container. A multipart part with
    no boundary, no delimiter lines or too deep a nesting is decoded as a leaf.

    Args:
        headers: Decoded headers of the part
        body_lines: Raw body lines
        config: Decoder settings (module settings if omitted)
        depth: Multipart nesting depth of this part

    Returns:
        Container or leaf EmailPart
    """
    config = config or settings
    boundary = multipart_boundary(headers)

    if boundary is not None:
        if depth >= config.max_nesting_depth:
            logger.warning("multipart_nesting_too_deep", depth=depth)
        else:
            parts, _ = split_multipart(body_lines, 0, boundary, config, depth + 1)
            if parts:
                return EmailPart(headers=headers, parts=parts)
            logger.warning("multipart_delimiter_not_found", boundary=boundary)

    content, charset = decode_content(headers, body_lines, config)
    return EmailPart(headers=headers, content=content, charset=charset)


def split_multipart(
    lines: List[str],
    start: int,
    boundary: str,
    config: Optional[DecoderSettings] = None,
    depth: int = 1,
) -> Tuple[List[EmailPart], int]:
    """
    Split a multipart body into its parts.

    Delimiters are matched by prefix (``line.startswith("--" + boundary)``); a
    delimiter followed by ``--`` closes the body. Lines before the first delimiter
    and after the closing one are ignored. When the closing delimiter is missing,
    the part pending at end of input is kept.

    Args:
        lines: Body lines
        start: Index of the first body line
        boundary: Boundary token from the Content-Type header
        config: Decoder settings (module settings if omitted)
        depth: Nesting depth of the parts being built

    Returns:
        Tuple of (parts in encounter order, index of the line after the closing
        delimiter or len(lines))
    """
    config = config or settings
    marker = "--" + boundary
    parts: List[EmailPart] = []
    pending: Optional[Tuple[Dict[str, str], int]] = None
    i = start

    while i < len(lines):
        line = lines[i]
        if not line.startswith(marker):
            i += 1
            continue

        if pending is not None:
            headers, body_start = pending
            parts.append(build_part(headers, lines[body_start:i], config, depth))
            pending = None

        if line[len(marker):].startswith("--"):
            return parts, i + 1

        headers, body_start = parse_part_headers(
            lines, i + 1, unfold=config.unfold_part_headers, stop_prefix=marker
        )
        pending = (headers, body_start)
        i = body_start

    if pending is not None:
        logger.debug("multipart_closing_delimiter_missing", boundary=boundary)
        headers, body_start = pending
        parts.append(build_part(headers, lines[body_start:], config, depth))

    return parts, len(lines)
