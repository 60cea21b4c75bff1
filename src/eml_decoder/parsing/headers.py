"""
Header field parser.

Splits a message (or a multipart sub-part) into its header block and body. Header
values are decoded with the RFC 2047 decoder. Functions take an explicit line
position and return the position where parsing stopped, so nested multipart
parsing never shares a cursor.
"""

import re
from typing import Dict, List, Optional, Tuple

from .charset import clean_text
from .encoded_words import decode_encoded_words

_CONTINUATION_CHARS = (" ", "\t")


def split_lines(message: str) -> List[str]:
    """
    Normalize line endings to ``\\n`` and split into lines.

    Args:
        message: Raw message text

    Returns:
        Lines without terminators
    """
    normalized = message.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.split("\n")


def header_param(value: str, name: str) -> Optional[str]:
    """
    Extract a parameter from a structured header value.

    ``header_param('text/plain; charset="utf-8"', "charset")`` -> ``'utf-8'``

    Args:
        value: Header value (e.g. Content-Type)
        name: Parameter name, matched case-insensitively

    Returns:
        Parameter value without quotes, or None if absent or empty
    """
    pattern = re.compile(
        r'(?:^|[;\s])' + re.escape(name) + r'\s*=\s*(?:"([^"]*)"?|([^;\s]*))',
        re.IGNORECASE,
    )
    match = pattern.search(value)
    if not match:
        return None
    param = match.group(1) if match.group(1) is not None else match.group(2)
    param = param.strip()
    return param or None


def get_header(headers: Dict[str, str], name: str, default: str = "") -> str:
    """Case-insensitive lookup in a header mapping."""
    if name in headers:
        return headers[name]
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return default


def _finalize(headers: Dict[str, str], key: str, raw_value: str) -> None:
    if key:
        headers[key] = clean_text(decode_encoded_words(raw_value).lstrip())


def parse_header_block(lines: List[str], start: int = 0) -> Tuple[Dict[str, str], int]:
    """
    Parse a header block with folded continuation lines.

    Continuation lines (leading space or tab) are appended to the pending value with
    their leading whitespace removed and no separator. Lines without a colon are
    dropped. The block ends at the first empty line.

    Args:
        lines: Message lines
        start: Index of the first header line

    Returns:
        Tuple of (decoded headers, index of the first body line)
    """
    headers: Dict[str, str] = {}
    current_key = ""
    raw_value = ""
    i = start

    while i < len(lines):
        line = lines[i].rstrip()

        if not line:
            _finalize(headers, current_key, raw_value)
            return headers, i + 1

        if line.startswith(_CONTINUATION_CHARS):
            if current_key:
                raw_value += line.lstrip()
        else:
            _finalize(headers, current_key, raw_value)
            key, sep, rest = line.partition(":")
            if sep:
                current_key = key.strip()
                raw_value = rest
            else:
                # Not a header line
                current_key = ""
                raw_value = ""
        i += 1

    _finalize(headers, current_key, raw_value)
    return headers, i


def parse_header_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Parse a single ``Key: value`` line without folding.

    Returns:
        Tuple of (key, decoded value), or None for lines without a colon
    """
    key, sep, rest = line.rstrip().partition(":")
    if not sep:
        return None
    return key.strip(), clean_text(decode_encoded_words(rest.strip()).strip())


def parse_part_headers(
    lines: List[str],
    start: int,
    unfold: bool = False,
    stop_prefix: Optional[str] = None,
) -> Tuple[Dict[str, str], int]:
    """
    Parse the header block of a multipart sub-part.

    The block ends at the first empty line, or at a line starting with
    ``stop_prefix`` (a delimiter of a part that has no body). Each line is parsed
    on its own unless ``unfold`` is set, in which case the folding rules of
    parse_header_block() apply.

    Args:
        lines: Message lines
        start: Index of the line after the boundary
        unfold: Join folded continuation lines
        stop_prefix: Delimiter prefix that also ends the block

    Returns:
        Tuple of (decoded headers, index of the first body line)
    """
    end = start
    while end < len(lines) and lines[end]:
        if stop_prefix and lines[end].startswith(stop_prefix):
            break
        end += 1

    block = lines[start:end]
    if unfold:
        headers, _ = parse_header_block(block)
    else:
        headers = {}
        for line in block:
            parsed = parse_header_line(line)
            if parsed is not None:
                key, value = parsed
                headers[key] = value

    # Skip the blank separator line
    if end < len(lines) and not lines[end]:
        end += 1
    return headers, end
