# Email decoding module

from .charset import convert_charset, convert_or_passthrough, decode_base64, detect_charset
from .content import decode_content, declared_charset, transfer_encoding
from .decoder import decode, decode_file
from .disposition import extract_filename, populate_filenames
from .encoded_words import decode_encoded_words
from .headers import header_param, parse_header_block, parse_part_headers, split_lines
from .multipart import build_part, split_multipart
from .quoted_printable import decode_quoted_printable

__all__ = [
    "decode",
    "decode_file",
    "decode_encoded_words",
    "decode_quoted_printable",
    "decode_base64",
    "decode_content",
    "declared_charset",
    "transfer_encoding",
    "convert_charset",
    "convert_or_passthrough",
    "detect_charset",
    "split_lines",
    "header_param",
    "parse_header_block",
    "parse_part_headers",
    "split_multipart",
    "build_part",
    "extract_filename",
    "populate_filenames",
]
