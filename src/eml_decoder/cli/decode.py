"""
Command-line interface for decoding .eml files.

Prints the main headers and every decoded part of a message, or dumps the decoded
part tree as JSON.

Usage:
    # Single file, human-readable
    python -m eml_decoder.cli.decode input.eml

    # Decoded tree as JSON
    python -m eml_decoder.cli.decode input.eml --json

    # Directory batch processing (one JSON object per line)
    python -m eml_decoder.cli.decode emails/ --json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from eml_decoder.config import settings
from eml_decoder.logging_config import setup_logging
from eml_decoder.models.email_part import EmailPart
from eml_decoder.parsing.decoder import decode_file
from eml_decoder.parsing.disposition import populate_filenames
from eml_decoder.version import API_VERSION, DECODER_VERSION

logger = structlog.get_logger(__name__)

DEFAULT_PREVIEW_CHARS = 20


def render_text(root: EmailPart, preview: int = DEFAULT_PREVIEW_CHARS) -> str:
    """
    Render a decoded message for the console.

    Args:
        root: Decoded message (with filenames populated)
        preview: Number of characters of attachment content to show

    Returns:
        Multi-line summary of headers and parts
    """
    lines = [
        f"From: {root.get_header('From')}",
        f"To: {root.get_header('To')}",
        f"Subject: {root.get_header('Subject')}",
    ]
    if root.content:
        lines.append(root.content)

    for part in list(root.walk())[1:]:
        lines.append("")
        lines.append(f"Part Content-Type: {part.get_header('Content-Type')}")
        if part.is_multipart:
            continue
        if part.is_attachment:
            lines.append(f"Attachment: {part.filename or ''}")
            lines.append(f"File content: {part.content[:preview]}")
        else:
            lines.append(f"Body: {part.content}")

    return "\n".join(lines)


def process_single_file(eml_path: Path) -> EmailPart:
    """
    Decode a single .eml file and fill in attachment filenames.

    Args:
        eml_path: Path to .eml file

    Returns:
        Decoded message tree
    """
    logger.debug("decoding_file", path=str(eml_path))
    return populate_filenames(decode_file(str(eml_path)))


def process_directory(dir_path: Path) -> List[dict]:
    """
    Decode all .eml files in a directory tree.

    Args:
        dir_path: Directory path

    Returns:
        List of {"source": path, "message": tree} dicts for decodable files
    """
    eml_files = sorted(dir_path.glob("**/*.eml"))

    if not eml_files:
        logger.warning("no_eml_files_found", directory=str(dir_path))
        return []

    results = []
    errors = 0
    for eml_file in eml_files:
        try:
            root = process_single_file(eml_file)
        except OSError as e:
            logger.error("file_read_failed", file=str(eml_file), error=str(e))
            errors += 1
            continue
        results.append({"source": str(eml_file), "message": root.model_dump(mode="json")})

    logger.info(
        "directory_processing_completed",
        total=len(eml_files),
        success=len(results),
        errors=errors,
    )
    return results


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Email Decoder CLI - Decode RFC 5322 / MIME .eml files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print headers and parts
  %(prog)s input.eml

  # Dump the decoded tree as JSON
  %(prog)s input.eml --json

  # Decode every .eml below a directory (JSON lines)
  %(prog)s emails/ --json
        """,
    )

    parser.add_argument(
        "input",
        type=str,
        help="Path to .eml file or directory containing .eml files",
    )

    parser.add_argument(
        "--json",
        "-j",
        action="store_true",
        help="Output the decoded part tree as JSON",
    )

    parser.add_argument(
        "--preview",
        type=int,
        default=DEFAULT_PREVIEW_CHARS,
        help=f"Characters of attachment content to print (default: {DEFAULT_PREVIEW_CHARS})",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {API_VERSION} ({DECODER_VERSION})",
    )

    args = parser.parse_args(argv)
    setup_logging(log_level=args.log_level, log_json=False)

    input_path = Path(args.input)

    if not input_path.exists():
        print(f"Error: Path not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    if input_path.is_dir():
        for result in process_directory(input_path):
            print(json.dumps(result, ensure_ascii=False))
        return

    try:
        root = process_single_file(input_path)
    except OSError as e:
        logger.error("cli_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(root.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        print(render_text(root, preview=args.preview))


if __name__ == "__main__":
    main()
