"""
Attachment filename extraction.

The decoder leaves ``EmailPart.filename`` empty; this module fills it in from the
Content-Disposition ``filename`` parameter or the Content-Type ``name`` parameter.
"""

from typing import Optional

from ..models.email_part import EmailPart
from .headers import header_param


def extract_filename(part: EmailPart) -> Optional[str]:
    """
    Get the filename declared for a part.

    Args:
        part: Decoded part

    Returns:
        Filename, or None if the part declares none
    """
    filename = header_param(part.get_header("Content-Disposition"), "filename")
    if filename is None:
        filename = header_param(part.get_header("Content-Type"), "name")
    return filename


def populate_filenames(part: EmailPart) -> EmailPart:
    """
    Return a copy of the tree with ``filename`` set on every part that has one.

    Args:
        part: Root of a decoded tree

    Returns:
        New tree; parts without a declared filename are left unchanged
    """
    children = [populate_filenames(child) for child in part.parts]
    filename = extract_filename(part) if not part.parts else None
    if filename is None and not children:
        return part
    update = {"parts": children}
    if filename is not None:
        update["filename"] = filename
    return part.model_copy(update=update)
