"""
Email part model - a node of the decoded MIME tree.

This module defines the data structure returned by the decoder: a root part for the
whole message, with nested child parts for every multipart section.
"""

from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, Field


class EmailPart(BaseModel):
    """
    One node (leaf or container) of a decoded message.

    A container has a ``multipart/*`` Content-Type, children in ``parts`` and empty
    ``content``. A leaf has decoded ``content`` and no children.
    """

    headers: Dict[str, str] = Field(
        default_factory=dict, description="Decoded header values keyed by header name"
    )
    content: str = Field(default="", description="Decoded payload text")
    parts: List["EmailPart"] = Field(
        default_factory=list, description="Child parts (multipart containers only)"
    )
    filename: Optional[str] = Field(
        None, description="Attachment filename (filled by populate_filenames)"
    )
    charset: Optional[str] = Field(
        None, description="Charset applied to the content of a leaf part"
    )

    model_config = {"frozen": True}

    def get_header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        if name in self.headers:
            return self.headers[name]
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default

    @property
    def content_type(self) -> str:
        """Media type without parameters, lower-cased (``text/plain`` by default)."""
        value = self.get_header("Content-Type")
        media_type = value.split(";", 1)[0].strip().lower()
        return media_type or "text/plain"

    @property
    def is_multipart(self) -> bool:
        return bool(self.parts)

    @property
    def is_attachment(self) -> bool:
        disposition = self.get_header("Content-Disposition").lower()
        return "attachment" in disposition or self.filename is not None

    def walk(self) -> Iterator["EmailPart"]:
        """
        Walk this part and all of its descendants, depth-first.

        Yields:
            Parts in pre-order (self first)
        """
        yield self
        for part in self.parts:
            yield from part.walk()


EmailPart.model_rebuild()
