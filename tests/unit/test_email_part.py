"""
Unit tests for the EmailPart model (models/email_part.py).
"""

import pytest
from pydantic import ValidationError

from eml_decoder.models.email_part import EmailPart


class TestEmailPart:
    """Tests for EmailPart helpers."""

    @pytest.mark.unit
    def test_defaults(self):
        part = EmailPart()

        assert part.headers == {}
        assert part.content == ""
        assert part.parts == []
        assert part.filename is None
        assert part.charset is None

    @pytest.mark.unit
    def test_get_header_case_insensitive(self):
        part = EmailPart(headers={"Content-Type": "text/html"})

        assert part.get_header("content-type") == "text/html"
        assert part.get_header("X-Missing") == ""
        assert part.get_header("X-Missing", "n/a") == "n/a"

    @pytest.mark.unit
    def test_content_type(self):
        part = EmailPart(headers={"Content-Type": 'Text/HTML; charset="utf-8"'})
        assert part.content_type == "text/html"

    @pytest.mark.unit
    def test_content_type_default(self):
        assert EmailPart().content_type == "text/plain"

    @pytest.mark.unit
    def test_is_attachment(self):
        by_disposition = EmailPart(headers={"Content-Disposition": 'Attachment; filename="a"'})
        by_filename = EmailPart(filename="a.txt")
        inline = EmailPart(headers={"Content-Disposition": "inline"})

        assert by_disposition.is_attachment
        assert by_filename.is_attachment
        assert not inline.is_attachment

    @pytest.mark.unit
    def test_walk_pre_order(self):
        leaf_a = EmailPart(content="a")
        leaf_b = EmailPart(content="b")
        inner = EmailPart(content="", parts=[leaf_b])
        root = EmailPart(parts=[leaf_a, inner])

        assert [p.content for p in root.walk()] == ["", "a", "", "b"]
        assert list(root.walk())[3] is leaf_b
        assert root.is_multipart
        assert not leaf_a.is_multipart

    @pytest.mark.unit
    def test_frozen(self):
        part = EmailPart(content="x")
        with pytest.raises(ValidationError):
            part.content = "y"

    @pytest.mark.unit
    def test_json_dump(self):
        root = EmailPart(headers={"Subject": "Hi"}, parts=[EmailPart(content="body", charset="utf-8")])
        data = root.model_dump(mode="json")

        assert data["headers"] == {"Subject": "Hi"}
        assert data["parts"][0]["content"] == "body"
        assert data["parts"][0]["charset"] == "utf-8"
