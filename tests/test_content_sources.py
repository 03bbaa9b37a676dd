"""Tests for document loading functionality."""

import json
from pathlib import Path

import pytest

from arabic_seo_analyzer.content_sources import (
    DocumentLoadError,
    document_from_text,
    heading_node,
    load_document,
    load_docx_document,
    load_json_document,
    paragraph_node,
)
from arabic_seo_analyzer.document import NodeKind, flatten_document


def _types(document: dict) -> list[str]:
    return [block["type"] for block in document["content"]]


class TestNodeBuilders:
    def test_paragraph_line_breaks(self):
        node = paragraph_node("أ\nب")
        assert [child["type"] for child in node["content"]] == ["text", "hardBreak", "text"]

    def test_empty_paragraph_has_no_content(self):
        assert paragraph_node("") == {"type": "paragraph"}

    def test_heading_level_clamped(self):
        assert heading_node("عنوان", 6)["attrs"]["level"] == 4
        assert heading_node("عنوان", 0)["attrs"]["level"] == 1


class TestLoadDocxDocument:
    """Tests for Word document loading."""

    def test_block_structure(self, sample_docx: Path):
        """Test headings, paragraphs and grouped lists."""
        document = load_docx_document(sample_docx)
        assert _types(document) == [
            "heading", "paragraph", "heading", "bulletList", "orderedList", "paragraph", "heading",
        ]

    def test_heading_levels(self, sample_docx: Path):
        """Test that deep Word headings are capped at H4."""
        flat = flatten_document(load_docx_document(sample_docx))
        assert [h.level for h in flat.headings] == [1, 2, 4]
        assert flat.headings[0].text == "دليل السفر إلى الرياض"

    def test_list_items_grouped(self, sample_docx: Path):
        document = load_docx_document(sample_docx)
        bullet = document["content"][3]
        assert len(bullet["content"]) == 2

    def test_line_break_becomes_hard_break(self, sample_docx: Path):
        flat = flatten_document(load_docx_document(sample_docx))
        paragraph = flat.paragraphs[-1]
        kinds = [child.kind for child in paragraph.node.children]
        assert NodeKind.HARD_BREAK in kinds

    def test_load_nonexistent_docx(self, tmp_path: Path):
        """Test loading non-existent file."""
        with pytest.raises(DocumentLoadError, match="File not found"):
            load_docx_document(tmp_path / "nonexistent.docx")

    def test_load_non_docx_file(self, tmp_path: Path):
        """Test loading non-docx file."""
        txt_path = tmp_path / "file.txt"
        txt_path.write_text("ليس مستند وورد", encoding="utf-8")

        with pytest.raises(DocumentLoadError, match="must be a .docx file"):
            load_docx_document(txt_path)


class TestDocumentFromText:
    """Tests for plain text and Markdown conversion."""

    def test_markdown_blocks(self):
        text = "# العنوان\n\nفقرة أولى\nسطر ثان\n\n- بند\n- بند آخر\n\n1. خطوة\n2) خطوة ثانية"
        document = document_from_text(text)
        assert _types(document) == ["heading", "paragraph", "bulletList", "orderedList"]
        assert document["content"][0]["attrs"]["level"] == 1

    def test_lines_joined_by_hard_breaks(self):
        document = document_from_text("سطر أول\nسطر ثان")
        assert [child["type"] for child in document["content"][0]["content"]] == ["text", "hardBreak", "text"]

    def test_paragraph_then_list_in_one_chunk(self):
        document = document_from_text("الخطوات التالية:\n- أولى\n- ثانية")
        assert _types(document) == ["paragraph", "bulletList"]

    def test_switching_list_kind(self):
        document = document_from_text("- نقطة\n1. رقم")
        assert _types(document) == ["bulletList", "orderedList"]

    def test_empty_text(self):
        assert document_from_text("") == {"type": "doc", "content": []}


class TestLoadDocument:
    """Tests for extension dispatch."""

    def test_json(self, sample_json_document: Path, sample_article: dict):
        assert load_document(sample_json_document) == sample_article

    def test_markdown(self, tmp_path: Path):
        path = tmp_path / "article.md"
        path.write_text("## قسم\n\nنص القسم.", encoding="utf-8")
        assert _types(load_document(path)) == ["heading", "paragraph"]

    def test_json_must_be_doc(self, tmp_path: Path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"type": "paragraph"}), encoding="utf-8")
        with pytest.raises(DocumentLoadError, match='"type": "doc"'):
            load_json_document(path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DocumentLoadError, match="Failed to read JSON document"):
            load_json_document(path)

    def test_unsupported_format(self, tmp_path: Path):
        path = tmp_path / "article.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(DocumentLoadError, match="Unsupported file format"):
            load_document(path)
