"""Tests for editor document parsing and flattening."""

from arabic_seo_analyzer.content_sources import doc_node, heading_node, list_node, paragraph_node
from arabic_seo_analyzer.document import (
    NodeKind,
    document_to_plain_text,
    flatten_document,
    iter_nested_paragraphs,
    parse_node,
    utf16_length,
)


def _hard_break_paragraph() -> dict:
    return {
        "type": "paragraph",
        "content": [
            {"type": "text", "text": "ab"},
            {"type": "hardBreak"},
            {"type": "text", "text": "cd"},
        ],
    }


class TestParseNode:
    """Tests for node validation."""

    def test_non_object_is_skipped(self):
        assert parse_node("paragraph") is None
        assert parse_node({"content": []}) is None

    def test_unknown_type_is_opaque(self):
        node = parse_node({"type": "table", "content": [paragraph_node("خلية")]})
        assert node.kind is NodeKind.OPAQUE
        assert node.plain_text == ""
        assert node.size == 2 + (2 + len("خلية"))

    def test_heading_level(self):
        node = parse_node(heading_node("عنوان", 3))
        assert node.kind is NodeKind.HEADING
        assert node.level == 3

    def test_malformed_children_skipped(self):
        node = parse_node({"type": "paragraph", "content": [None, 5, {"type": "text", "text": "نص"}]})
        assert node.plain_text == "نص"
        assert node.size == 4


class TestNodeSizes:
    """Tests for editor position addressing."""

    def test_text_size_in_utf16_units(self):
        assert utf16_length("abc") == 3
        assert utf16_length("😀") == 2

    def test_leaf_and_container_sizes(self):
        node = parse_node(_hard_break_paragraph())
        assert node.size == 2 + 2 + 1 + 2

    def test_block_positions(self):
        flat = flatten_document(doc_node([paragraph_node("abc"), heading_node("de", 2)]))
        assert [b.position for b in flat.blocks] == [1, 6]
        assert flat.total_size == 10
        assert flat.blocks[1].end == 10

    def test_empty_document(self):
        flat = flatten_document(None)
        assert flat.blocks == []
        assert flat.total_size == 1
        assert flatten_document({"type": "doc"}).blocks == []


class TestInlineSpans:
    """Tests for hard-break-aware span mapping."""

    def test_span_after_hard_break(self):
        flat = flatten_document(doc_node([_hard_break_paragraph()]))
        block = flat.blocks[0]
        assert block.inline.text == "abcd"
        assert block.absolute_span(2, 4) == (5, 7)

    def test_span_before_hard_break(self):
        flat = flatten_document(doc_node([_hard_break_paragraph()]))
        assert flat.blocks[0].absolute_span(0, 2) == (2, 4)


class TestFlatDocument:
    """Tests for block queries on the flattened document."""

    def test_sections(self):
        flat = flatten_document(doc_node([
            heading_node("أول", 2),
            paragraph_node("نص"),
            heading_node("فرعي", 3),
            paragraph_node("نص آخر"),
            heading_node("ثاني", 2),
        ]))
        body, end = flat.section(0, level=2)
        assert end == 4
        assert len(body) == 3
        body, end = flat.section(0)
        assert end == 2

    def test_introduction_is_blocks_before_first_heading(self):
        flat = flatten_document(doc_node([paragraph_node("مقدمة"), heading_node("عنوان", 2)]))
        assert [b.text for b in flat.introduction()] == ["مقدمة"]

    def test_faq_range(self, sample_article):
        flat = flatten_document(sample_article)
        assert len(flat.faq_ranges) == 1
        faq_heading = next(b for b in flat.headings if b.text == "الأسئلة الشائعة")
        question = flat.blocks[faq_heading.index + 1]
        conclusion = flat.headings[-1]
        assert flat.is_in_faq(question.position)
        assert not flat.is_in_faq(conclusion.position)

    def test_nested_paragraphs_include_list_items(self):
        flat = flatten_document(doc_node([paragraph_node("أ ب"), list_node(["بند"])]))
        found = [(node.plain_text, pos) for node, pos in iter_nested_paragraphs(flat)]
        # paragraph at 1 (size 5); list at 6, item at 7, item paragraph at 8
        assert found == [("أ ب", 1), ("بند", 8)]


class TestPlainText:
    def test_blocks_joined_by_blank_line(self):
        document = doc_node([heading_node("عنوان", 2), _hard_break_paragraph(), list_node(["بند"])])
        assert document_to_plain_text(document) == "عنوان\n\nab\ncd\n\nبند"

    def test_empty(self):
        assert document_to_plain_text(None) == ""
