"""Tests for paragraph and sentence level checks."""

import pytest

from arabic_seo_analyzer.config import AnalysisConfig, ContentGoal
from arabic_seo_analyzer.content_sources import doc_node, heading_node, list_node, paragraph_node
from arabic_seo_analyzer.document import flatten_document
from arabic_seo_analyzer.models import AnalysisStatus
from arabic_seo_analyzer.paragraph_checks import (
    check_automatic_lists,
    check_duplicate_words,
    check_paragraph_endings,
    check_paragraph_length,
    check_punctuation,
    check_second_paragraph,
    check_sentence_beginnings,
    check_sentence_length,
    check_spacing,
    check_steps_introduction,
    check_summary_paragraph,
    check_word_count,
    count_tour_days,
)


def words(n: int, word: str = "كلمة") -> str:
    return " ".join([word] * n)


def sentences(count: int, per_sentence: int) -> str:
    return " ".join(words(per_sentence) + "." for _ in range(count))


def flat_of(*blocks):
    return flatten_document(doc_node(list(blocks)))


class TestWordCount:
    """Tests for the article length check."""

    @pytest.mark.parametrize("total,status", [
        (0, AnalysisStatus.FAIL),
        (599, AnalysisStatus.FAIL),
        (700, AnalysisStatus.WARN),
        (800, AnalysisStatus.PASS),
    ])
    def test_sales_article(self, total, status):
        result = check_word_count(flat_of(), "", total, AnalysisConfig())
        assert result.status is status
        assert result.current == total

    def test_tour_program_minimum_from_days(self):
        config = AnalysisConfig(goal=ContentGoal.TOUR_PROGRAM)
        result = check_word_count(flat_of(), "رحلة 5 أيام إلى الرياض", 1600, config)
        assert result.required == "> 1900"
        assert result.status is AnalysisStatus.WARN

    def test_tour_program_default_minimum(self):
        config = AnalysisConfig(goal=ContentGoal.TOUR_PROGRAM)
        result = check_word_count(flat_of(), "رحلة قصيرة", 1100, config)
        assert result.required == "> 1100"
        assert result.status is AnalysisStatus.PASS


class TestCountTourDays:
    def test_explicit_duration(self):
        assert count_tour_days("برنامج 7 أيام", []) == 7

    def test_day_headings(self):
        flat = flat_of(
            heading_node("اليوم الأول: الوصول", 3),
            heading_node("اليوم الثاني: جولة", 3),
            heading_node("اليوم الحادي عشر: العودة", 3),
            heading_node("اليوم الأول", 3),
        )
        assert count_tour_days("", flat.headings) == 3

    def test_no_days(self):
        assert count_tour_days("", []) == 0


class TestIntroductionParagraphs:
    """Tests for the summary and second paragraph checks."""

    def test_summary_pass(self):
        result = check_summary_paragraph(flat_of(paragraph_node(sentences(2, 20))))
        assert result.status is AnalysisStatus.PASS
        assert result.current == "40 كلمة, 2 جمل"

    def test_summary_single_sentence_fails(self):
        assert check_summary_paragraph(flat_of(paragraph_node(words(40)))).status is AnalysisStatus.FAIL

    def test_summary_near_miss_warns(self):
        result = check_summary_paragraph(flat_of(paragraph_node(sentences(2, 14))))
        assert result.status is AnalysisStatus.WARN
        assert result.progress == 0.5

    def test_summary_missing(self):
        assert check_summary_paragraph(flat_of()).status is AnalysisStatus.FAIL

    def test_second_paragraph_must_be_in_introduction(self):
        flat = flat_of(
            paragraph_node(sentences(2, 20)),
            heading_node("عنوان", 2),
            paragraph_node(sentences(2, 20)),
        )
        result = check_second_paragraph(flat)
        assert result.status is AnalysisStatus.FAIL
        assert result.current == "لا يوجد فقرة ثانية في المقدمة"

    def test_second_paragraph_sentence_limit(self):
        flat = flat_of(paragraph_node(sentences(2, 20)), paragraph_node(sentences(4, 10)))
        assert check_second_paragraph(flat).status is AnalysisStatus.FAIL


class TestParagraphLength:
    def test_body_paragraphs(self):
        flat = flat_of(
            paragraph_node("مقدمة قصيرة."),
            heading_node("قسم", 2),
            paragraph_node(sentences(2, 25)),
            paragraph_node(sentences(2, 42)),
        )
        result = check_paragraph_length(flat)
        assert result.status is AnalysisStatus.WARN
        assert result.current == "0 مخالفة, 1 تحذير"

    def test_conclusion_paragraphs_excluded(self):
        flat = flat_of(heading_node("قسم", 2), paragraph_node("قصيرة جدا."))
        assert check_paragraph_length(flat).status is AnalysisStatus.FAIL
        assert check_paragraph_length(flat, [flat.blocks[1]]).status is AnalysisStatus.PASS


class TestSentenceLength:
    def test_long_sentence_span(self):
        text = "جملة قصيرة. " + words(30) + "."
        flat = flat_of(paragraph_node(text))
        result = check_sentence_length(flat)
        assert result.status is AnalysisStatus.FAIL
        item = result.violating_items[0]
        paragraph = flat.blocks[0]
        assert item.from_pos == paragraph.position + 1 + 12
        assert item.to_pos == paragraph.position + 1 + len(text)
        assert item.message == "الحالي: 30 كلمة"
        assert result.progress == 0.5

    def test_short_sentences_pass(self):
        assert check_sentence_length(flat_of(paragraph_node(sentences(3, 10)))).status is AnalysisStatus.PASS


class TestLists:
    """Tests for list lead-ins and list presence."""

    def test_list_at_document_start(self):
        result = check_steps_introduction(flat_of(list_node(["بند"])))
        assert result.status is AnalysisStatus.FAIL
        assert result.current == "لا توجد فقرة تمهيدية قبل القائمة."

    def test_list_after_heading(self):
        result = check_steps_introduction(flat_of(heading_node("خطوات", 2), list_node(["بند"])))
        assert result.current == "العنصر السابق للقائمة ليس فقرة (بل heading)."

    def test_good_lead_in(self):
        flat = flat_of(paragraph_node(words(30) + ":"), list_node(["بند"]))
        assert check_steps_introduction(flat).status is AnalysisStatus.PASS

    def test_automatic_lists(self):
        assert check_automatic_lists(flat_of(list_node(["بند"]))).status is AnalysisStatus.PASS
        assert check_automatic_lists(flat_of(paragraph_node("نص"))).status is AnalysisStatus.FAIL


class TestPunctuationAndSpacing:
    def test_paragraph_endings_punctuation(self):
        flat = flat_of(paragraph_node("نص صحيح."), paragraph_node("نص بلا نقطة"), paragraph_node("قائمة:"))
        result = check_punctuation(flat)
        assert result.status is AnalysisStatus.FAIL
        assert [item.message for item in result.violating_items] == ["الفقرة تنتهي ب 'ة'"]

    def test_double_space(self):
        result = check_spacing(flat_of(paragraph_node("كلمة  كلمة.")))
        assert [item.message for item in result.violating_items] == ["يوجد مسافات مزدوجة"]

    def test_space_around_comma(self):
        result = check_spacing(flat_of(paragraph_node("مرحبا ،اهلا.")))
        messages = {item.message for item in result.violating_items}
        assert messages == {"يوجد مسافة قبل علامة الترقيم", "لا يوجد مسافة بعد علامة الترقيم"}

    def test_ellipsis_is_one_mark(self):
        flat = flat_of(paragraph_node("انتظر...ثم تابع."))
        result = check_spacing(flat)
        assert len(result.violating_items) == 1
        item = result.violating_items[0]
        assert item.message == "لا يوجد مسافة بعد علامة الترقيم"
        assert (item.from_pos, item.to_pos) == (flat.blocks[0].position + 1 + 5, flat.blocks[0].position + 1 + 8)

    def test_ellipsis_followed_by_space_is_fine(self):
        assert check_spacing(flat_of(paragraph_node("انتظر... ثم تابع."))).status is AnalysisStatus.PASS

    def test_decimal_numbers_are_fine(self):
        assert check_spacing(flat_of(paragraph_node("السعر 3.5 ريال."))).status is AnalysisStatus.PASS


class TestRepetition:
    """Tests for repeated words, endings and beginnings."""

    def test_same_paragraph_ending(self):
        flat = flat_of(paragraph_node("استمتع بالرحلة."), paragraph_node("خطط جيدا للرحلة."))
        assert check_paragraph_endings(flat).status is AnalysisStatus.PASS
        flat = flat_of(paragraph_node("استمتع بالرحلة."), paragraph_node("خطط جيدا بالرحلة."))
        result = check_paragraph_endings(flat)
        assert result.status is AnalysisStatus.FAIL
        assert len(result.violating_items) == 2

    def test_short_last_words_ignored(self):
        flat = flat_of(paragraph_node("هذا ما في"), paragraph_node("ذلك ما في"))
        assert check_paragraph_endings(flat).status is AnalysisStatus.PASS

    def test_same_sentence_beginning(self):
        text = "الرحلة ممتعة. الرحلة طويلة."
        flat = flat_of(paragraph_node(text))
        result = check_sentence_beginnings(flat)
        assert result.status is AnalysisStatus.FAIL
        first, second = result.violating_items
        assert first.from_pos == flat.blocks[0].position + 1
        assert second.from_pos == flat.blocks[0].position + 1 + 14

    def test_sentence_beginnings_across_list_items(self):
        flat = flat_of(paragraph_node("الرحلة ممتعة."), list_node(["الرحلة طويلة."]))
        assert check_sentence_beginnings(flat).status is AnalysisStatus.FAIL

    def test_duplicate_word_in_paragraph(self):
        result = check_duplicate_words(flat_of(paragraph_node("السفر ممتع لأن السفر مفيد.")))
        assert result.status is AnalysisStatus.FAIL
        assert [item.message for item in result.violating_items] == ["الكلمة المكررة: السفر"] * 2

    def test_stoplist_applies_to_paragraphs_only(self):
        flat = flat_of(heading_node("الذي يعرف الذي", 2), paragraph_node("الذي يعرف الذي."))
        assert check_duplicate_words(flat).status is AnalysisStatus.PASS
        assert check_duplicate_words(flat, in_headings=True).status is AnalysisStatus.FAIL
