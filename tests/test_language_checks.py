"""Tests for lexical quality checks."""

import pytest

from arabic_seo_analyzer.content_sources import doc_node, heading_node, paragraph_node
from arabic_seo_analyzer.document import flatten_document
from arabic_seo_analyzer.language_checks import (
    check_arabic_only,
    check_cta_words,
    check_interactive_language,
    check_repeated_bigrams,
    check_slow_words,
    check_transitional_words,
    check_warning_words,
    check_word_consistency,
)
from arabic_seo_analyzer.models import AnalysisStatus


def flat_of(*texts):
    return flatten_document(doc_node([paragraph_node(t) for t in texts]))


class TestTransitionalWords:
    """Tests for the transitional sentence share."""

    def test_one_in_three_passes(self):
        result = check_transitional_words("كذلك الرحلة ممتعة. الطقس جميل. الطعام لذيذ.")
        assert result.status is AnalysisStatus.PASS
        assert result.current == "33%"

    def test_one_in_four_warns(self):
        text = "كذلك الرحلة ممتعة. الطقس جميل. الطعام لذيذ. السوق قريب."
        assert check_transitional_words(text).status is AnalysisStatus.WARN

    def test_none_fails(self):
        assert check_transitional_words("الطقس جميل. الطعام لذيذ.").status is AnalysisStatus.FAIL

    def test_empty_text(self):
        result = check_transitional_words("")
        assert result.status is AnalysisStatus.FAIL
        assert result.current == "0%"


class TestPresenceChecks:
    def test_cta(self):
        assert check_cta_words("احجز رحلتك اليوم").status is AnalysisStatus.PASS
        result = check_cta_words("نص عادي")
        assert result.status is AnalysisStatus.FAIL
        assert result.current == "غير موجود"

    def test_warning_words(self):
        assert check_warning_words("نصيحة: احمل الماء").current == "موجودة"
        assert check_warning_words("نص عادي").current == "غير موجودة"


class TestInteractiveLanguage:
    def test_share_above_threshold(self):
        text = "يمكنك " + " ".join(["كلمة"] * 999)
        result = check_interactive_language(text, 1000)
        assert result.status is AnalysisStatus.PASS
        assert result.current == "0.100%"

    def test_no_interactive_words(self):
        assert check_interactive_language("نص عادي", 2).status is AnalysisStatus.FAIL

    def test_zero_words(self):
        result = check_interactive_language("", 0)
        assert result.status is AnalysisStatus.FAIL
        assert result.progress == 0


class TestArabicOnly:
    """Tests for Latin word detection."""

    def test_primary_keyword_words_are_exempt(self):
        flat = flat_of("زرت Riyadh مع خدمات SEO")
        result = check_arabic_only(flat, "SEO خدمات", 100)
        assert result.status is AnalysisStatus.FAIL
        assert [item.message for item in result.violating_items] == ["كلمة لاتينية: Riyadh"]

    def test_low_share_warns(self):
        result = check_arabic_only(flat_of("زرت Riyadh"), "", 1000)
        assert result.status is AnalysisStatus.WARN
        assert result.current == "0.10%"

    def test_headings_are_inspected(self):
        flat = flatten_document(doc_node([heading_node("دليل Riyadh", 2)]))
        assert check_arabic_only(flat, "", 1000).violation_count == 1

    def test_arabic_text_passes(self):
        assert check_arabic_only(flat_of("نص عربي"), "", 2).status is AnalysisStatus.PASS


class TestSlowWords:
    def test_high_share_fails(self):
        flat = flat_of("في الواقع الرحلة ممتعة.")
        result = check_slow_words(flat, 10)
        assert result.status is AnalysisStatus.FAIL
        assert result.current == "20.0%"
        assert result.violating_items[0].message == "كلمة بطيئة: في الواقع"

    def test_low_share_passes(self):
        assert check_slow_words(flat_of("في الواقع الرحلة ممتعة."), 1000).status is AnalysisStatus.PASS

    def test_empty(self):
        assert check_slow_words(flat_of(), 0).current == "0%"


class TestRepeatedBigrams:
    def test_repeated_phrase(self):
        text = "من خلال الفريق. من خلال الخبرة."
        result = check_repeated_bigrams(flat_of(text), text)
        assert result.status is AnalysisStatus.FAIL
        assert result.current == "1 عبارة مكررة"
        assert [item.message for item in result.violating_items] == ["العبارة المكررة: من خلال"] * 2

    def test_single_use_passes(self):
        text = "من خلال الفريق."
        assert check_repeated_bigrams(flat_of(text), text).status is AnalysisStatus.PASS


class TestWordConsistency:
    """Tests for spelling consistency."""

    def test_hamza_variants_reported(self):
        result = check_word_consistency(flat_of("زار أحمد المدينة.", "ثم عاد احمد."))
        assert result.status is AnalysisStatus.FAIL
        assert result.current == "1 مجموعة متناقضة"
        messages = {item.message for item in result.violating_items}
        assert messages == {"تناقض: أحمد, احمد"}
        assert result.violation_count == 2

    @pytest.mark.parametrize("texts", [
        ("زار أحمد المدينة.", "ثم عاد أحمد."),
        ("نص واحد فقط.",),
    ])
    def test_consistent_text_passes(self, texts):
        assert check_word_consistency(flat_of(*texts)).status is AnalysisStatus.PASS
