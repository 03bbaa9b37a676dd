"""Tests for repeated n-gram detection."""

from arabic_seo_analyzer.content_sources import doc_node, heading_node, paragraph_node
from arabic_seo_analyzer.document import flatten_document
from arabic_seo_analyzer.duplicates import duplicate_stats, find_duplicates, is_keyword_phrase, tokenize
from arabic_seo_analyzer.models import NGRAM_SIZES, Keywords

REPEATING_TEXT = "الفريق المحترف يقدم خدمة. خدمة الفريق المحترف رائعة."


class TestTokenize:
    def test_punctuation_removed_and_normalized(self):
        originals, normalized = tokenize("مرحبًا، بالعالم!")
        assert originals == ["مرحبًا", "بالعالم"]
        assert normalized == ["مرحبا", "بالعالم"]

    def test_tokens_that_normalize_to_nothing_are_dropped(self):
        originals, normalized = tokenize("نص ـ آخر")
        assert originals == ["نص", "آخر"]
        assert normalized == ["نص", "اخر"]


class TestFindDuplicates:
    """Tests for n-gram bucketing."""

    def test_repeated_bigram(self):
        flat = flatten_document(doc_node([paragraph_node(REPEATING_TEXT)]))
        analysis = find_duplicates(flat, Keywords())
        assert [(p.text, p.count) for p in analysis[2]] == [("الفريق المحترف", 2)]
        assert all(not analysis[n] for n in NGRAM_SIZES if n != 2)

    def test_repeats_across_blocks(self):
        flat = flatten_document(doc_node([
            heading_node("رحلة الرياض", 2),
            paragraph_node("رحلة الرياض ممتعة."),
        ]))
        phrases = find_duplicates(flat, Keywords())[2]
        assert [(p.text, p.count) for p in phrases] == [("رحلة الرياض", 2)]

    def test_spelling_variants_share_a_bucket(self):
        flat = flatten_document(doc_node([paragraph_node("مدينة أبها الجميلة ثم مدينة ابها")]))
        phrases = find_duplicates(flat, Keywords())[2]
        assert len(phrases) == 1
        assert phrases[0].text == "مدينة أبها"

    def test_keyword_tagging(self):
        flat = flatten_document(doc_node([paragraph_node(REPEATING_TEXT)]))
        phrase = find_duplicates(flat, Keywords(primary="المحترف"))[2][0]
        assert phrase.contains_keyword

    def test_empty_document(self):
        analysis = find_duplicates(flatten_document(None), Keywords())
        assert analysis.all_phrases() == []
        assert set(analysis.to_dict()) == {"2", "3", "4", "5", "6", "7", "8"}


class TestKeywordPhrase:
    def test_containment_in_both_directions(self):
        assert is_keyword_phrase("فندق الرياض", ["الرياض"])
        assert is_keyword_phrase("الرياض", ["فندق الرياض"])
        assert not is_keyword_phrase("رحلة جدة", ["الرياض"])


class TestDuplicateStats:
    def test_counters(self):
        flat = flatten_document(doc_node([paragraph_node(REPEATING_TEXT)]))
        analysis = find_duplicates(flat, Keywords(primary="المحترف"))
        stats = duplicate_stats(REPEATING_TEXT, analysis)
        assert stats.total_words == 8
        assert stats.keyword_duplicates_count == 1
        assert stats.common_duplicates_count == 0
        assert stats.total_duplicates == 1
        assert set(stats.to_dict()) == {
            "totalWords", "uniqueWords", "keywordDuplicatesCount",
            "commonDuplicatesCount", "totalDuplicates",
        }
