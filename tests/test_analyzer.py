"""Tests for the analysis entry point."""

import pytest

from arabic_seo_analyzer.analyzer import _analyze_cached, analyze, clear_cache
from arabic_seo_analyzer.config import ContentGoal
from arabic_seo_analyzer.content_sources import doc_node, paragraph_node
from arabic_seo_analyzer.document import parse_node
from arabic_seo_analyzer.models import NOT_APPLICABLE, AnalysisStatus, Keywords

SECTION_CHECKS = [
    "h2_structure", "h2_count", "h3_structure", "h4_structure",
    "between_h2_h3", "faq_section", "answer_paragraph", "ambiguous_headings",
]


@pytest.fixture
def riyadh_document():
    """A thousand-word single-paragraph document mentioning the primary six times."""
    text = " ".join(["الرياض"] * 6 + ["كلمة"] * 994)
    return doc_node([paragraph_node(text)])


class TestAnalyze:
    """Tests for the analyze function."""

    def test_sales_density_in_band(self, riyadh_document):
        result = analyze(riyadh_document, keywords={"primary": "الرياض"})
        primary = result.keyword_analysis.primary
        assert result.word_count == 1000
        assert primary.count == 6
        assert primary.required_count == (5, 8)
        assert primary.percentage == pytest.approx(0.006)
        assert primary.status is AnalysisStatus.PASS

    def test_plain_text_is_rendered_when_omitted(self, riyadh_document):
        rendered = analyze(riyadh_document, keywords={"primary": "الرياض"})
        explicit = analyze(
            riyadh_document,
            plain_text=" ".join(["الرياض"] * 6 + ["كلمة"] * 994),
            keywords={"primary": "الرياض"},
        )
        assert rendered.to_dict() == explicit.to_dict()

    def test_empty_document(self):
        result = analyze(None, "", Keywords())
        structure = result.structure_analysis
        assert result.word_count == 0
        assert structure.word_count.current == 0
        assert structure.word_count.status is AnalysisStatus.FAIL
        checks = structure.checks()
        assert all(checks[name].violation_count == 0 for name in SECTION_CHECKS)
        assert result.duplicate_analysis.all_phrases() == []
        assert result.keyword_analysis.primary.checks == []

    def test_sample_article(self, sample_article, sample_keywords):
        result = analyze(sample_article, keywords=sample_keywords)
        structure = result.structure_analysis
        assert structure.faq_section.status is AnalysisStatus.PASS
        assert structure.last_h2_is_conclusion.status is AnalysisStatus.PASS
        assert structure.automatic_lists.status is AnalysisStatus.PASS
        assert result.structure_stats.heading_count == 6
        assert len(result.keyword_analysis.secondaries) == 4


class TestGoalHandling:
    def test_default_goal_is_sales(self, riyadh_document):
        result = analyze(riyadh_document, keywords={"primary": "الرياض"})
        assert result.keyword_analysis.primary.required_percentage == (0.005, 0.008)
        assert result.structure_analysis.first_title.current == NOT_APPLICABLE

    @pytest.mark.parametrize("goal", [ContentGoal.TOUR_PROGRAM, "tour-program", "برنامج سياحي"])
    def test_tour_goal_spellings(self, riyadh_document, goal):
        result = analyze(riyadh_document, keywords={"primary": "الرياض"}, goal=goal)
        assert result.structure_analysis.first_title.is_applicable
        assert result.keyword_analysis.primary.required_percentage == (0.009, 0.011)

    @pytest.mark.parametrize("goal", ["unknown", None])
    def test_unknown_goal_uses_default_bands(self, riyadh_document, goal):
        result = analyze(riyadh_document, keywords={"primary": "الرياض"}, goal=goal)
        assert result.keyword_analysis.primary.required_percentage == (0.005, 0.01)
        assert all(not c.is_applicable for c in result.structure_analysis.goal_checks())


class TestMemoization:
    """Tests for result caching."""

    def test_identical_calls_hit_cache(self, sample_article, sample_keywords):
        first = analyze(sample_article, keywords=sample_keywords)
        hits = _analyze_cached.cache_info().hits
        second = analyze(sample_article, keywords=dict(sample_keywords))
        assert _analyze_cached.cache_info().hits == hits + 1
        assert first == second

    def test_each_call_gets_its_own_report(self, sample_article, sample_keywords):
        first = analyze(sample_article, keywords=sample_keywords)
        second = analyze(sample_article, keywords=sample_keywords)
        assert first is not second
        assert first.structure_analysis.word_count is not second.structure_analysis.word_count

    def test_mutating_a_report_does_not_leak(self, riyadh_document):
        first = analyze(riyadh_document, keywords=Keywords(primary="الرياض"), goal="blog")
        first.word_count = 999
        first.keyword_analysis.primary.count = 0
        first.structure_analysis.word_count.current = 0

        second = analyze(riyadh_document, keywords=Keywords(primary="الرياض"), goal="blog")
        assert second.word_count == 1000
        assert second.keyword_analysis.primary.count == 6
        assert second.structure_analysis.word_count.current == 1000

    def test_keywords_object_and_mapping_are_equivalent(self, sample_article, sample_keywords):
        analyze(sample_article, keywords=sample_keywords)
        hits = _analyze_cached.cache_info().hits
        analyze(sample_article, keywords=Keywords.from_dict(sample_keywords))
        assert _analyze_cached.cache_info().hits == hits + 1

    def test_different_inputs_are_not_shared(self, sample_article):
        first = analyze(sample_article, keywords={"primary": "الرياض"})
        second = analyze(sample_article, keywords={"primary": "جدة"})
        assert first != second

    def test_clear_cache(self, sample_article):
        analyze(sample_article)
        clear_cache()
        assert _analyze_cached.cache_info().currsize == 0
        second = analyze(sample_article)
        assert _analyze_cached.cache_info().misses == 1
        assert second.to_dict() == analyze(sample_article).to_dict()

    def test_parsed_document_accepted(self, sample_article):
        from_json = analyze(sample_article)
        from_node = analyze(parse_node(sample_article))
        assert from_json.to_dict() == from_node.to_dict()


class TestSerialization:
    def test_top_level_keys(self, sample_article, sample_keywords):
        data = analyze(sample_article, keywords=sample_keywords).to_dict()
        assert set(data) == {
            "keywordAnalysis", "structureAnalysis", "structureStats",
            "duplicateAnalysis", "duplicateStats", "wordCount",
        }

    def test_structure_keys_are_camel_case(self, sample_article):
        structure = analyze(sample_article).to_dict()["structureAnalysis"]
        assert "differentTransitionalWords" in structure
        assert "duplicateWordsInParagraph" in structure
        assert len(structure) == 41
        assert structure["wordCount"]["status"] in {"pass", "warn", "fail"}

    def test_keyword_stats_shape(self, sample_article, sample_keywords):
        primary = analyze(sample_article, keywords=sample_keywords).to_dict()["keywordAnalysis"]["primary"]
        assert set(primary) == {"count", "percentage", "requiredCount", "requiredPercentage", "status", "checks"}
        assert all(set(check) == {"text", "isMet"} for check in primary["checks"])
