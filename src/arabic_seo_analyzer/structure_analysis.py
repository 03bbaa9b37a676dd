"""
Structure analysis assembly.

Runs the full catalogue of structure checks over a flattened document and
derives the summary counters shown alongside the report.
"""

import logging

from . import conclusion_checks, goal_checks, language_checks, paragraph_checks, section_checks
from .config import AnalysisConfig
from .document import FlatDocument
from .models import AnalysisStatus, Keywords, StructureAnalysis, StructureStats

logger = logging.getLogger(__name__)


def analyze_structure(
    flat: FlatDocument,
    plain_text: str,
    keywords: Keywords,
    total_words: int,
    config: AnalysisConfig,
) -> StructureAnalysis:
    """
    Evaluate every structure check.

    Args:
        flat: Flattened document.
        plain_text: Plain-text rendering of the document.
        keywords: Keyword configuration (the primary keyword exempts its
            Latin words from the Latin-word check).
        total_words: Word count of ``plain_text``.
        config: Goal-derived configuration.

    Returns:
        StructureAnalysis with all checks populated.
    """
    conclusion = conclusion_checks.find_conclusion_section(flat)
    conclusion_paragraphs = conclusion.paragraphs if conclusion else []

    return StructureAnalysis(
        word_count=paragraph_checks.check_word_count(flat, plain_text, total_words, config),
        first_title=goal_checks.check_first_title(flat, config),
        second_title=goal_checks.check_second_title(flat, config),
        includes_excludes=goal_checks.check_includes_excludes(flat, config),
        pre_travel_h2=goal_checks.check_pre_travel_h2(flat, config),
        pricing_h2=goal_checks.check_pricing_h2(flat, config),
        who_is_it_for_h2=goal_checks.check_who_is_it_for_h2(flat, config),
        summary_paragraph=paragraph_checks.check_summary_paragraph(flat),
        second_paragraph=paragraph_checks.check_second_paragraph(flat),
        paragraph_length=paragraph_checks.check_paragraph_length(flat, conclusion_paragraphs),
        h2_structure=section_checks.check_h2_structure(flat, total_words),
        h2_count=section_checks.check_h2_count(flat, total_words),
        h3_structure=section_checks.check_subheading_structure(flat, 3),
        h4_structure=section_checks.check_subheading_structure(flat, 4),
        between_h2_h3=section_checks.check_between_h2_h3(flat),
        faq_section=section_checks.check_faq_section(flat),
        answer_paragraph=section_checks.check_answer_paragraph(flat),
        ambiguous_headings=section_checks.check_ambiguous_headings(flat),
        punctuation=paragraph_checks.check_punctuation(flat),
        paragraph_endings=paragraph_checks.check_paragraph_endings(flat),
        interrogative_h2=section_checks.check_interrogative_h2(flat),
        different_transitional_words=language_checks.check_transitional_words(plain_text),
        duplicate_words_in_paragraph=paragraph_checks.check_duplicate_words(flat),
        duplicate_words_in_heading=paragraph_checks.check_duplicate_words(flat, in_headings=True),
        sentence_length=paragraph_checks.check_sentence_length(flat),
        steps_introduction=paragraph_checks.check_steps_introduction(flat),
        automatic_lists=paragraph_checks.check_automatic_lists(flat),
        cta_words=language_checks.check_cta_words(plain_text),
        interactive_language=language_checks.check_interactive_language(plain_text, total_words),
        arabic_only=language_checks.check_arabic_only(flat, keywords.primary, total_words),
        last_h2_is_conclusion=conclusion_checks.check_last_h2_is_conclusion(flat),
        conclusion_paragraph=conclusion_checks.check_conclusion_paragraph(conclusion),
        conclusion_word_count=conclusion_checks.check_conclusion_word_count(conclusion),
        conclusion_has_number=conclusion_checks.check_conclusion_has_number(conclusion),
        conclusion_has_list=conclusion_checks.check_conclusion_has_list(conclusion),
        sentence_beginnings=paragraph_checks.check_sentence_beginnings(flat),
        warning_words=language_checks.check_warning_words(plain_text),
        spacing=paragraph_checks.check_spacing(flat),
        repeated_bigrams=language_checks.check_repeated_bigrams(flat, plain_text),
        slow_words=language_checks.check_slow_words(flat, total_words),
        word_consistency=language_checks.check_word_consistency(flat),
    )


def structure_stats(analysis: StructureAnalysis, flat: FlatDocument) -> StructureStats:
    checks = list(analysis)
    stats = StructureStats(
        violating_criteria_count=sum(1 for c in checks if c.status is AnalysisStatus.FAIL),
        total_errors_count=sum(c.violation_count for c in checks),
        paragraph_count=len(flat.non_empty_paragraphs),
        heading_count=len(flat.headings),
    )
    logger.debug(
        f"Structure analysis: {stats.violating_criteria_count} failing checks, "
        f"{stats.total_errors_count} violating items"
    )
    return stats
