"""
Keyword density and placement analysis.

This module measures how the configured keywords are used:
- Primary keyword density plus placement in key paragraphs and headings
- Secondary keyword density against an evenly split shared budget
- Company name density
- LSI term distribution and balance
"""

import logging
import math

from .checks import get_status, make_result
from .config import LSI_WARN_MARGIN, AnalysisConfig, DensityBand
from .document import Block, FlatDocument
from .models import (
    AnalysisStatus,
    CheckResult,
    CompanyNameAnalysis,
    KeywordAnalysis,
    KeywordCheck,
    Keywords,
    KeywordStats,
    LsiKeywordAnalysis,
    LsiTermStats,
    PrimaryKeywordAnalysis,
    SecondaryKeywordAnalysis,
)
from .text_normalizer import contains_term, count_occurrences, percentage

logger = logging.getLogger(__name__)

LSI_BALANCE_TITLE = "توازن LSI"
LSI_MAX_SPREAD = 2
LSI_BALANCE_DESCRIPTION = (
    "يعتبر التوازن جيداً عندما يكون الفرق في عدد مرات التكرار بين أكثر كلمة وأقل كلمة "
    "استخداماً (من الكلمات المذكورة) لا يزيد عن 2."
)

# Primary keyword appears 1-2 times across H2s only for articles with 5-8 H2s
H2_PLACEMENT_BAND = (5, 8)
H2_PLACEMENT_COUNT = (1, 2)


def required_count(total_words: int, band: DensityBand) -> tuple[int, int]:
    """Translate a density band into an inclusive occurrence-count band."""
    return math.floor(total_words * band[0]), math.ceil(total_words * band[1])


def keyword_stats(count: int, total_words: int, band: DensityBand) -> KeywordStats:
    counts = required_count(total_words, band)
    return KeywordStats(
        count=count,
        percentage=percentage(count, total_words),
        required_count=counts,
        required_percentage=band,
        status=get_status(count, counts[0], counts[1]),
    )


def _h2_sections(flat: FlatDocument) -> list[tuple[Block, list[Block]]]:
    """Each H2 with the blocks up to the next heading of any level."""
    sections = []
    for index, block in enumerate(flat.blocks):
        if block.is_heading_level(2):
            body, _ = flat.section(index)
            sections.append((block, body))
    return sections


def analyze_primary(
    flat: FlatDocument,
    plain_text: str,
    term: str,
    total_words: int,
    config: AnalysisConfig,
) -> PrimaryKeywordAnalysis:
    count = count_occurrences(plain_text, term) if term else 0
    stats = keyword_stats(count, total_words, config.primary_density)
    analysis = PrimaryKeywordAnalysis(**vars(stats))

    if not term:
        return analysis

    # Empty paragraph nodes included
    paragraphs = flat.paragraphs
    h2s = flat.headings_at(2)
    first_h2 = h2s[0] if h2s else None
    last_h2 = h2s[-1] if h2s else None

    analysis.checks = [
        KeywordCheck("في أول فقرة", bool(paragraphs) and contains_term(paragraphs[0].text, term)),
        KeywordCheck("في أول H2", first_h2 is not None and contains_term(first_h2.text, term)),
        KeywordCheck("في آخر H2", last_h2 is not None and contains_term(last_h2.text, term)),
        KeywordCheck(
            "في آخر فقرتين",
            any(contains_term(p.text, term) for p in paragraphs[-2:]),
        ),
    ]

    count_in_h2 = count_occurrences(" ".join(h.text for h in h2s), term)
    h2_met = True
    if H2_PLACEMENT_BAND[0] <= len(h2s) <= H2_PLACEMENT_BAND[1]:
        h2_met = H2_PLACEMENT_COUNT[0] <= count_in_h2 <= H2_PLACEMENT_COUNT[1]
    analysis.checks.append(KeywordCheck(f"في H2 ({count_in_h2})", h2_met))

    return analysis


def analyze_secondaries(
    flat: FlatDocument,
    plain_text: str,
    keywords: Keywords,
    total_words: int,
    config: AnalysisConfig,
) -> list[SecondaryKeywordAnalysis]:
    """
    Analyze each secondary keyword slot.

    Empty slots are kept so indices line up with the configuration; they
    report INFO with zero counts.
    """
    total_band = config.secondary_total_density
    active = len(keywords.active_secondaries)
    share: DensityBand = (total_band[0] / active, total_band[1] / active) if active else (0, 0)
    sections = _h2_sections(flat)

    results = []
    for term in keywords.secondaries:
        if not term:
            results.append(SecondaryKeywordAnalysis(
                count=0,
                percentage=0,
                required_count=(0, 0),
                required_percentage=(0, 0),
                status=AnalysisStatus.INFO,
            ))
            continue

        stats = keyword_stats(count_occurrences(plain_text, term), total_words, share)

        headed = [(h2, body) for h2, body in sections if contains_term(h2.text, term)]
        in_h2 = bool(headed)
        followed_up = all(
            contains_term(" ".join(b.text for b in body if b.is_paragraph), term)
            for _, body in headed
        )

        results.append(SecondaryKeywordAnalysis(
            **vars(stats),
            text=term,
            checks=[
                KeywordCheck("في H2", in_h2),
                KeywordCheck("في فقرة H2", in_h2 and followed_up),
            ],
        ))
    return results


def analyze_secondaries_distribution(
    secondaries: list[SecondaryKeywordAnalysis],
    total_words: int,
    config: AnalysisConfig,
) -> KeywordStats:
    total = sum(s.count for s in secondaries)
    return keyword_stats(total, total_words, config.secondary_total_density)


def analyze_company(plain_text: str, company: str, total_words: int, config: AnalysisConfig) -> CompanyNameAnalysis:
    count = count_occurrences(plain_text, company) if company else 0
    return CompanyNameAnalysis(**vars(keyword_stats(count, total_words, config.company_density)))


def _lsi_balance(terms: list[LsiTermStats]) -> CheckResult:
    missing = [t.text for t in terms if t.count == 0]
    if missing:
        return make_result(
            LSI_BALANCE_TITLE,
            AnalysisStatus.FAIL,
            f"{len(missing)} كلمات مفقودة",
            "استخدام كل الكلمات",
            0,
            f"الكلمات التالية لم تستخدم: {', '.join(missing)}",
        )

    if len(terms) < 2:
        return make_result(
            LSI_BALANCE_TITLE, AnalysisStatus.PASS, "جيد", f"الفرق <= {LSI_MAX_SPREAD}", 1,
            LSI_BALANCE_DESCRIPTION,
        )

    most = max(terms, key=lambda t: t.count)
    least = min(terms, key=lambda t: t.count)
    spread = most.count - least.count

    if spread > LSI_MAX_SPREAD:
        description = (
            f'الفرق في التكرار بين الكلمات المستخدمة كبير. الأكثر تكراراً هي "{most.text}" '
            f'({most.count} مرة) والأقل هي "{least.text}" ({least.count} مرة). '
            f"الفرق هو {spread} (المطلوب <= {LSI_MAX_SPREAD})."
        )
        return make_result(
            LSI_BALANCE_TITLE, AnalysisStatus.FAIL, f"الفرق: {spread}", f"الفرق <= {LSI_MAX_SPREAD}", 0,
            description,
        )

    description = (
        f"توزيع الكلمات متوازن. الفرق بين الأكثر والأقل استخدامًا هو {spread} "
        f"(المطلوب <= {LSI_MAX_SPREAD})."
    )
    return make_result(
        LSI_BALANCE_TITLE, AnalysisStatus.PASS, f"الفرق: {spread}", f"الفرق <= {LSI_MAX_SPREAD}", 1,
        description,
    )


def analyze_lsi(plain_text: str, keywords: Keywords, total_words: int, config: AnalysisConfig) -> LsiKeywordAnalysis:
    """
    Analyze the LSI term set.

    The distribution uses a warn band of five occurrences either side of the
    required count band. Balance fails when any term is unused, or when the
    most and least used terms differ by more than two occurrences.
    """
    terms = keywords.active_lsi
    if not terms:
        return LsiKeywordAnalysis(
            distribution=KeywordStats(0, 0, (0, 0), (0, 0), AnalysisStatus.INFO),
            balance=make_result(
                LSI_BALANCE_TITLE, AnalysisStatus.PASS, "لا توجد كلمات", f"الفرق <= {LSI_MAX_SPREAD}", 1,
                LSI_BALANCE_DESCRIPTION,
            ),
        )

    term_stats = []
    for term in terms:
        count = count_occurrences(plain_text, term)
        term_stats.append(LsiTermStats(text=term, count=count, percentage=percentage(count, total_words)))

    band = config.lsi_density
    counts = required_count(total_words, band)
    total = sum(t.count for t in term_stats)
    distribution = KeywordStats(
        count=total,
        percentage=percentage(total, total_words),
        required_count=counts,
        required_percentage=band,
        status=get_status(
            total, counts[0], counts[1],
            max(0, counts[0] - LSI_WARN_MARGIN), counts[1] + LSI_WARN_MARGIN,
        ),
    )

    return LsiKeywordAnalysis(distribution=distribution, balance=_lsi_balance(term_stats), keywords=term_stats)


def analyze_keywords(
    flat: FlatDocument,
    plain_text: str,
    keywords: Keywords,
    total_words: int,
    config: AnalysisConfig,
) -> KeywordAnalysis:
    """
    Run the full keyword analysis.

    Args:
        flat: Flattened document.
        plain_text: Plain-text rendering used for whole-document counts.
        keywords: Keyword configuration.
        total_words: Word count of ``plain_text``.
        config: Goal-derived density bands.

    Returns:
        KeywordAnalysis covering primary, secondaries, company and LSI.
    """
    secondaries = analyze_secondaries(flat, plain_text, keywords, total_words, config)
    analysis = KeywordAnalysis(
        primary=analyze_primary(flat, plain_text, keywords.primary, total_words, config),
        secondaries=secondaries,
        secondaries_distribution=analyze_secondaries_distribution(secondaries, total_words, config),
        company=analyze_company(plain_text, keywords.company, total_words, config),
        lsi=analyze_lsi(plain_text, keywords, total_words, config),
    )
    logger.debug(
        f"Keyword analysis: primary {analysis.primary.count}/{analysis.primary.required_count}, "
        f"{len(keywords.active_secondaries)} secondaries, {len(keywords.active_lsi)} LSI terms"
    )
    return analysis
