"""
Data models for the Arabic SEO analyzer.

This module defines the report structures produced by the analysis engine.
Every model serializes through ``to_dict()`` into the camelCase shape the
editor surface consumes.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Union


class AnalysisStatus(Enum):
    """Outcome of a single check, ordered worst-last as fail < warn < pass."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"
    INFO = "info"


NOT_APPLICABLE = "غير مطبق"

NGRAM_SIZES = range(2, 9)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass
class ViolatingItem:
    """
    A span to highlight for a failing or warning check.

    ``from_pos``/``to_pos`` is the exact span. ``section_from``/``section_to``
    optionally covers the wider region the item belongs to, such as the whole
    section under a heading.
    """
    from_pos: int
    to_pos: int
    message: str
    section_from: Optional[int] = None
    section_to: Optional[int] = None

    @property
    def has_section(self) -> bool:
        return self.section_from is not None and self.section_to is not None

    def to_dict(self) -> dict:
        result: dict[str, Any] = {
            "from": self.from_pos,
            "to": self.to_pos,
            "message": self.message,
        }
        if self.section_from is not None:
            result["sectionFrom"] = self.section_from
        if self.section_to is not None:
            result["sectionTo"] = self.section_to
        return result


@dataclass
class CheckResult:
    """The atomic output unit of the structure and keyword checks."""
    title: str
    status: AnalysisStatus
    current: Union[str, int, float]
    required: Union[str, int, float]
    progress: float
    description: Optional[str] = None
    details: Optional[str] = None
    violating_items: Optional[list[ViolatingItem]] = None

    @property
    def is_applicable(self) -> bool:
        return self.current != NOT_APPLICABLE

    @property
    def violation_count(self) -> int:
        return len(self.violating_items) if self.violating_items else 0

    def to_dict(self) -> dict:
        result: dict[str, Any] = {
            "title": self.title,
            "status": self.status.value,
            "current": self.current,
            "required": self.required,
            "progress": self.progress,
        }
        if self.description is not None:
            result["description"] = self.description
        if self.details is not None:
            result["details"] = self.details
        if self.violating_items is not None:
            result["violatingItems"] = [item.to_dict() for item in self.violating_items]
        return result


def _clean_term(term: Any) -> str:
    return str(term).strip() if term else ""


def _clean_terms(terms: Any) -> tuple[str, ...]:
    if not isinstance(terms, (list, tuple)):
        terms = [terms] if terms else []
    return tuple(_clean_term(t) for t in terms)


@dataclass(frozen=True)
class Keywords:
    """
    Target keyword configuration.

    Attributes:
        primary: The main keyword.
        secondaries: Synonym keywords; empty slots are allowed.
        company: Company or brand name.
        lsi: Topically related terms tracked as a set.
    """
    primary: str = ""
    secondaries: tuple[str, ...] = ()
    company: str = ""
    lsi: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "primary", _clean_term(self.primary))
        object.__setattr__(self, "company", _clean_term(self.company))
        object.__setattr__(self, "secondaries", _clean_terms(self.secondaries))
        object.__setattr__(self, "lsi", _clean_terms(self.lsi))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Keywords":
        data = data or {}
        return cls(
            primary=data.get("primary") or "",
            secondaries=data.get("secondaries") or (),
            company=data.get("company") or "",
            lsi=data.get("lsi") or (),
        )

    @property
    def active_secondaries(self) -> list[str]:
        return [s for s in self.secondaries if s]

    @property
    def active_lsi(self) -> list[str]:
        return [k for k in self.lsi if k]

    def all_terms(self) -> list[str]:
        """Every non-empty configured term: primary, secondaries, company, LSI."""
        terms = [self.primary, *self.secondaries, self.company, *self.lsi]
        return [t for t in terms if t]

    @property
    def is_empty(self) -> bool:
        return not self.all_terms()

    def to_dict(self) -> dict:
        return {
            "primary": self.primary,
            "secondaries": list(self.secondaries),
            "company": self.company,
            "lsi": list(self.lsi),
        }


@dataclass
class KeywordCheck:
    """A boolean placement check for a keyword."""
    text: str
    is_met: bool

    def to_dict(self) -> dict:
        return {"text": self.text, "isMet": self.is_met}


@dataclass
class KeywordStats:
    """Occurrence count of a term against its required density band."""
    count: int
    percentage: float
    required_count: tuple[int, int]
    required_percentage: tuple[float, float]
    status: AnalysisStatus

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "percentage": self.percentage,
            "requiredCount": list(self.required_count),
            "requiredPercentage": list(self.required_percentage),
            "status": self.status.value,
        }


@dataclass
class PrimaryKeywordAnalysis(KeywordStats):
    checks: list[KeywordCheck] = field(default_factory=list)

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["checks"] = [check.to_dict() for check in self.checks]
        return result


@dataclass
class SecondaryKeywordAnalysis(KeywordStats):
    text: str = ""
    checks: list[KeywordCheck] = field(default_factory=list)

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["text"] = self.text
        result["checks"] = [check.to_dict() for check in self.checks]
        return result


@dataclass
class CompanyNameAnalysis(KeywordStats):
    pass


@dataclass
class LsiTermStats:
    text: str
    count: int
    percentage: float

    def to_dict(self) -> dict:
        return {"text": self.text, "count": self.count, "percentage": self.percentage}


@dataclass
class LsiKeywordAnalysis:
    """Aggregate distribution and balance of the LSI term set."""
    distribution: KeywordStats
    balance: CheckResult
    keywords: list[LsiTermStats] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "distribution": self.distribution.to_dict(),
            "balance": self.balance.to_dict(),
            "keywords": [kw.to_dict() for kw in self.keywords],
        }


@dataclass
class KeywordAnalysis:
    primary: PrimaryKeywordAnalysis
    secondaries: list[SecondaryKeywordAnalysis]
    secondaries_distribution: KeywordStats
    company: CompanyNameAnalysis
    lsi: LsiKeywordAnalysis

    def to_dict(self) -> dict:
        return {
            "primary": self.primary.to_dict(),
            "secondaries": [s.to_dict() for s in self.secondaries],
            "secondariesDistribution": self.secondaries_distribution.to_dict(),
            "company": self.company.to_dict(),
            "lsi": self.lsi.to_dict(),
        }


# Display groups of the structure report, in rendering order
DISPLAY_GROUPS: list[tuple[str, list[str]]] = [
    ("البنية الأساسية", [
        "word_count", "summary_paragraph", "second_paragraph",
        "paragraph_length", "sentence_length", "steps_introduction",
    ]),
    ("العناوين والتسلسل", [
        "h2_structure", "h2_count", "h3_structure", "h4_structure",
        "between_h2_h3", "faq_section", "answer_paragraph", "ambiguous_headings",
    ]),
    ("الجودة اللغوية", [
        "punctuation", "paragraph_endings", "interrogative_h2",
        "duplicate_words_in_paragraph", "duplicate_words_in_heading",
        "sentence_beginnings", "arabic_only", "spacing",
        "repeated_bigrams", "word_consistency",
    ]),
    ("التفاعلية والتحفيز", [
        "cta_words", "interactive_language", "warning_words",
        "automatic_lists", "different_transitional_words", "slow_words",
    ]),
    ("الخاتمة", [
        "last_h2_is_conclusion", "conclusion_paragraph", "conclusion_word_count",
        "conclusion_has_number", "conclusion_has_list",
    ]),
]

GOAL_CHECK_FIELDS = [
    "first_title", "second_title", "includes_excludes",
    "pre_travel_h2", "pricing_h2", "who_is_it_for_h2",
]


@dataclass
class StructureAnalysis:
    """The full catalogue of structure checks, in stable order."""
    word_count: CheckResult
    first_title: CheckResult
    second_title: CheckResult
    includes_excludes: CheckResult
    pre_travel_h2: CheckResult
    pricing_h2: CheckResult
    who_is_it_for_h2: CheckResult
    summary_paragraph: CheckResult
    second_paragraph: CheckResult
    paragraph_length: CheckResult
    h2_structure: CheckResult
    h2_count: CheckResult
    h3_structure: CheckResult
    h4_structure: CheckResult
    between_h2_h3: CheckResult
    faq_section: CheckResult
    answer_paragraph: CheckResult
    ambiguous_headings: CheckResult
    punctuation: CheckResult
    paragraph_endings: CheckResult
    interrogative_h2: CheckResult
    different_transitional_words: CheckResult
    duplicate_words_in_paragraph: CheckResult
    duplicate_words_in_heading: CheckResult
    sentence_length: CheckResult
    steps_introduction: CheckResult
    automatic_lists: CheckResult
    cta_words: CheckResult
    interactive_language: CheckResult
    arabic_only: CheckResult
    last_h2_is_conclusion: CheckResult
    conclusion_paragraph: CheckResult
    conclusion_word_count: CheckResult
    conclusion_has_number: CheckResult
    conclusion_has_list: CheckResult
    sentence_beginnings: CheckResult
    warning_words: CheckResult
    spacing: CheckResult
    repeated_bigrams: CheckResult
    slow_words: CheckResult
    word_consistency: CheckResult

    def checks(self) -> dict[str, CheckResult]:
        """All checks keyed by field name, in catalogue order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __iter__(self) -> Iterator[CheckResult]:
        return iter(self.checks().values())

    def groups(self) -> list[tuple[str, list[CheckResult]]]:
        """Display groups with not-applicable checks removed."""
        result = []
        for title, names in DISPLAY_GROUPS:
            checks = [getattr(self, name) for name in names]
            result.append((title, [c for c in checks if c.is_applicable]))
        return result

    def goal_checks(self) -> list[CheckResult]:
        return [getattr(self, name) for name in GOAL_CHECK_FIELDS]

    def to_dict(self) -> dict:
        return {_camel(name): check.to_dict() for name, check in self.checks().items()}


@dataclass
class StructureStats:
    violating_criteria_count: int
    total_errors_count: int
    paragraph_count: int
    heading_count: int

    def to_dict(self) -> dict:
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass
class DuplicatePhrase:
    """An n-gram seen more than once across the document's blocks."""
    text: str
    count: int
    contains_keyword: bool = False

    @property
    def size(self) -> int:
        return len(self.text.split())

    def to_dict(self) -> dict:
        return {"text": self.text, "count": self.count, "containsKeyword": self.contains_keyword}


@dataclass
class DuplicateAnalysis:
    """Repeated n-grams bucketed by length (2 through 8 words)."""
    buckets: dict[int, list[DuplicatePhrase]] = field(
        default_factory=lambda: {n: [] for n in NGRAM_SIZES}
    )

    def __getitem__(self, size: int) -> list[DuplicatePhrase]:
        return self.buckets[size]

    def all_phrases(self) -> list[DuplicatePhrase]:
        return [phrase for n in NGRAM_SIZES for phrase in self.buckets[n]]

    def to_dict(self) -> dict:
        return {str(n): [p.to_dict() for p in self.buckets[n]] for n in NGRAM_SIZES}


@dataclass
class DuplicateStats:
    total_words: int
    unique_words: int
    keyword_duplicates_count: int
    common_duplicates_count: int
    total_duplicates: int

    def to_dict(self) -> dict:
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass
class FullAnalysis:
    """The complete report returned by ``analyze``."""
    keyword_analysis: KeywordAnalysis
    structure_analysis: StructureAnalysis
    structure_stats: StructureStats
    duplicate_analysis: DuplicateAnalysis
    duplicate_stats: DuplicateStats
    word_count: int

    def to_dict(self) -> dict:
        return {
            "keywordAnalysis": self.keyword_analysis.to_dict(),
            "structureAnalysis": self.structure_analysis.to_dict(),
            "structureStats": self.structure_stats.to_dict(),
            "duplicateAnalysis": self.duplicate_analysis.to_dict(),
            "duplicateStats": self.duplicate_stats.to_dict(),
            "wordCount": self.word_count,
        }
