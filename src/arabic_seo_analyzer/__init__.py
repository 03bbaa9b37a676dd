"""
Arabic SEO Analyzer

A content-quality analysis engine for Arabic articles that:
- Measures keyword density against goal-dependent bands
- Scores document structure against a fixed catalogue of editorial rules
- Finds repeated phrases across paragraphs and headings
"""

__version__ = "1.0.0"
__author__ = "Arabic SEO Analyzer Team"

from .config import AnalysisConfig, ContentGoal, DEFAULT_GOAL, resolve_goal

from .models import (
    AnalysisStatus,
    CheckResult,
    ViolatingItem,
    Keywords,
    KeywordAnalysis,
    StructureAnalysis,
    StructureStats,
    DuplicateAnalysis,
    DuplicateStats,
    FullAnalysis,
)

from .analyzer import analyze, clear_cache

from .document import (
    DocNode,
    FlatDocument,
    flatten_document,
    document_to_plain_text,
)

from .text_normalizer import (
    normalize,
    count_occurrences,
    word_count,
)

from .highlights import (
    HighlightSpan,
    spans_for_check,
    grouped_spans,
    violations_at,
    term_spans,
)

# Input loaders
from .keyword_loader import KeywordLoadError, load_keywords, parse_keyword_block
from .content_sources import DocumentLoadError, load_document, document_from_text

from .assistant_prompt import PromptOptions, build_assistant_prompt

__all__ = [
    # Configuration
    "AnalysisConfig",
    "ContentGoal",
    "DEFAULT_GOAL",
    "resolve_goal",
    # Models
    "AnalysisStatus",
    "CheckResult",
    "ViolatingItem",
    "Keywords",
    "KeywordAnalysis",
    "StructureAnalysis",
    "StructureStats",
    "DuplicateAnalysis",
    "DuplicateStats",
    "FullAnalysis",
    # Engine
    "analyze",
    "clear_cache",
    "DocNode",
    "FlatDocument",
    "flatten_document",
    "document_to_plain_text",
    "normalize",
    "count_occurrences",
    "word_count",
    # Highlights
    "HighlightSpan",
    "spans_for_check",
    "grouped_spans",
    "violations_at",
    "term_spans",
    # Loaders
    "KeywordLoadError",
    "load_keywords",
    "parse_keyword_block",
    "DocumentLoadError",
    "load_document",
    "document_from_text",
    # Assistant
    "PromptOptions",
    "build_assistant_prompt",
]
