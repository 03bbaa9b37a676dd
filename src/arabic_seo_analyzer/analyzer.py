"""
Analysis orchestrator.

``analyze`` is the single entry point of the engine. It is a pure function
of its four inputs and memoizes results, so it is safe to call on every
document edit. Each call returns its own copy of the cached report.
"""

import copy
import json
import logging
from functools import lru_cache
from typing import Any, Mapping, Optional, Union

from .config import DEFAULT_GOAL, AnalysisConfig, ContentGoal, resolve_goal
from .document import DocNode, document_to_plain_text, flatten_document
from .duplicates import duplicate_stats, find_duplicates
from .keyword_analysis import analyze_keywords
from .models import FullAnalysis, Keywords
from .structure_analysis import analyze_structure, structure_stats
from .text_normalizer import word_count

logger = logging.getLogger(__name__)

CACHE_SIZE = 32


def _document_key(document: Any) -> Union[str, DocNode]:
    if isinstance(document, DocNode):
        return document
    return json.dumps(document, sort_keys=True, ensure_ascii=False, default=str)


def _coerce_keywords(keywords: Union[Keywords, Mapping[str, Any], None]) -> Keywords:
    if isinstance(keywords, Keywords):
        return keywords
    return Keywords.from_dict(keywords)


@lru_cache(maxsize=CACHE_SIZE)
def _analyze_cached(
    document_key: Union[str, DocNode],
    plain_text: str,
    keywords: Keywords,
    goal: Optional[ContentGoal],
) -> FullAnalysis:
    document = document_key if isinstance(document_key, DocNode) else json.loads(document_key)
    config = AnalysisConfig(goal=goal)
    flat = flatten_document(document)
    total_words = word_count(plain_text)

    structure = analyze_structure(flat, plain_text, keywords, total_words, config)
    duplicates = find_duplicates(flat, keywords)

    return FullAnalysis(
        keyword_analysis=analyze_keywords(flat, plain_text, keywords, total_words, config),
        structure_analysis=structure,
        structure_stats=structure_stats(structure, flat),
        duplicate_analysis=duplicates,
        duplicate_stats=duplicate_stats(plain_text, duplicates),
        word_count=total_words,
    )


def analyze(
    document: Any,
    plain_text: Optional[str] = None,
    keywords: Union[Keywords, Mapping[str, Any], None] = None,
    goal: Union[ContentGoal, str, None] = DEFAULT_GOAL,
) -> FullAnalysis:
    """
    Analyze a document against its keyword configuration and content goal.

    Args:
        document: Editor JSON tree (``{"type": "doc", "content": [...]}``),
            a parsed ``DocNode``, or None for an empty document.
        plain_text: Plain-text rendering of the same document, used for
            whole-document counts. Rendered from ``document`` when omitted.
        keywords: ``Keywords`` or a mapping with ``primary``,
            ``secondaries``, ``company`` and ``lsi``.
        goal: Content goal as enum, English value or Arabic label. Unknown
            values fall back to the default density bands and disable
            goal-specific checks.

    Returns:
        FullAnalysis report.
    """
    if plain_text is None:
        plain_text = document_to_plain_text(document)
    resolved = resolve_goal(goal)
    if goal and resolved is None:
        logger.debug(f"Unknown goal {goal!r}; using default density bands")

    hits_before = _analyze_cached.cache_info().hits
    result = _analyze_cached(_document_key(document), plain_text, _coerce_keywords(keywords), resolved)
    if _analyze_cached.cache_info().hits > hits_before:
        logger.debug("Analysis served from cache")
    return copy.deepcopy(result)


def clear_cache() -> None:
    """Drop all memoized analysis results."""
    _analyze_cached.cache_clear()
