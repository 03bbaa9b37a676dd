"""
Repeated n-gram detection.

Scans the text of every paragraph and heading for word sequences of two to
eight words that occur more than once, comparing words in normalized form.
"""

import logging
import re
from dataclasses import dataclass

from .document import FlatDocument
from .models import NGRAM_SIZES, DuplicateAnalysis, DuplicatePhrase, DuplicateStats, Keywords
from .text_normalizer import normalize_term

logger = logging.getLogger(__name__)

_PUNCTUATION_RE = re.compile(r"[.,!؟،؛:\"'()\[\]{}«»-]")


def tokenize(text: str) -> tuple[list[str], list[str]]:
    """
    Split block text into words with punctuation removed.

    Returns:
        Parallel lists of (original words, normalized words). Tokens that
        normalize to nothing (a stray diacritic or tatweel) are dropped from
        both lists.
    """
    originals: list[str] = []
    normalized: list[str] = []
    for token in _PUNCTUATION_RE.sub(" ", text).split():
        folded = normalize_term(token)
        if folded:
            originals.append(token)
            normalized.append(folded)
    return originals, normalized


@dataclass
class _Gram:
    text: str
    size: int
    count: int = 1


def is_keyword_phrase(normalized_gram: str, normalized_keywords: list[str]) -> bool:
    return any(kw in normalized_gram or normalized_gram in kw for kw in normalized_keywords)


def find_duplicates(flat: FlatDocument, keywords: Keywords) -> DuplicateAnalysis:
    """
    Collect n-grams (n = 2..8) seen more than once across all blocks.

    Each repeated n-gram keeps the original spelling of its first
    occurrence and is tagged when it overlaps a configured keyword.

    Args:
        flat: Flattened document.
        keywords: Keyword configuration used for tagging.

    Returns:
        DuplicateAnalysis with one bucket per n-gram length.
    """
    grams: dict[str, _Gram] = {}
    for block in flat.text_blocks:
        if not block.has_text:
            continue
        originals, normalized = tokenize(block.text)
        for n in NGRAM_SIZES:
            for i in range(len(originals) - n + 1):
                key = " ".join(normalized[i:i + n])
                gram = grams.get(key)
                if gram is None:
                    grams[key] = _Gram(text=" ".join(originals[i:i + n]), size=n)
                else:
                    gram.count += 1

    normalized_keywords = [normalize_term(term) for term in keywords.all_terms()]
    normalized_keywords = [kw for kw in normalized_keywords if kw]

    analysis = DuplicateAnalysis()
    for key, gram in grams.items():
        if gram.count > 1:
            analysis.buckets[gram.size].append(DuplicatePhrase(
                text=gram.text,
                count=gram.count,
                contains_keyword=is_keyword_phrase(key, normalized_keywords),
            ))

    logger.debug(f"Duplicate scan: {len(grams)} distinct n-grams, {len(analysis.all_phrases())} repeated")
    return analysis


def duplicate_stats(plain_text: str, analysis: DuplicateAnalysis) -> DuplicateStats:
    words = (plain_text or "").split()
    phrases = analysis.all_phrases()
    keyword_phrases = sum(1 for p in phrases if p.contains_keyword)
    return DuplicateStats(
        total_words=len(words),
        unique_words=len({normalize_term(w) for w in words}),
        keyword_duplicates_count=keyword_phrases,
        common_duplicates_count=len(phrases) - keyword_phrases,
        total_duplicates=sum(p.count - 1 for p in phrases),
    )
