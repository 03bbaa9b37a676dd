"""
Arabic text normalization and counting primitives.

This module provides the building blocks every check relies on:
- Orthography-tolerant normalization (diacritics, tatweel, letter variants)
- Whole-word occurrence counting and span lookup
- Word and sentence counting

Normalization is only ever applied to a copy used for matching. Any span
returned here is expressed against the original, un-normalized text.
"""

import re
from dataclasses import dataclass
from functools import lru_cache


# Harakat (fathatan .. sukun) and tatweel
DIACRITICS = "".join(chr(code) for code in range(0x064B, 0x0653))
TATWEEL = "ـ"

_LETTER_FOLDS = {
    "آ": "ا",
    "أ": "ا",
    "إ": "ا",
    "ٱ": "ا",
    "ؤ": "و",
    "ئ": "ي",
    "ى": "ي",
    "ة": "ه",
}

_TRANSLATION = {ord(ch): None for ch in DIACRITICS + TATWEEL}
_TRANSLATION.update({ord(src): dst for src, dst in _LETTER_FOLDS.items()})

# A Unicode letter: word character that is neither a digit nor underscore
LETTER = r"[^\W\d_]"

# A word as written: letters, optionally carrying harakat
WORD_RE = re.compile(rf"{LETTER}(?:{LETTER}|[{DIACRITICS}])*")

LATIN_WORD_RE = re.compile(r"[a-zA-Z]+")

SENTENCE_TERMINATORS = ".!?؟"
_SENTENCE_SPLIT_RE = re.compile(r"[.!?؟]+")
_SENTENCE_RE = re.compile(r"[^.!?؟]+(?:[.!?؟]+|\s*\Z)")


def normalize(text: str) -> str:
    """
    Normalize Arabic text for matching.

    Removes harakat and tatweel, folds alef/hamza variants to bare alef,
    waw-hamza to waw, yaa-hamza and alef maqsura to yaa, and taa marbuta
    to haa. Total and deterministic; empty input yields empty output.

    Args:
        text: Text to normalize.

    Returns:
        Normalized copy of the text.
    """
    if not text:
        return ""
    return text.translate(_TRANSLATION)


def normalize_term(text: str) -> str:
    """Lower-case and normalize a term for comparison."""
    return normalize((text or "").lower())


@dataclass(frozen=True)
class NormalizedText:
    """
    A normalized view of a text that remembers where each character came from.

    ``index_map[i]`` is the index in ``original`` of normalized character ``i``.
    """
    original: str
    text: str
    index_map: tuple[int, ...]

    @classmethod
    def build(cls, original: str, lowercase: bool = True) -> "NormalizedText":
        chars: list[str] = []
        index_map: list[int] = []
        for index, ch in enumerate(original):
            folded = ch.lower() if lowercase else ch
            folded = folded.translate(_TRANSLATION)
            for out in folded:
                chars.append(out)
                index_map.append(index)
        return cls(original=original, text="".join(chars), index_map=tuple(index_map))

    def original_span(self, start: int, end: int) -> tuple[int, int]:
        """
        Map a normalized ``[start, end)`` span back onto the original text.

        Characters removed by normalization that trail the last matched
        character (harakat on the final letter) are included in the span.
        """
        if start >= len(self.index_map):
            return len(self.original), len(self.original)
        original_start = self.index_map[start]
        if end >= len(self.index_map):
            return original_start, len(self.original)
        return original_start, self.index_map[end]


@lru_cache(maxsize=1024)
def term_pattern(normalized_term: str) -> re.Pattern:
    """Compile a whole-word pattern for an already-normalized term."""
    return re.compile(rf"(?<!{LETTER}){re.escape(normalized_term)}(?!{LETTER})")


def count_occurrences(text: str, term: str) -> int:
    """
    Count whole-word occurrences of a term in a text.

    Both sides are lower-cased and normalized first. A match may not be
    preceded or followed by a letter, so "سعر" does not match inside
    "أسعار" or "السعر".

    Args:
        text: Text to search.
        term: Word or phrase to count.

    Returns:
        Number of non-overlapping matches; 0 for empty text or term.
    """
    if not text or not term:
        return 0
    needle = normalize_term(term)
    if not needle:
        return 0
    return len(term_pattern(needle).findall(normalize_term(text)))


def contains_term(text: str, term: str) -> bool:
    return count_occurrences(text, term) > 0


def find_term_spans(text: str, term: str) -> list[tuple[int, int]]:
    """
    Locate whole-word occurrences of a term, reported on the original text.

    Args:
        text: Original (un-normalized) text.
        term: Word or phrase to locate.

    Returns:
        List of ``(start, end)`` character spans in ``text``.
    """
    if not text or not term:
        return []
    needle = normalize_term(term)
    if not needle:
        return []
    view = NormalizedText.build(text)
    return [view.original_span(m.start(), m.end()) for m in term_pattern(needle).finditer(view.text)]


def word_count(text: str) -> int:
    """Count whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())


def sentence_count(text: str) -> int:
    """
    Count sentences split on terminal punctuation.

    Fragments of two characters or fewer are ignored. Non-empty text
    always counts as at least one sentence.
    """
    if not text:
        return 0
    count = sum(1 for part in _SENTENCE_SPLIT_RE.split(text) if len(part.strip()) > 2)
    if count:
        return count
    return 1 if text.strip() else 0


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, dropping fragments of two characters or fewer."""
    if not text:
        return []
    return [part for part in _SENTENCE_SPLIT_RE.split(text) if len(part.strip()) > 2]


def iter_sentence_matches(text: str):
    """Yield regex matches for each sentence, terminal punctuation included."""
    if not text:
        return iter(())
    return _SENTENCE_RE.finditer(text)


def iter_words(text: str):
    """Yield regex matches for each letter-only word (harakat included)."""
    if not text:
        return iter(())
    return WORD_RE.finditer(text)


def percentage(count: int, total: int) -> float:
    """Return ``count / total``, or 0.0 when there is nothing to divide by."""
    if total <= 0:
        return 0.0
    return count / total
